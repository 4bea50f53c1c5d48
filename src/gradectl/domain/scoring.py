"""Grading pipeline stages — validation, classification, reporting.

Each stage is a small stateless object so the orchestrator in
:mod:`gradectl.services.evaluate` can swap any of them in tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from gradectl.domain.grades import GRADE_BANDS, SCORE_MAX, SCORE_MIN, LetterGrade

DEFAULT_MESSAGES: Mapping[LetterGrade, str] = MappingProxyType(
    {
        LetterGrade.A: "Excellent work! You have mastered this material.",
        LetterGrade.B: "Good job. You have a solid understanding of the material.",
        LetterGrade.C: "Satisfactory. You meet the expectations, with room to improve.",
        LetterGrade.D: "Needs improvement. Review the material and seek extra help.",
        LetterGrade.F: "Failing. A significant review of the material is required.",
    }
)


class ScoreValidator:
    """Checks that a raw score lies inside the legal percentage domain."""

    def __init__(self, minimum: float = SCORE_MIN, maximum: float = SCORE_MAX) -> None:
        self.minimum = minimum
        self.maximum = maximum

    def validate(self, score: float) -> bool:
        """True iff ``minimum <= score <= maximum``.  NaN is never valid."""
        return self.minimum <= score <= self.maximum


class GradeClassifier:
    """Maps an already validated score onto its letter-grade band.

    Out-of-range input is the caller's problem: scores above the top of
    the scale come back as A and anything below zero as F.
    """

    def classify(self, score: float) -> LetterGrade:
        for lower, grade in GRADE_BANDS:
            if score >= lower:
                return grade
        return GRADE_BANDS[-1][1]


class PerformanceReporter:
    """Turns a letter grade into a fixed, human-readable message.

    Args:
        overrides: Optional per-grade replacements merged over
            :data:`DEFAULT_MESSAGES`.

    Raises:
        ValueError: If a merged message is blank or two grades would
            share the same message.
    """

    def __init__(self, overrides: Mapping[LetterGrade, str] | None = None) -> None:
        merged = dict(DEFAULT_MESSAGES)
        if overrides:
            merged.update({LetterGrade(k): v for k, v in overrides.items()})
        check_messages(merged)
        self._messages: Mapping[LetterGrade, str] = MappingProxyType(merged)

    @property
    def messages(self) -> Mapping[LetterGrade, str]:
        return self._messages

    def describe(self, letter: LetterGrade) -> str:
        return self._messages[LetterGrade(letter)]


def check_messages(messages: Mapping[LetterGrade, str]) -> None:
    """Raise ValueError unless every grade has its own non-blank message."""
    missing = [g.value for g in LetterGrade if g not in messages]
    if missing:
        raise ValueError(f"No performance message for grade(s): {', '.join(missing)}")

    seen: dict[str, LetterGrade] = {}
    for grade in LetterGrade:
        text = messages[grade].strip()
        if not text:
            raise ValueError(f"Performance message for grade {grade} is blank")
        if text in seen:
            raise ValueError(
                f"Grades {seen[text]} and {grade} share the same performance message"
            )
        seen[text] = grade
