"""Letter grades and the grading scale.

The scale is closed on the lower bound of every band and open on the
upper bound, except for the top band which also includes the maximum
score.  A boundary value therefore always lands in the higher band.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

SCORE_MIN = 0.0
SCORE_MAX = 100.0


class LetterGrade(StrEnum):
    """Discrete grade bands, ordered by academic merit (A highest)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def rank(self) -> int:
        """Merit rank: 4 for A down to 0 for F."""
        return _RANKS[self]

    # str ordering would put A below B; compare by merit instead.

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, LetterGrade):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, LetterGrade):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, LetterGrade):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, LetterGrade):
            return NotImplemented
        return self.rank >= other.rank


_RANKS: dict[LetterGrade, int] = {
    LetterGrade.A: 4,
    LetterGrade.B: 3,
    LetterGrade.C: 2,
    LetterGrade.D: 1,
    LetterGrade.F: 0,
}

# Highest band first.  Each entry is (inclusive lower bound, grade).
GRADE_BANDS: tuple[tuple[float, LetterGrade], ...] = (
    (90.0, LetterGrade.A),
    (80.0, LetterGrade.B),
    (70.0, LetterGrade.C),
    (60.0, LetterGrade.D),
    (SCORE_MIN, LetterGrade.F),
)


def band_ranges() -> list[dict[str, Any]]:
    """Return the scale as ``{grade, min, max, max_inclusive}`` rows, A first."""
    rows: list[dict[str, Any]] = []
    upper = SCORE_MAX
    for index, (lower, grade) in enumerate(GRADE_BANDS):
        rows.append(
            {
                "grade": grade.value,
                "min": lower,
                "max": upper,
                "max_inclusive": index == 0,
            }
        )
        upper = lower
    return rows
