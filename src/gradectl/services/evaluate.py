"""GradeEvaluator and GradeService — the grading pipeline.

``GradeEvaluator.evaluate`` validates, classifies and describes a score,
short-circuiting on invalid input.  An out-of-range score is a terminal
outcome reported as a value (:class:`EvaluationInvalid`), never raised.

``GradeService`` adapts evaluator outcomes to the universal
:class:`~gradectl.services.result.ServiceResult` for the CLI.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Any, Literal

import structlog
from pydantic import BaseModel, Field

from gradectl.config.settings import GradeSettings
from gradectl.domain.grades import SCORE_MAX, SCORE_MIN, LetterGrade, band_ranges
from gradectl.domain.scoring import GradeClassifier, PerformanceReporter, ScoreValidator
from gradectl.services.base import BaseService
from gradectl.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)

OUT_OF_RANGE_SCORE = "OUT_OF_RANGE_SCORE"
OUT_OF_RANGE_REASON = "score out of range"


class OutOfRangeScoreError(ValueError):
    """Raised by :meth:`EvaluationInvalid.unwrap` for callers wanting exceptions."""

    def __init__(self, score: float, reason: str = OUT_OF_RANGE_REASON) -> None:
        super().__init__(f"{reason}: {score!r}")
        self.score = score
        self.reason = reason


class EvaluationSuccess(BaseModel):
    """A valid score with its grade and performance message."""

    model_config = {"frozen": True}

    kind: Literal["success"] = "success"
    score: float
    letter: LetterGrade
    message: str

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> tuple[LetterGrade, str]:
        return self.letter, self.message

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "letter": self.letter.value, "message": self.message}


class EvaluationInvalid(BaseModel):
    """A score outside the legal domain; carries no grade or message."""

    model_config = {"frozen": True}

    kind: Literal["invalid"] = "invalid"
    score: float
    code: str = OUT_OF_RANGE_SCORE
    reason: str = OUT_OF_RANGE_REASON

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> tuple[LetterGrade, str]:
        raise OutOfRangeScoreError(self.score, self.reason)

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "code": self.code, "reason": self.reason}


EvaluationResult = Annotated[
    EvaluationSuccess | EvaluationInvalid,
    Field(discriminator="kind"),
]


class GradeEvaluator:
    """Composes validator, classifier and reporter into one call."""

    def __init__(
        self,
        validator: ScoreValidator | None = None,
        classifier: GradeClassifier | None = None,
        reporter: PerformanceReporter | None = None,
    ) -> None:
        self._validator = validator or ScoreValidator()
        self._classifier = classifier or GradeClassifier()
        self._reporter = reporter or PerformanceReporter()

    @property
    def reporter(self) -> PerformanceReporter:
        return self._reporter

    def evaluate(self, score: float) -> EvaluationResult:
        if not self._validator.validate(score):
            log.info("Score rejected", score=score, reason=OUT_OF_RANGE_REASON)
            return EvaluationInvalid(score=score)

        letter = self._classifier.classify(score)
        message = self._reporter.describe(letter)
        log.debug("Score evaluated", score=score, letter=letter.value)
        return EvaluationSuccess(score=score, letter=letter, message=message)


class GradeService(BaseService):
    """Grading operations returning ServiceResult."""

    def __init__(
        self,
        settings: GradeSettings | None = None,
        *,
        evaluator: GradeEvaluator | None = None,
    ) -> None:
        super().__init__(settings)
        if evaluator is None:
            reporter = PerformanceReporter(self.settings.messages.overrides())
            evaluator = GradeEvaluator(reporter=reporter)
        self._evaluator = evaluator

    @property
    def evaluator(self) -> GradeEvaluator:
        return self._evaluator

    def evaluate(self, score: float) -> ServiceResult:
        """Evaluate one score; an invalid score is a failed result."""
        outcome = self._evaluator.evaluate(score)
        if isinstance(outcome, EvaluationInvalid):
            return ServiceResult(
                ok=False,
                op="evaluate",
                error=ServiceError(
                    code=outcome.code,
                    message=outcome.reason,
                    detail={"score": score, "min": SCORE_MIN, "max": SCORE_MAX},
                ),
            )
        return ServiceResult(ok=True, op="evaluate", data=outcome.to_dict())

    def evaluate_batch(self, scores: Iterable[float]) -> ServiceResult:
        """Evaluate several scores.

        Invalid scores are reported per item and as warnings; the batch
        itself only fails when there is nothing to evaluate.
        """
        scores = list(scores)
        if not scores:
            return ServiceResult(
                ok=False,
                op="evaluate_batch",
                error=ServiceError(code="NO_SCORES", message="No scores to evaluate"),
            )

        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        distribution = {grade.value: 0 for grade in LetterGrade}
        for score in scores:
            outcome = self._evaluator.evaluate(score)
            items.append({"kind": outcome.kind, **outcome.to_dict()})
            if isinstance(outcome, EvaluationSuccess):
                distribution[outcome.letter.value] += 1
            else:
                warnings.append(f"{outcome.reason}: {score}")

        invalid = len(warnings)
        return ServiceResult(
            ok=True,
            op="evaluate_batch",
            data={
                "items": items,
                "count": len(items),
                "valid": len(items) - invalid,
                "invalid": invalid,
                "distribution": distribution,
            },
            warnings=warnings,
        )

    def scale(self) -> ServiceResult:
        """Describe the grading scale with the active message per band."""
        messages = self._evaluator.reporter.messages
        bands = [
            {**row, "message": messages[LetterGrade(row["grade"])]} for row in band_ranges()
        ]
        return ServiceResult(ok=True, op="scale", data={"bands": bands})
