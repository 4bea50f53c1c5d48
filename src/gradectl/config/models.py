"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gradectl.toml only contains
overrides.  An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from gradectl.domain.grades import LetterGrade
from gradectl.domain.scoring import DEFAULT_MESSAGES, check_messages


class MessagesConfig(BaseModel):
    """[messages] section — per-grade performance message overrides."""

    model_config = {"frozen": True}

    A: str | None = None
    B: str | None = None
    C: str | None = None
    D: str | None = None
    F: str | None = None

    @model_validator(mode="after")
    def _distinct_messages(self) -> MessagesConfig:
        merged = {**DEFAULT_MESSAGES, **self.overrides()}
        check_messages(merged)
        return self

    def overrides(self) -> dict[LetterGrade, str]:
        """Only the grades that were actually overridden."""
        return {
            grade: value
            for grade in LetterGrade
            if (value := getattr(self, grade.value)) is not None
        }


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    decimals: int = Field(default=1, ge=0, le=6)

