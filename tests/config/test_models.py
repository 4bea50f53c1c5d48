"""Tests for configuration section models."""

import pytest
from pydantic import ValidationError

from gradectl.config.models import MessagesConfig, OutputConfig
from gradectl.domain.grades import LetterGrade
from gradectl.domain.scoring import DEFAULT_MESSAGES


class TestMessagesConfig:
    def test_empty(self) -> None:
        assert MessagesConfig().overrides() == {}

    def test_overrides_only_set_grades(self) -> None:
        config = MessagesConfig(B="Well done.", D="Keep at it.")
        assert config.overrides() == {LetterGrade.B: "Well done.", LetterGrade.D: "Keep at it."}

    def test_duplicate_of_default_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MessagesConfig(C=DEFAULT_MESSAGES[LetterGrade.A])

    def test_blank_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MessagesConfig(A="")

    def test_swapping_defaults_is_allowed(self) -> None:
        config = MessagesConfig(
            A=DEFAULT_MESSAGES[LetterGrade.B], B=DEFAULT_MESSAGES[LetterGrade.A]
        )
        assert config.A == DEFAULT_MESSAGES[LetterGrade.B]

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            MessagesConfig().A = "x"  # type: ignore[misc]


class TestOutputConfig:
    def test_default(self) -> None:
        assert OutputConfig().decimals == 1

    @pytest.mark.parametrize("decimals", [-1, 7])
    def test_bounds(self, decimals: int) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(decimals=decimals)

