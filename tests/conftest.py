"""Shared pytest fixtures for gradectl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from gradectl.config.settings import GradeSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> GradeSettings:
    """Default settings with no TOML file and no GRADECTL_* env vars."""
    monkeypatch.delenv("GRADECTL_CONFIG", raising=False)
    return GradeSettings.from_cli(cwd=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray gradectl.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("GRADECTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations.

    Each CliRunner invocation points the root handler at a stream that is
    closed once the invocation returns.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    grade_level = logging.getLogger("gradectl").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("gradectl").setLevel(grade_level)
    structlog.reset_defaults()
