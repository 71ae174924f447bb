"""Shared pytest fixtures for dbml tests."""

from pathlib import Path

import pytest

from dbml.core.config import COMMENT_MODE_VAR, CommentMode, ParserOptions


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DBML_* settings from the developer's shell out of the tests."""
    monkeypatch.delenv(COMMENT_MODE_VAR, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_dbml(fixtures_dir: Path) -> Path:
    """Return path to the sample DBML document."""
    return fixtures_dir / "sample.dbml"


@pytest.fixture
def aware_options() -> ParserOptions:
    return ParserOptions(comment_mode=CommentMode.AWARE)
