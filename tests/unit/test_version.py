"""Tests for version lookup."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError

import pytest

import dbml
from dbml import _version


class TestVersion:
    def test_exported_version(self) -> None:
        assert dbml.__version__ == _version.get_version()

    def test_not_installed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def missing(name: str) -> str:
            raise PackageNotFoundError(name)

        monkeypatch.setattr(_version, "version", missing)
        assert _version.get_version() == "0.0.0"
