"""Tests for version lookup."""

from __future__ import annotations

from pathlib import Path

from booltree._version import _checkout_version, get_version


class TestVersion:
    def test_matches_project(self) -> None:
        assert get_version() == "0.1.0"

    def test_checkout_version(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "booltree"\nversion = "2.3.4"\n')
        assert _checkout_version(pyproject) == "2.3.4"

    def test_other_project_is_ignored(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "something-else"\nversion = "9.9.9"\n')
        assert _checkout_version(pyproject) is None

    def test_missing_file(self, tmp_path: Path) -> None:
        assert _checkout_version(tmp_path / "pyproject.toml") is None
