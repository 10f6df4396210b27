"""Tests for csprojector.paths."""

from __future__ import annotations

import logging
import os

from conftest import link_dir

from csprojector.paths import resolve


class TestResolve:
    def test_existing_directory(self, tmp_path):
        (tmp_path / "Packages" / "analyzers").mkdir(parents=True)
        result = resolve(tmp_path, "Packages/analyzers")
        assert str(result) == os.path.abspath(tmp_path / "Packages" / "analyzers")
        assert result.is_absolute()

    def test_accepts_string_root(self, tmp_path):
        (tmp_path / "analyzers").mkdir()
        assert resolve(str(tmp_path), "analyzers") is not None

    def test_missing_returns_none(self, tmp_path):
        assert resolve(tmp_path, "Packages/missing") is None

    def test_missing_logs_warning(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="csprojector.paths"):
            resolve(tmp_path, "Packages/missing")
        assert "does not exist" in caplog.text
        assert "missing" in caplog.text

    def test_file_is_not_a_directory(self, tmp_path):
        (tmp_path / "analyzers").write_text("")
        assert resolve(tmp_path, "analyzers") is None

    def test_symlinked_directory_keeps_link_path(self, tmp_path):
        (tmp_path / "elsewhere" / "analyzers").mkdir(parents=True)
        link = link_dir(tmp_path / "proj" / "Packages" / "analyzers", tmp_path / "elsewhere" / "analyzers")
        result = resolve(tmp_path / "proj", "Packages/analyzers")
        assert str(result) == os.path.abspath(link)
