"""Tests for the botstrings command line.

Python 3.13+.
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

from botstrings.cli import main


class TestGenerate:
    """Test the generate subcommand."""

    def test_prints_to_stdout(
        self, resource_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["generate", str(resource_dir)]) == 0

        out = capsys.readouterr().out
        ast.parse(out)
        assert "def AfkSet(self, guild_id: int | None, param0: object) -> str:" in out
        assert "def OnlyGerman(" in out

    def test_writes_output_file(
        self, resource_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        target = tmp_path / "gen" / "strings.py"

        assert main(["generate", str(resource_dir), "-o", str(target)]) == 0
        assert "[OK] Wrote" in capsys.readouterr().out
        assert target.is_file()

        assert main(["generate", str(resource_dir), "-o", str(target)]) == 0
        assert "is up to date" in capsys.readouterr().out

    def test_class_name_option(
        self, resource_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["generate", str(resource_dir), "--class-name", "Responses"]) == 0

        assert "class Responses:" in capsys.readouterr().out

    def test_invalid_class_name(
        self, resource_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["generate", str(resource_dir), "--class-name", "not valid"]) == 2

        assert "class_name must be a valid Python identifier" in capsys.readouterr().err

    def test_missing_directory(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["generate", str(tmp_path / "missing")]) == 1

        assert "Resource directory not found" in capsys.readouterr().err

    def test_no_subcommand_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2


class TestCheck:
    """Test the check subcommand."""

    def test_reports_malformed_and_missing(
        self, resource_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["check", str(resource_dir)]) == 1

        out = capsys.readouterr().out
        assert "[ERROR]" in out
        assert "responses.fr-FR.json: malformed (0 keys)" in out
        assert "[WARN] de-DE: 3 keys missing" in out
        assert "[WARN] fr-FR: 4 keys missing" in out

    def test_clean_directory(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "responses.en-US.json").write_text('{"a": "A"}', encoding="utf-8")
        (tmp_path / "responses.de-DE.json").write_text('{"a": "Ä"}', encoding="utf-8")

        assert main(["check", str(tmp_path)]) == 0
        assert "[WARN]" not in capsys.readouterr().out

    def test_missing_default_locale(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "responses.de-DE.json").write_text('{"a": "Ä"}', encoding="utf-8")

        assert main(["check", str(tmp_path)]) == 0
        assert "Default locale 'en-US' has no response file" in capsys.readouterr().out
