"""Tests for top-level CLI main() error/abort handling."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock, patch

import click
import pytest

from tailwind_scaffold import __version__
from tailwind_scaffold.cli import commands
from tailwind_scaffold.helpers.errors import FileSystemError, SubprocessFailure


class TestCommandsMainErrorHandling:
    """Scaffold failures end the process with a message, not a traceback."""

    @patch("tailwind_scaffold.cli.commands.run_scaffold")
    def test_main_runs_scaffold_in_cwd(
        self,
        mock_scaffold: Mock,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        with patch("sys.argv", ["tailwind-scaffold"]):
            result = commands.main()

        assert result == 0
        mock_scaffold.assert_called_once()
        assert mock_scaffold.call_args.args[0] == Path.cwd()

    @pytest.mark.parametrize(
        "error",
        [
            SubprocessFailure("npm install -D tailwindcss", 1),
            FileSystemError(Path("/tmp/x/index.html"), "Permission denied"),
        ],
    )
    def test_main_reports_scaffold_errors(
        self,
        error: Exception,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("sys.argv", ["tailwind-scaffold"]), patch(
            "tailwind_scaffold.cli.commands.run_scaffold",
            side_effect=error,
        ):
            result = commands.main()

        assert result == 1
        assert str(error) in capsys.readouterr().out

    def test_main_handles_click_abort_with_friendly_message(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("sys.argv", ["tailwind-scaffold"]), patch.object(
            commands._click_cli,
            "main",
            side_effect=click.Abort(),
        ):
            result = commands.main()

        assert result == 130
        assert "Cancelled by user" in capsys.readouterr().out

    def test_main_handles_click_exception(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exc = click.ClickException("boom")
        with patch("sys.argv", ["tailwind-scaffold"]), patch.object(
            commands._click_cli,
            "main",
            side_effect=exc,
        ):
            result = commands.main()

        assert result == exc.exit_code
        assert "Error: boom" in capsys.readouterr().err

    def test_unknown_flag_is_rejected(self) -> None:
        with patch("sys.argv", ["tailwind-scaffold", "--css", "x.css"]), patch(
            "tailwind_scaffold.cli.commands.run_scaffold",
        ) as mock_scaffold:
            result = commands.main()

        assert result == 2
        mock_scaffold.assert_not_called()

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("sys.argv", ["tailwind-scaffold", "--version"]):
            result = commands.main()

        assert result == 0
        assert __version__ in capsys.readouterr().out
