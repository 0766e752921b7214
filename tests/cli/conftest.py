"""Shared fixtures for end-to-end CLI tests.

Every test drives the real click command with scripted terminal input
inside an isolated project directory. ``subprocess.run`` is replaced so no
package manager is ever executed; ``<pm> init`` still creates package.json
the way npm does.
"""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner, Result

from tailwind_scaffold.cli.commands import _click_cli

RunScaffold = Callable[[str], Result]

ENTER = "\n"
ALL_DEFAULTS = ENTER * 6


@pytest.fixture()
def isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Create an isolated empty project directory and cd into it."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    yield project


@pytest.fixture()
def subprocess_calls(isolated_project: Path) -> Iterator[list[list[str]]]:
    """Patch ``subprocess.run`` and record every command it receives."""
    calls: list[list[str]] = []

    def _fake_run(
        args: list[str],
        cwd: Path,
        check: bool = False,
    ) -> subprocess.CompletedProcess[str]:
        calls.append(list(args))
        if args[1:2] == ["init"]:
            (Path(cwd) / "package.json").write_text(
                json.dumps({"name": "demo", "version": "1.0.0"}, indent=2) + "\n"
            )
        return subprocess.CompletedProcess(args, 0)

    with patch(
        "tailwind_scaffold.helpers.helpers_subprocess.subprocess.run",
        side_effect=_fake_run,
    ):
        yield calls


@pytest.fixture()
def run_scaffold_cli(subprocess_calls: list[list[str]]) -> RunScaffold:
    """Invoke ``tailwind-scaffold`` with the given terminal input."""
    runner = CliRunner()

    def _run(terminal_input: str) -> Result:
        return runner.invoke(_click_cli, [], input=terminal_input)

    return _run
