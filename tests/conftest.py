"""Shared fixtures for the tailwind-scaffold test suite.

Provides an isolated project directory and a recording command runner so
no test ever calls a real package manager.
"""

from __future__ import annotations

import json
import shlex
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from tailwind_scaffold.helpers.errors import SubprocessFailure
from tailwind_scaffold.helpers.scaffold_config import PACKAGE_MANAGER_ENV

# Manifest written by the fake ``<pm> init`` command.
INIT_MANIFEST: dict[str, object] = {
    "name": "demo",
    "version": "1.0.0",
    "scripts": {"test": "echo \"Error: no test specified\" && exit 1"},
}


class FakeRunner:
    """Records commands instead of running them.

    ``init`` commands create package.json like the real package managers do.
    A command containing ``fail_on`` raises ``SubprocessFailure``.
    """

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[list[str]] = []

    def __call__(self, args: list[str], cwd: Path) -> None:
        self.calls.append(list(args))
        if self.fail_on is not None and self.fail_on in args:
            raise SubprocessFailure(shlex.join(args), 1)
        if len(args) > 1 and args[1] == "init":
            (cwd / "package.json").write_text(json.dumps(INIT_MANIFEST, indent=2) + "\n")


@pytest.fixture(autouse=True)
def _clear_package_manager_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's shell override out of the tests."""
    monkeypatch.delenv(PACKAGE_MANAGER_ENV, raising=False)


@pytest.fixture()
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Empty project directory that is also the working directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    yield project


@pytest.fixture()
def make_runner() -> Callable[..., FakeRunner]:
    """Factory for ``FakeRunner`` instances."""
    return FakeRunner


@pytest.fixture()
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def write_manifest(project_dir: Path) -> Callable[[dict[str, object]], Path]:
    """Write package.json into the project directory."""

    def _write(document: dict[str, object]) -> Path:
        path = project_dir / "package.json"
        path.write_text(json.dumps(document, indent=2) + "\n")
        return path

    return _write
