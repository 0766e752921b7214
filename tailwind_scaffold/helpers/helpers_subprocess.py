"""Blocking subprocess runner for package-manager invocations."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path
from typing import Protocol

from tailwind_scaffold.helpers.errors import SubprocessFailure
from tailwind_scaffold.helpers.helpers_logging import print_info


class CommandRunner(Protocol):
    """Callable that runs a command to completion or raises."""

    def __call__(self, args: list[str], cwd: Path) -> None:
        ...


def run_command(args: list[str], cwd: Path) -> None:
    """Run ``args`` in ``cwd`` with inherited stdio and wait for it.

    Raises:
        SubprocessFailure: On a missing executable or a non-zero exit code.
    """
    command = shlex.join(args)
    print_info(f"$ {command}")
    try:
        result = subprocess.run(args, cwd=cwd, check=False)
    except FileNotFoundError as exc:
        raise SubprocessFailure(command, None) from exc

    if result.returncode != 0:
        raise SubprocessFailure(command, result.returncode)
