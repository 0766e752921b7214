"""Error types raised by the scaffold workflow.

Every error is fatal: the CLI entry point prints it and exits non-zero.
Nothing is retried and files written before the failure stay on disk.
"""

from __future__ import annotations

from pathlib import Path

from tailwind_scaffold.helpers.helpers_logging import print_error


class ScaffoldError(Exception):
    """Base class for all scaffold failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def print_error(self) -> None:
        """Print the error message using the logging helper."""
        print_error(self.message)


class SubprocessFailure(ScaffoldError):
    """External command exited non-zero or could not be started."""

    def __init__(self, command: str, returncode: int | None) -> None:
        if returncode is None:
            message = f"Failed to execute: {command} (command not found)"
        else:
            message = f"Failed to execute: {command} (exit code {returncode})"
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class FileSystemError(ScaffoldError):
    """Read, write or mkdir failure on a specific path."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Filesystem error at {path}: {reason}")
        self.path = path


class ManifestParseError(ScaffoldError):
    """package.json exists but is not a well-formed manifest."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            f"Could not parse {path}: {reason}. "
            + "Fix the manifest by hand; it is never rewritten automatically."
        )
        self.path = path


class PromptError(ScaffoldError):
    """Input stream closed while waiting for an answer."""


class ConfigError(ScaffoldError):
    """Invalid .tailwind-scaffold.yaml or environment override."""


class FileNameError(ScaffoldError):
    """File name answer would place a file outside the project."""

    def __init__(self, label: str, name: str) -> None:
        super().__init__(
            f"{label} file name must be relative and stay inside the project: {name!r}"
        )
        self.name = name
