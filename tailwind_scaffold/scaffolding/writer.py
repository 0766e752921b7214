"""Blind-overwrite writer for generated config files.

Never use this for the HTML entry file; that goes through ``html_merge``.
"""

from __future__ import annotations

from pathlib import Path

from tailwind_scaffold.helpers.errors import FileSystemError


def ensure_directory(path: Path) -> None:
    """Create ``path`` and its parents; an existing directory is a no-op."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileSystemError(path, str(exc)) from exc


def write_text_file(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` as UTF-8, creating parent directories.

    Line endings are written exactly as they appear in ``content``.
    """
    ensure_directory(path.parent)
    try:
        path.write_text(content, encoding="utf-8", newline="")
    except OSError as exc:
        raise FileSystemError(path, str(exc)) from exc


def write_template(path: Path, content: str) -> None:
    """Overwrite ``path`` so it contains exactly ``content``.

    Raises:
        FileSystemError: On mkdir or write failure.
    """
    write_text_file(path, content)
