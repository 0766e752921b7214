"""Merge build scripts into package.json.

The manifest is always reloaded from disk before patching, so several
patches in one run (core build script, then optional feature scripts)
accumulate instead of clobbering each other.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, cast

from tailwind_scaffold.helpers.errors import FileSystemError, ManifestParseError

from .types import ScriptMap

_DEFAULT_INDENT = "  "
_INDENT_RE = re.compile(r'^([ \t]+)"', re.MULTILINE)


def detect_indent(text: str) -> str:
    """Indentation of the first indented key in ``text`` (two spaces if none)."""
    match = _INDENT_RE.search(text)
    return match.group(1) if match else _DEFAULT_INDENT


def _read_manifest_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileSystemError(path, str(exc)) from exc


def parse_manifest(text: str, path: Path) -> dict[str, Any]:
    """Parse manifest text into a JSON object.

    Raises:
        ManifestParseError: If ``text`` is not a JSON object, or its
            ``scripts`` entry is present but not an object.
    """
    try:
        document: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, f"invalid JSON ({exc})") from exc

    if not isinstance(document, dict):
        raise ManifestParseError(path, "top-level value must be an object")

    manifest = cast(dict[str, Any], document)
    scripts = manifest.get("scripts")
    if scripts is not None and not isinstance(scripts, dict):
        raise ManifestParseError(path, "'scripts' must be an object")
    return manifest


def load_manifest(path: Path) -> dict[str, Any]:
    """Read and parse the manifest at ``path``."""
    return parse_manifest(_read_manifest_text(path), path)


def merge_scripts(manifest: dict[str, Any], new_scripts: ScriptMap) -> dict[str, Any]:
    """Return a copy of ``manifest`` with ``new_scripts`` merged into ``scripts``.

    New keys win on conflict; every other script and top-level key is kept
    in its original order.
    """
    existing = cast(dict[str, Any], manifest.get("scripts") or {})
    merged = dict(manifest)
    merged["scripts"] = {**existing, **new_scripts}
    return merged


def patch_manifest(path: Path, new_scripts: ScriptMap) -> dict[str, Any]:
    """Merge ``new_scripts`` into the manifest at ``path`` and rewrite it.

    Args:
        path: Location of package.json
        new_scripts: Script name to command

    Returns:
        The document as written

    Raises:
        ManifestParseError: If the existing manifest is malformed.
        FileSystemError: On read or write failure.
    """
    text = _read_manifest_text(path)
    manifest = merge_scripts(parse_manifest(text, path), new_scripts)

    serialized = json.dumps(manifest, indent=detect_indent(text), ensure_ascii=False)
    try:
        path.write_text(serialized + "\n", encoding="utf-8")
    except OSError as exc:
        raise FileSystemError(path, str(exc)) from exc
    return manifest
