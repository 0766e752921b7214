"""Path resolution and read-only inspection of the working directory."""

from __future__ import annotations

from pathlib import Path, PurePosixPath, PureWindowsPath

from tailwind_scaffold.helpers.errors import FileNameError, FileSystemError
from tailwind_scaffold.helpers.scaffold_config import ScaffoldConfig

from .types import ProbeResult, ResolvedPaths, ScaffoldRequest

MANIFEST_FILE_NAME = "package.json"
DIST_DIR_NAME = "dist"


def _check_file_name(label: str, name: str) -> None:
    candidate = PurePosixPath(name.replace("\\", "/"))
    if (
        candidate.is_absolute()
        or PureWindowsPath(name).drive
        or ".." in candidate.parts
        or not candidate.parts
    ):
        raise FileNameError(label, name)


def resolve_paths(
    request: ScaffoldRequest,
    cwd: Path,
    config: ScaffoldConfig | None = None,
) -> ResolvedPaths:
    """Derive every scaffold path from the request and ``cwd``.

    Args:
        request: Request with defaults already substituted
        cwd: Project root the scaffold runs against
        config: Settings; only ``css_dir`` is used here

    Returns:
        Absolute paths for all generated and patched files

    Raises:
        FileNameError: If a file name is absolute or climbs out with "..".
    """
    _check_file_name("CSS", request.css_file_name)
    _check_file_name("HTML", request.html_file_name)
    config = config or ScaffoldConfig()
    cwd = cwd.resolve()
    css_dir = cwd / config.css_dir

    return ResolvedPaths(
        cwd=cwd,
        css_dir=css_dir,
        css_file=css_dir / request.css_file_name,
        html_file=cwd / request.html_file_name,
        dist_css_file=cwd / DIST_DIR_NAME / request.css_file_name,
        tailwind_config=cwd / "tailwind.config.js",
        postcss_config=cwd / "postcss.config.js",
        prettier_config=cwd / ".prettierrc",
        eslint_config=cwd / ".eslintrc.json",
        manifest=cwd / MANIFEST_FILE_NAME,
    )


def probe(paths: ResolvedPaths) -> ProbeResult:
    """Check for an existing manifest and HTML entry file.

    The manifest is only checked for existence; the HTML file, when present,
    is read in full for the merge step.

    Raises:
        FileSystemError: If the HTML file exists but cannot be read.
    """
    manifest_exists = paths.manifest.is_file()

    if not paths.html_file.exists():
        return ProbeResult(manifest_exists=manifest_exists, html_exists=False)

    try:
        # newline="" keeps CRLF so the merge can write it back unchanged
        with paths.html_file.open(encoding="utf-8", newline="") as handle:
            html_content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileSystemError(paths.html_file, str(exc)) from exc

    return ProbeResult(
        manifest_exists=manifest_exists,
        html_exists=True,
        html_content=html_content,
    )
