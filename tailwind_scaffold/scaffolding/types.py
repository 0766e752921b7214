"""Value types passed between scaffold stages.

Every value is built once per run and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path

DEFAULT_CSS_FILE_NAME = "styles.css"
DEFAULT_HTML_FILE_NAME = "index.html"

ScriptMap = dict[str, str]
"""package.json ``scripts`` entries, script name to command."""


@dataclass(frozen=True)
class FeatureToggles:
    """Answers of the second prompt phase."""

    integrate_prettier: bool = True
    integrate_eslint: bool = True
    include_accessibility_features: bool = True
    automate_css_build: bool = True

    def enabled(self) -> list[str]:
        """Names of the toggles that are switched on, in prompt order."""
        return [f.name for f in fields(self) if getattr(self, f.name)]


@dataclass(frozen=True)
class ScaffoldRequest:
    """File names chosen by the user plus the optional feature toggles."""

    css_file_name: str = DEFAULT_CSS_FILE_NAME
    html_file_name: str = DEFAULT_HTML_FILE_NAME
    toggles: FeatureToggles = field(default_factory=FeatureToggles)


def build_request(
    css_answer: str | None,
    html_answer: str | None,
    toggles: FeatureToggles | None = None,
) -> ScaffoldRequest:
    """Build a request, substituting defaults for blank answers."""
    css_file_name = (css_answer or "").strip() or DEFAULT_CSS_FILE_NAME
    html_file_name = (html_answer or "").strip() or DEFAULT_HTML_FILE_NAME
    return ScaffoldRequest(
        css_file_name=css_file_name,
        html_file_name=html_file_name,
        toggles=toggles or FeatureToggles(),
    )


@dataclass(frozen=True)
class ResolvedPaths:
    """Absolute locations of every file the scaffold reads or writes."""

    cwd: Path
    css_dir: Path
    css_file: Path
    html_file: Path
    dist_css_file: Path
    tailwind_config: Path
    postcss_config: Path
    prettier_config: Path
    eslint_config: Path
    manifest: Path

    @property
    def css_source_rel(self) -> str:
        """CSS entry file relative to cwd, as used in build scripts."""
        return self.css_file.relative_to(self.cwd).as_posix()

    @property
    def css_output_rel(self) -> str:
        """Built stylesheet relative to cwd, as used in build scripts."""
        return self.dist_css_file.relative_to(self.cwd).as_posix()


@dataclass(frozen=True)
class ProbeResult:
    """What already exists in the working directory."""

    manifest_exists: bool
    html_exists: bool
    html_content: str = ""


class MergeOutcome(Enum):
    """How the HTML entry file was affected by a merge."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class HtmlMergeResult:
    """Merged HTML text and whether it differs from the input."""

    content: str
    outcome: MergeOutcome

    @property
    def changed(self) -> bool:
        return self.outcome is not MergeOutcome.UNCHANGED
