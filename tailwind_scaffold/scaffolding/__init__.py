"""Tailwind scaffolding package.

Public API:
    run_scaffold: Run the full prompt-driven workflow against a directory
    merge_html: Merge the stylesheet link into existing HTML
    patch_manifest: Merge scripts into package.json
    write_template: Overwrite a generated config file
    probe / resolve_paths: Inspect the working directory

Example:
    from tailwind_scaffold.scaffolding import merge_html

    result = merge_html(Path("index.html").read_text(), "styles.css")
"""

from .create import ScaffoldResult, run_scaffold
from .features import FEATURE_STEPS, apply_features
from .html_merge import merge_html
from .manifest import load_manifest, patch_manifest
from .probe import probe, resolve_paths
from .types import (
    FeatureToggles,
    HtmlMergeResult,
    MergeOutcome,
    ProbeResult,
    ResolvedPaths,
    ScaffoldRequest,
    build_request,
)
from .writer import write_template

__all__ = [
    # Workflow
    "run_scaffold",
    "ScaffoldResult",
    "apply_features",
    "FEATURE_STEPS",
    # Components
    "merge_html",
    "load_manifest",
    "patch_manifest",
    "probe",
    "resolve_paths",
    "write_template",
    # Types
    "FeatureToggles",
    "HtmlMergeResult",
    "MergeOutcome",
    "ProbeResult",
    "ResolvedPaths",
    "ScaffoldRequest",
    "build_request",
]
