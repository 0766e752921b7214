"""Run the Tailwind scaffold against a project directory.

Stages run strictly in order, each feeding the next::

    ask_file_names -> build_request -> resolve_paths -> probe
    -> init manifest (if missing) -> install core deps
    -> write templates -> merge HTML -> patch manifest
    -> ask_features -> apply_features

Any ``ScaffoldError`` aborts the remaining stages. Files already written
are left on disk.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from tailwind_scaffold.helpers.helpers_logging import (
    print_header,
    print_info,
    print_skipped,
    print_success,
)
from tailwind_scaffold.helpers.helpers_subprocess import CommandRunner, run_command
from tailwind_scaffold.helpers.scaffold_config import ScaffoldConfig, load_config

from .features import apply_features
from .html_merge import merge_html
from .manifest import patch_manifest
from .probe import probe, resolve_paths
from .templates import (
    get_build_scripts,
    get_css_entry_template,
    get_postcss_config_template,
    get_tailwind_config_template,
)
from .types import (
    FeatureToggles,
    MergeOutcome,
    ProbeResult,
    ResolvedPaths,
    ScaffoldRequest,
    build_request,
)
from .writer import write_template, write_text_file

CORE_PACKAGES = ["tailwindcss", "postcss", "autoprefixer"]

FileNamePrompt = Callable[[], tuple[str, str]]
FeaturePrompt = Callable[[], FeatureToggles]


@dataclass(frozen=True)
class ScaffoldResult:
    """Summary of a completed run."""

    request: ScaffoldRequest
    paths: ResolvedPaths
    html_outcome: MergeOutcome
    applied_features: list[str]


def _relative(paths: ResolvedPaths, path: Path) -> str:
    return path.relative_to(paths.cwd).as_posix()


def prepare_manifest(
    paths: ResolvedPaths,
    probe_result: ProbeResult,
    config: ScaffoldConfig,
    runner: CommandRunner,
) -> None:
    """Initialise package.json when missing, then install the core packages."""
    if not probe_result.manifest_exists:
        print_info(f"Initializing {config.package_manager} project...")
        runner(config.init_command(), paths.cwd)

    print_info("Installing Tailwind CSS and dependencies...")
    runner(config.install_command(CORE_PACKAGES), paths.cwd)


def write_core_templates(paths: ResolvedPaths) -> None:
    """Write tailwind.config.js, the CSS entry file and postcss.config.js."""
    write_template(paths.tailwind_config, get_tailwind_config_template())
    print_success(f"Created {_relative(paths, paths.tailwind_config)}")

    write_template(paths.css_file, get_css_entry_template())
    print_success(f"Created Tailwind CSS file at {_relative(paths, paths.css_file)}")

    write_template(paths.postcss_config, get_postcss_config_template())
    print_success(f"Created {_relative(paths, paths.postcss_config)}")


def update_html_entry(
    paths: ResolvedPaths,
    probe_result: ProbeResult,
    css_file_name: str,
) -> MergeOutcome:
    """Create or patch the HTML entry file; skip the write when unchanged."""
    html_name = _relative(paths, paths.html_file)
    result = merge_html(probe_result.html_content, css_file_name)

    if not result.changed:
        print_skipped(f"Unchanged: {html_name} already links ./dist/{css_file_name}")
        return result.outcome

    write_text_file(paths.html_file, result.content)
    if probe_result.html_exists:
        print_success(f"Updated {html_name} to include Tailwind CSS")
    else:
        print_success(f"Created HTML file at {html_name}")
    return result.outcome


def _print_next_steps(paths: ResolvedPaths, config: ScaffoldConfig) -> None:
    print_header("\n✅ Tailwind CSS setup complete!")
    print_info("\n📋 Next steps:")
    print_info(f"   1. {config.run_script_command('build:css')}")
    print_info(f"   2. Open {_relative(paths, paths.html_file)} to confirm Tailwind is working")


def run_scaffold(
    cwd: Path,
    ask_file_names: FileNamePrompt,
    ask_features: FeaturePrompt,
    runner: CommandRunner = run_command,
    config: ScaffoldConfig | None = None,
) -> ScaffoldResult:
    """Scaffold Tailwind CSS into the project at ``cwd``.

    Args:
        cwd: Project root; every path is derived from it
        ask_file_names: Returns the raw (css, html) file name answers
        ask_features: Returns the optional feature toggles
        runner: Executes package-manager commands
        config: Settings; loaded from ``cwd`` when omitted

    Returns:
        Summary of the run

    Raises:
        ScaffoldError: On the first failing stage.
    """
    config = config or load_config(cwd)

    css_answer, html_answer = ask_file_names()
    request = build_request(css_answer, html_answer)
    paths = resolve_paths(request, cwd, config)
    probe_result = probe(paths)

    print_header("\n🚀 Setting up Tailwind CSS...\n")
    prepare_manifest(paths, probe_result, config, runner)

    print_info("\n📄 Generating configuration files...")
    write_core_templates(paths)

    html_outcome = update_html_entry(paths, probe_result, request.css_file_name)

    patch_manifest(
        paths.manifest,
        get_build_scripts(paths.css_source_rel, paths.css_output_rel),
    )
    print_success(f"Updated {paths.manifest.name} with Tailwind build script")

    request = replace(request, toggles=ask_features())
    applied = apply_features(request, paths, config, runner)

    _print_next_steps(paths, config)
    return ScaffoldResult(
        request=request,
        paths=paths,
        html_outcome=html_outcome,
        applied_features=applied,
    )
