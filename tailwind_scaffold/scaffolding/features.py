"""Optional follow-up steps gated by the second prompt phase.

Each enabled toggle installs its dev-dependencies, writes its config file,
and merges its scripts into package.json. An install failure aborts the run
before the toggle's template is written.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from tailwind_scaffold.helpers.helpers_logging import print_header, print_info, print_success
from tailwind_scaffold.helpers.helpers_subprocess import CommandRunner
from tailwind_scaffold.helpers.scaffold_config import ScaffoldConfig

from .manifest import patch_manifest
from .templates import (
    create_eslint_config,
    create_prettier_config,
    get_automation_scripts,
    get_json_template,
    get_postcss_config_template,
)
from .types import ResolvedPaths, ScaffoldRequest, ScriptMap
from .writer import write_template


@dataclass(frozen=True)
class FeatureStep:
    """Install + template + scripts for one toggle."""

    toggle: str
    title: str
    packages: list[str]
    target: Callable[[ResolvedPaths], Path]
    render: Callable[[ScaffoldRequest], str]
    scripts: Callable[[ResolvedPaths], ScriptMap]


def _eslint_scripts(_paths: ResolvedPaths) -> ScriptMap:
    return {"lint": "eslint ."}


FEATURE_STEPS: list[FeatureStep] = [
    FeatureStep(
        toggle="integrate_prettier",
        title="Prettier",
        packages=["prettier"],
        target=lambda paths: paths.prettier_config,
        render=lambda _request: get_json_template(create_prettier_config()),
        scripts=lambda _paths: {"format": "prettier --write ."},
    ),
    FeatureStep(
        toggle="integrate_eslint",
        title="ESLint",
        packages=["eslint"],
        target=lambda paths: paths.eslint_config,
        # base config; the accessibility step adds jsx-a11y after installing its plugin
        render=lambda _request: get_json_template(create_eslint_config()),
        scripts=_eslint_scripts,
    ),
    FeatureStep(
        toggle="include_accessibility_features",
        title="Accessibility linting (jsx-a11y)",
        packages=["eslint", "eslint-plugin-jsx-a11y"],
        target=lambda paths: paths.eslint_config,
        render=lambda _request: get_json_template(create_eslint_config(accessibility=True)),
        scripts=_eslint_scripts,
    ),
    FeatureStep(
        toggle="automate_css_build",
        title="Automated CSS build (cssnano + watch scripts)",
        packages=["cssnano"],
        target=lambda paths: paths.postcss_config,
        render=lambda _request: get_postcss_config_template(minify=True),
        scripts=lambda paths: get_automation_scripts(
            paths.css_source_rel, paths.css_output_rel,
        ),
    ),
]


def apply_feature(
    step: FeatureStep,
    request: ScaffoldRequest,
    paths: ResolvedPaths,
    config: ScaffoldConfig,
    runner: CommandRunner,
) -> None:
    """Run one feature step: install, write template, patch scripts."""
    print_header(f"\n{step.title}")
    print_info(f"Installing {', '.join(step.packages)}...")
    runner(config.install_command(step.packages), paths.cwd)

    target = step.target(paths)
    write_template(target, step.render(request))
    print_success(f"Created {target.relative_to(paths.cwd).as_posix()}")

    scripts = step.scripts(paths)
    if scripts:
        patch_manifest(paths.manifest, scripts)
        print_success(
            f"Updated {paths.manifest.name} with scripts: {', '.join(scripts)}"
        )


def apply_features(
    request: ScaffoldRequest,
    paths: ResolvedPaths,
    config: ScaffoldConfig,
    runner: CommandRunner,
) -> list[str]:
    """Run every step whose toggle is enabled, in order.

    Returns:
        Names of the toggles that were applied
    """
    enabled = set(request.toggles.enabled())
    applied: list[str] = []
    for step in FEATURE_STEPS:
        if step.toggle not in enabled:
            continue
        apply_feature(step, request, paths, config, runner)
        applied.append(step.toggle)
    return applied
