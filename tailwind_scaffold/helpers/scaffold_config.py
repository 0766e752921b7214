"""Optional project-level configuration for the scaffold.

Reads ``.tailwind-scaffold.yaml`` from the working directory::

    package_manager: npm   # npm | yarn | pnpm
    css_dir: src/styles

The ``TAILWIND_SCAFFOLD_PACKAGE_MANAGER`` environment variable overrides
``package_manager``. A missing file means defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import cast

import yaml

from tailwind_scaffold.helpers.errors import ConfigError
from tailwind_scaffold.helpers.helpers_logging import print_info, print_warning

CONFIG_FILE_NAME = ".tailwind-scaffold.yaml"
PACKAGE_MANAGER_ENV = "TAILWIND_SCAFFOLD_PACKAGE_MANAGER"

DEFAULT_PACKAGE_MANAGER = "npm"
DEFAULT_CSS_DIR = "src/styles"

# init command, install-dev-deps prefix, run-script prefix
PACKAGE_MANAGER_COMMANDS: dict[str, dict[str, list[str]]] = {
    "npm": {
        "init": ["npm", "init", "-y"],
        "install_dev": ["npm", "install", "-D"],
        "run": ["npm", "run"],
    },
    "yarn": {
        "init": ["yarn", "init", "-y"],
        "install_dev": ["yarn", "add", "-D"],
        "run": ["yarn"],
    },
    "pnpm": {
        "init": ["pnpm", "init"],
        "install_dev": ["pnpm", "add", "-D"],
        "run": ["pnpm", "run"],
    },
}

_KNOWN_KEYS = frozenset({"package_manager", "css_dir"})


@dataclass(frozen=True)
class ScaffoldConfig:
    """Resolved scaffold settings."""

    package_manager: str = DEFAULT_PACKAGE_MANAGER
    css_dir: str = DEFAULT_CSS_DIR

    def init_command(self) -> list[str]:
        """Command that creates a package.json."""
        return list(PACKAGE_MANAGER_COMMANDS[self.package_manager]["init"])

    def install_command(self, packages: list[str]) -> list[str]:
        """Command that installs ``packages`` as dev-dependencies."""
        return [*PACKAGE_MANAGER_COMMANDS[self.package_manager]["install_dev"], *packages]

    def run_script_command(self, script: str) -> str:
        """Human-readable invocation of a package.json script."""
        return " ".join([*PACKAGE_MANAGER_COMMANDS[self.package_manager]["run"], script])


def _validate_package_manager(value: object, source: str) -> str:
    if not isinstance(value, str) or value not in PACKAGE_MANAGER_COMMANDS:
        supported = ", ".join(sorted(PACKAGE_MANAGER_COMMANDS))
        raise ConfigError(
            f"Unsupported package manager {value!r} in {source} "
            + f"(expected one of: {supported})"
        )
    return value


def _validate_css_dir(value: object, source: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"css_dir in {source} must be a non-empty string")

    css_dir = PurePosixPath(value.strip().replace("\\", "/"))
    if css_dir.is_absolute() or ".." in css_dir.parts:
        raise ConfigError(
            f"css_dir in {source} must stay inside the project: {value!r}"
        )
    return css_dir.as_posix()


def load_config(cwd: Path) -> ScaffoldConfig:
    """Load configuration for the project rooted at ``cwd``.

    Raises:
        ConfigError: If the file is malformed or holds invalid values.
    """
    config_path = cwd / CONFIG_FILE_NAME
    raw: dict[str, object] = {}

    if config_path.exists():
        try:
            loaded: object = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Could not read {config_path}: {exc}") from exc

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"{config_path} must contain a mapping")

        raw = cast(dict[str, object], loaded)
        for key in sorted(set(raw) - _KNOWN_KEYS):
            print_warning(f"Ignoring unknown key in {CONFIG_FILE_NAME}: {key}")
        print_info(f"Using settings from {CONFIG_FILE_NAME}")

    package_manager = _validate_package_manager(
        raw.get("package_manager", DEFAULT_PACKAGE_MANAGER),
        CONFIG_FILE_NAME,
    )
    css_dir = _validate_css_dir(raw.get("css_dir", DEFAULT_CSS_DIR), CONFIG_FILE_NAME)

    env_override = os.environ.get(PACKAGE_MANAGER_ENV)
    if env_override:
        package_manager = _validate_package_manager(
            env_override.strip(),
            PACKAGE_MANAGER_ENV,
        )

    return ScaffoldConfig(package_manager=package_manager, css_dir=css_dir)
