#!/usr/bin/env python3
"""Tailwind Scaffold CLI - Main Entry Point.

Bootstraps Tailwind CSS in the current directory. There are no flags: the
CSS/HTML file names and the optional features are asked interactively.

Usage:
    tailwind-scaffold            Run the interactive setup
    tailwind-scaffold --help     Show this help message
    tailwind-scaffold --version  Show the installed version

Settings (optional) are read from .tailwind-scaffold.yaml:
    package_manager: npm | yarn | pnpm
    css_dir: src/styles
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tailwind_scaffold import __version__
from tailwind_scaffold.cli.prompts import prompt_features, prompt_file_names
from tailwind_scaffold.helpers.errors import ScaffoldError
from tailwind_scaffold.scaffolding import run_scaffold

_EXIT_ERROR = 1
_EXIT_ABORTED = 130


@click.command(
    name="tailwind-scaffold",
    help="Bootstrap Tailwind CSS (configs, CSS entry file, HTML demo, build scripts) in the current directory.",
)
@click.version_option(__version__, prog_name="tailwind-scaffold")
def _click_cli() -> int:
    """Run the scaffold against the current working directory."""
    run_scaffold(
        Path.cwd(),
        ask_file_names=prompt_file_names,
        ask_features=prompt_features,
    )
    return 0


def main() -> int:
    """Main CLI entry point."""
    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="tailwind-scaffold",
            standalone_mode=False,
        )
    except ScaffoldError as exc:
        exc.print_error()
        return _EXIT_ERROR
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return _EXIT_ABORTED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
