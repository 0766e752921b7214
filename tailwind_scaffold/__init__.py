"""
Tailwind Scaffold

A command-line utility that bootstraps a Tailwind CSS setup
(configs, CSS entry file, HTML demo, build scripts) inside an existing project.
"""

__version__ = "0.1.0"

from tailwind_scaffold.cli.commands import main
from tailwind_scaffold.scaffolding import run_scaffold

__all__ = [
    "main",
    "run_scaffold",
]
