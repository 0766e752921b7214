"""End-to-end tests for the ``tailwind-scaffold`` command.

The command is driven through click with scripted answers, exactly as a
user would type them: CSS name, HTML name, then four yes/no questions.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tailwind_scaffold.helpers.errors import PromptError
from tests.cli.conftest import ALL_DEFAULTS, ENTER, RunScaffold

# Mark all tests in this module as CLI end-to-end tests
pytestmark = pytest.mark.cli

EXPECTED_FILES = [
    "package.json",
    "tailwind.config.js",
    "postcss.config.js",
    "src/styles/styles.css",
    "index.html",
    ".prettierrc",
    ".eslintrc.json",
]


def _read_json(project: Path, name: str) -> dict[str, object]:
    return json.loads((project / name).read_text(encoding="utf-8"))


def test_all_defaults_scaffold_everything(
    run_scaffold_cli: RunScaffold,
    isolated_project: Path,
    subprocess_calls: list[list[str]],
) -> None:
    result = run_scaffold_cli(ALL_DEFAULTS)

    assert result.exit_code == 0, result.output
    for name in EXPECTED_FILES:
        assert (isolated_project / name).is_file(), f"File missing: {name}"

    assert subprocess_calls[0] == ["npm", "init", "-y"]
    assert subprocess_calls[1] == ["npm", "install", "-D", "tailwindcss", "postcss", "autoprefixer"]
    assert len(subprocess_calls) == 6

    scripts = _read_json(isolated_project, "package.json")["scripts"]
    assert scripts == {
        "build:css": "tailwindcss build src/styles/styles.css -o dist/styles.css",
        "format": "prettier --write .",
        "lint": "eslint .",
        "watch:css": "tailwindcss -i src/styles/styles.css -o dist/styles.css --watch",
        "build:css:prod": "tailwindcss -i src/styles/styles.css -o dist/styles.css --minify",
    }
    assert "npm run build:css" in result.output


def test_custom_names_and_no_features(
    run_scaffold_cli: RunScaffold,
    isolated_project: Path,
    subprocess_calls: list[list[str]],
) -> None:
    result = run_scaffold_cli("theme.css\nlanding.html\nn\nn\nn\nn\n")

    assert result.exit_code == 0, result.output
    assert (isolated_project / "src" / "styles" / "theme.css").is_file()
    assert '<link href="./dist/theme.css" rel="stylesheet">' in (
        isolated_project / "landing.html"
    ).read_text()
    assert not (isolated_project / ".prettierrc").exists()
    assert not (isolated_project / ".eslintrc.json").exists()
    assert len(subprocess_calls) == 2


def test_rerun_reports_unchanged_html(
    run_scaffold_cli: RunScaffold,
    isolated_project: Path,
) -> None:
    no_features = ENTER * 2 + "n\n" * 4
    assert run_scaffold_cli(no_features).exit_code == 0
    html_before = (isolated_project / "index.html").read_text()

    result = run_scaffold_cli(no_features)

    assert result.exit_code == 0, result.output
    assert "Unchanged: index.html" in result.output
    assert (isolated_project / "index.html").read_text() == html_before


def test_closed_input_is_a_prompt_error(
    run_scaffold_cli: RunScaffold,
    isolated_project: Path,
    subprocess_calls: list[list[str]],
) -> None:
    result = run_scaffold_cli("")

    assert result.exit_code == 1
    assert isinstance(result.exception, PromptError)
    assert subprocess_calls == []
    assert list(isolated_project.iterdir()) == []
