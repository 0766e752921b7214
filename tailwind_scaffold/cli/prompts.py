"""Interactive prompts for the scaffold workflow."""

from __future__ import annotations

import click

from tailwind_scaffold.helpers.errors import PromptError
from tailwind_scaffold.scaffolding.types import (
    DEFAULT_CSS_FILE_NAME,
    DEFAULT_HTML_FILE_NAME,
    FeatureToggles,
)

# (toggle field, question) in prompt order
FEATURE_QUESTIONS: list[tuple[str, str]] = [
    ("integrate_prettier", "Integrate Prettier for code formatting?"),
    ("integrate_eslint", "Integrate ESLint for linting?"),
    ("include_accessibility_features", "Include accessibility linting (eslint-plugin-jsx-a11y)?"),
    ("automate_css_build", "Automate the CSS build (cssnano minification + watch scripts)?"),
]


def _ask_text(question: str, default: str) -> str:
    try:
        answer: str = click.prompt(question, default=default, show_default=True)
    except click.Abort as exc:
        raise PromptError("Input closed while waiting for an answer") from exc
    return answer


def _ask_confirm(question: str) -> bool:
    try:
        return click.confirm(question, default=True)
    except click.Abort as exc:
        raise PromptError("Input closed while waiting for an answer") from exc


def prompt_file_names() -> tuple[str, str]:
    """Ask for the CSS and HTML file names (raw answers, not yet defaulted)."""
    css_answer = _ask_text(
        f'Enter the CSS file name (or leave blank for default "{DEFAULT_CSS_FILE_NAME}")',
        DEFAULT_CSS_FILE_NAME,
    )
    html_answer = _ask_text(
        f'Enter the HTML file name (or leave blank to generate "{DEFAULT_HTML_FILE_NAME}")',
        DEFAULT_HTML_FILE_NAME,
    )
    return css_answer, html_answer


def prompt_features() -> FeatureToggles:
    """Ask the optional feature questions, each defaulting to yes."""
    answers = {name: _ask_confirm(question) for name, question in FEATURE_QUESTIONS}
    return FeatureToggles(**answers)
