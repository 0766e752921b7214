"""Merge the stylesheet link into an HTML entry file that may already exist.

The HTML file can hold user content, so it is patched in place instead of
being overwritten:

1. If the canonical ``<link href="./dist/<css>" rel="stylesheet">`` tag is
   already present, the content is returned untouched.
2. Empty content is replaced by the demo skeleton.
3. Otherwise every ``<link>`` whose ``href`` names a ``.css`` resource is
   removed and the canonical tag is inserted right before ``</head>``.

Step 3 matches any ``.css`` link, including ones this tool never wrote (for
example a CDN stylesheet). Links to non-CSS resources are never removed.
"""

from __future__ import annotations

import re

from .templates import get_html_template, get_stylesheet_link
from .types import HtmlMergeResult, MergeOutcome

# href value ending in .css, optionally followed by ?query or #fragment
_CSS_HREF = (
    r"""(?<![\w-])href\s*=\s*(?:"[^"]*?\.css(?:[?#][^"]*)?"|'[^']*?\.css(?:[?#][^']*)?'"""
    + r"""|[^\s"'>]*?\.css(?:[?#][^\s"'>]*)?(?=[\s>/]))"""
)
_CSS_LINK = rf"<link\b(?=[^>]*{_CSS_HREF})[^>]*>"

# a CSS link that is alone on its line, removed with the line
_CSS_LINK_LINE_RE = re.compile(
    rf"^[ \t]*{_CSS_LINK}[ \t]*(?:\r\n|\n|\Z)",
    re.IGNORECASE | re.MULTILINE,
)
_CSS_LINK_RE = re.compile(_CSS_LINK, re.IGNORECASE)

_HEAD_OPEN_RE = re.compile(r"<head\b[^>]*>", re.IGNORECASE)
_HEAD_CLOSE_RE = re.compile(r"</head\s*>", re.IGNORECASE)
_BODY_OPEN_RE = re.compile(r"<body\b", re.IGNORECASE)

_DEFAULT_CHILD_INDENT = "    "


def find_stylesheet_links(content: str) -> list[str]:
    """Return every ``<link>`` tag in ``content`` that references a .css file."""
    return _CSS_LINK_RE.findall(content)


def strip_stylesheet_links(content: str) -> str:
    """Remove every CSS ``<link>`` tag, dropping lines that become empty."""
    content = _CSS_LINK_LINE_RE.sub("", content)
    return _CSS_LINK_RE.sub("", content)


def _line_start(content: str, index: int) -> int:
    return content.rfind("\n", 0, index) + 1


def _leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip(" \t"))]


def _newline_style(content: str) -> str:
    return "\r\n" if "\r\n" in content else "\n"


def _child_indent(content: str, head_close: int) -> str:
    """Indentation used by the last element inside <head>, if any."""
    head_open = _HEAD_OPEN_RE.search(content, 0, head_close)
    start = head_open.end() if head_open else 0
    for line in reversed(content[start:head_close].splitlines()):
        if line.strip():
            return _leading_whitespace(line)

    close_line = content[_line_start(content, head_close):head_close]
    return _leading_whitespace(close_line) + _DEFAULT_CHILD_INDENT


def insert_before_head_close(content: str, tag: str) -> str:
    """Insert ``tag`` immediately before the first ``</head>``.

    Falls back to the opening ``<body`` tag, and finally to the start of the
    document, when there is no ``</head>``.
    """
    newline = _newline_style(content)

    head_close = _HEAD_CLOSE_RE.search(content)
    if head_close is None:
        body_open = _BODY_OPEN_RE.search(content)
        position = body_open.start() if body_open else 0
        return content[:position] + tag + newline + content[position:]

    index = head_close.start()
    line_start = _line_start(content, index)
    if content[line_start:index].strip():
        # </head> shares its line with other markup
        return content[:index] + tag + content[index:]

    indent = _child_indent(content, index)
    return content[:line_start] + indent + tag + newline + content[line_start:]


def merge_html(existing_content: str, css_file_name: str) -> HtmlMergeResult:
    """Merge the stylesheet link for ``css_file_name`` into ``existing_content``.

    Args:
        existing_content: Current file text, or "" when the file is missing
        css_file_name: Stylesheet name under ./dist/

    Returns:
        Merged content with CREATED, UPDATED or UNCHANGED outcome
    """
    tag = get_stylesheet_link(css_file_name)

    if not existing_content.strip():
        return HtmlMergeResult(get_html_template(css_file_name), MergeOutcome.CREATED)

    if tag in existing_content:
        return HtmlMergeResult(existing_content, MergeOutcome.UNCHANGED)

    stripped = strip_stylesheet_links(existing_content)
    return HtmlMergeResult(
        insert_before_head_close(stripped, tag),
        MergeOutcome.UPDATED,
    )
