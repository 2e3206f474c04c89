"""
Fixed-width layout primitives: indented blocks, straddled lines and rules.
"""

from __future__ import annotations

CONCEALED_TAG_WIDTH = 2
"""
Tag delimiters (`*tag*` or `|tag|`) are concealed by the help viewer, so lines
ending in a tag get this much extra padding to keep the visible text aligned.
"""


def format_block(text: str, tab_width: int, trim: int = 0) -> str:
    """
    Indent every non-empty line of `text` by `tab_width` spaces.

    The first line is indented by `max(tab_width - trim, 0)` instead, so it lines
    up after a marker of width `trim` that the caller already wrote (such as
    `* ` or `12. `). Empty lines are dropped.
    """
    formatted: list[str] = []
    for index, line in enumerate(text.split("\n")):
        if not line:
            continue
        width = max(tab_width - trim, 0) if index == 0 else tab_width
        formatted.append(" " * width + line + "\n")
    return "".join(formatted)


def straddle(left: str, right: str, column_width: int, trim: int = 0) -> str:
    """
    Lay out `left` and `right` on one line so that `right` ends at the column
    width (plus `trim`), with at least one space between them.
    """
    padding = column_width - (len(left) + len(right)) + trim
    if padding <= 0:
        padding = 1
    return f"{left}{' ' * padding}{right}\n"


def rule(char: str, column_width: int) -> str:
    return char * column_width + "\n"
