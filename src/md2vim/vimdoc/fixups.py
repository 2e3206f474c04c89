"""
Final textual cleanups applied to the assembled help file.
"""

from __future__ import annotations

import re

BLOCK_OPEN = ">"
BLOCK_CLOSE = "<"

_INDENTED_DELIMITER = re.compile(
    rf"^[ \t]*([{re.escape(BLOCK_OPEN)}{re.escape(BLOCK_CLOSE)}])[ \t]*$", re.MULTILINE
)


def fixup_block_delimiters(text: str) -> str:
    """
    Strip the whitespace around lines that hold only a `>` or `<` block
    delimiter. Nested formatting indents these lines, but the help viewer only
    recognizes them in column zero.
    """
    return _INDENTED_DELIMITER.sub(r"\1", text)
