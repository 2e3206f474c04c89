"""
Tag generation for help-file cross references.

A heading `Getting Started` in `plugin.txt` gets the tag `plugin-getting_started`
(or `Plugin-GettingStarted` in Pascal mode). The same function builds both the
`*tag*` anchor in the body and the `|tag|` link in the table of contents, so the
two always match.

Punctuation is not escaped, so headings that differ only in punctuation can
produce colliding or unusual tags.
"""

from __future__ import annotations

import re

_WORD_START = re.compile(r"\b\w")


def _capitalize_words(text: str) -> str:
    """Upper-case the first letter of every word, leaving the rest untouched."""
    return _WORD_START.sub(lambda match: match.group(0).upper(), text)


def tag_slug(text: str, *, pascal: bool = False) -> str:
    if pascal:
        return _capitalize_words(text).replace(" ", "")
    return text.lower().replace(" ", "_")


def build_tag(title: str, text: str, *, pascal: bool = False) -> str:
    """
    Build the tag for heading `text` in the document titled `title`.

    Args:
        title: Document title (the help-file stem).
        text: Rendered heading text.
        pascal: Capitalize words and drop spaces instead of lower-casing and
            joining with underscores.

    Returns:
        Tag of the form `<title>-<slug>`, without the `*` or `|` delimiters.
    """
    return f"{title}-{tag_slug(text, pascal=pascal)}"
