"""Tests for help-file tag generation."""

from __future__ import annotations

from md2vim.vimdoc.options import help_title
from md2vim.vimdoc.tags import build_tag, tag_slug


def test_default_tag_lowercases_and_joins_with_underscores() -> None:
    assert build_tag("doc", "Getting Started") == "doc-getting_started"


def test_pascal_tag_capitalizes_words_and_drops_spaces() -> None:
    assert build_tag("Doc", "Getting started", pascal=True) == "Doc-GettingStarted"


def test_pascal_keeps_existing_capitals() -> None:
    """Only the first letter of each word changes."""
    assert tag_slug("using the API", pascal=True) == "UsingTheAPI"


def test_pascal_word_boundaries_include_punctuation() -> None:
    assert tag_slug("read-only mode", pascal=True) == "Read-OnlyMode"


def test_punctuation_is_not_escaped() -> None:
    assert build_tag("doc", "What's New?") == "doc-what's_new?"


def test_tag_is_deterministic() -> None:
    assert build_tag("doc", "Usage") == build_tag("doc", "Usage")


def test_distinct_texts_give_distinct_tags() -> None:
    texts = ["Install", "Installation", "Install Guide", "Usage"]
    tags = {build_tag("doc", text) for text in texts}
    assert len(tags) == len(texts)


def test_help_title_strips_extension_and_lowercases() -> None:
    assert help_title("doc/MyPlugin.txt") == "myplugin"


def test_help_title_keeps_case_in_pascal_mode() -> None:
    assert help_title("MyPlugin.txt", pascal=True) == "MyPlugin"


def test_help_title_without_extension_is_unchanged() -> None:
    assert help_title("README") == "README"
