"""Tests for the block delimiter fixup pass."""

from __future__ import annotations

from md2vim.vimdoc.fixups import fixup_block_delimiters


def test_indented_delimiters_are_dedented() -> None:
    text = "*   item\n    >\n        code\n    <\n"
    assert fixup_block_delimiters(text) == "*   item\n>\n        code\n<\n"


def test_trailing_whitespace_is_removed() -> None:
    assert fixup_block_delimiters(">  \ncode\n\t<\t\n") == ">\ncode\n<\n"


def test_delimiters_inside_text_are_untouched() -> None:
    text = "a > b\n    <tag>\n  >>\n"
    assert fixup_block_delimiters(text) == text


def test_blank_lines_are_preserved() -> None:
    text = "para\n\n  >\ncode\n<\n\n"
    assert fixup_block_delimiters(text) == "para\n\n>\ncode\n<\n\n"


def test_fixup_is_idempotent() -> None:
    text = "x\n   >\n      y\n  <\n\n  <  \n"
    once = fixup_block_delimiters(text)
    assert fixup_block_delimiters(once) == once
