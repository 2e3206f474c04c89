"""Tests for fixed-width layout helpers."""

from __future__ import annotations

from md2vim.vimdoc.layout import format_block, rule, straddle


def test_format_block_indents_every_line() -> None:
    assert format_block("foo\n  bar\n", 4) == "    foo\n      bar\n"


def test_format_block_drops_empty_lines() -> None:
    assert format_block("one\n\n\ntwo\n\n", 2) == "  one\n  two\n"


def test_format_block_trims_first_line_only() -> None:
    assert format_block("item\nmore", 4, trim=2) == "  item\n    more\n"


def test_format_block_trim_larger_than_tab_width() -> None:
    assert format_block("item", 2, trim=4) == "item\n"


def test_format_block_empty_text() -> None:
    assert format_block("", 4) == ""


def test_straddle_right_aligns() -> None:
    line = straddle("left", "right", 20)
    assert line == "left" + " " * 11 + "right\n"
    assert len(line.rstrip("\n")) == 20


def test_straddle_trim_adds_padding() -> None:
    assert straddle("a", "*b*", 10, 2) == "a" + " " * 8 + "*b*\n"


def test_straddle_overflow_keeps_one_space() -> None:
    assert straddle("a" * 10, "b" * 10, 12) == "a" * 10 + " " + "b" * 10 + "\n"


def test_rule() -> None:
    assert rule("=", 5) == "=====\n"
