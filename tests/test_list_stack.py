"""Tests for list nesting state."""

from __future__ import annotations

import pytest

from md2vim.vimdoc.list_stack import BULLET_MARKER, ListKind, ListStack, ListStackError


def test_ordered_markers_count_from_one() -> None:
    stack = ListStack()
    context = stack.push(ListKind.ordered)
    assert [context.next_marker() for _ in range(3)] == ["1. ", "2. ", "3. "]


def test_unordered_marker_is_fixed() -> None:
    stack = ListStack()
    context = stack.push(ListKind.unordered)
    assert context.next_marker() == BULLET_MARKER
    assert context.next_marker() == BULLET_MARKER
    assert context.next_index == 1


def test_nested_lists_keep_independent_counters() -> None:
    stack = ListStack()
    outer = stack.push(ListKind.ordered)
    outer.next_marker()
    outer.next_marker()

    inner = stack.push(ListKind.ordered)
    assert stack.peek() is inner
    assert inner.next_marker() == "1. "

    stack.pop()
    assert stack.peek() is outer
    assert outer.next_marker() == "3. "


def test_new_list_restarts_at_one() -> None:
    stack = ListStack()
    stack.push(ListKind.ordered).next_marker()
    stack.pop()
    assert stack.push(ListKind.ordered).next_marker() == "1. "


def test_pop_empty_stack_raises() -> None:
    with pytest.raises(ListStackError):
        ListStack().pop()


def test_peek_empty_stack_raises() -> None:
    stack = ListStack()
    stack.push(ListKind.unordered)
    stack.pop()
    with pytest.raises(ListStackError):
        stack.peek()
    assert len(stack) == 0
