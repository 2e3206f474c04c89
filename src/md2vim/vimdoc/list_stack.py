"""
Nesting state for lists being rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BULLET_MARKER = "* "


class ListKind(str, Enum):
    ordered = "ordered"
    unordered = "unordered"


class ListStackError(RuntimeError):
    """
    Raised when a list item or list end arrives with no open list. This means the
    caller driving the renderer broke the nesting contract; it is not an input
    error and is never recovered from.
    """


@dataclass
class ListContext:
    """One open list: its kind and the number the next item gets."""

    kind: ListKind
    next_index: int = 1

    def next_marker(self) -> str:
        """Return the marker for the next item, advancing the counter for ordered lists."""
        if self.kind is ListKind.unordered:
            return BULLET_MARKER
        marker = f"{self.next_index}. "
        self.next_index += 1
        return marker


class ListStack:
    """Stack of open lists, innermost last."""

    def __init__(self) -> None:
        self._contexts: list[ListContext] = []

    def __len__(self) -> int:
        return len(self._contexts)

    def push(self, kind: ListKind) -> ListContext:
        context = ListContext(kind)
        self._contexts.append(context)
        return context

    def pop(self) -> ListContext:
        if not self._contexts:
            raise ListStackError("List closed while no list is open")
        return self._contexts.pop()

    def peek(self) -> ListContext:
        if not self._contexts:
            raise ListStackError("List item rendered while no list is open")
        return self._contexts[-1]
