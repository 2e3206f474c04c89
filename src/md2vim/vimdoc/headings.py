"""
Heading hierarchy and table of contents rendering.

Headings arrive one at a time in document order. The first becomes the root.
After that, a heading deeper than the tracked "current" heading is appended to
its children, while a heading at the same or a shallower level replaces
"current" without being linked into the tree. Anything attached below such an
unlinked heading is therefore also absent from the table of contents.

Example:
    # Plugin          root, current
    ## Install        child of Plugin
    ### Manually      child of Plugin (current is still Plugin)
    # Other           becomes current, not linked
    ## Notes          child of Other, not reachable from the root
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from md2vim.vimdoc.layout import CONCEALED_TAG_WIDTH, straddle


@dataclass
class HeadingNode:
    text: str
    level: int
    children: list[HeadingNode] = field(default_factory=list)


@dataclass
class HeadingTree:
    """Incrementally built heading hierarchy for one document."""

    root: HeadingNode | None = None
    current: HeadingNode | None = None

    def add(self, text: str, level: int) -> list[str]:
        """
        Place a heading and return messages describing any hierarchy problems.
        Problems are reported but the heading is still placed.
        """
        node = HeadingNode(text, level)
        problems: list[str] = []

        if self.root is None or self.current is None:
            if level != 1:
                problems.append(
                    f"Top-level heading {text!r} is a level {level} heading, not level 1"
                )
            self.root = node
            self.current = node
            return problems

        if self.root.level >= level:
            problems.append(
                f"Heading {text!r} (level {level}) is at or above the level of "
                f"the root heading {self.root.text!r} (level {self.root.level})"
            )

        if level <= self.current.level:
            self.current = node
        else:
            self.current.children.append(node)

        return problems


def render_toc(
    node: HeadingNode,
    tag_for: Callable[[str], str],
    *,
    column_width: int,
    tab_width: int,
    depth: int = 0,
) -> str:
    """
    Render `node` and its descendants, depth first, as an indented outline with
    each entry linking to its heading's tag.
    """
    title = " " * (depth * tab_width) + node.text
    link = f"|{tag_for(node.text)}|"
    lines = [straddle(title, link, column_width, CONCEALED_TAG_WIDTH)]
    for child in node.children:
        lines.append(
            render_toc(
                child,
                tag_for,
                column_width=column_width,
                tab_width=tab_width,
                depth=depth + 1,
            )
        )
    return "".join(lines)
