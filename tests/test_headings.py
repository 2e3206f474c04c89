"""Tests for heading tree construction and table of contents rendering."""

from __future__ import annotations

from md2vim.vimdoc.headings import HeadingNode, HeadingTree, render_toc


def _build(*headings: tuple[str, int]) -> tuple[HeadingTree, list[str]]:
    tree = HeadingTree()
    problems: list[str] = []
    for text, level in headings:
        problems.extend(tree.add(text, level))
    return tree, problems


def _outline(node: HeadingNode, depth: int = 0) -> list[tuple[int, str]]:
    result = [(depth, node.text)]
    for child in node.children:
        result.extend(_outline(child, depth + 1))
    return result


class TestHeadingTree:
    """Placement of headings as they arrive in document order."""

    def test_first_heading_becomes_root(self) -> None:
        tree, problems = _build(("Title", 1))
        assert tree.root is not None
        assert tree.root.text == "Title"
        assert tree.current is tree.root
        assert problems == []

    def test_deeper_headings_attach_to_current_in_order(self) -> None:
        tree, problems = _build(("Title", 1), ("Install", 2), ("Usage", 2), ("Details", 3))
        assert tree.root is not None
        assert [child.text for child in tree.root.children] == ["Install", "Usage", "Details"]
        assert problems == []

    def test_current_only_moves_on_same_or_shallower_level(self) -> None:
        tree, _ = _build(("Title", 1), ("Other", 1), ("Notes", 2))
        assert tree.root is not None
        assert tree.root.children == []
        assert tree.current is not None
        assert tree.current.text == "Other"
        assert [child.text for child in tree.current.children] == ["Notes"]

    def test_non_level_one_root_is_reported(self) -> None:
        tree, problems = _build(("Start", 2))
        assert tree.root is not None
        assert tree.root.level == 2
        assert len(problems) == 1
        assert "not level 1" in problems[0]

    def test_heading_at_root_level_is_reported_but_placed(self) -> None:
        tree, problems = _build(("Title", 1), ("Second Title", 1))
        assert len(problems) == 1
        assert "root heading" in problems[0]
        assert tree.current is not None
        assert tree.current.text == "Second Title"


class TestRenderToc:
    """Table of contents output."""

    @staticmethod
    def _tag(text: str) -> str:
        return f"doc-{text.lower()}"

    def test_single_entry(self) -> None:
        toc = render_toc(HeadingNode("Title", 1), self._tag, column_width=30, tab_width=4)
        assert toc == "Title" + " " * 16 + "|doc-title|\n"

    def test_nesting_indents_by_tab_width(self) -> None:
        tree, _ = _build(("Title", 1), ("Install", 2), ("Usage", 2))
        assert tree.root is not None
        toc = render_toc(tree.root, self._tag, column_width=40, tab_width=2)
        lines = toc.splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("Title ")
        assert lines[1].startswith("  Install ")
        assert lines[2].startswith("  Usage ")
        assert lines[1].endswith("|doc-install|")
        # Tag delimiters are concealed, so visible width is the column width
        assert all(len(line) == 42 for line in lines)

    def test_outline_mirrors_tree(self) -> None:
        root = HeadingNode(
            "A",
            1,
            [HeadingNode("B", 2, [HeadingNode("C", 3)]), HeadingNode("D", 2)],
        )
        toc = render_toc(root, self._tag, column_width=20, tab_width=3)
        indents = [len(line) - len(line.lstrip(" ")) for line in toc.splitlines()]
        assert indents == [depth * 3 for depth, _ in _outline(root)]
        assert [line.split()[0] for line in toc.splitlines()] == ["A", "B", "C", "D"]
