"""
Help-file assembly from a stream of document events.

`HelpWriter` knows nothing about Markdown syntax. A front end (see
`md2vim.formats.vimdoc_renderer`) walks a parsed document and calls one method
per element, in document order:

- Block events write into an `OutputBuffer`. Blocks with inline content
  (headings, paragraphs) and lists receive an `InlineRender` callable that
  renders the nested content into that same buffer and reports whether anything
  was produced.
- Container blocks (list items, quotes, code) receive their already rendered
  text.
- Span events return the text to splice into the surrounding inline content.

`document_header` starts a fresh render state and `document_footer` splices in
the table of contents and applies the final fixups.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field

from md2vim.vimdoc.buffer import OutputBuffer
from md2vim.vimdoc.diagnostics import RenderWarning, WarningKind
from md2vim.vimdoc.fixups import BLOCK_CLOSE, BLOCK_OPEN, fixup_block_delimiters
from md2vim.vimdoc.headings import HeadingTree, render_toc
from md2vim.vimdoc.layout import CONCEALED_TAG_WIDTH, format_block, rule, straddle
from md2vim.vimdoc.list_stack import ListKind, ListStack
from md2vim.vimdoc.options import RenderOptions
from md2vim.vimdoc.tags import build_tag

InlineRender = Callable[[], bool]
"""Renders nested content into the current buffer; returns False if it produced nothing."""

WarningHandler = Callable[[RenderWarning], None]

_WHITESPACE = re.compile(r"\s")

_RULE_CHARS = {1: "=", 2: "-"}


@dataclass
class RenderState:
    """Mutable state for a single document conversion."""

    toc_offset: int | None = None
    headings: HeadingTree = field(default_factory=HeadingTree)
    lists: ListStack = field(default_factory=ListStack)
    warnings: list[RenderWarning] = field(default_factory=list)


class HelpWriter:
    """
    Renders document events into help-file text. One instance handles one
    conversion at a time; `document_header` resets all state.
    """

    def __init__(self, options: RenderOptions, on_warning: WarningHandler | None = None) -> None:
        self.options = options
        self.on_warning = on_warning
        self.state = RenderState()
        self._document: OutputBuffer | None = None

    @property
    def warnings(self) -> list[RenderWarning]:
        return self.state.warnings

    def tag(self, text: str) -> str:
        return build_tag(self.options.title, text, pascal=self.options.pascal)

    def _warn(self, kind: WarningKind, construct: str, message: str) -> None:
        warning = RenderWarning(kind, construct, message)
        self.state.warnings.append(warning)
        if self.on_warning is not None:
            self.on_warning(warning)

    def _unsupported(self, construct: str, description: str) -> None:
        self._warn(
            WarningKind.unsupported,
            construct,
            f"{description} cannot be represented in a help file and was omitted",
        )

    def _document_offset(self, out: OutputBuffer, position: int) -> int:
        """
        Map a position in `out` to an offset in the document buffer. A heading
        nested in a container block is written to that block's private buffer,
        and the block itself will land at the document buffer's current end.
        """
        if self._document is None or out is self._document:
            return position
        return self._document.tell()

    def _literal_block(self, out: OutputBuffer, text: str) -> None:
        out.write(BLOCK_OPEN + "\n")
        out.write(format_block(text, self.options.tab_width))
        out.write(BLOCK_CLOSE + "\n\n")

    # Header and footer

    def document_header(self, out: OutputBuffer) -> None:
        self.state = RenderState()
        self._document = out
        options = self.options
        if options.description:
            out.write(straddle(options.basename, options.description, options.column_width))
        else:
            out.write(options.basename + "\n")
        out.write("\n")

    def document_footer(self, out: OutputBuffer) -> None:
        state = self.state
        text = out.getvalue()
        root = state.headings.root
        if state.toc_offset is not None and root is not None and self.options.toc:
            toc = render_toc(
                root,
                self.tag,
                column_width=self.options.column_width,
                tab_width=self.options.tab_width,
            )
            text = text[: state.toc_offset] + toc + "\n" + text[state.toc_offset :]
        out.reset(fixup_block_delimiters(text))

    # Block-level events

    def heading(self, out: OutputBuffer, text: InlineRender, level: int) -> None:
        options = self.options
        init_pos = out.tell()

        if options.rules and level in _RULE_CHARS:
            out.write(rule(_RULE_CHARS[level], options.column_width))

        heading_pos = out.tell()
        if not text():
            out.truncate(init_pos)
            return

        heading_text = out.since(heading_pos)
        if self.state.toc_offset is None:
            self.state.toc_offset = self._document_offset(out, init_pos)

        for problem in self.state.headings.add(heading_text, level):
            self._warn(WarningKind.structure, "heading", problem)

        out.truncate(heading_pos)
        out.write(
            straddle(
                heading_text.upper(),
                f"*{self.tag(heading_text)}*",
                options.column_width,
                CONCEALED_TAG_WIDTH,
            )
        )
        out.write("\n")

    def paragraph(self, out: OutputBuffer, text: InlineRender, *, tight: bool = False) -> None:
        marker = out.tell()
        if not text():
            out.truncate(marker)
            return
        out.write("\n" if tight else "\n\n")

    def list_block(self, out: OutputBuffer, items: InlineRender, *, ordered: bool) -> None:
        self.state.lists.push(ListKind.ordered if ordered else ListKind.unordered)
        items()
        self.state.lists.pop()

    def list_item(self, out: OutputBuffer, text: str, *, end_of_list: bool = False) -> None:
        marker = self.state.lists.peek().next_marker()
        body = format_block(text, self.options.tab_width, len(marker))
        if body:
            out.write(marker + body)
        else:
            out.write(marker.rstrip() + "\n")
        if end_of_list:
            out.write("\n")

    def block_code(self, out: OutputBuffer, text: str, lang: str = "") -> None:
        self._literal_block(out, text)

    def block_quote(self, out: OutputBuffer, text: str) -> None:
        self._literal_block(out, text)

    def block_alert(self, out: OutputBuffer, kind: str, text: str) -> None:
        """A quote with an alert header; the kind (`NOTE`, `WARNING`, ...) leads the block."""
        self._literal_block(out, f"{kind}:\n{text}")

    def block_html(self, out: OutputBuffer, text: str) -> None:
        self._literal_block(out, text)

    def horizontal_rule(self, out: OutputBuffer) -> None:
        out.write(rule("-", self.options.column_width))

    def table(self, out: OutputBuffer) -> None:
        self._unsupported("table", "Table")

    def footnotes(self, out: OutputBuffer) -> None:
        self._unsupported("footnote", "Footnote definition")

    def title_block(self, out: OutputBuffer, text: str) -> None:
        self._unsupported("title_block", "Title block")

    # Span-level events

    def auto_link(self, link: str) -> str:
        return link

    def code_span(self, text: str) -> str:
        # Inline code containing whitespace is not highlighted reliably by the viewer.
        if _WHITESPACE.search(text):
            return ""
        return f"`{text}`"

    def emphasis(self, text: str) -> str:
        return text

    def double_emphasis(self, text: str) -> str:
        return text

    def strikethrough(self, text: str) -> str:
        return text

    def task_marker(self, checked: bool) -> str:
        return "[x]" if checked else "[ ]"

    def image(self, link: str, alt: str) -> str:
        self._unsupported("image", f"Image {link!r}")
        return ""

    def line_break(self) -> str:
        return "\n"

    def link(self, link: str, content: str) -> str:
        return f"{content} ({link})"

    def raw_html_tag(self, tag: str) -> str:
        self._unsupported("raw_html", f"Inline HTML {tag!r}")
        return ""

    def footnote_ref(self, ref: str) -> str:
        self._unsupported("footnote", f"Footnote reference {ref!r}")
        return ""

    def entity(self, entity: str) -> str:
        return entity

    def normal_text(self, text: str) -> str:
        return text
