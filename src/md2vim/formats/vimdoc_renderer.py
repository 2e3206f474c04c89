"""
Marko front end for the help-file writer.

Marko parses the Markdown; `VimDocRenderer` walks the resulting element tree and
turns each element into a `HelpWriter` event. Inline elements render to strings,
as in any Marko renderer. Block elements write into the current output buffer,
and container blocks (list items, quotes) render their children into a nested
buffer first.

The GFM and footnote extensions are enabled only for parsing, so that tables,
strikethrough and footnotes are recognized and can be reported. Their HTML
renderer mixins are never used.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from marko import Markdown, block, inline
from marko.renderer import Renderer

from md2vim.vimdoc.buffer import OutputBuffer
from md2vim.vimdoc.help_writer import HelpWriter, InlineRender

MARKDOWN_EXTENSIONS = ["gfm", "footnote"]


def vimdoc_markdown() -> Markdown:
    """Markdown parser configured with the extensions the help writer understands."""
    return Markdown(extensions=MARKDOWN_EXTENSIONS)


class VimDocRenderer(Renderer):
    """
    Marko renderer producing help-file text. Create one per conversion and call
    `render()` on a parsed `Document`.
    """

    def __init__(self, writer: HelpWriter) -> None:
        super().__init__()
        self.writer = writer
        self._out = OutputBuffer()

    @contextmanager
    def _capture(self) -> Iterator[OutputBuffer]:
        """Redirect block output into a fresh buffer for the duration of the block."""
        saved = self._out
        self._out = OutputBuffer()
        try:
            yield self._out
        finally:
            self._out = saved

    def _render_blocks(self, element: Any) -> str:
        with self._capture() as out:
            self.render_children(element)
        return out.getvalue()

    def _inline(self, element: Any, prefix: str = "") -> InlineRender:
        def text() -> bool:
            rendered = prefix + self.render_children(element)
            self._out.write(rendered)
            return bool(rendered.strip())

        return text

    # Document

    def render_document(self, element: block.Document) -> str:
        out = self._out = OutputBuffer()
        self.writer.document_header(out)
        self.render_children(element)
        self.writer.document_footer(out)
        return out.getvalue()

    # Blocks. These write to the current buffer and return an empty string.

    def render_heading(self, element: block.Heading) -> str:
        self.writer.heading(self._out, self._inline(element), element.level)
        return ""

    def render_setext_heading(self, element: block.SetextHeading) -> str:
        return self.render_heading(element)  # pyright: ignore[reportArgumentType]

    def render_paragraph(self, element: block.Paragraph) -> str:
        tight = bool(getattr(element, "_tight", False))
        # GFM task items: the checkbox is stripped from the text, which keeps its leading space
        checked = getattr(element, "checked", None)
        prefix = "" if checked is None else self.writer.task_marker(checked)
        self.writer.paragraph(self._out, self._inline(element, prefix), tight=tight)
        return ""

    def render_list(self, element: block.List) -> str:
        items = [child for child in element.children if isinstance(child, block.ListItem)]

        def render_items() -> bool:
            for index, item in enumerate(items):
                self.writer.list_item(
                    self._out,
                    self._render_blocks(item),
                    end_of_list=index == len(items) - 1,
                )
            return bool(items)

        self.writer.list_block(self._out, render_items, ordered=element.ordered)
        return ""

    def render_quote(self, element: block.Quote) -> str:
        self.writer.block_quote(self._out, self._render_blocks(element))
        return ""

    def render_alert(self, element: Any) -> str:
        body = self._render_blocks(element)
        self.writer.block_alert(self._out, element.alert_type, body)
        return ""

    def render_fenced_code(self, element: block.FencedCode) -> str:
        self.writer.block_code(self._out, self.render_children(element), element.lang)
        return ""

    def render_code_block(self, element: block.CodeBlock) -> str:
        self.writer.block_code(self._out, self.render_children(element))
        return ""

    def render_html_block(self, element: block.HTMLBlock) -> str:
        self.writer.block_html(self._out, element.body)
        return ""

    def render_thematic_break(self, element: block.ThematicBreak) -> str:
        self.writer.horizontal_rule(self._out)
        return ""

    def render_blank_line(self, element: block.BlankLine) -> str:
        return ""

    def render_link_ref_def(self, element: block.LinkRefDef) -> str:
        return ""

    def render_table(self, element: Any) -> str:
        self.writer.table(self._out)
        return ""

    def render_footnote_def(self, element: Any) -> str:
        self.writer.footnotes(self._out)
        return ""

    # Inline elements. These return text.

    def render_raw_text(self, element: inline.RawText) -> str:
        return self.writer.normal_text(element.children)  # pyright: ignore[reportArgumentType]

    def render_literal(self, element: inline.Literal) -> str:
        return self.writer.entity(element.children)  # pyright: ignore[reportArgumentType]

    def render_emphasis(self, element: inline.Emphasis) -> str:
        return self.writer.emphasis(self.render_children(element))

    def render_strong_emphasis(self, element: inline.StrongEmphasis) -> str:
        return self.writer.double_emphasis(self.render_children(element))

    def render_strikethrough(self, element: Any) -> str:
        return self.writer.strikethrough(self.render_children(element))

    def render_code_span(self, element: inline.CodeSpan) -> str:
        return self.writer.code_span(element.children)  # pyright: ignore[reportArgumentType]

    def render_line_break(self, element: inline.LineBreak) -> str:
        return self.writer.line_break()

    def render_link(self, element: inline.Link) -> str:
        return self.writer.link(element.dest, self.render_children(element))

    def render_auto_link(self, element: inline.AutoLink) -> str:
        return self.writer.auto_link(self.render_children(element))

    render_url = render_auto_link

    def render_image(self, element: inline.Image) -> str:
        return self.writer.image(element.dest, self.render_children(element))

    def render_inline_html(self, element: inline.InlineHTML) -> str:
        return self.writer.raw_html_tag(element.children)  # pyright: ignore[reportArgumentType]

    def render_footnote_ref(self, element: Any) -> str:
        return self.writer.footnote_ref(getattr(element, "label", ""))
