"""
Library entry points: convert Markdown text or files to help files.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from strif import atomic_output_file

from md2vim.formats.vimdoc_renderer import VimDocRenderer, vimdoc_markdown
from md2vim.vimdoc.diagnostics import RenderWarning
from md2vim.vimdoc.help_writer import HelpWriter, WarningHandler
from md2vim.vimdoc.options import RenderOptions


@dataclass
class ConversionResult:
    """
    Converted help-file text plus any warnings raised along the way. Printing the
    warnings is left to the caller.
    """

    text: str
    warnings: list[RenderWarning]


def convert_markdown(
    markdown_text: str,
    options: RenderOptions,
    on_warning: WarningHandler | None = None,
) -> ConversionResult:
    """
    Convert a Markdown document to help-file text.

    Args:
        markdown_text: The Markdown source.
        options: Layout options; `options.filename` names the help file and
            determines the tag prefix.
        on_warning: Called with each warning as it is raised.

    Returns:
        The help-file text and the collected warnings.
    """
    doc = vimdoc_markdown().parse(markdown_text)
    writer = HelpWriter(options, on_warning=on_warning)
    with VimDocRenderer(writer) as renderer:
        renderer.root_node = doc
        text = renderer.render(doc)
    return ConversionResult(text=text, warnings=list(writer.warnings))


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def write_output(path: str, text: str) -> None:
    """Write to stdout for `-`, otherwise atomically replace the file at `path`."""
    if path == "-":
        sys.stdout.write(text)
        return
    with atomic_output_file(Path(path), make_parents=True) as temp_path:
        Path(temp_path).write_text(text, encoding="utf-8")


def convert_file(
    path: str,
    output: str,
    options: RenderOptions,
    on_warning: WarningHandler | None = None,
) -> ConversionResult:
    """
    Convert the Markdown file at `path` (`-` for stdin) and write the result to
    `output` (`-` for stdout).
    """
    result = convert_markdown(read_input(path), options, on_warning=on_warning)
    write_output(output, result.text)
    return result
