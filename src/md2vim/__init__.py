"""
md2vim: convert Markdown documents into Vim help files.

Library usage:
    from md2vim import RenderOptions, convert_markdown

    result = convert_markdown(text, RenderOptions(filename="plugin.txt"))
    print(result.text)
    for warning in result.warnings:
        print(warning)
"""

from md2vim.convert_api import ConversionResult, convert_file, convert_markdown
from md2vim.vimdoc.diagnostics import RenderWarning, WarningKind
from md2vim.vimdoc.list_stack import ListStackError
from md2vim.vimdoc.options import RenderFlag, RenderOptions

__all__ = [
    "ConversionResult",
    "ListStackError",
    "RenderFlag",
    "RenderOptions",
    "RenderWarning",
    "WarningKind",
    "convert_file",
    "convert_markdown",
]
