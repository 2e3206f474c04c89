"""
Parser-independent help-file rendering: tags, layout, heading tree, table of
contents and document assembly.
"""

from md2vim.vimdoc.help_writer import HelpWriter, RenderState
from md2vim.vimdoc.options import RenderFlag, RenderOptions

__all__ = ["HelpWriter", "RenderFlag", "RenderOptions", "RenderState"]
