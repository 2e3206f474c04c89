"""
Options that control how a help file is laid out.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag, auto
from pathlib import PurePath

DEFAULT_COLUMN_WIDTH = 80
DEFAULT_TAB_WIDTH = 4


class RenderFlag(Flag):
    """Layout switches, combinable with `|`."""

    NONE = 0
    NO_TOC = auto()
    NO_RULES = auto()
    PASCAL = auto()


def help_title(filename: str, *, pascal: bool = False) -> str:
    """
    Derive the tag prefix from a help-file name: `plugin.txt` -> `plugin`.
    The stem is lower-cased unless `pascal` is set. Names without an extension
    are used unchanged.
    """
    name = PurePath(filename).name
    index = name.rfind(".")
    if index < 0:
        return name
    title = name[:index]
    return title if pascal else title.lower()


@dataclass(frozen=True)
class RenderOptions:
    """Settings for one conversion."""

    filename: str
    description: str = ""
    column_width: int = DEFAULT_COLUMN_WIDTH
    tab_width: int = DEFAULT_TAB_WIDTH
    flags: RenderFlag = RenderFlag.NONE

    def __post_init__(self) -> None:
        if self.column_width < 1:
            raise ValueError(f"Column width must be positive, got {self.column_width}")
        if self.tab_width < 0:
            raise ValueError(f"Tab width must not be negative, got {self.tab_width}")

    @property
    def basename(self) -> str:
        return PurePath(self.filename).name

    @property
    def title(self) -> str:
        return help_title(self.filename, pascal=self.pascal)

    @property
    def pascal(self) -> bool:
        return RenderFlag.PASCAL in self.flags

    @property
    def toc(self) -> bool:
        return RenderFlag.NO_TOC not in self.flags

    @property
    def rules(self) -> bool:
        return RenderFlag.NO_RULES not in self.flags
