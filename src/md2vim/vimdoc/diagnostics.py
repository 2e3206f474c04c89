"""
Structured warnings raised while rendering. Rendering never stops for these;
they are collected and handed back with the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WarningKind(str, Enum):
    structure = "structure"
    """Malformed heading hierarchy."""

    unsupported = "unsupported"
    """A construct with no help-file rendering was dropped."""


@dataclass(frozen=True)
class RenderWarning:
    kind: WarningKind
    construct: str
    """Name of the construct, e.g. `heading`, `table`, `footnote`."""

    message: str

    def __str__(self) -> str:
        return self.message
