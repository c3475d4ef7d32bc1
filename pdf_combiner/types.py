"""
Type definitions and dataclasses for PDF Combiner.

This module defines data structures used throughout the library.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .exceptions import InvalidOrientationError

ALL_PAGES = "all"

PageList = List[int]
PageSelection = Union[Tuple[int, ...], str]


class Orientation(str, Enum):
    """Page orientation understood by the PDF engine."""

    PORTRAIT = "P"
    LANDSCAPE = "L"

    @classmethod
    def coerce(cls, value: Union["Orientation", str, None]) -> Optional["Orientation"]:
        """Return an :class:`Orientation` for *value*, or ``None`` when unset.

        Accepts the engine codes (``"P"``/``"L"``) as well as the long names,
        in any case.
        """
        if value is None or isinstance(value, Orientation):
            return value

        text = str(value).strip().lower()
        if not text:
            return None
        if text in ("p", "portrait"):
            return cls.PORTRAIT
        if text in ("l", "landscape"):
            return cls.LANDSCAPE
        raise InvalidOrientationError(value)


@dataclass(frozen=True)
class PageSize:
    """
    Natural size of an imported page, in PDF points.

    Attributes:
        width: Page width
        height: Page height
    """
    width: float
    height: float

    @property
    def orientation(self) -> Orientation:
        # Square pages count as landscape.
        if self.width < self.height:
            return Orientation.PORTRAIT
        return Orientation.LANDSCAPE

    def oriented(self, orientation: Orientation) -> "PageSize":
        """Return this size with sides swapped to match *orientation*."""
        short, long = sorted((self.width, self.height))
        if orientation is Orientation.PORTRAIT:
            return PageSize(width=short, height=long)
        return PageSize(width=long, height=short)


@dataclass(frozen=True)
class DocumentEntry:
    """
    A single input registered with a combiner session.

    Attributes:
        path: Source PDF path
        pages: Tuple of 1-based page numbers, or ``"all"``
        orientation: Optional orientation override for this document
    """
    path: Path
    pages: PageSelection = ALL_PAGES
    orientation: Optional[Orientation] = None

    @property
    def all_pages(self) -> bool:
        return self.pages == ALL_PAGES

    def resolve_pages(self, page_count: int) -> PageList:
        """Return the concrete page list once the source's page count is known."""
        if self.all_pages:
            return list(range(1, page_count + 1))
        return list(self.pages)

    def __str__(self) -> str:
        pages = self.pages if self.all_pages else ",".join(map(str, self.pages))
        return f"DocumentEntry(path='{self.path}', pages={pages})"


class OutputMode(str, Enum):
    """Output channels, using the engine's single character codes."""

    DOWNLOAD = "D"
    FILE = "F"
    STRING = "S"
    BROWSER = "I"

    @classmethod
    def from_name(cls, name: Union["OutputMode", str, None]) -> "OutputMode":
        """Map a descriptive mode name to its channel.

        Unrecognised names fall back to :attr:`BROWSER`.
        """
        if isinstance(name, OutputMode):
            return name
        return _MODE_NAMES.get(str(name or "").strip().lower(), cls.BROWSER)


_MODE_NAMES = {
    "download": OutputMode.DOWNLOAD,
    "file": OutputMode.FILE,
    "string": OutputMode.STRING,
    "browser": OutputMode.BROWSER,
}
