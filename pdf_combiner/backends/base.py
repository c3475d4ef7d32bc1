"""Engine protocol for PDF assembly."""

from __future__ import annotations

from typing import Optional, Protocol, Union

from ..types import Orientation, PageSize


class PDFEngine(Protocol):
    """Protocol defining the operations a combiner needs from a PDF engine.

    The metadata setters (``set_title``, ``set_author``, ``set_subject``,
    ``set_keywords`` and ``set_creator``) are optional; engines that do not
    provide one simply do not receive that field.
    """

    def set_source_file(self, path: str) -> int:
        """Open *path* as the current source and return its page count."""

    def import_page(self, page_number: int) -> Optional[object]:
        """Return a template for the 1-based *page_number* of the current source."""

    def get_template_size(self, template: object) -> PageSize:
        """Return the natural size of an imported template."""

    def add_page(self, orientation: Optional[Orientation], size: PageSize) -> None:
        """Start a new output page of *size*, forced to *orientation* when given."""

    def use_template(self, template: object) -> None:
        """Stamp *template* onto the current output page."""

    def page_number(self) -> int:
        """Return the number of pages in the output document so far."""

    def output(self, path: str, channel: str) -> Union[str, bytes]:
        """Emit the output document through *channel*.

        Returns the serialised bytes for the ``"S"`` channel and an empty
        string on success for every other channel.
        """
