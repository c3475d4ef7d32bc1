"""pypdf engine implementation for PDF Combiner."""

from __future__ import annotations

import io
import logging
import tempfile
import webbrowser
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from pypdf import PageObject, PdfReader, PdfWriter, Transformation
from pypdf.errors import PdfReadError

from ..config import CombinerSettings
from ..exceptions import (
    EncryptedPDFError,
    InvalidPDFError,
    OutputError,
    PageNotFoundError,
    PDFFileNotFoundError,
)
from ..types import Orientation, OutputMode, PageSize
from .base import PDFEngine

LOGGER = logging.getLogger("pdf_combiner.backends.pypdf")

PRODUCER = "PDF Combiner"

# Shift that brings a clockwise-rotated crop box back to the origin.
_ROTATION_OFFSETS = {
    90: lambda width, height: (0.0, width),
    180: lambda width, height: (width, height),
    270: lambda width, height: (height, 0.0),
}


def _displayed_size(page: PageObject) -> PageSize:
    """Size of *page* as a viewer shows it: its crop box, turned by /Rotate."""
    width, height = float(page.cropbox.width), float(page.cropbox.height)
    if page.rotation % 180 == 90:
        width, height = height, width
    return PageSize(width=width, height=height)


@dataclass
class PageTemplate:
    """A source page imported for stamping onto an output page."""

    page: PageObject
    source: Path
    page_number: int
    size: PageSize


class PypdfEngine(PDFEngine):
    """Engine implementation that uses `pypdf` under the hood."""

    def __init__(self, settings: Optional[CombinerSettings] = None) -> None:
        self.settings = settings or CombinerSettings.from_env()
        self._writer = PdfWriter()
        self._reader: Optional[PdfReader] = None
        self._source: Optional[Path] = None
        self._current_page: Optional[PageObject] = None
        self._metadata: Dict[str, str] = {"/Producer": PRODUCER}

    # ------------------------------------------------------------------
    # Source handling
    # ------------------------------------------------------------------
    def set_source_file(self, path: str) -> int:
        source = Path(path)
        if not source.exists() or not source.is_file():
            raise PDFFileNotFoundError(path)

        try:
            raw_bytes = source.read_bytes()
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {path}. Error: {exc}") from exc

        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {path}. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF: {path}. Error: {exc}") from exc

        if reader.is_encrypted:
            raise EncryptedPDFError(f"PDF is encrypted and cannot be combined: {path}")

        num_pages = len(reader.pages)
        if num_pages == 0:
            raise InvalidPDFError(f"PDF has no pages: {path}")

        self._reader = reader
        self._source = source
        LOGGER.debug("Opened source %s with %d page(s)", source, num_pages)
        return num_pages

    def import_page(self, page_number: int) -> PageTemplate:
        if self._reader is None or self._source is None:
            raise InvalidPDFError("No source PDF selected; call set_source_file first.")

        if page_number < 1 or page_number > len(self._reader.pages):
            raise PageNotFoundError(page_number, self._source)

        page = self._reader.pages[page_number - 1]
        size = _displayed_size(page)
        return PageTemplate(page=page, source=self._source, page_number=page_number, size=size)

    def get_template_size(self, template: PageTemplate) -> PageSize:
        return template.size

    # ------------------------------------------------------------------
    # Output document assembly
    # ------------------------------------------------------------------
    def add_page(self, orientation: Optional[Orientation], size: PageSize) -> None:
        if orientation is not None:
            size = size.oriented(orientation)
        self._current_page = self._writer.add_blank_page(width=size.width, height=size.height)

    def use_template(self, template: PageTemplate) -> None:
        if self._current_page is None:
            raise InvalidPDFError("No output page to stamp onto; call add_page first.")

        # Anchor the visible (cropped, rotated) template at the top-left corner.
        crop = template.page.cropbox
        width, height = float(crop.width), float(crop.height)
        transformation = Transformation().translate(tx=-float(crop.left), ty=-float(crop.bottom))

        rotation = template.page.rotation % 360
        if rotation in _ROTATION_OFFSETS:
            # /Rotate turns the page clockwise.
            offset_x, offset_y = _ROTATION_OFFSETS[rotation](width, height)
            transformation = transformation.rotate(-rotation).translate(tx=offset_x, ty=offset_y)

        target_height = float(self._current_page.mediabox.height)
        transformation = transformation.translate(ty=target_height - template.size.height)
        self._current_page.merge_transformed_page(template.page, transformation)

    def page_number(self) -> int:
        return len(self._writer.pages)

    # ------------------------------------------------------------------
    # Metadata setters
    # ------------------------------------------------------------------
    def set_title(self, value: str) -> None:
        self._metadata["/Title"] = value

    def set_author(self, value: str) -> None:
        self._metadata["/Author"] = value

    def set_subject(self, value: str) -> None:
        self._metadata["/Subject"] = value

    def set_keywords(self, value: str) -> None:
        self._metadata["/Keywords"] = value

    def set_creator(self, value: str) -> None:
        self._metadata["/Creator"] = value

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def output(self, path: str, channel: Union[OutputMode, str] = OutputMode.BROWSER) -> Union[str, bytes]:
        try:
            mode = OutputMode(channel)
        except ValueError as exc:
            raise OutputError(path, channel, f"Unsupported output channel: {channel!r}") from exc

        if mode is OutputMode.STRING:
            return self._serialise()

        if mode is OutputMode.DOWNLOAD:
            destination = self.settings.download_dir / Path(path).name
        else:
            destination = Path(path)

        self._write(destination)

        if mode is OutputMode.BROWSER and self.settings.open_browser:
            LOGGER.debug("Opening %s in the system browser", destination)
            webbrowser.open(destination.resolve().as_uri())

        return ""

    def _finalise_metadata(self) -> None:
        self._writer.add_metadata(self._metadata)

    def _serialise(self) -> bytes:
        self._finalise_metadata()
        buffer = io.BytesIO()
        self._writer.write(buffer)
        return buffer.getvalue()

    def _write(self, destination: Path) -> None:
        self._finalise_metadata()
        destination.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile("wb", delete=False, dir=destination.parent, suffix=".tmp") as handle:
            temp_path = Path(handle.name)
            try:
                self._writer.write(handle)
            except Exception:
                handle.close()
                temp_path.unlink(missing_ok=True)
                raise
        temp_path.replace(destination)
        LOGGER.info("Wrote %d page(s) to %s", self.page_number(), destination)


__all__ = ["PageTemplate", "PypdfEngine"]
