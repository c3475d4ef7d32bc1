"""PDF combining built around a pluggable :class:`PDFEngine`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .backends import PDFEngine, PypdfEngine
from .config import CombinerSettings
from .exceptions import (
    NoDocumentsError,
    PageNotFoundError,
    PDFFileNotFoundError,
    SessionStateError,
)
from .metadata import apply_metadata
from .output import write_output
from .ranges import normalize_pages
from .types import ALL_PAGES, DocumentEntry, Orientation, OutputMode, PageSize

LOGGER = logging.getLogger("pdf_combiner.combiner")

OrientationLike = Union[Orientation, str, None]
PagesLike = Union[str, Iterable[int], None]
ProgressCallback = Callable[[int, int, str], None]


class PDFCombiner:
    """Collects input PDFs and assembles them into a single document.

    A combiner is a one-shot session: add documents, merge once, then save.

    >>> combiner = PDFCombiner()
    >>> combiner.add_pdf("cover.pdf")
    >>> combiner.add_pdf("report.pdf", "1,3,6, 12-16")
    >>> combiner.duplex_merge(meta={"title": "Annual report"})
    >>> combiner.save("combined.pdf", "file")
    """

    def __init__(
        self,
        *,
        engine: Optional[PDFEngine] = None,
        settings: Optional[CombinerSettings] = None,
    ) -> None:
        self.settings = settings or CombinerSettings.from_env()
        self.engine: PDFEngine = engine or PypdfEngine(self.settings)
        self._documents: List[DocumentEntry] = []
        self._merged = False
        self._failed = False
        self._saved = False

    @property
    def documents(self) -> Tuple[DocumentEntry, ...]:
        return tuple(self._documents)

    @property
    def page_count(self) -> int:
        return self.engine.page_number()

    def _ensure_open(self, action: str) -> None:
        if self._saved:
            raise SessionStateError(f"Cannot {action}: the combined PDF has already been saved.")
        if self._failed:
            raise SessionStateError(f"Cannot {action}: a previous merge failed; start a new session.")

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def add_pdf(
        self,
        path: Union[str, Path],
        pages: PagesLike = ALL_PAGES,
        orientation: OrientationLike = None,
    ) -> DocumentEntry:
        """Register *path* for merging.

        Args:
            path: Path of an existing PDF file.
            pages: ``"all"``, a range expression such as ``"1,3,6, 12-16"``,
                or an iterable of 1-based page numbers.
            orientation: Optional ``"P"``/``"L"`` override for this document.

        Raises:
            PDFFileNotFoundError: If *path* is not an existing file.
            InvalidRangeError: If *pages* cannot be parsed.
        """
        self._ensure_open("add a PDF")
        if self._merged:
            raise SessionStateError("Cannot add a PDF after the documents were merged.")

        pdf_path = Path(path)
        if not pdf_path.is_file():
            raise PDFFileNotFoundError(path)

        entry = DocumentEntry(
            path=pdf_path,
            pages=normalize_pages(pages),
            orientation=Orientation.coerce(orientation),
        )
        self._documents.append(entry)
        LOGGER.debug("Registered %s", entry)
        return entry

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------
    def merge(
        self,
        orientation: OrientationLike = None,
        meta: Optional[Mapping[str, str]] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> int:
        """Merge the registered PDFs and return the output page count."""
        return self._merge(orientation, meta, duplex=False, progress_callback=progress_callback)

    def duplex_merge(
        self,
        orientation: OrientationLike = None,
        meta: Optional[Mapping[str, str]] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> int:
        """Merge the registered PDFs, padding with blank pages for duplex printing.

        Whenever the output holds an odd number of pages after a document,
        a blank page is appended so the next document starts on a front side.
        """
        return self._merge(orientation, meta, duplex=True, progress_callback=progress_callback)

    def _merge(
        self,
        orientation: OrientationLike,
        meta: Optional[Mapping[str, str]],
        *,
        duplex: bool,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> int:
        self._ensure_open("merge")
        if self._merged:
            raise SessionStateError("The registered PDFs have already been merged.")
        if not self._documents:
            raise NoDocumentsError()

        global_orientation = Orientation.coerce(orientation)
        try:
            if meta:
                apply_metadata(self.engine, meta)

            for index, entry in enumerate(self._documents, start=1):
                if progress_callback:
                    progress_callback(index, len(self._documents), entry.path.name)
                self._append_document(entry, global_orientation, duplex)
        except Exception:
            self._failed = True
            raise

        self._merged = True
        total = self.engine.page_number()
        LOGGER.info(
            "Merged %d PDF(s) into %d page(s)%s",
            len(self._documents),
            total,
            " with duplex padding" if duplex else "",
        )
        return total

    def _append_document(
        self,
        entry: DocumentEntry,
        global_orientation: Optional[Orientation],
        duplex: bool,
    ) -> None:
        page_count = self.engine.set_source_file(str(entry.path))

        last: Optional[Tuple[Orientation, PageSize]] = None
        for page in entry.resolve_pages(page_count):
            template = self.engine.import_page(page)
            if template is None:
                raise PageNotFoundError(page, entry.path)

            size = self.engine.get_template_size(template)
            page_orientation = self.effective_orientation(size, entry.orientation, global_orientation)
            LOGGER.debug(
                "Adding page %d of %s (%sx%s, %s)",
                page,
                entry.path,
                size.width,
                size.height,
                page_orientation.value,
            )
            self.engine.add_page(page_orientation, size)
            self.engine.use_template(template)
            last = (page_orientation, size)

        if duplex and last is not None and self.engine.page_number() % 2:
            LOGGER.debug("Inserting duplex blank page after %s", entry.path)
            self.engine.add_page(*last)

    @staticmethod
    def effective_orientation(
        size: PageSize,
        document_orientation: Optional[Orientation],
        global_orientation: Optional[Orientation],
    ) -> Orientation:
        """Pick the orientation used for one output page.

        A document override wins over the global value; with neither, the
        page follows its natural size.
        """
        forced = document_orientation or global_orientation
        if forced is None:
            return size.orientation
        return forced

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------
    def save(
        self,
        output_path: Union[str, Path] = "new_file.pdf",
        output_mode: Union[OutputMode, str] = "file",
    ) -> Union[bool, bytes]:
        """Write the merged document.

        Args:
            output_path: Destination path (or download file name).
            output_mode: ``"download"``, ``"file"``, ``"string"`` or
                ``"browser"``; any other value behaves like ``"browser"``.

        Returns:
            The PDF bytes in ``"string"`` mode, otherwise ``True``.
        """
        self._ensure_open("save")
        if not self._merged:
            raise SessionStateError("Nothing to save: call merge() or duplex_merge() first.")

        result = write_output(self.engine, str(output_path), output_mode)
        self._saved = True
        return result


PDFInput = Union[str, Path, Sequence[object]]


def combine_pdfs(
    inputs: Iterable[PDFInput],
    output: Union[str, Path],
    *,
    orientation: OrientationLike = None,
    meta: Optional[Mapping[str, str]] = None,
    duplex: bool = False,
    mode: Union[OutputMode, str] = "file",
    engine: Optional[PDFEngine] = None,
) -> Union[bool, bytes]:
    """Combine *inputs* into *output* in one call.

    Each input is either a path or a ``(path, pages)`` /
    ``(path, pages, orientation)`` tuple.
    """

    combiner = PDFCombiner(engine=engine)
    for item in inputs:
        if isinstance(item, (str, Path)):
            combiner.add_pdf(item)
        else:
            combiner.add_pdf(*item)

    if duplex:
        combiner.duplex_merge(orientation, meta)
    else:
        combiner.merge(orientation, meta)
    return combiner.save(output, mode)


__all__ = ["PDFCombiner", "combine_pdfs"]
