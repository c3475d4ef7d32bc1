from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union
import sys

import pytest
from pypdf import PdfWriter
from pypdf.generic import RectangleObject

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdf_combiner.config import CombinerSettings  # noqa: E402
from pdf_combiner.types import Orientation, PageSize  # noqa: E402

A4_PORTRAIT = (595, 842)
A4_LANDSCAPE = (842, 595)


class RecordingEngine:
    """In-memory engine that records every call made by the combiner."""

    def __init__(self, documents: Dict[str, Sequence[Tuple[float, float]]]) -> None:
        self.documents = {
            path: [PageSize(width=w, height=h) for w, h in sizes]
            for path, sizes in documents.items()
        }
        self.pages: List[dict] = []
        self.sources: List[str] = []
        self.meta: Dict[str, str] = {}
        self.outputs: List[Tuple[str, str]] = []
        self.output_result: Union[str, bytes] = ""
        self._source: Optional[str] = None

    def set_source_file(self, path: str) -> int:
        self._source = path
        self.sources.append(path)
        return len(self.documents[path])

    def import_page(self, page_number: int):
        if page_number > len(self.documents[self._source]):
            return None
        return (self._source, page_number)

    def get_template_size(self, template) -> PageSize:
        source, page_number = template
        return self.documents[source][page_number - 1]

    def add_page(self, orientation: Optional[Orientation], size: PageSize) -> None:
        self.pages.append({"orientation": orientation, "size": size, "template": None})

    def use_template(self, template) -> None:
        self.pages[-1]["template"] = template

    def page_number(self) -> int:
        return len(self.pages)

    def set_title(self, value: str) -> None:
        self.meta["title"] = value

    def set_author(self, value: str) -> None:
        self.meta["author"] = value

    def set_subject(self, value: str) -> None:
        self.meta["subject"] = value

    def set_keywords(self, value: str) -> None:
        self.meta["keywords"] = value

    # No set_creator: engines may omit setters.

    def output(self, path: str, channel: str):
        self.outputs.append((path, channel))
        if channel == "S":
            return b"%PDF-recorded"
        return self.output_result


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str,
        sizes: Sequence[Tuple[float, float]] = (A4_PORTRAIT,),
        title: str | None = None,
        rotate: int = 0,
        cropbox: Optional[Tuple[float, float, float, float]] = None,
    ) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for width, height in sizes:
            page = writer.add_blank_page(width=width, height=height)
            if rotate:
                page.rotate(rotate)
            if cropbox is not None:
                page.cropbox = RectangleObject(cropbox)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def sample_pdfs(pdf_factory: Callable[..., Path]) -> list[Path]:
    three = pdf_factory("three.pdf", sizes=[A4_PORTRAIT, A4_LANDSCAPE, A4_PORTRAIT])
    two = pdf_factory("two.pdf", sizes=[A4_PORTRAIT, A4_PORTRAIT])
    return [three, two]


@pytest.fixture()
def settings(tmp_path: Path) -> CombinerSettings:
    return CombinerSettings(download_dir=tmp_path / "downloads", open_browser=False)


@pytest.fixture()
def recording_engine_factory(tmp_path: Path) -> Callable[..., Tuple[RecordingEngine, Dict[str, Path]]]:
    """Create placeholder files on disk plus an engine describing their pages."""

    def _create(**documents: Sequence[Tuple[float, float]]):
        paths: Dict[str, Path] = {}
        for name in documents:
            path = tmp_path / f"{name}.pdf"
            path.write_bytes(b"%PDF-placeholder")
            paths[name] = path
        engine = RecordingEngine({str(paths[name]): sizes for name, sizes in documents.items()})
        return engine, paths

    return _create
