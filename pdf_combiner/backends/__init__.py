"""Engine abstractions for PDF Combiner."""

from .base import PDFEngine
from .pypdf_backend import PageTemplate, PypdfEngine

__all__ = [
    "PDFEngine",
    "PageTemplate",
    "PypdfEngine",
]
