"""
PDF Combiner - Merge PDF files with page selection and duplex padding.

This library merges several PDF documents into one. Each input can be
limited to a page range expression and forced to an orientation, blank
pages can be inserted for duplex printing, and the output can carry
title, author, subject, keywords and creator metadata.

Quick Start:
    >>> from pdf_combiner import PDFCombiner
    >>> combiner = PDFCombiner()
    >>> combiner.add_pdf('cover.pdf')
    >>> combiner.add_pdf('report.pdf', '1,3,6, 12-16')
    >>> combiner.merge()
    >>> combiner.save('combined.pdf', 'file')

Main Classes:
    - PDFCombiner: Merge session collecting inputs and writing the output
    - PypdfEngine: Default PDF engine built on pypdf

Exceptions:
    - PDFCombinerException: Base exception
    - PDFFileNotFoundError: Input path does not exist
    - InvalidRangeError: Invalid page range expression
    - InvalidOrientationError: Orientation other than portrait or landscape
    - NoDocumentsError: Merge requested without inputs
    - PageNotFoundError: Requested page missing from a source PDF
    - OutputError: Combined PDF could not be written

For CLI usage, use the 'pdf-combiner' command after installation.
"""

# Core classes
from pdf_combiner.combiner import PDFCombiner, combine_pdfs
from pdf_combiner.backends import PDFEngine, PypdfEngine
from pdf_combiner.config import CombinerSettings

# Data types
from pdf_combiner.types import ALL_PAGES, DocumentEntry, Orientation, OutputMode, PageSize
from pdf_combiner.metadata import MetaField, apply_metadata
from pdf_combiner.output import write_output
from pdf_combiner.ranges import parse_page_range

# Exceptions
from pdf_combiner.exceptions import (
    PDFCombinerException,
    PDFFileNotFoundError,
    InvalidPDFError,
    EncryptedPDFError,
    InvalidRangeError,
    InvalidOrientationError,
    NoDocumentsError,
    PageNotFoundError,
    OutputError,
    SessionStateError,
)

__version__ = "1.0.0"
__author__ = "PDF Combiner Contributors"
__license__ = "MIT"

__all__ = [
    # Main classes
    "PDFCombiner",
    "PDFEngine",
    "PypdfEngine",
    "CombinerSettings",
    "combine_pdfs",
    # Data types
    "ALL_PAGES",
    "DocumentEntry",
    "Orientation",
    "OutputMode",
    "PageSize",
    "MetaField",
    # Helpers
    "apply_metadata",
    "parse_page_range",
    "write_output",
    # Exceptions
    "PDFCombinerException",
    "PDFFileNotFoundError",
    "InvalidPDFError",
    "EncryptedPDFError",
    "InvalidRangeError",
    "InvalidOrientationError",
    "NoDocumentsError",
    "PageNotFoundError",
    "OutputError",
    "SessionStateError",
    # Version info
    "__version__",
]
