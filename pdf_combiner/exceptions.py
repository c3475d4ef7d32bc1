"""
Custom exceptions for PDF Combiner.

This module defines all custom exceptions used throughout the library.
"""

from typing import Optional


class PDFCombinerException(Exception):
    """Base exception for all PDF Combiner errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF combiner error occurred."


class PDFFileNotFoundError(PDFCombinerException, FileNotFoundError):
    """Raised when an input path does not point to a readable file."""

    def __init__(self, path: object, message: str = "") -> None:
        self.path = str(path)
        super().__init__(message or f"Could not locate PDF on '{self.path}'")

    @property
    def default_message(self) -> str:
        return "Could not locate PDF file."


class InvalidPDFError(PDFCombinerException):
    """Raised when PDF file is invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(PDFCombinerException):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be combined."


class InvalidRangeError(PDFCombinerException):
    """Raised when a page range expression cannot be interpreted."""

    def __init__(
        self,
        message: str = "",
        *,
        segment: Optional[str] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> None:
        self.segment = segment
        self.start = start
        self.end = end
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return "Invalid page range specification."


class NoDocumentsError(PDFCombinerException):
    """Raised when a merge is requested before any PDF was added."""

    @property
    def default_message(self) -> str:
        return "No PDFs to merge."


class PageNotFoundError(PDFCombinerException):
    """Raised when a requested page does not exist in its source PDF."""

    def __init__(self, page: int, path: object, message: str = "") -> None:
        self.page = page
        self.path = str(path)
        super().__init__(
            message
            or f"Could not load page '{page}' in PDF '{self.path}'. Check that the page exists."
        )

    @property
    def default_message(self) -> str:
        return "Requested page does not exist."


class OutputError(PDFCombinerException):
    """Raised when the combined PDF could not be written to its destination."""

    def __init__(self, path: object, mode: object, message: str = "") -> None:
        self.path = str(path)
        self.mode = mode
        super().__init__(message or f"Error outputting PDF '{self.path}' to '{mode}'.")

    @property
    def default_message(self) -> str:
        return "Error outputting PDF."


class SessionStateError(PDFCombinerException):
    """Raised when a combiner session is used after it was saved or failed."""

    @property
    def default_message(self) -> str:
        return "The combiner session can no longer be used."


class InvalidOrientationError(PDFCombinerException, ValueError):
    """Raised when an orientation is neither portrait nor landscape."""

    def __init__(self, value: object, message: str = "") -> None:
        self.value = value
        super().__init__(message or f"Unknown orientation: {value!r}. Expected 'P' or 'L'.")

    @property
    def default_message(self) -> str:
        return "Unknown page orientation."
