"""
Exceptions raised by docpipe operations.

Every exception carries a stable ``kind`` so callers (CLI, HTTP layer) can
report the failure category without inspecting the class hierarchy.
"""

from __future__ import annotations


class DocPipeError(Exception):
    """Base exception for all docpipe errors."""

    kind = "DocPipeError"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown document pipeline error occurred."


class NoPagesSelectedError(DocPipeError):
    """Raised when a page selection resolves to zero valid pages."""

    kind = "NoPagesSelected"

    @property
    def default_message(self) -> str:
        return (
            "No valid pages were selected. Check the page range and the "
            "document's total page count."
        )


class NoValidImagesError(DocPipeError):
    """Raised when none of the supplied images could be embedded."""

    kind = "NoValidImages"

    @property
    def default_message(self) -> str:
        return "None of the images could be embedded. Check that the files are valid PNG or JPEG images."


class UnreadableSourceError(DocPipeError):
    """Raised when a source buffer cannot be parsed as its declared format."""

    kind = "UnreadableSource"

    def __init__(self, source_name: str, message: str = "") -> None:
        self.source_name = source_name
        super().__init__(message or f"Unable to read '{source_name}' as a PDF document.")


class RenderingUnsupportedError(DocPipeError):
    """Raised when no page rendering backend is available."""

    kind = "RenderingUnsupported"

    @property
    def default_message(self) -> str:
        return "Page rendering is not available in this runtime."


class UnsupportedInputFormatError(DocPipeError):
    """Raised for a single batch item that cannot be embedded. Never fatal on its own."""

    kind = "UnsupportedInputFormat"

    def __init__(self, source_name: str, message: str = "") -> None:
        self.source_name = source_name
        super().__init__(message or f"Unsupported input format: {source_name}")


class NoSourcesError(DocPipeError):
    """Raised when an operation is invoked without any input files."""

    kind = "NoSources"

    @property
    def default_message(self) -> str:
        return "No input files were provided."


class OperationCancelledError(DocPipeError):
    """Raised when a caller cancels an operation before it completes."""

    kind = "Cancelled"

    @property
    def default_message(self) -> str:
        return "The operation was cancelled."


__all__ = [
    "DocPipeError",
    "NoPagesSelectedError",
    "NoValidImagesError",
    "UnreadableSourceError",
    "RenderingUnsupportedError",
    "UnsupportedInputFormatError",
    "NoSourcesError",
    "OperationCancelledError",
]
