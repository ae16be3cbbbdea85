"""Shared domain models used across docpipe tools."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import Any, Iterator

from pypdf import PageObject, PdfWriter

PDF_MIME = "application/pdf"
ZIP_MIME = "application/zip"


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A named, read-only input buffer with its declared MIME type."""

    name: str
    data: bytes = field(repr=False)
    mime_type: str = PDF_MIME

    @classmethod
    def from_path(cls, path: str | Path, mime_type: str | None = None) -> "SourceFile":
        source = Path(path)
        if mime_type is None:
            guessed, _ = mimetypes.guess_type(source.name)
            mime_type = guessed or "application/octet-stream"
        return cls(name=source.name, data=source.read_bytes(), mime_type=mime_type)

    @property
    def stem(self) -> str:
        return Path(self.name).stem or "document"

    @property
    def size(self) -> int:
        return len(self.data)


class ImageFormat(str, Enum):
    """Image encodings that can be placed on a page without re-encoding."""

    PNG = "png"
    JPEG = "jpeg"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_mime(cls, mime_type: str | None) -> "ImageFormat":
        normalized = (mime_type or "").split(";", 1)[0].strip().lower()
        if normalized == "image/png":
            return cls.PNG
        if normalized in {"image/jpeg", "image/jpg"}:
            return cls.JPEG
        return cls.UNSUPPORTED

    @classmethod
    def from_pillow(cls, format_name: str | None) -> "ImageFormat":
        """Map a decoded Pillow format name onto the embeddable formats."""

        return _PILLOW_FORMATS.get((format_name or "").upper(), cls.UNSUPPORTED)


# Multi-picture JPEGs from phone cameras decode as MPO but embed as plain JPEG.
_PILLOW_FORMATS = {
    "PNG": ImageFormat.PNG,
    "JPEG": ImageFormat.JPEG,
    "MPO": ImageFormat.JPEG,
}


@dataclass(frozen=True, slots=True)
class PageIndexSet:
    """Strictly ascending, duplicate free, zero-based page indices."""

    indices: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        previous = -1
        for index in self.indices:
            if index < 0:
                raise ValueError(f"Page indices must be non-negative, got {index}")
            if index <= previous:
                raise ValueError("Page indices must be strictly ascending and unique")
            previous = index

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __bool__(self) -> bool:
        return bool(self.indices)

    def page_numbers(self) -> list[int]:
        """Return the 1-based page numbers for display."""

        return [index + 1 for index in self.indices]


class AssembledDocument:
    """Append-only page sequence backed by a :class:`pypdf.PdfWriter`."""

    def __init__(self, writer: PdfWriter | None = None) -> None:
        self._writer = writer if writer is not None else PdfWriter()

    @property
    def page_count(self) -> int:
        return len(self._writer.pages)

    @property
    def pages(self) -> tuple[PageObject, ...]:
        return tuple(self._writer.pages)

    def append_page(self, page: PageObject) -> None:
        self._writer.add_page(page)

    def to_bytes(self) -> bytes:
        buffer = BytesIO()
        self._writer.write(buffer)
        return buffer.getvalue()

    def to_artifact(self, filename: str, **details: Any) -> "OutputArtifact":
        return OutputArtifact(
            data=self.to_bytes(),
            mime_type=PDF_MIME,
            filename=filename,
            details={"page_count": self.page_count, **details},
        )


@dataclass(frozen=True, slots=True)
class RasterFrame:
    """One rendered page, already encoded as PNG."""

    index: int
    width: int
    height: int
    data: bytes = field(repr=False)


@dataclass(frozen=True, slots=True)
class OutputArtifact:
    """Normalized result object shared by the CLI and HTTP wrappers."""

    data: bytes = field(repr=False)
    mime_type: str
    filename: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def page_count(self) -> int | None:
        return self.details.get("page_count")


__all__ = [
    "PDF_MIME",
    "ZIP_MIME",
    "SourceFile",
    "ImageFormat",
    "PageIndexSet",
    "AssembledDocument",
    "RasterFrame",
    "OutputArtifact",
]
