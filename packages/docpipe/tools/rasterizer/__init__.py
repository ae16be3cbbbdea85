"""Page rasterization exposed through the docpipe tools namespace."""

from __future__ import annotations

from .archive import FrameArchive
from .backends import PdfiumBackend, RenderingBackend, default_backend
from .rasterize import DocumentRasterizer, PdfToImagesTool, frame_filename, pdf_to_images

__all__ = [
    "DocumentRasterizer",
    "FrameArchive",
    "PdfiumBackend",
    "RenderingBackend",
    "PdfToImagesTool",
    "default_backend",
    "frame_filename",
    "pdf_to_images",
]
