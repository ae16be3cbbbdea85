"""Local document transforms: merge, split, compress, images to PDF and PDF to images."""

from __future__ import annotations

import threading
from typing import Iterable

from .core.config import PipelineSettings, load_settings
from .core.exceptions import (
    DocPipeError,
    NoPagesSelectedError,
    NoSourcesError,
    NoValidImagesError,
    OperationCancelledError,
    RenderingUnsupportedError,
    UnreadableSourceError,
    UnsupportedInputFormatError,
)
from .core.model import (
    AssembledDocument,
    ImageFormat,
    OutputArtifact,
    PageIndexSet,
    RasterFrame,
    SourceFile,
)
from .tools import load_builtin_plugins
from .tools.common.interfaces import ConversionContext
from .tools.common.pipeline import ToolRegistry, register_tool, registry
from .tools.compressor import optimize_pdf
from .tools.images import convert_images, images_to_pdf
from .tools.merger import merge_documents as assemble_merged, merge_pdfs
from .tools.rasterizer import DocumentRasterizer, FrameArchive, RenderingBackend, pdf_to_images
from .tools.splitter import extract_pages, parse_page_range, split_pdf

load_builtin_plugins()

__all__ = [
    "merge_documents",
    "split_document",
    "compress_document",
    "images_to_document",
    "document_to_images",
    "merge_pdfs",
    "assemble_merged",
    "split_pdf",
    "extract_pages",
    "parse_page_range",
    "optimize_pdf",
    "convert_images",
    "images_to_pdf",
    "pdf_to_images",
    "DocumentRasterizer",
    "FrameArchive",
    "RenderingBackend",
    "SourceFile",
    "OutputArtifact",
    "PageIndexSet",
    "AssembledDocument",
    "RasterFrame",
    "ImageFormat",
    "PipelineSettings",
    "load_settings",
    "ConversionContext",
    "ToolRegistry",
    "registry",
    "register_tool",
    "DocPipeError",
    "NoPagesSelectedError",
    "NoValidImagesError",
    "UnreadableSourceError",
    "RenderingUnsupportedError",
    "UnsupportedInputFormatError",
    "NoSourcesError",
    "OperationCancelledError",
]


def _run(
    tool_name: str,
    sources: Iterable[SourceFile],
    config: dict | None = None,
    *,
    settings: PipelineSettings | None = None,
    cancel: threading.Event | None = None,
    resources: dict | None = None,
) -> OutputArtifact:
    context = ConversionContext(
        sources=list(sources),
        config=config or {},
        resources=resources or {},
        settings=settings,
        cancel=cancel,
    )
    return registry.run(tool_name, context)


def merge_documents(
    sources: Iterable[SourceFile],
    *,
    cancel: threading.Event | None = None,
) -> OutputArtifact:
    """Convenience wrapper around the merge plugin."""

    return _run("merge", sources, cancel=cancel)


def split_document(
    source: SourceFile,
    ranges: str,
    *,
    cancel: threading.Event | None = None,
) -> OutputArtifact:
    """Convenience wrapper around the split plugin."""

    return _run("split", [source], {"ranges": ranges}, cancel=cancel)


def compress_document(
    source: SourceFile,
    *,
    cancel: threading.Event | None = None,
) -> OutputArtifact:
    """Convenience wrapper around the compression plugin."""

    return _run("compress", [source], cancel=cancel)


def images_to_document(
    images: Iterable[SourceFile],
    *,
    settings: PipelineSettings | None = None,
    cancel: threading.Event | None = None,
) -> OutputArtifact:
    """Convenience wrapper around the images to PDF plugin."""

    return _run("images_to_pdf", images, settings=settings, cancel=cancel)


def document_to_images(
    source: SourceFile,
    *,
    scale: float | None = None,
    backend: RenderingBackend | None = None,
    settings: PipelineSettings | None = None,
    cancel: threading.Event | None = None,
) -> OutputArtifact:
    """Convenience wrapper around the PDF to images plugin."""

    resources = {"rendering_backend": backend} if backend is not None else None
    return _run(
        "pdf_to_images",
        [source],
        {"scale": scale},
        settings=settings,
        cancel=cancel,
        resources=resources,
    )
