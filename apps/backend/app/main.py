"""FastAPI application exposing the docpipe transforms over HTTP uploads."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List
from urllib.parse import quote

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, Response

from docpipe import (
    DocPipeError,
    NoPagesSelectedError,
    NoSourcesError,
    NoValidImagesError,
    OutputArtifact,
    RenderingUnsupportedError,
    SourceFile,
    UnreadableSourceError,
    compress_document,
    document_to_images,
    images_to_document,
    merge_documents,
    split_document,
)

app = FastAPI(title="docpipe API", version="0.1.0")

ERROR_STATUS: dict[type[DocPipeError], int] = {
    NoPagesSelectedError: 400,
    NoValidImagesError: 400,
    NoSourcesError: 400,
    UnreadableSourceError: 422,
    RenderingUnsupportedError: 501,
}


@app.exception_handler(DocPipeError)
async def docpipe_error_handler(_request, exc: DocPipeError) -> JSONResponse:
    """Report pipeline failures by kind and message, never with a traceback."""

    status_code = next(
        (code for error_type, code in ERROR_STATUS.items() if isinstance(exc, error_type)),
        500,
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "kind": exc.kind})


def _safe_filename(filename: str | None, default: str) -> str:
    """Return a filesystem-safe filename derived from user input."""

    if not filename:
        return default

    candidate = Path(filename).name
    return candidate or default


async def _read_upload(upload: UploadFile, default_name: str, default_type: str) -> SourceFile:
    """Turn an upload into a :class:`SourceFile`, trusting its declared type."""

    contents = await upload.read()
    if not contents:
        raise HTTPException(status_code=400, detail=f"File '{upload.filename}' is empty.")

    return SourceFile(
        name=_safe_filename(upload.filename, default_name),
        data=contents,
        mime_type=upload.content_type or default_type,
    )


def _content_disposition(filename: str) -> str:
    """Attachment header in the form ``FileResponse`` emits, RFC 5987 for non-ASCII names."""

    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


def _artifact_response(artifact: OutputArtifact) -> Response:
    headers = {"Content-Disposition": _content_disposition(artifact.filename)}
    if artifact.page_count is not None:
        headers["X-DocPipe-Page-Count"] = str(artifact.page_count)
    skipped = artifact.details.get("skipped")
    if skipped:
        # Percent-encoded so names stay latin-1 safe and commas stay separators.
        headers["X-DocPipe-Skipped"] = ",".join(quote(name, safe="") for name in skipped)
    return Response(content=artifact.data, media_type=artifact.mime_type, headers=headers)


async def _run(operation: Callable[..., OutputArtifact], *args, **kwargs) -> Response:
    artifact = await run_in_threadpool(operation, *args, **kwargs)
    return _artifact_response(artifact)


@app.get("/health", response_class=JSONResponse)
async def health() -> dict[str, str]:
    """Lightweight health endpoint for uptime checks."""
    return {"status": "ok"}


@app.post("/merge", summary="Merge PDFs in upload order")
async def merge_endpoint(
    files: List[UploadFile] = File(..., description="PDF files to merge"),
) -> Response:
    """Merge multiple PDF uploads into a single document.

    One unreadable upload fails the whole request; no partial document is
    returned.
    """

    sources = [
        await _read_upload(upload, f"document_{index}.pdf", "application/pdf")
        for index, upload in enumerate(files, start=1)
    ]
    return await _run(merge_documents, sources)


@app.post("/split", summary="Extract selected pages")
async def split_endpoint(
    file: UploadFile = File(..., description="Source PDF to extract pages from."),
    ranges: str = Form(..., description="Comma separated pages and ranges, e.g. '1, 3-5, 8'."),
) -> Response:
    """Extract the pages named by ``ranges`` into a single PDF document."""

    source = await _read_upload(file, "document.pdf", "application/pdf")
    return await _run(split_document, source, ranges)


@app.post("/compress", summary="Resave a PDF to reduce its size")
async def compress_endpoint(
    file: UploadFile = File(..., description="Source PDF to optimize."),
) -> Response:
    source = await _read_upload(file, "document.pdf", "application/pdf")
    return await _run(compress_document, source)


@app.post("/convert/images-to-pdf", summary="Place images one per page in a PDF")
async def images_to_pdf_endpoint(
    files: List[UploadFile] = File(..., description="PNG or JPEG images, in page order."),
) -> Response:
    """Convert uploaded images into one PDF.

    Images that cannot be embedded are skipped and listed in the
    ``X-DocPipe-Skipped`` header.
    """

    sources = [
        await _read_upload(upload, f"image_{index}", "application/octet-stream")
        for index, upload in enumerate(files, start=1)
    ]
    return await _run(images_to_document, sources)


@app.post("/convert/pdf-to-images", summary="Render each page to PNG")
async def pdf_to_images_endpoint(
    file: UploadFile = File(..., description="Source PDF to render."),
    scale: float | None = Form(None, ge=1.0, description="Render scale, at least 1.0."),
) -> Response:
    """Render every page of the upload and return the PNGs as a zip archive."""

    source = await _read_upload(file, "document.pdf", "application/pdf")
    return await _run(document_to_images, source, scale=scale)


__all__ = ["app"]
