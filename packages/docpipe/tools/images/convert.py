"""Images to PDF conversion exposed as the ``images_to_pdf`` tool."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from io import BytesIO
from typing import Callable, Iterable

from PIL import Image
from pypdf import PdfReader
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ...core.config import PipelineSettings, load_settings
from ...core.exceptions import NoSourcesError, NoValidImagesError, UnsupportedInputFormatError
from ...core.model import AssembledDocument, ImageFormat, OutputArtifact, SourceFile
from ...core.utils import check_cancelled, get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from .layout import place_image

LOGGER = get_logger("docpipe.tools.images")

IMAGES_FILENAME = "images.pdf"

SkipCallback = Callable[[SourceFile, UnsupportedInputFormatError], None]


@dataclass(frozen=True)
class ProbedImage:
    source: SourceFile
    format: ImageFormat
    width: int
    height: int


def probe_image(source: SourceFile) -> ProbedImage:
    """Check that ``source`` is an embeddable image of its declared type.

    Raises:
        UnsupportedInputFormatError: If the declared type is not PNG or
            JPEG, or the bytes do not decode as that type.
    """

    image_format = ImageFormat.from_mime(source.mime_type)
    if image_format is ImageFormat.UNSUPPORTED:
        raise UnsupportedInputFormatError(
            source.name, f"Unsupported image type {source.mime_type!r}: {source.name}"
        )

    try:
        with Image.open(BytesIO(source.data)) as image:
            image.load()
            detected = image.format
            width, height = image.size
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        raise UnsupportedInputFormatError(
            source.name, f"Could not decode {source.name} as {image_format.value}"
        ) from exc

    if ImageFormat.from_pillow(detected) is not image_format:
        raise UnsupportedInputFormatError(
            source.name,
            f"{source.name} was declared as {source.mime_type} but contains {detected or 'unknown'} data",
        )
    return ProbedImage(source=source, format=image_format, width=width, height=height)


def _log_skip(source: SourceFile, error: UnsupportedInputFormatError) -> None:
    LOGGER.warning("Skipping %s: %s", source.name, error.message)


def convert_images(
    images: Iterable[SourceFile],
    *,
    settings: PipelineSettings | None = None,
    cancel: threading.Event | None = None,
    on_skip: SkipCallback | None = None,
) -> AssembledDocument:
    """Lay out ``images`` one per page, in the order given.

    Each page uses the reference sheet from ``settings``, turned to
    landscape unless the image is taller than it is wide. Images that
    cannot be embedded are skipped and reported through ``on_skip``.

    Raises:
        NoValidImagesError: If no image could be embedded.
    """

    settings = settings or load_settings()
    report_skip = on_skip or _log_skip

    buffer = BytesIO()
    pdf_canvas = canvas.Canvas(buffer, pagesize=settings.sheet)
    embedded = 0

    for source in images:
        check_cancelled(cancel, "images to PDF")
        try:
            probed = probe_image(source)
        except UnsupportedInputFormatError as exc:
            report_skip(source, exc)
            continue

        placement = place_image(
            probed.width,
            probed.height,
            sheet=settings.sheet,
            margin=settings.image_margin,
        )
        LOGGER.debug(
            "Placing %s (%dx%d px) on a %.0fx%.0f pt page",
            source.name,
            probed.width,
            probed.height,
            placement.page_width,
            placement.page_height,
        )
        pdf_canvas.setPageSize((placement.page_width, placement.page_height))
        pdf_canvas.drawImage(
            ImageReader(BytesIO(source.data)),
            placement.x,
            placement.y,
            width=placement.width,
            height=placement.height,
            mask="auto" if probed.format is ImageFormat.PNG else None,
        )
        pdf_canvas.showPage()
        embedded += 1

    if embedded == 0:
        raise NoValidImagesError()

    pdf_canvas.save()
    reader = PdfReader(BytesIO(buffer.getvalue()))
    document = AssembledDocument()
    for page in reader.pages:
        document.append_page(page)
    return document


def images_to_pdf(
    images: Iterable[SourceFile],
    *,
    settings: PipelineSettings | None = None,
    cancel: threading.Event | None = None,
) -> OutputArtifact:
    """Convert ``images`` into a single PDF artifact."""

    image_list = list(images)
    if not image_list:
        raise NoSourcesError("No images provided.")

    skipped: list[str] = []

    def _collect(source: SourceFile, error: UnsupportedInputFormatError) -> None:
        _log_skip(source, error)
        skipped.append(source.name)

    document = convert_images(image_list, settings=settings, cancel=cancel, on_skip=_collect)
    LOGGER.info(
        "Converted %d of %d image(s) into a PDF", document.page_count, len(image_list)
    )
    return document.to_artifact(IMAGES_FILENAME, skipped=skipped)


@register_tool("images_to_pdf")
class ImagesToPdfTool(BaseTool):
    def run(self) -> OutputArtifact:
        context = self.context
        return self._store(
            images_to_pdf(context.sources, settings=context.settings, cancel=context.cancel)
        )


__all__ = [
    "ProbedImage",
    "probe_image",
    "convert_images",
    "images_to_pdf",
    "ImagesToPdfTool",
    "IMAGES_FILENAME",
]
