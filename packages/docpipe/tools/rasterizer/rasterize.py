"""PDF to PNG rasterization exposed as the ``pdf_to_images`` tool."""

from __future__ import annotations

import threading

from ...core.config import PipelineSettings, load_settings
from ...core.exceptions import RenderingUnsupportedError
from ...core.model import ZIP_MIME, OutputArtifact, SourceFile
from ...core.utils import check_cancelled, get_logger, strip_pdf_suffix
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from .archive import FrameArchive
from .backends import RenderingBackend, default_backend

LOGGER = get_logger("docpipe.tools.rasterize")


def frame_filename(base_name: str, page_number: int) -> str:
    """Return the archive member name for a 1-based ``page_number``."""

    return f"{base_name}_page_{page_number:03d}.png"


class DocumentRasterizer:
    """Renders every page of a PDF and collects the frames in page order."""

    def __init__(self, backend: RenderingBackend | None) -> None:
        self.backend = backend

    def rasterize(
        self,
        source: SourceFile,
        scale: float = 2.0,
        *,
        cancel: threading.Event | None = None,
    ) -> FrameArchive:
        if self.backend is None:
            raise RenderingUnsupportedError("No rendering backend is configured.")
        if scale < 1.0:
            raise ValueError(f"Scale must be at least 1.0, got {scale}")

        # Backends render lazily, so each check runs before the next page is drawn.
        frames = []
        check_cancelled(cancel, "rasterize")
        for frame in self.backend.render(source, scale=scale):
            frames.append(frame)
            check_cancelled(cancel, "rasterize")

        base_name = strip_pdf_suffix(source.name) or "document"
        archive = FrameArchive()
        for frame in sorted(frames, key=lambda item: item.index):
            archive.add(frame_filename(base_name, frame.index + 1), frame.data)
        LOGGER.info(
            "Rasterized %d page(s) of %s with the %s backend",
            len(archive),
            source.name,
            self.backend.name,
        )
        return archive


def pdf_to_images(
    source: SourceFile,
    *,
    scale: float | None = None,
    backend: RenderingBackend | None = None,
    settings: PipelineSettings | None = None,
    cancel: threading.Event | None = None,
) -> OutputArtifact:
    """Render ``source`` to PNG frames and package them as a zip archive."""

    settings = settings or load_settings()
    rasterizer = DocumentRasterizer(backend if backend is not None else default_backend())
    archive = rasterizer.rasterize(
        source,
        settings.raster_scale if scale is None else scale,
        cancel=cancel,
    )
    base_name = strip_pdf_suffix(source.name) or "document"
    return OutputArtifact(
        data=archive.to_zip(),
        mime_type=ZIP_MIME,
        filename=f"{base_name}_images.zip",
        details={"page_count": len(archive), "frames": archive.names()},
    )


@register_tool("pdf_to_images")
class PdfToImagesTool(BaseTool):
    def run(self) -> OutputArtifact:
        context = self.context
        source = context.single_source()
        return self._store(
            pdf_to_images(
                source,
                scale=context.config.get("scale"),
                backend=context.resources.get("rendering_backend"),
                settings=context.settings,
                cancel=context.cancel,
            )
        )


__all__ = ["DocumentRasterizer", "frame_filename", "pdf_to_images", "PdfToImagesTool"]
