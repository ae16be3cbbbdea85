"""Page rendering backends used by :mod:`docpipe.tools.rasterizer`."""

from __future__ import annotations

from io import BytesIO
from typing import Iterator, Protocol

from ...core.exceptions import RenderingUnsupportedError, UnreadableSourceError
from ...core.model import RasterFrame, SourceFile
from ...core.utils import get_logger

LOGGER = get_logger("docpipe.tools.rasterize")


class RenderingBackend(Protocol):
    """Turns each page of a PDF into a PNG encoded :class:`RasterFrame`."""

    name: str

    def render(self, source: SourceFile, *, scale: float) -> Iterator[RasterFrame]:
        """Yield one frame per page, in page order."""


class PdfiumBackend:
    """Renders pages with pdfium through :mod:`pypdfium2`."""

    name = "pdfium"

    def __init__(self) -> None:
        try:
            import pypdfium2 as pdfium
        except ImportError as exc:
            raise RenderingUnsupportedError("pypdfium2 is required for page rendering.") from exc
        self._pdfium = pdfium

    def render(self, source: SourceFile, *, scale: float) -> Iterator[RasterFrame]:
        try:
            document = self._pdfium.PdfDocument(source.data)
        except self._pdfium.PdfiumError as exc:
            raise UnreadableSourceError(source.name) from exc

        try:
            for index in range(len(document)):
                page = document[index]
                try:
                    image = page.render(scale=scale).to_pil()
                    buffer = BytesIO()
                    image.save(buffer, format="PNG")
                finally:
                    page.close()
                LOGGER.debug("Rendered page %d of %s at %sx", index + 1, source.name, scale)
                yield RasterFrame(
                    index=index,
                    width=image.width,
                    height=image.height,
                    data=buffer.getvalue(),
                )
        finally:
            document.close()


def default_backend() -> RenderingBackend:
    """Return the pdfium backend, or raise :class:`RenderingUnsupportedError`."""

    return PdfiumBackend()


__all__ = ["RenderingBackend", "PdfiumBackend", "default_backend"]
