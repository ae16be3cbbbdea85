"""Structural resave exposed as the ``compress`` tool."""

from __future__ import annotations

import threading
from io import BytesIO

from pypdf import PdfWriter

from ...core.model import PDF_MIME, OutputArtifact, SourceFile
from ...core.reader import load_pdf
from ...core.utils import check_cancelled, get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from ..splitter.utils import build_output_filename

LOGGER = get_logger("docpipe.tools.compress")


def optimize_pdf(
    source: SourceFile,
    *,
    cancel: threading.Event | None = None,
) -> OutputArtifact:
    """Rewrite the object and page tables of ``source``.

    Identical objects are merged and unreferenced ones dropped. Embedded
    images, content streams and metadata are left as they are, so the
    rendered pages do not change and the size reduction may be zero.
    """

    reader = load_pdf(source)
    check_cancelled(cancel, "compress")

    writer = PdfWriter(clone_from=reader)
    writer.compress_identical_objects(remove_identicals=True, remove_orphans=True)
    check_cancelled(cancel, "compress")

    buffer = BytesIO()
    writer.write(buffer)
    data = buffer.getvalue()

    LOGGER.info(
        "Optimized %s: %d -> %d bytes",
        source.name,
        source.size,
        len(data),
    )
    return OutputArtifact(
        data=data,
        mime_type=PDF_MIME,
        filename=build_output_filename(source.stem, "compressed"),
        details={
            "page_count": len(writer.pages),
            "original_size": source.size,
            "optimized_size": len(data),
        },
    )


@register_tool("compress")
class CompressTool(BaseTool):
    def run(self) -> OutputArtifact:
        context = self.context
        source = context.single_source()
        LOGGER.debug("Compressing %s", source.name)
        return self._store(optimize_pdf(source, cancel=context.cancel))


__all__ = ["optimize_pdf", "CompressTool"]
