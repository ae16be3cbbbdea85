"""Page extraction exposed as the ``split`` tool."""

from __future__ import annotations

import threading

from pypdf import PdfReader

from ...core.exceptions import NoPagesSelectedError
from ...core.model import AssembledDocument, OutputArtifact, PageIndexSet, SourceFile
from ...core.reader import load_pdf
from ...core.utils import check_cancelled, get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from .utils import build_output_filename, parse_page_range

LOGGER = get_logger("docpipe.tools.split")


def _copy_pages(
    reader: PdfReader,
    source_name: str,
    indices: PageIndexSet,
    cancel: threading.Event | None,
) -> AssembledDocument:
    total_pages = len(reader.pages)
    document = AssembledDocument()
    for index in indices:
        check_cancelled(cancel, "split")
        if index >= total_pages:
            raise IndexError(
                f"Page index {index} is out of range for '{source_name}' ({total_pages} pages)"
            )
        LOGGER.debug("Copying page %s from %s", index + 1, source_name)
        document.append_page(reader.pages[index])
    return document


def extract_pages(
    source: SourceFile,
    indices: PageIndexSet,
    *,
    cancel: threading.Event | None = None,
) -> AssembledDocument:
    """Copy the pages at ``indices`` from ``source`` into a new document.

    Raises:
        NoPagesSelectedError: If ``indices`` is empty.
        UnreadableSourceError: If ``source`` cannot be parsed.
        IndexError: If an index is beyond the last page of ``source``.
    """

    if not indices:
        raise NoPagesSelectedError()
    return _copy_pages(load_pdf(source), source.name, indices, cancel)


def split_pdf(
    source: SourceFile,
    page_range: str,
    *,
    cancel: threading.Event | None = None,
) -> OutputArtifact:
    """Extract the pages described by ``page_range`` into a single PDF."""

    reader = load_pdf(source)
    indices = parse_page_range(page_range, len(reader.pages))
    if not indices:
        LOGGER.info("Page range %r selected no pages from %s", page_range, source.name)
        raise NoPagesSelectedError()

    document = _copy_pages(reader, source.name, indices, cancel)
    LOGGER.info("Extracted %d page(s) from %s", document.page_count, source.name)
    return document.to_artifact(
        build_output_filename(source.stem, "pages"),
        pages=indices.page_numbers(),
    )


@register_tool("split")
class SplitTool(BaseTool):
    def run(self) -> OutputArtifact:
        context = self.context
        source = context.single_source()
        page_range = context.config.get("ranges")
        if page_range is None:
            raise ValueError("Split tool requires a 'ranges' expression")
        return self._store(split_pdf(source, page_range, cancel=context.cancel))


__all__ = ["extract_pages", "split_pdf", "SplitTool"]
