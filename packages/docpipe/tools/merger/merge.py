"""Merge functionality exposed as the ``merge`` tool."""

from __future__ import annotations

import threading
from typing import Iterable

from pypdf import PdfReader

from ...core.exceptions import NoSourcesError
from ...core.model import AssembledDocument, OutputArtifact, SourceFile
from ...core.reader import load_pdf
from ...core.utils import check_cancelled, get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("docpipe.tools.merge")

MERGED_FILENAME = "merged.pdf"


def merge_documents(
    sources: Iterable[SourceFile],
    *,
    cancel: threading.Event | None = None,
) -> AssembledDocument:
    """Concatenate every page of ``sources`` in source-then-page order.

    All sources are opened before any page is copied, so one unreadable
    input fails the whole merge and nothing is assembled.

    Raises:
        NoSourcesError: If ``sources`` is empty.
        UnreadableSourceError: If any source cannot be parsed.
    """

    source_list = list(sources)
    if not source_list:
        raise NoSourcesError("No input PDFs provided.")

    readers: list[tuple[SourceFile, PdfReader]] = []
    for source in source_list:
        check_cancelled(cancel, "merge")
        LOGGER.debug("Opening input PDF %s", source.name)
        readers.append((source, load_pdf(source)))

    document = AssembledDocument()
    for source, reader in readers:
        for page_index, page in enumerate(reader.pages):
            check_cancelled(cancel, "merge")
            LOGGER.debug("Adding page %s from %s", page_index + 1, source.name)
            document.append_page(page)
    return document


def merge_pdfs(
    sources: Iterable[SourceFile],
    *,
    cancel: threading.Event | None = None,
) -> OutputArtifact:
    """Merge ``sources`` and return the serialized PDF."""

    source_list = list(sources)
    document = merge_documents(source_list, cancel=cancel)
    LOGGER.info("Merged %d PDFs into %d page(s)", len(source_list), document.page_count)
    return document.to_artifact(MERGED_FILENAME, sources=[source.name for source in source_list])


@register_tool("merge")
class MergeTool(BaseTool):
    def run(self) -> OutputArtifact:
        context = self.context
        LOGGER.debug("Merging %d input(s)", len(context.sources))
        return self._store(merge_pdfs(context.sources, cancel=context.cancel))


__all__ = ["merge_documents", "merge_pdfs", "MergeTool", "MERGED_FILENAME"]
