from __future__ import annotations

import threading
from typing import Callable

import pytest

from docpipe import (
    NoPagesSelectedError,
    OperationCancelledError,
    PageIndexSet,
    SourceFile,
    UnreadableSourceError,
    extract_pages,
    merge_pdfs,
    split_document,
    split_pdf,
)


def test_split_extracts_requested_pages(ten_page_pdf: SourceFile, widths_of: Callable) -> None:
    artifact = split_pdf(ten_page_pdf, "2,4,6")

    assert artifact.mime_type == "application/pdf"
    assert artifact.filename == "report_pages.pdf"
    assert artifact.page_count == 3
    assert artifact.details["pages"] == [2, 4, 6]
    assert widths_of(artifact.data) == [102, 104, 106]


def test_split_outputs_document_order(ten_page_pdf: SourceFile, widths_of: Callable) -> None:
    artifact = split_pdf(ten_page_pdf, "6, 2-3")
    assert widths_of(artifact.data) == [102, 103, 106]


def test_split_then_merge_matches_single_split(ten_page_pdf: SourceFile, widths_of: Callable) -> None:
    single = split_pdf(ten_page_pdf, "2,4,6")
    parts = [split_pdf(ten_page_pdf, page) for page in ("2", "4", "6")]
    rejoined = merge_pdfs(
        SourceFile(name=f"part{index}.pdf", data=part.data) for index, part in enumerate(parts)
    )

    assert widths_of(rejoined.data) == widths_of(single.data)


@pytest.mark.parametrize("expression", ["5-2", "20-30", "", "abc", "0"])
def test_split_with_no_valid_pages(ten_page_pdf: SourceFile, expression: str) -> None:
    with pytest.raises(NoPagesSelectedError) as excinfo:
        split_pdf(ten_page_pdf, expression)
    assert excinfo.value.kind == "NoPagesSelected"


def test_extract_pages_requires_indices(ten_page_pdf: SourceFile) -> None:
    with pytest.raises(NoPagesSelectedError):
        extract_pages(ten_page_pdf, PageIndexSet())


def test_extract_pages_copies_indices(ten_page_pdf: SourceFile) -> None:
    document = extract_pages(ten_page_pdf, PageIndexSet((0, 9)))
    assert document.page_count == 2
    assert [round(float(page.mediabox.width)) for page in document.pages] == [101, 110]


def test_extract_pages_rejects_index_past_end(ten_page_pdf: SourceFile) -> None:
    with pytest.raises(IndexError):
        extract_pages(ten_page_pdf, PageIndexSet((3, 10)))


def test_split_unreadable_source() -> None:
    bogus = SourceFile(name="broken.pdf", data=b"this is not a pdf")
    with pytest.raises(UnreadableSourceError) as excinfo:
        split_pdf(bogus, "1")
    assert excinfo.value.source_name == "broken.pdf"


def test_split_empty_source() -> None:
    with pytest.raises(UnreadableSourceError):
        split_pdf(SourceFile(name="empty.pdf", data=b""), "1")


def test_split_document_helper(ten_page_pdf: SourceFile, widths_of: Callable) -> None:
    artifact = split_document(ten_page_pdf, "1-3")
    assert widths_of(artifact.data) == [101, 102, 103]


def test_split_honours_cancellation(ten_page_pdf: SourceFile) -> None:
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(OperationCancelledError):
        split_pdf(ten_page_pdf, "1-3", cancel=cancel)


def test_split_keeps_page_text_and_images(
    content_pdf_factory: Callable, contents_of: Callable
) -> None:
    source = content_pdf_factory("notes.pdf", ["Page one", "Page two", "Page three", "Page four"])

    artifact = split_pdf(source, "4, 2")

    assert contents_of(artifact.data) == [("Page two", [11]), ("Page four", [13])]
