"""Split utilities exposed through the docpipe tools namespace."""

from __future__ import annotations

from .split import SplitTool, extract_pages, split_pdf
from .utils import build_output_filename, parse_page_range

__all__ = [
    "split_pdf",
    "extract_pages",
    "parse_page_range",
    "build_output_filename",
    "SplitTool",
]
