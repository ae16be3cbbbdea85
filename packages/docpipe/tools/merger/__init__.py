"""Merge utilities exposed through the docpipe tools namespace."""

from __future__ import annotations

from .merge import MERGED_FILENAME, MergeTool, merge_documents, merge_pdfs

__all__ = ["merge_documents", "merge_pdfs", "MergeTool", "MERGED_FILENAME"]
