"""Compression utilities exposed through the docpipe tools namespace."""

from __future__ import annotations

from .compress import CompressTool, optimize_pdf

__all__ = ["optimize_pdf", "CompressTool"]
