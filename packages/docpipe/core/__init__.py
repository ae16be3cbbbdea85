"""Shared building blocks for docpipe tools."""
