"""Shared plumbing for pluggable docpipe tools."""
