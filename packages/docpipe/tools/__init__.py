"""Namespace for pluggable docpipe tools."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from .splitter import split  # noqa: F401  # register the split tool
    from .merger import merge  # noqa: F401
    from .compressor import compress  # noqa: F401
    from .images import convert  # noqa: F401
    from .rasterizer import rasterize  # noqa: F401


__all__ = ["registry", "load_builtin_plugins"]
