"""CLI helpers for rendering PDF pages to PNG images."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ConversionContext
from . import read_sources


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("rasterize", help="Render every page to PNG inside a zip archive")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("output", help="Output zip path")
    parser.add_argument(
        "--scale",
        type=float,
        default=None,
        help="Render scale (>= 1.0); defaults to DOCPIPE_RASTER_SCALE or 2.0",
    )
    parser.set_defaults(tool_name="pdf_to_images", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    return ConversionContext(
        sources=read_sources([args.input]),
        config={"scale": args.scale},
    )
