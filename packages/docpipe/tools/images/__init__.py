"""Image to PDF conversion exposed through the docpipe tools namespace."""

from __future__ import annotations

from .convert import IMAGES_FILENAME, ImagesToPdfTool, ProbedImage, convert_images, images_to_pdf, probe_image
from .layout import Placement, page_size_for, place_image, scale_to_fit

__all__ = [
    "convert_images",
    "images_to_pdf",
    "probe_image",
    "ProbedImage",
    "ImagesToPdfTool",
    "IMAGES_FILENAME",
    "Placement",
    "page_size_for",
    "place_image",
    "scale_to_fit",
]
