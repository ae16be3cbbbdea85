"""Page geometry for placing one raster image per page."""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import A4

DEFAULT_MARGIN = 0.95


@dataclass(frozen=True)
class Placement:
    """Page size and image rectangle, in PDF points."""

    page_width: float
    page_height: float
    x: float
    y: float
    width: float
    height: float

    @property
    def is_portrait(self) -> bool:
        return self.page_height > self.page_width


def page_size_for(
    image_width: float,
    image_height: float,
    sheet: tuple[float, float] = A4,
) -> tuple[float, float]:
    """Orient ``sheet`` to match the image: portrait only when taller than wide."""

    short_side, long_side = sorted(sheet)
    if image_height > image_width:
        return short_side, long_side
    return long_side, short_side


def scale_to_fit(
    width: float,
    height: float,
    max_width: float,
    max_height: float,
) -> tuple[float, float]:
    """Scale ``width`` x ``height`` to the largest size inside the box, keeping aspect ratio."""

    factor = min(max_width / width, max_height / height)
    return width * factor, height * factor


def place_image(
    image_width: float,
    image_height: float,
    *,
    sheet: tuple[float, float] = A4,
    margin: float = DEFAULT_MARGIN,
) -> Placement:
    """Compute where an image of the given pixel size lands on its page.

    The image is scaled to ``margin`` of the page width and height and
    centered, leaving a visible border.
    """

    if image_width <= 0 or image_height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {image_width}x{image_height}")

    page_width, page_height = page_size_for(image_width, image_height, sheet)
    width, height = scale_to_fit(
        image_width,
        image_height,
        page_width * margin,
        page_height * margin,
    )
    return Placement(
        page_width=page_width,
        page_height=page_height,
        x=(page_width - width) / 2,
        y=(page_height - height) / 2,
        width=width,
        height=height,
    )


__all__ = ["Placement", "page_size_for", "scale_to_fit", "place_image", "DEFAULT_MARGIN"]
