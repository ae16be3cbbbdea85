"""Environment driven configuration for docpipe operations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from reportlab.lib.pagesizes import A4, LEGAL, LETTER

RASTER_SCALE_ENV = "DOCPIPE_RASTER_SCALE"
PAGE_SIZE_ENV = "DOCPIPE_PAGE_SIZE"
IMAGE_MARGIN_ENV = "DOCPIPE_IMAGE_MARGIN"
LOG_LEVEL_ENV = "DOCPIPE_LOG_LEVEL"

DEFAULT_RASTER_SCALE = 2.0
DEFAULT_PAGE_SIZE = "A4"
DEFAULT_IMAGE_MARGIN = 0.95
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

PAGE_SIZES: dict[str, tuple[float, float]] = {
    "A4": A4,
    "LETTER": LETTER,
    "LEGAL": LEGAL,
}


@dataclass(frozen=True)
class PipelineSettings:
    """Tunable defaults shared by every operation."""

    raster_scale: float = DEFAULT_RASTER_SCALE
    page_size: str = DEFAULT_PAGE_SIZE
    image_margin: float = DEFAULT_IMAGE_MARGIN
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.raster_scale < 1.0:
            raise ValueError(f"{RASTER_SCALE_ENV} must be at least 1.0, got {self.raster_scale}")
        if self.page_size not in PAGE_SIZES:
            raise ValueError(
                f"{PAGE_SIZE_ENV} must be one of {sorted(PAGE_SIZES)}, got {self.page_size!r}"
            )
        if not 0.0 < self.image_margin <= 1.0:
            raise ValueError(f"{IMAGE_MARGIN_ENV} must be in (0, 1], got {self.image_margin}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"{LOG_LEVEL_ENV} must be one of {list(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @property
    def sheet(self) -> tuple[float, float]:
        """Portrait ``(width, height)`` of the reference sheet in points."""

        return PAGE_SIZES[self.page_size]


def _float_from_env(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def load_settings(environ: Mapping[str, str] | None = None) -> PipelineSettings:
    """Build :class:`PipelineSettings` from ``environ`` (defaults to ``os.environ``)."""

    env = os.environ if environ is None else environ
    return PipelineSettings(
        raster_scale=_float_from_env(env, RASTER_SCALE_ENV, DEFAULT_RASTER_SCALE),
        page_size=env.get(PAGE_SIZE_ENV, DEFAULT_PAGE_SIZE).strip().upper() or DEFAULT_PAGE_SIZE,
        image_margin=_float_from_env(env, IMAGE_MARGIN_ENV, DEFAULT_IMAGE_MARGIN),
        log_level=env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
    )


__all__ = ["PipelineSettings", "load_settings", "PAGE_SIZES", "LOG_LEVELS"]
