"""Table driven sRGB <-> linear conversion of single colour samples."""

from .color import (
    ColorSample,
    OutOfDomainError,
    to_index,
    to_linear,
    to_linear_approx,
    to_srgb,
    to_srgb_approx,
)
from .config import PRELOAD
from .lut import delinearization_table, linearization_table, preload

__all__ = [
    "ColorSample",
    "OutOfDomainError",
    "delinearization_table",
    "linearization_table",
    "preload",
    "to_index",
    "to_linear",
    "to_linear_approx",
    "to_srgb",
    "to_srgb_approx",
]

if PRELOAD:
    preload()
