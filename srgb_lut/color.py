"""Colour space conversion for single pixel values.

``to_linear`` and ``to_srgb`` map the red, green and blue components of a
:class:`ColorSample` through the shared 256-entry lookup tables.  Alpha is
carried through untouched.  Components are expected to be normalized to
``[0, 1]``; anything else is rejected before the table is touched.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .config import MAX_BYTE
from .lut import DELINEARIZATION, GAMMA_COMPRESS, GAMMA_EXPAND, LINEARIZATION, LazyTable
from .transfer import to_byte


class OutOfDomainError(ValueError):
    """A colour component cannot be mapped to a table index."""


@dataclass(frozen=True)
class ColorSample:
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_bytes(cls, red: int, green: int, blue: int, alpha: int = MAX_BYTE) -> "ColorSample":
        """Build a sample from 8-bit components."""
        return cls(red / MAX_BYTE, green / MAX_BYTE, blue / MAX_BYTE, alpha / MAX_BYTE)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)


def to_index(component: float, name: str = "colour") -> int:
    """Return the table index for a normalized colour ``component``.

    Scaling by 255 is followed by round half up, the same rule the byte
    ramps are built with.

    Raises
    ------
    OutOfDomainError
        If ``component`` is NaN or lies outside ``[0, 1]``.
    """
    if math.isnan(component) or not 0.0 <= component <= 1.0:
        raise OutOfDomainError(f"{name} component {component!r} outside [0, 1]")
    return to_byte(component * MAX_BYTE)


def _indices(sample: ColorSample) -> Tuple[int, int, int]:
    return (
        to_index(sample.red, "red"),
        to_index(sample.green, "green"),
        to_index(sample.blue, "blue"),
    )


def _lookup(table: LazyTable, sample: ColorSample) -> ColorSample:
    r, g, b = _indices(sample)
    ramp = table.value
    return ColorSample(float(ramp[r]), float(ramp[g]), float(ramp[b]), sample.alpha)


def _lookup_bytes(table: LazyTable, sample: ColorSample) -> ColorSample:
    r, g, b = _indices(sample)
    ramp = table.value
    return ColorSample(
        int(ramp[r]) / MAX_BYTE,
        int(ramp[g]) / MAX_BYTE,
        int(ramp[b]) / MAX_BYTE,
        sample.alpha,
    )


def to_linear(sample: ColorSample) -> ColorSample:
    """Convert an sRGB ``sample`` to linear light."""
    return _lookup(LINEARIZATION, sample)


def to_srgb(sample: ColorSample) -> ColorSample:
    """Convert a linear light ``sample`` to sRGB."""
    return _lookup(DELINEARIZATION, sample)


def to_linear_approx(sample: ColorSample) -> ColorSample:
    """Like :func:`to_linear` but through the 8-bit gamma 2.2 ramp."""
    return _lookup_bytes(GAMMA_EXPAND, sample)


def to_srgb_approx(sample: ColorSample) -> ColorSample:
    """Like :func:`to_srgb` but through the 8-bit gamma 2.2 ramp."""
    return _lookup_bytes(GAMMA_COMPRESS, sample)
