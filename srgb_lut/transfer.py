"""sRGB transfer functions and lookup table builders.

The float tables hold the exact piecewise sRGB curves sampled at the 256
possible 8-bit inputs, so per-pixel conversion becomes a single index
lookup.  The byte ramps use a plain power-law gamma and map 8-bit values
to 8-bit values.
"""
from __future__ import annotations

import math
from typing import Callable

import numpy as np

from .config import (
    DEFAULT_GAMMA,
    LINEAR_SLOPE,
    LINEAR_THRESHOLD,
    MAX_BYTE,
    SRGB_EXPONENT,
    SRGB_OFFSET,
    SRGB_THRESHOLD,
    TABLE_SIZE,
)


def srgb_to_linear(signal: float) -> float:
    """Decode a gamma-encoded sRGB ``signal`` in ``[0, 1]`` to linear light."""
    if signal <= SRGB_THRESHOLD:
        return signal / LINEAR_SLOPE
    return ((signal + SRGB_OFFSET) / (1.0 + SRGB_OFFSET)) ** SRGB_EXPONENT


def linear_to_srgb(signal: float) -> float:
    """Encode a linear light ``signal`` in ``[0, 1]`` as sRGB."""
    if signal <= LINEAR_THRESHOLD:
        return signal * LINEAR_SLOPE
    return (1.0 + SRGB_OFFSET) * signal ** (1.0 / SRGB_EXPONENT) - SRGB_OFFSET


def to_byte(value: float) -> int:
    """Clamp ``value`` to ``[0, 255]`` and round half up."""
    if math.isnan(value):
        raise ValueError("cannot convert NaN to a byte")
    if value <= 0.0:
        return 0
    if value >= MAX_BYTE:
        return MAX_BYTE
    return int(math.floor(value + 0.5))


def _sample(curve: Callable[[float], float]) -> np.ndarray:
    ramp = np.empty(TABLE_SIZE, dtype=np.float64)
    for x in range(TABLE_SIZE):
        ramp[x] = curve(x / MAX_BYTE)
    return ramp


def build_linearization_table() -> np.ndarray:
    """Return the sRGB -> linear table indexed by 8-bit component value."""
    return _sample(srgb_to_linear)


def build_delinearization_table() -> np.ndarray:
    """Return the linear -> sRGB table indexed by 8-bit component value."""
    return _sample(linear_to_srgb)


def build_gamma_expand_bytes(gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """Return a ``uint8`` ramp taking gamma-encoded bytes to linear bytes.

    Parameters
    ----------
    gamma:
        Power-law exponent, must be ``> 0``.
    """
    if not gamma > 0:
        raise ValueError("gamma must be > 0")
    ramp = np.empty(TABLE_SIZE, dtype=np.uint8)
    for x in range(TABLE_SIZE):
        ramp[x] = to_byte(MAX_BYTE * (x / MAX_BYTE) ** gamma)
    return ramp


def build_gamma_compress_bytes(gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """Inverse of :func:`build_gamma_expand_bytes`."""
    if not gamma > 0:
        raise ValueError("gamma must be > 0")
    ramp = np.empty(TABLE_SIZE, dtype=np.uint8)
    for x in range(TABLE_SIZE):
        ramp[x] = to_byte(MAX_BYTE * (x / MAX_BYTE) ** (1.0 / gamma))
    return ramp
