"""Fixed constants for the sRGB transfer tables."""
from __future__ import annotations

import os

# Entries per table; index i stands for the 8-bit value i.
TABLE_SIZE = 256
MAX_BYTE = TABLE_SIZE - 1

# sRGB decoding (sRGB -> linear)
SRGB_THRESHOLD = 0.04045
LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_EXPONENT = 2.4

# sRGB encoding (linear -> sRGB)
LINEAR_THRESHOLD = 0.0031308

# Plain power-law gamma used by the byte ramps
DEFAULT_GAMMA = 2.2


def _truthy(val: str | None) -> bool:
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


# Build every table at import time instead of on first use.
PRELOAD = _truthy(os.environ.get("SRGB_LUT_PRELOAD"))
