"""Process-wide lookup tables built once on first use."""
from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Optional

import numpy as np

from .transfer import (
    build_delinearization_table,
    build_gamma_compress_bytes,
    build_gamma_expand_bytes,
    build_linearization_table,
)


class LazyTable:
    """Hold a table that is built by ``builder`` the first time it is read.

    Concurrent first readers block on a lock while one of them builds; the
    array is frozen before it is published so no reader sees it half filled.
    """

    def __init__(self, name: str, builder: Callable[[], np.ndarray]) -> None:
        self.name = name
        self._builder = builder
        self._lock = threading.Lock()
        self._value: Optional[np.ndarray] = None

    @property
    def built(self) -> bool:
        return self._value is not None

    @property
    def value(self) -> np.ndarray:
        table = self._value
        if table is not None:
            return table
        with self._lock:
            table = self._value
            if table is None:
                logging.debug("building %s table", self.name)
                table = self._builder()
                table.setflags(write=False)
                self._value = table
        return table

    def __repr__(self) -> str:
        state = "built" if self.built else "unbuilt"
        return f"LazyTable({self.name!r}, {state})"


LINEARIZATION = LazyTable("linear", build_linearization_table)
DELINEARIZATION = LazyTable("srgb", build_delinearization_table)
GAMMA_EXPAND = LazyTable("gamma-expand", build_gamma_expand_bytes)
GAMMA_COMPRESS = LazyTable("gamma-compress", build_gamma_compress_bytes)

TABLES: Dict[str, LazyTable] = {
    t.name: t for t in (LINEARIZATION, DELINEARIZATION, GAMMA_EXPAND, GAMMA_COMPRESS)
}


def linearization_table() -> np.ndarray:
    return LINEARIZATION.value


def delinearization_table() -> np.ndarray:
    return DELINEARIZATION.value


def preload() -> None:
    """Build every table now rather than on first conversion."""
    for table in TABLES.values():
        _ = table.value
    logging.info("preloaded %d lookup tables", len(TABLES))
