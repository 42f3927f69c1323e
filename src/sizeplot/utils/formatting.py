from __future__ import annotations

import math
from typing import Protocol

from sizeplot.utils.constants import BINARY_UNITS
from sizeplot.utils.exceptions import InvalidValueException


class ByteFormatter(Protocol):
    """Turns a raw byte count into a display string."""

    def __call__(self, size: float) -> str: ...


def format_bytes(size: float) -> str:
    """Formats bytes as human-readable IEC units (B, KiB, MiB, ...) with two decimals."""
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        raise InvalidValueException(size)
    if not math.isfinite(size) or size < 0:
        raise InvalidValueException(size)
    value = float(size)
    for unit in BINARY_UNITS:
        if value < 1024.0 or unit == BINARY_UNITS[-1]:
            return f"{value:.2f} {unit}"
        value /= 1024.0
    return f"{value:.2f} {BINARY_UNITS[-1]}"
