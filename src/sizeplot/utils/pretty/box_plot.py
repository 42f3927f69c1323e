"""
Proportional box-plot rendering for a Distribution.

Every summary value is mapped onto a fixed-width character canvas relative to a
reference maximum, then the canvas is filled left to right with three shade
intensities: light for the whiskers, medium for the box and dark for the median.
"""
from __future__ import annotations

import math
from typing import List

from sizeplot.utils.constants import (
    BLANK,
    DARK_SHADE,
    DEFAULT_TERMINAL_WIDTH,
    LABEL_MARGIN,
    LIGHT_SHADE,
    MEDIUM_SHADE,
    MIN_CANVAS_WIDTH,
)
from sizeplot.utils.exceptions import DegenerateCanvasException
from sizeplot.utils.formatting import ByteFormatter, format_bytes
from sizeplot.utils.pretty.color_logger import RichLog
from sizeplot.utils.pretty.terminal import TerminalGeometry
from sizeplot.utils.statistics import Distribution


def column_position(value: float, max_value: float, canvas_width: int) -> int:
    """Map ``value`` onto a canvas column, rounding half away from zero.

    A non-positive ``max_value`` places everything at column 0.
    """
    if max_value <= 0:
        return 0
    scaled = value / max_value * canvas_width
    if not math.isfinite(scaled):
        return 0
    return max(0, int(math.floor(scaled + 0.5)))


def _fill(canvas: List[str], start: int, end: int, glyph: str) -> None:
    for column in range(max(start, 0), min(end, len(canvas))):
        canvas[column] = glyph


def render_bar(dist: Distribution, max_value: float, canvas_width: int) -> str:
    """Render the shaded bar for ``dist`` as exactly ``canvas_width`` characters.

    Raises:
        DegenerateCanvasException: if ``canvas_width`` is smaller than one column.
    """
    if canvas_width < MIN_CANVAS_WIDTH:
        raise DegenerateCanvasException(canvas_width)
    if max_value <= 0:
        RichLog.warn(f"Reference maximum is {max_value}; drawing the box-plot at column 0.")

    lo = column_position(dist.min, max_value, canvas_width)
    lq = column_position(dist.lower_quartile, max_value, canvas_width)
    med = column_position(dist.median, max_value, canvas_width)
    uq = column_position(dist.upper_quartile, max_value, canvas_width)
    hi = column_position(dist.max, max_value, canvas_width)

    canvas = [BLANK] * canvas_width
    _fill(canvas, lo, lq, LIGHT_SHADE)
    _fill(canvas, lq, med, MEDIUM_SHADE)
    _fill(canvas, med, uq, MEDIUM_SHADE)
    _fill(canvas, uq, hi, LIGHT_SHADE)
    # median sits on the last column when it maps to the right edge
    canvas[min(med, canvas_width - 1)] = DARK_SHADE
    return "".join(canvas)


def resolve_canvas_width(
    geometry: TerminalGeometry,
    default_width: int = DEFAULT_TERMINAL_WIDTH,
    label_margin: int = LABEL_MARGIN,
) -> int:
    """Columns left for the bar once the label margin is reserved.

    Falls back to ``default_width`` when the terminal width is unknown and never
    returns less than one column.
    """
    columns = geometry.columns()
    if columns is None:
        RichLog.debug(f"Terminal width unavailable; using default width {default_width}.")
        columns = default_width
    width = columns - label_margin
    if width < MIN_CANVAS_WIDTH:
        RichLog.warn(
            f"Terminal width {columns} leaves no room for the box-plot after reserving "
            f"{label_margin} columns for labels; clamping canvas to {MIN_CANVAS_WIDTH} column."
        )
        return MIN_CANVAS_WIDTH
    return width


def render_box_plot(
    dist: Distribution,
    max_value: float,
    canvas_width: int,
    formatter: ByteFormatter = format_bytes,
) -> str:
    """Render the labeled bar line: ``Smallest: <min> <bar> Largest: <max>``."""
    bar = render_bar(dist, max_value, canvas_width)
    return f"Smallest: {formatter(dist.min)} {bar} Largest: {formatter(dist.max)}"


def render_summary(dist: Distribution, formatter: ByteFormatter = format_bytes) -> List[str]:
    """Render the five labeled summary lines, rounding interpolated values to whole bytes."""
    rows = [
        ("Smallest", dist.min),
        ("Lower Quartile", _round_bytes(dist.lower_quartile)),
        ("Median", _round_bytes(dist.median)),
        ("Upper Quartile", _round_bytes(dist.upper_quartile)),
        ("Largest", dist.max),
    ]
    return [f"{label}: {formatter(value)}" for label, value in rows]


def _round_bytes(value: float) -> int:
    return int(math.floor(value + 0.5))
