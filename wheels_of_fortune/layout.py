"""Hexagonal wheel layout with overscan past every canvas edge."""
import logging
import math

from .config import GRID_DIVISOR, RADIUS_JITTER
from .wheel import Wheel

logger = logging.getLogger(__name__)


def base_radius(width, height):
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas size must be positive, got {width}x{height}")
    return min(width, height) / GRID_DIVISOR


def spacing(width, height):
    """(spacing_x, spacing_y) for hex circle packing."""
    base_r = base_radius(width, height)
    return base_r * 2, base_r * math.sqrt(3)


def grid_shape(width, height):
    """(cols, rows) needed to cover the overscanned region."""
    base_r = base_radius(width, height)
    spacing_x, spacing_y = spacing(width, height)
    extent_x = (width + base_r) - (-base_r)
    extent_y = (height + base_r) - (-base_r)
    cols = math.ceil(extent_x / spacing_x) + 1
    rows = math.ceil(extent_y / spacing_y) + 1
    return cols, rows


def grid_positions(width, height):
    """Cell centres, row by row; odd rows shift half a column."""
    base_r = base_radius(width, height)
    spacing_x, spacing_y = spacing(width, height)
    cols, rows = grid_shape(width, height)
    start_x = -base_r
    start_y = -base_r

    positions = []
    for j in range(rows):
        row_offset = 0.0 if j % 2 == 0 else spacing_x / 2
        for i in range(cols):
            positions.append((start_x + i * spacing_x + row_offset, start_y + j * spacing_y))
    return positions


def layout(width, height, policy):
    """Build a fresh wheel for every grid cell.

    Cells are not filtered by canvas containment, so wheels near the border
    render partly off-canvas and the edges never show a gap.
    """
    base_r = base_radius(width, height)
    wheels = []
    for x, y in grid_positions(width, height):
        r = min(base_r * policy.uniform(*RADIUS_JITTER), base_r)
        wheels.append(Wheel(x, y, r, policy.choose_palette(), policy))

    cols, rows = grid_shape(width, height)
    logger.info("Laid out %d wheels (%d cols x %d rows, base radius %.1f) for %dx%d",
                len(wheels), cols, rows, base_r, width, height)
    return wheels
