# hotplate/grid.py
from __future__ import annotations

from typing import Tuple

import numpy as np

from .config import BoundarySpec, GridShape


# Interior of a padded grid: one ghost cell on every side.
INTERIOR: Tuple[slice, slice] = (slice(1, -1), slice(1, -1))

# Placeholder stored in the four corner cells; never read by the stencil.
CORNER_VALUE = 0.0


def initial_grid(shape: GridShape, boundary: BoundarySpec) -> np.ndarray:
    """
    Build the padded (ny+2, nx+2) starting grid.

    Grid-space layout (row = y, column = x, row 0 = top):
      row 0      -> boundary.top
      row ny+1   -> boundary.bottom
      column 0   -> boundary.left
      column nx+1-> boundary.right

    Every cell is first seeded with the mean of the four edge temperatures.
    Edges are stamped left, right, top, bottom, and the corners are then
    overwritten with CORNER_VALUE, so no edge owns a corner.
    """
    rows, cols = shape.padded
    g = np.full((rows, cols), boundary.mean, dtype=np.float64)

    g[:, 0] = boundary.left
    g[:, -1] = boundary.right
    g[0, :] = boundary.top
    g[-1, :] = boundary.bottom
    g[[0, 0, -1, -1], [0, -1, 0, -1]] = CORNER_VALUE
    return g


def extract_interior(grid: np.ndarray) -> np.ndarray:
    """
    Strip the one-cell padding, returning the (ny, nx) plate region.
    """
    if grid.ndim != 2:
        raise ValueError("grid must be 2D")
    if grid.shape[0] < 3 or grid.shape[1] < 3:
        raise ValueError(f"padded grid must be at least (3, 3); got {grid.shape}")
    return grid[INTERIOR]


def embed_interior(
    interior: np.ndarray,
    boundary: BoundarySpec,
) -> np.ndarray:
    """
    Inverse of extract_interior: surround a (ny, nx) plate region with the
    boundary lines laid out exactly as initial_grid does.
    """
    if interior.ndim != 2:
        raise ValueError("interior must be 2D (ny, nx)")
    ny, nx = interior.shape
    g = initial_grid(GridShape(nx=nx, ny=ny), boundary)
    g[INTERIOR] = interior
    return g


# ============================
# Grid space <-> caller space
# ============================
#
# Grid space:   A[row, col], row 0 = top edge, col 0 = left edge, shape (ny, nx)
# Caller space: T[x, y],     x 0 = left edge,  y 0 = bottom edge, shape (nx, ny)
#
#   T[x, y] = A[ny - 1 - y, x]
#
# i.e. a 90 degree clockwise rotation of the grid-space array.

def grid_to_caller(interior: np.ndarray) -> np.ndarray:
    """(ny, nx) grid-space plate -> (nx, ny) caller-space T[x, y]."""
    if interior.ndim != 2:
        raise ValueError("interior must be 2D (ny, nx)")
    return np.ascontiguousarray(np.rot90(interior, k=-1))


def caller_to_grid(temperature: np.ndarray) -> np.ndarray:
    """(nx, ny) caller-space T[x, y] -> (ny, nx) grid-space plate."""
    if temperature.ndim != 2:
        raise ValueError("temperature must be 2D (nx, ny)")
    return np.ascontiguousarray(np.rot90(temperature, k=1))

