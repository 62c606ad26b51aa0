# hotplate/config.py
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Optional, Tuple

import numpy as np

from .errors import InvalidGridShape, InvalidTemperature


def check_tolerance(tol: float) -> float:
    """Finite positive tolerance as float, else ValueError."""
    if isinstance(tol, bool) or not isinstance(tol, Real) or not np.isfinite(float(tol)) or tol <= 0.0:
        raise ValueError(f"tol must be a finite positive number; got {tol!r}")
    return float(tol)


def check_max_iter(max_iter: Optional[int]) -> Optional[int]:
    """None or a positive integer, else ValueError."""
    if max_iter is None:
        return None
    if isinstance(max_iter, bool) or not isinstance(max_iter, Real) or not np.isfinite(float(max_iter)) or int(max_iter) != max_iter or max_iter < 1:
        raise ValueError(f"max_iter must be None or a positive integer; got {max_iter!r}")
    return int(max_iter)


def _as_count(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidGridShape(f"{name} must be a positive integer; got {value!r}")
    v = float(value)
    if not np.isfinite(v) or v < 1 or not v.is_integer():
        raise InvalidGridShape(f"{name} must be a positive integer; got {value!r}")
    return int(v)


@dataclass(frozen=True)
class GridShape:
    """
    Number of cells along each axis of the plate.

    Integral floats (3.0) are accepted and stored as int.
    """
    nx: int
    ny: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "nx", _as_count(self.nx, "nx"))
        object.__setattr__(self, "ny", _as_count(self.ny, "ny"))

    @property
    def n_cells(self) -> int:
        return self.nx * self.ny

    @property
    def padded(self) -> Tuple[int, int]:
        """(rows, cols) of the padded grid: (ny + 2, nx + 2)."""
        return self.ny + 2, self.nx + 2


@dataclass(frozen=True)
class BoundarySpec:
    """
    Fixed edge temperatures in Kelvin.

      bottom = side A (ta), top = side B (tb),
      left   = side C (tc), right = side D (td)
    """
    bottom: float
    top: float
    left: float
    right: float

    def __post_init__(self) -> None:
        for name in ("bottom", "top", "left", "right"):
            t = getattr(self, name)
            if isinstance(t, bool) or not isinstance(t, Real):
                raise InvalidTemperature(f"{name} temperature must be a number; got {t!r}")
            t = float(t)
            if not np.isfinite(t) or t <= 0.0:
                raise InvalidTemperature(
                    f"{name} temperature must be above absolute zero (Kelvin); got {t!r}"
                )
            object.__setattr__(self, name, t)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.bottom, self.top, self.left, self.right

    @property
    def mean(self) -> float:
        # scale before summing: finite for any finite edge temperatures
        return float(np.mean(np.asarray(self.as_tuple()) / 4.0) * 4.0)

    @property
    def min(self) -> float:
        return float(np.min(self.as_tuple()))

    @property
    def max(self) -> float:
        return float(np.max(self.as_tuple()))


@dataclass(frozen=True)
class PlateConfig:
    shape: GridShape
    boundary: BoundarySpec
    tol: float                      # bound on max per-cell fractional change
    max_iter: Optional[int] = None  # None -> iterate until converged

    def __post_init__(self) -> None:
        object.__setattr__(self, "tol", check_tolerance(self.tol))
        object.__setattr__(self, "max_iter", check_max_iter(self.max_iter))

    @classmethod
    def from_args(
        cls,
        nx: int,
        ny: int,
        ta: float,
        tb: float,
        tc: float,
        td: float,
        tol: float,
        max_iter: Optional[int] = None,
    ) -> "PlateConfig":
        """Build from the positional (nx, ny, ta, tb, tc, td, tol) convention."""
        return cls(
            shape=GridShape(nx=nx, ny=ny),
            boundary=BoundarySpec(bottom=ta, top=tb, left=tc, right=td),
            tol=tol,
            max_iter=max_iter,
        )


def cell_scaled_tolerance(tol: float, shape: GridShape) -> float:
    """
    Caller-side tolerance refinement: tol / (nx * ny).

    Finer grids need a tighter per-cell bound to reach a comparable
    whole-plate accuracy. The solver itself always applies tol directly.
    """
    return check_tolerance(tol) / float(shape.n_cells)
