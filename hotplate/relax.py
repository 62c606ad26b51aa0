# hotplate/relax.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from .config import PlateConfig, check_max_iter, check_tolerance
from .errors import NotConverged, NumericalInstability
from .grid import INTERIOR, caller_to_grid, embed_interior, extract_interior, grid_to_caller, initial_grid


SweepCallback = Callable[[int, float], None]


# ============================
# Low-level: one Jacobi sweep
# ============================

def sweep(previous: np.ndarray, current: np.ndarray) -> None:
    """
    5-point averaging update of every interior cell:

        current[i, j] = (previous[i, j-1] + previous[i, j+1]
                         + previous[i-1, j] + previous[i+1, j]) / 4

    Reads only `previous`; boundary lines of `current` are left untouched.
    """
    if previous.shape != current.shape:
        raise ValueError(f"buffer shapes differ: {previous.shape} vs {current.shape}")
    if previous is current:
        raise ValueError("sweep needs two distinct buffers")

    # neighbours scaled before summing: result never exceeds the largest neighbour
    horizontal = 0.25 * previous[1:-1, :-2] + 0.25 * previous[1:-1, 2:]
    vertical = 0.25 * previous[:-2, 1:-1] + 0.25 * previous[2:, 1:-1]
    current[INTERIOR] = horizontal + vertical


def fractional_change(current: np.ndarray, previous: np.ndarray) -> float:
    """
    max over interior cells of |current - previous| / previous
    """
    new = current[INTERIOR]
    old = previous[INTERIOR]
    return float(np.max(np.abs(new - old) / old))


# ============================
# Mid-level: relax a padded grid
# ============================

@dataclass
class RelaxResult:
    grid: np.ndarray
    iterations: int
    frac_history: List[float] = field(default_factory=list)

    @property
    def frac(self) -> float:
        return self.frac_history[-1] if self.frac_history else float("inf")


def relax(
    grid: np.ndarray,
    tol: float,
    *,
    max_iter: Optional[int] = None,
    callback: Optional[SweepCallback] = None,
    debug: bool = False,
) -> RelaxResult:
    """
    Jacobi relaxation of a padded grid until the maximum fractional change
    of any interior cell is <= tol.

    Parameters
    ----------
    grid:
        Padded (ny+2, nx+2) starting grid; not modified.
    tol:
        Bound on the max per-cell fractional change, applied as given.
    max_iter:
        Optional guard. None iterates until converged.
    callback:
        Called as callback(iteration, frac) after every sweep.
    debug:
        Print a summary block when the loop stops.

    Raises
    ------
    NumericalInstability
        Overflow, invalid arithmetic, or a non-positive interior value.
    ValueError
        tol is not finite and positive, or max_iter is not None or >= 1.
    NotConverged
        More than max_iter sweeps were needed.
    """
    if grid.ndim != 2 or grid.shape[0] < 3 or grid.shape[1] < 3:
        raise ValueError(f"grid must be a padded 2D array of at least (3, 3); got {grid.shape}")
    tol = check_tolerance(tol)
    max_iter = check_max_iter(max_iter)

    previous = np.array(grid, dtype=np.float64, copy=True)
    current = previous.copy()
    if not np.all(np.isfinite(previous[INTERIOR])) or np.any(previous[INTERIOR] <= 0.0):
        raise NumericalInstability("starting grid has non-finite or non-positive interior values")

    history: List[float] = []
    frac = np.inf
    it = 0

    while frac > tol:
        if max_iter is not None and it >= max_iter:
            raise NotConverged(it, frac, tol)

        try:
            with np.errstate(over="raise", invalid="raise", divide="raise"):
                sweep(previous, current)
                frac = fractional_change(current, previous)
        except FloatingPointError as exc:
            raise NumericalInstability(f"floating-point error in sweep {it + 1}: {exc}") from exc

        if not np.isfinite(frac) or np.any(current[INTERIOR] <= 0.0):
            raise NumericalInstability(
                f"sweep {it + 1} left a non-finite or non-positive interior (frac={frac})"
            )

        it += 1
        history.append(frac)
        if callback is not None:
            callback(it, frac)

        previous, current = current, previous

    if debug:
        rows, cols = grid.shape
        print("\n[relax DEBUG]")
        print(f"grid: {rows}x{cols} (padded), tol={tol:.3e}, max_iter={max_iter}")
        print(f"sweeps={it}, final frac={frac:.3e}")
        print(f"interior min={previous[INTERIOR].min():.6g}, max={previous[INTERIOR].max():.6g}")

    return RelaxResult(grid=previous, iterations=it, frac_history=history)


# ============================
# High-level: solve a plate
# ============================

@dataclass
class PlateSolution:
    """
    Converged plate temperatures.

    `temperature` is indexed T[x, y] with shape (nx, ny), x = 0 at the left
    edge and y = 0 at the bottom edge.
    """
    config: PlateConfig
    temperature: np.ndarray
    iterations: int
    frac_history: List[float]

    @property
    def frac(self) -> float:
        return self.frac_history[-1]

    def grid(self) -> np.ndarray:
        """Padded grid-space array (row 0 = top) rebuilt from the result."""
        return embed_interior(caller_to_grid(self.temperature), self.config.boundary)


def solve(
    cfg: PlateConfig,
    *,
    callback: Optional[SweepCallback] = None,
    debug: bool = False,
) -> PlateSolution:
    """
    Steady-state temperature of a flat plate with fixed edge temperatures.
    """
    g0 = initial_grid(cfg.shape, cfg.boundary)
    res = relax(g0, cfg.tol, max_iter=cfg.max_iter, callback=callback, debug=debug)
    T = grid_to_caller(extract_interior(res.grid))
    return PlateSolution(
        config=cfg,
        temperature=T,
        iterations=res.iterations,
        frac_history=res.frac_history,
    )


def hot_plate(
    nx: int,
    ny: int,
    ta: float,
    tb: float,
    tc: float,
    td: float,
    tol: float,
    *,
    max_iter: Optional[int] = None,
) -> np.ndarray:
    """
    Equilibrium temperature of each plate cell, shape (nx, ny), indexed T[x, y].

    Parameters
    ----------
    nx, ny:
        number of cells in the X and Y directions
    ta, tb, tc, td:
        bottom, top, left and right edge temperatures (Kelvin)
    tol:
        bound on the max fractional change of any cell between sweeps
    max_iter:
        optional sweep limit (NotConverged when exceeded)
    """
    cfg = PlateConfig.from_args(nx, ny, ta, tb, tc, td, tol, max_iter=max_iter)
    return solve(cfg).temperature
