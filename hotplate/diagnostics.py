# hotplate/diagnostics.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from scipy import ndimage

from .grid import INTERIOR
from .relax import PlateSolution


# -----------------------------
# I/O helpers
# -----------------------------

def save_npz(path: Path, **arrays: np.ndarray) -> None:
    """Save compressed .npz (creates parent dirs)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    np.savez_compressed(path, **arrays)


def save_solution(path: Path, sol: PlateSolution) -> None:
    b = sol.config.boundary
    save_npz(
        path,
        temperature=sol.temperature,
        frac_history=np.asarray(sol.frac_history, dtype=float),
        boundary=np.array(b.as_tuple()),
        tol=np.array(sol.config.tol),
        iterations=np.array(sol.iterations),
    )


# -----------------------------
# Checks
# -----------------------------

_LAPLACE_5PT = np.array(
    [[0.0, 1.0, 0.0],
     [1.0, -4.0, 1.0],
     [0.0, 1.0, 0.0]]
)


def laplacian_residual(sol: PlateSolution) -> float:
    """
    max |5-point Laplacian| over the interior cells, in Kelvin (unit spacing).

    Zero for the exact discrete solution; bounded by 4 * tol * max(T) for a
    relaxed one.
    """
    g = sol.grid()
    R = ndimage.convolve(g, _LAPLACE_5PT, mode="constant", cval=0.0)
    return float(np.max(np.abs(R[INTERIOR])))


def maximum_principle_gap(sol: PlateSolution) -> float:
    """
    How far the solution strays outside [min edge, max edge]; 0.0 when it doesn't.
    """
    b = sol.config.boundary
    T = sol.temperature
    return float(max(0.0, b.min - T.min(), T.max() - b.max))


# -----------------------------
# Plotting
# -----------------------------

def plot_field(
    sol: PlateSolution,
    *,
    title: str = "",
    path: Optional[Path] = None,
    cmap: str | None = None,
    vmin: float | None = None,
    vmax: float | None = None,
    show: bool = True,
    close: bool = True,
) -> None:
    """
    Colour map of T[x, y] with the origin at the lower left.

    Parameters
    ----------
    path:
        If provided, saves the figure to this path (parent dirs created).
    show:
        If True, calls plt.show().
    close:
        If True, closes the figure.
    """
    T = sol.temperature
    nx, ny = T.shape

    fig, ax = plt.subplots()
    im = ax.imshow(
        T.T,
        origin="lower",
        aspect="auto",
        vmin=vmin,
        vmax=vmax,
        cmap=cmap,
        extent=(0.0, float(nx), 0.0, float(ny)),
    )
    fig.colorbar(im, ax=ax, label="T [K]")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    fig.tight_layout()

    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=200)

    if show:
        plt.show()

    if close:
        plt.close(fig)


def plot_convergence(
    frac_history: Sequence[float],
    *,
    tol: float | None = None,
    title: str = "",
    path: Optional[Path] = None,
    show: bool = True,
    close: bool = True,
) -> None:
    """
    Semilog plot of the max fractional change per sweep.
    """
    frac = np.asarray(frac_history, dtype=float)
    sweeps = np.arange(1, frac.size + 1)

    fig, ax = plt.subplots()
    # a uniform plate converges with frac == 0, which log axes can't show
    ax.semilogy(sweeps, np.maximum(frac, 1e-300), lw=1.2)
    if tol is not None:
        ax.axhline(tol, color="k", ls="--", lw=0.8, label=f"tol={tol:.1e}")
        ax.legend()
    ax.set_xlabel("sweep")
    ax.set_ylabel("max fractional change")
    ax.set_title(title)
    fig.tight_layout()

    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=200)

    if show:
        plt.show()

    if close:
        plt.close(fig)
