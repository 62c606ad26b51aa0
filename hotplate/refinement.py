from __future__ import annotations

from typing import Any, Dict

import numpy as np

from .config import GridShape, PlateConfig, cell_scaled_tolerance
from .relax import solve


def refine_shape(shape: GridShape, r: int = 2) -> GridShape:
    """
    Refine the plate by integer factor r: every cell becomes an r x r block.
    """
    if not isinstance(r, int) or r < 2:
        raise ValueError("refine_shape: r must be an integer >= 2")
    return GridShape(nx=shape.nx * r, ny=shape.ny * r)


def restrict_block_mean(T_fine: np.ndarray, r: int = 2) -> np.ndarray:
    """
    Cell-centred restriction: each coarse cell is the mean of its r x r fine block.

    T_fine is a caller-space (nx_f, ny_f) array with nx_f, ny_f divisible by r.
    """
    if T_fine.ndim != 2:
        raise ValueError("T_fine must be 2D (nx, ny)")
    nx_f, ny_f = T_fine.shape
    if nx_f % r or ny_f % r:
        raise ValueError(f"restrict_block_mean: shape {T_fine.shape} not divisible by r={r}")
    return T_fine.reshape(nx_f // r, r, ny_f // r, r).mean(axis=(1, 3))


def l2_norm(T: np.ndarray) -> float:
    """
    Cell-weighted discrete L2 norm on the unit plate:
        ||T||_2 = sqrt( sum T_xy^2 / (nx * ny) )
    """
    return float(np.sqrt(np.mean(np.abs(T) ** 2)))


def l2_rel_error(u: np.ndarray, v: np.ndarray, eps: float = 1e-30) -> float:
    """Relative L2 error: ||u - v|| / (||v|| + eps)."""
    return l2_norm(u - v) / (l2_norm(v) + eps)


def solve_grid_refine(
    cfg: PlateConfig,
    refine_factor: int = 2,
    scale_tolerance: bool = True,
    return_fields: bool = True,
) -> Dict[str, Any]:
    """
    Solve the plate on cfg.shape and on a grid refined by refine_factor,
    restrict the fine solution back onto the coarse cells and compare.

    With scale_tolerance, both solves use tol / (nx * ny) of their own grid,
    so the finer grid gets the tighter per-cell bound it needs.

    Returns:
      {
        "metrics": {...},
        "cfg_fine": PlateConfig,
        (optional) "T_coarse", "T_fine", "T_fine_restricted"
      }
    """
    r = int(refine_factor)
    if r < 2:
        raise ValueError("solve_grid_refine: refine_factor must be >= 2")

    shape_f = refine_shape(cfg.shape, r=r)

    if scale_tolerance:
        tol_c = cell_scaled_tolerance(cfg.tol, cfg.shape)
        tol_f = cell_scaled_tolerance(cfg.tol, shape_f)
    else:
        tol_c = tol_f = cfg.tol

    cfg_c = PlateConfig(shape=cfg.shape, boundary=cfg.boundary, tol=tol_c, max_iter=cfg.max_iter)
    cfg_f = PlateConfig(shape=shape_f, boundary=cfg.boundary, tol=tol_f, max_iter=cfg.max_iter)

    # --- Coarse solve
    sol_c = solve(cfg_c)

    # --- Fine solve
    sol_f = solve(cfg_f)

    # --- Restrict fine solution back to coarse cells
    T_f_to_c = restrict_block_mean(sol_f.temperature, r=r)

    metrics = {
        "refine_factor": r,
        "tol_coarse": tol_c,
        "tol_fine": tol_f,
        "iterations_coarse": sol_c.iterations,
        "iterations_fine": sol_f.iterations,
        "rel_l2_error": float(l2_rel_error(sol_c.temperature, T_f_to_c)),
        "l2_T_coarse": float(l2_norm(sol_c.temperature)),
        "l2_T_fine_restricted": float(l2_norm(T_f_to_c)),
    }

    out: Dict[str, Any] = {"metrics": metrics, "cfg_fine": cfg_f}
    if return_fields:
        out.update(
            dict(
                T_coarse=sol_c.temperature,
                T_fine=sol_f.temperature,
                T_fine_restricted=T_f_to_c,
            )
        )
    return out
