from __future__ import annotations
from pathlib import Path

from tqdm import tqdm

from hotplate.config import GridShape, PlateConfig, cell_scaled_tolerance
from hotplate.cases import make_default_cases
from hotplate.relax import solve
from hotplate.diagnostics import (
    save_solution,
    plot_field,
    plot_convergence,
    laplacian_residual,
    maximum_principle_gap,
)


def run_case(cfg: PlateConfig, name: str, outdir: Path) -> dict[str, float]:
    outdir.mkdir(parents=True, exist_ok=True)

    sol = solve(cfg)

    metrics = {
        "iterations": float(sol.iterations),
        "frac": float(sol.frac),
        "laplacian_residual": laplacian_residual(sol),
        "max_principle_gap": maximum_principle_gap(sol),
    }

    save_solution(outdir / "fields" / "solution.npz", sol)
    plot_field(sol, title=f"{name} T [K]", path=outdir / "figs" / "T.png", show=False)
    plot_convergence(sol.frac_history, tol=cfg.tol, title=name,
                     path=outdir / "figs" / "convergence.png", show=False)
    return metrics


def main() -> None:
    base_out = Path("outputs")
    cases = make_default_cases()

    shape = GridShape(nx=40, ny=30)
    tol = cell_scaled_tolerance(1.0, shape)

    for name, boundary in tqdm(cases.items(), desc="cases"):
        cfg = PlateConfig(shape=shape, boundary=boundary, tol=tol, max_iter=200_000)
        outdir = base_out / f"case_{name}" / f"grid_{shape.nx}x{shape.ny}"
        metrics = run_case(cfg, name, outdir)
        tqdm.write(f"{name} {metrics}")


if __name__ == "__main__":
    main()
