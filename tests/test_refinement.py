import numpy as np
import pytest

from hotplate.cases import make_default_cases
from hotplate.config import GridShape, PlateConfig
from hotplate.refinement import l2_norm, l2_rel_error, refine_shape, restrict_block_mean, solve_grid_refine


def test_refine_shape():
    assert refine_shape(GridShape(nx=3, ny=2), r=2) == GridShape(nx=6, ny=4)
    with pytest.raises(ValueError):
        refine_shape(GridShape(nx=3, ny=2), r=1)


def test_restrict_block_mean():
    T = np.arange(16, dtype=float).reshape(4, 4)
    Tc = restrict_block_mean(T, r=2)
    assert Tc.shape == (2, 2)
    assert Tc[0, 0] == np.mean([0.0, 1.0, 4.0, 5.0])
    assert Tc[1, 1] == np.mean([10.0, 11.0, 14.0, 15.0])
    with pytest.raises(ValueError):
        restrict_block_mean(np.ones((3, 4)), r=2)


def test_l2_helpers():
    assert l2_norm(np.full((3, 5), 2.0)) == pytest.approx(2.0)
    assert l2_rel_error(np.full((2, 2), 3.0), np.full((2, 2), 2.0)) == pytest.approx(0.5)


def test_solve_grid_refine_four_sides():
    cfg = PlateConfig(
        shape=GridShape(nx=4, ny=4),
        boundary=make_default_cases()["four_sides"],
        tol=1e-2,
    )
    out = solve_grid_refine(cfg, refine_factor=2)
    m = out["metrics"]

    assert out["cfg_fine"].shape == GridShape(nx=8, ny=8)
    assert out["T_fine"].shape == (8, 8)
    assert out["T_fine_restricted"].shape == (4, 4)
    assert m["tol_fine"] == pytest.approx(m["tol_coarse"] / 4.0)
    assert m["iterations_fine"] > m["iterations_coarse"]
    assert 0.0 < m["rel_l2_error"] < 0.1


def test_solve_grid_refine_uniform_plate_is_exact():
    cfg = PlateConfig(
        shape=GridShape(nx=3, ny=2),
        boundary=make_default_cases()["uniform"],
        tol=1e-3,
    )
    out = solve_grid_refine(cfg, refine_factor=3, return_fields=False)
    assert out["metrics"]["rel_l2_error"] == 0.0
    assert "T_fine" not in out
