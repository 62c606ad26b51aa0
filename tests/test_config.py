import numpy as np
import pytest

from hotplate.config import (
    BoundarySpec,
    GridShape,
    PlateConfig,
    cell_scaled_tolerance,
    check_max_iter,
    check_tolerance,
)
from hotplate.errors import InvalidGridShape, InvalidTemperature


def test_grid_shape_accepts_integral_values():
    s = GridShape(nx=3.0, ny=np.int64(5))
    assert (s.nx, s.ny) == (3, 5)
    assert isinstance(s.nx, int)
    assert s.padded == (7, 5)
    assert s.n_cells == 15


@pytest.mark.parametrize("bad", [0, -1, 2.5, float("nan"), float("inf"), True, "4", None])
def test_grid_shape_rejects(bad):
    with pytest.raises(InvalidGridShape):
        GridShape(nx=bad, ny=3)
    with pytest.raises(InvalidGridShape):
        GridShape(nx=3, ny=bad)


@pytest.mark.parametrize("bad", [0.0, -10.0, float("nan"), float("inf"), "300"])
def test_boundary_rejects_non_physical_temperature(bad):
    with pytest.raises(InvalidTemperature, match="left"):
        BoundarySpec(bottom=300.0, top=300.0, left=bad, right=300.0)


def test_boundary_summary_values():
    b = BoundarySpec(bottom=100, top=200, left=300, right=400)
    assert b.as_tuple() == (100.0, 200.0, 300.0, 400.0)
    assert b.mean == 250.0
    assert b.min == 100.0
    assert b.max == 400.0


def test_plate_config_from_args_maps_sides():
    cfg = PlateConfig.from_args(4, 2, 100, 200, 300, 400, 1e-3)
    assert cfg.shape == GridShape(nx=4, ny=2)
    assert cfg.boundary.bottom == 100.0
    assert cfg.boundary.top == 200.0
    assert cfg.boundary.left == 300.0
    assert cfg.boundary.right == 400.0
    assert cfg.max_iter is None


@pytest.mark.parametrize("tol", [0.0, -1e-3, float("nan"), float("inf")])
def test_plate_config_rejects_tolerance(tol):
    with pytest.raises(ValueError):
        PlateConfig.from_args(4, 4, 300, 300, 300, 300, tol)


@pytest.mark.parametrize("max_iter", [0, -3, 2.5, True])
def test_plate_config_rejects_max_iter(max_iter):
    with pytest.raises(ValueError):
        PlateConfig.from_args(4, 4, 300, 300, 300, 300, 1e-3, max_iter=max_iter)


def test_cell_scaled_tolerance():
    assert cell_scaled_tolerance(1.0, GridShape(nx=4, ny=5)) == pytest.approx(0.05)
    with pytest.raises(ValueError):
        cell_scaled_tolerance(0.0, GridShape(nx=4, ny=5))


def test_boundary_mean_of_extreme_temperatures_is_finite():
    b = BoundarySpec(bottom=1.7e308, top=1.7e308, left=1.6e308, right=1.6e308)
    assert np.isfinite(b.mean)
    assert b.mean == pytest.approx(1.65e308)


@pytest.mark.parametrize("tol", [float("nan"), 0.0, -1.0, float("inf"), True, "1e-3"])
def test_check_tolerance_rejects(tol):
    with pytest.raises(ValueError):
        check_tolerance(tol)


def test_check_helpers_normalise():
    assert check_tolerance(1) == 1.0
    assert check_max_iter(None) is None
    assert check_max_iter(5.0) == 5
    with pytest.raises(ValueError):
        check_max_iter(float("inf"))
