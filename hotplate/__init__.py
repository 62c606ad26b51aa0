"""
Steady-state temperature of a flat plate with fixed edge temperatures,
by Jacobi relaxation of the 2-D Laplace equation.

Modules:
- config: grid shape, boundary temperatures, solve configuration
- grid: padded grid construction and grid <-> caller orientation
- relax: relaxation engine and solve entry points
- refinement: grid refinement study
- diagnostics: output files, plots, residual checks
"""

from .config import BoundarySpec, GridShape, PlateConfig, cell_scaled_tolerance
from .errors import InvalidGridShape, InvalidTemperature, NotConverged, NumericalInstability
from .relax import PlateSolution, hot_plate, relax, solve

__all__ = [
    # config
    "GridShape",
    "BoundarySpec",
    "PlateConfig",
    "cell_scaled_tolerance",
    # errors
    "InvalidTemperature",
    "InvalidGridShape",
    "NumericalInstability",
    "NotConverged",
    # solve
    "PlateSolution",
    "relax",
    "solve",
    "hot_plate",
]
