from __future__ import annotations

from .config import BoundarySpec


def make_default_cases() -> dict[str, BoundarySpec]:
    """Named edge-temperature presets (Kelvin)."""
    cases = {
        "uniform": BoundarySpec(bottom=300.0, top=300.0, left=300.0, right=300.0),
        "hot_top": BoundarySpec(bottom=273.15, top=373.15, left=273.15, right=273.15),
        "four_sides": BoundarySpec(bottom=100.0, top=200.0, left=300.0, right=400.0),
        "mirror_lr": BoundarySpec(bottom=250.0, top=350.0, left=500.0, right=500.0),
    }
    return cases
