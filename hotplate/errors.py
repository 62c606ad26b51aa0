"""
Error kinds raised by the plate solver.

Validation errors derive from ValueError, runtime failures of the relaxation
derive from RuntimeError.
"""

from __future__ import annotations


class InvalidTemperature(ValueError):
    """A boundary temperature is not a finite value above absolute zero."""


class InvalidGridShape(ValueError):
    """nx or ny is not a positive integer."""


class NumericalInstability(RuntimeError):
    """The relaxation produced a non-finite or non-positive state."""


class NotConverged(RuntimeError):
    """The optional iteration guard was exceeded before the tolerance was met."""

    def __init__(self, iterations: int, frac: float, tol: float) -> None:
        super().__init__(
            f"relaxation did not converge in {iterations} sweeps "
            f"(max fractional change {frac:.3e} > tol {tol:.3e})"
        )
        self.iterations = iterations
        self.frac = frac
        self.tol = tol
