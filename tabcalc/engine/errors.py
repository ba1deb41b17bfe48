"""
Exception types and input checks shared by the calculation modules.

Two conventions coexist:
  - Throwing: psychrometrics, mixing, fan affinity, filter and duct calcs
    raise InvalidInputError naming the offending argument.
  - Sentinel: Pitot and air-change relations return NaN instead of raising.
"""

import math


class InvalidInputError(ValueError):
    """An argument is non-finite or violates a range constraint."""


class ConvergenceError(ArithmeticError):
    """An iterative solver could not enclose or reach a root."""


def check_finite(value: float, name: str) -> None:
    """Raise InvalidInputError unless value is a finite number."""
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be a finite number")
