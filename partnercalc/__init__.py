"""Partnership profit calculation utilities.

This module also exposes the package version for runtime display."""

from partnercalc.calculators import compute, profit_schedule, rate_difference
from partnercalc.models import CalculatorInputs, ProfitBreakdown

__all__ = [
    "__version__",
    "CalculatorInputs",
    "ProfitBreakdown",
    "compute",
    "profit_schedule",
    "rate_difference",
]

# Keep in sync with the version declared in ``pyproject.toml``
__version__ = "0.1.0"
