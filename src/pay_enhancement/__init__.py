"""Government pay enhancement estimator (DRA + ad-hoc increase)."""

from pay_enhancement.calculators import (
    CalculatedResult,
    CalculationError,
    CalculationErrorKind,
    SalaryEngine,
    SalaryInputs,
)

__version__ = "0.1.0"

__all__ = [
    "CalculatedResult",
    "CalculationError",
    "CalculationErrorKind",
    "SalaryEngine",
    "SalaryInputs",
]
