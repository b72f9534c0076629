"""Salary enhancement calculation engine."""

from pay_enhancement.calculators.engine import SalaryEngine
from pay_enhancement.calculators.enhancement_calculator import EnhancementCalculator
from pay_enhancement.calculators.stage_resolver import StageResolver
from pay_enhancement.calculators.types import (
    CalculatedResult,
    CalculationError,
    CalculationErrorKind,
    SalaryInputs,
    StageResolution,
)

__all__ = [
    "SalaryEngine",
    "EnhancementCalculator",
    "StageResolver",
    "CalculatedResult",
    "CalculationError",
    "CalculationErrorKind",
    "SalaryInputs",
    "StageResolution",
]
