"""Type definitions for the enhancement calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class CalculationErrorKind(str, Enum):
    """Calculation failure kinds. All are user-correctable input errors."""

    INVALID_GRADE = "INVALID_GRADE"
    PAY_BELOW_MINIMUM = "PAY_BELOW_MINIMUM"
    STAGE_UNRESOLVABLE = "STAGE_UNRESOLVABLE"
    INVALID_PRE_PROMOTION_GRADE = "INVALID_PRE_PROMOTION_GRADE"
    NON_POSITIVE_PAY = "NON_POSITIVE_PAY"
    HISTORICAL_LOOKUP_OUT_OF_RANGE = "HISTORICAL_LOOKUP_OUT_OF_RANGE"


@dataclass(frozen=True)
class SalaryInputs:
    """One calculation request.

    ``pre_promotion_grade`` and ``pre_promotion_baseline_pay`` are only
    read when ``promoted`` is True. A pay of 0 means "not entered".
    """

    grade: int
    current_pay: int
    promoted: bool = False
    pre_promotion_grade: int = 0
    pre_promotion_baseline_pay: int = 0


@dataclass(frozen=True)
class CalculationError:
    """A typed calculation failure with enough detail to build a message."""

    kind: CalculationErrorKind
    message: str
    grade: int | None = None
    minimum_pay: int | None = None
    stage: int | None = None

    @property
    def success(self) -> bool:
        return False


@dataclass(frozen=True)
class StageResolution:
    """Resolved 0-based stage, or the reason none could be resolved."""

    stage: int | None = None
    error: CalculationError | None = None

    @property
    def resolved(self) -> bool:
        return self.stage is not None


@dataclass(frozen=True)
class CalculatedResult:
    """Amounts produced by one successful calculation."""

    baseline_pay: Decimal  # Historical pay the allowance is computed on
    allowance: Decimal
    increase: Decimal
    total: Decimal
    current_pay: Decimal  # Echoed back; base of the increase

    @property
    def success(self) -> bool:
        return True
