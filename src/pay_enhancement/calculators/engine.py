"""Salary enhancement engine - main orchestrator."""

from __future__ import annotations

import logging

from pay_enhancement.calculators.enhancement_calculator import EnhancementCalculator
from pay_enhancement.calculators.stage_resolver import StageResolver
from pay_enhancement.calculators.types import (
    CalculatedResult,
    CalculationError,
    CalculationErrorKind,
    SalaryInputs,
    StageResolution,
)
from pay_enhancement.pay_scales import PayScaleTable, current_table, historical_table

logger = logging.getLogger(__name__)


class SalaryEngine:
    """Estimates the salary enhancement for one employee.

    Non-promoted employees (same grade since the reference date):
    1) Detect the stage from current pay on the current scale
    2) Read the historical pay at that stage for the same grade
    3) Compute allowance on the historical pay, increase on current pay

    Promoted employees:
    1) Require positive pre-promotion and current pay
    2) Check the pre-promotion grade exists on the historical scale
    3) Use the supplied pre-promotion pay as the allowance base
    4) Compute allowance and increase

    Every failure is returned as a CalculationError; no partial results.
    """

    def __init__(
        self,
        historical: PayScaleTable | None = None,
        current: PayScaleTable | None = None,
    ):
        self.historical = historical if historical is not None else historical_table()
        self.current = current if current is not None else current_table()
        self.stage_resolver = StageResolver()
        self.calculator = EnhancementCalculator()

    def resolve_stage(self, grade: int, current_pay: int) -> StageResolution:
        """Detect the stage for a grade and pay on the current scale."""
        return self.stage_resolver.resolve(self.current, grade, current_pay)

    def calculate(self, inputs: SalaryInputs) -> CalculatedResult | CalculationError:
        """Calculate the enhancement for one set of inputs."""
        if inputs.promoted:
            outcome = self._calculate_promoted(inputs)
        else:
            outcome = self._calculate_same_grade(inputs)

        if isinstance(outcome, CalculationError):
            logger.debug(
                "Calculation failed for BPS-%s (promoted=%s): %s",
                inputs.grade,
                inputs.promoted,
                outcome.message,
            )
        else:
            logger.debug(
                "Calculated BPS-%s (promoted=%s): baseline=%s total=%s",
                inputs.grade,
                inputs.promoted,
                outcome.baseline_pay,
                outcome.total,
            )
        return outcome

    def _calculate_promoted(
        self, inputs: SalaryInputs
    ) -> CalculatedResult | CalculationError:
        if inputs.pre_promotion_baseline_pay <= 0 or inputs.current_pay <= 0:
            return self._non_positive_pay(inputs.grade)

        # Presence check only; the supplied baseline is used verbatim
        if self.historical.lookup(inputs.pre_promotion_grade) is None:
            return CalculationError(
                kind=CalculationErrorKind.INVALID_PRE_PROMOTION_GRADE,
                message=(
                    f"invalid pre-promotion grade: BPS-{inputs.pre_promotion_grade} "
                    f"is not in {self.historical.name}"
                ),
                grade=inputs.pre_promotion_grade,
            )

        return self._compute(
            inputs.pre_promotion_baseline_pay, inputs.current_pay, inputs.grade
        )

    def _calculate_same_grade(
        self, inputs: SalaryInputs
    ) -> CalculatedResult | CalculationError:
        resolution = self.resolve_stage(inputs.grade, inputs.current_pay)
        if resolution.error is not None:
            return resolution.error
        stage = resolution.stage

        baseline_pay = self.historical.pay_at(inputs.grade, stage)
        if baseline_pay is None:
            return CalculationError(
                kind=CalculationErrorKind.HISTORICAL_LOOKUP_OUT_OF_RANGE,
                message=(
                    f"invalid grade or stage for historical lookup: BPS-{inputs.grade} "
                    f"stage {stage} is not in {self.historical.name}"
                ),
                grade=inputs.grade,
                stage=stage,
            )

        return self._compute(baseline_pay, inputs.current_pay, inputs.grade)

    def _compute(
        self, baseline_pay: int, current_pay: int, grade: int
    ) -> CalculatedResult | CalculationError:
        result = self.calculator.compute(baseline_pay, current_pay)
        if result is None:
            return self._non_positive_pay(grade)
        return result

    @staticmethod
    def _non_positive_pay(grade: int) -> CalculationError:
        return CalculationError(
            kind=CalculationErrorKind.NON_POSITIVE_PAY,
            message="missing/invalid pay values: all pay amounts must be positive",
            grade=grade,
        )
