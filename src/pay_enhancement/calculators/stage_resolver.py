"""Seniority stage detection from a declared basic pay."""

from __future__ import annotations

import logging

from pay_enhancement.calculators.types import (
    CalculationError,
    CalculationErrorKind,
    StageResolution,
)
from pay_enhancement.pay_scales import PayScaleTable

logger = logging.getLogger(__name__)


class StageResolver:
    """Maps a declared running basic pay to a stage on a pay scale.

    Matching is a floor match: the highest stage whose tabulated pay is
    at or below the declared pay wins. Pay between two stages (e.g. from
    increments the table does not model) resolves to the lower stage;
    pay equal to a stage resolves to that stage. Pay below the grade
    minimum is rejected.
    """

    @staticmethod
    def resolve(table: PayScaleTable, grade: int, current_pay: int) -> StageResolution:
        """Resolve the stage for a grade and current pay.

        Args:
            table: The current-period pay scale
            grade: Declared grade
            current_pay: Declared running basic pay

        Returns:
            StageResolution with either ``stage`` or ``error`` set
        """
        if current_pay <= 0:
            return StageResolution(
                error=CalculationError(
                    kind=CalculationErrorKind.NON_POSITIVE_PAY,
                    message="invalid input: current pay must be positive",
                    grade=grade,
                )
            )
        if grade <= 0:
            return StageResolution(
                error=CalculationError(
                    kind=CalculationErrorKind.INVALID_GRADE,
                    message="invalid input: grade must be positive",
                    grade=grade,
                )
            )

        stages = table.lookup(grade)
        if stages is None:
            return StageResolution(
                error=CalculationError(
                    kind=CalculationErrorKind.INVALID_GRADE,
                    message=f"invalid grade: BPS-{grade} is not in {table.name}",
                    grade=grade,
                )
            )

        if stages and current_pay < stages[0]:
            return StageResolution(
                error=CalculationError(
                    kind=CalculationErrorKind.PAY_BELOW_MINIMUM,
                    message=(
                        f"pay below minimum for grade: BPS-{grade} starts at {stages[0]}"
                    ),
                    grade=grade,
                    minimum_pay=stages[0],
                )
            )

        for stage in range(len(stages) - 1, -1, -1):
            if stages[stage] <= current_pay:
                return StageResolution(stage=stage)

        # Only reachable when the grade has no stages at all
        logger.error(
            "No stage found for BPS-%s pay %s in %s; reference data is inconsistent",
            grade,
            current_pay,
            table.name,
        )
        return StageResolution(
            error=CalculationError(
                kind=CalculationErrorKind.STAGE_UNRESOLVABLE,
                message=f"could not determine a stage for BPS-{grade} pay {current_pay}",
                grade=grade,
            )
        )
