"""Allowance and increase amounts."""

from __future__ import annotations

from decimal import Decimal

from pay_enhancement.calculators.types import CalculatedResult

# Disparity Reduction Allowance on the 30.06.2022 basic pay
ALLOWANCE_RATE = Decimal("0.30")
# Ad-hoc increase on the running basic pay
INCREASE_RATE = Decimal("0.10")


class EnhancementCalculator:
    """Computes the two-tier enhancement.

    - allowance = baseline pay * 30%
    - increase = current pay * 10%
    - total = allowance + increase

    Amounts are not rounded; presentation decides how to display them.
    """

    @staticmethod
    def compute(baseline_pay: int | Decimal, current_pay: int | Decimal) -> CalculatedResult | None:
        """Return the result, or None unless both pays are positive."""
        baseline = Decimal(baseline_pay)
        current = Decimal(current_pay)
        if baseline <= 0 or current <= 0:
            return None

        allowance = baseline * ALLOWANCE_RATE
        increase = current * INCREASE_RATE
        return CalculatedResult(
            baseline_pay=baseline,
            allowance=allowance,
            increase=increase,
            total=allowance + increase,
            current_pay=current,
        )
