"""User-facing translation of calculation errors."""

from decimal import ROUND_HALF_UP, Decimal

from pay_enhancement.calculators import CalculationError, CalculationErrorKind
from pay_enhancement.config import get_settings


def format_currency(amount: int | Decimal, currency_code: str | None = None) -> str:
    """Render an amount in whole currency units, e.g. ``PKR 27,270``."""
    code = currency_code or get_settings().currency_code
    whole = Decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{code} {whole:,}"


def describe_error(error: CalculationError, promoted: bool = False) -> str:
    """Translate a calculation error into a message for the user."""
    kind = error.kind
    if kind == CalculationErrorKind.INVALID_GRADE:
        return "Invalid BPS selected."
    if kind == CalculationErrorKind.PAY_BELOW_MINIMUM:
        return (
            f"Basic pay for BPS-{error.grade} must be at least "
            f"{format_currency(error.minimum_pay or 0)}."
        )
    if kind == CalculationErrorKind.STAGE_UNRESOLVABLE:
        return "Could not determine a stage for the entered basic pay."
    if kind == CalculationErrorKind.INVALID_PRE_PROMOTION_GRADE:
        return "Invalid BPS selected for the pre-promotion scale."
    if kind == CalculationErrorKind.NON_POSITIVE_PAY and promoted:
        return (
            "For promoted cases, please enter positive, non-zero values "
            "for all pay fields."
        )
    if kind == CalculationErrorKind.NON_POSITIVE_PAY:
        return (
            "Could not calculate. The entered basic pay does not correspond "
            "to a valid stage."
        )
    return (
        "Could not calculate. Please verify all your inputs are correct "
        "and positive values."
    )


class CalculationFailed(Exception):
    """Raised by route handlers when the engine returns a CalculationError."""

    def __init__(self, error: CalculationError, promoted: bool = False):
        self.error = error
        self.promoted = promoted
        super().__init__(describe_error(error, promoted))

    def to_response_content(self) -> dict:
        return {
            "detail": str(self),
            "code": self.error.kind.value,
            "grade": self.error.grade,
            "minimum_pay": self.error.minimum_pay,
            "stage": self.error.stage,
        }
