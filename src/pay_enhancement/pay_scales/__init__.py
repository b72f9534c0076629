"""Pay scale reference tables."""

from pay_enhancement.pay_scales.reference import (
    GRADE_OPTIONS,
    PAY_SCALE_2017,
    PAY_SCALE_2022,
    build_table,
    current_table,
    historical_table,
)
from pay_enhancement.pay_scales.table import PayScaleTable

__all__ = [
    "GRADE_OPTIONS",
    "PAY_SCALE_2017",
    "PAY_SCALE_2022",
    "PayScaleTable",
    "build_table",
    "current_table",
    "historical_table",
]
