"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from pay_enhancement.calculators import CalculatedResult, SalaryInputs


# ============================================================================
# Pay scale schemas
# ============================================================================


class PayScaleSummary(BaseModel):
    """Grades available for input and in each period."""

    grade_options: list[int]
    historical_grades: list[int]
    current_grades: list[int]


class GradeScaleResponse(BaseModel):
    """Stage sequence of one grade in one period."""

    period: Literal["historical", "current"]
    table: str
    grade: int
    stages: list[int]


# ============================================================================
# Stage resolution schemas
# ============================================================================


class StageResolveRequest(BaseModel):
    """Schema for detecting a stage from running basic pay."""

    grade: int = Field(ge=0)
    current_pay: int = Field(ge=0)


class StageResolveResponse(BaseModel):
    """Detected stage."""

    grade: int
    stage: int  # 0-based index into the scale
    stage_number: int  # 1-based, as printed on pay slips
    stage_pay: int
    current_pay: int


# ============================================================================
# Calculation schemas
# ============================================================================


class CalculateRequest(BaseModel):
    """Schema for an enhancement calculation."""

    grade: int = Field(ge=0)
    current_pay: int = Field(ge=0)
    promoted: bool = False
    pre_promotion_grade: int = Field(default=0, ge=0)
    pre_promotion_baseline_pay: int = Field(default=0, ge=0)

    def to_inputs(self) -> SalaryInputs:
        return SalaryInputs(
            grade=self.grade,
            current_pay=self.current_pay,
            promoted=self.promoted,
            pre_promotion_grade=self.pre_promotion_grade,
            pre_promotion_baseline_pay=self.pre_promotion_baseline_pay,
        )


class CalculateResponse(BaseModel):
    """Calculated enhancement amounts."""

    baseline_pay: Decimal
    allowance: Decimal
    increase: Decimal
    total: Decimal
    current_pay: Decimal

    @classmethod
    def from_result(cls, result: CalculatedResult) -> "CalculateResponse":
        return cls(
            baseline_pay=result.baseline_pay,
            allowance=result.allowance,
            increase=result.increase,
            total=result.total,
            current_pay=result.current_pay,
        )


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str
    code: str | None = None
    grade: int | None = None
    minimum_pay: int | None = None
    stage: int | None = None
