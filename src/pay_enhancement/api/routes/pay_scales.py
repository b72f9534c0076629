"""Pay scale reference endpoints."""

from typing import Annotated, Literal

from fastapi import APIRouter, HTTPException, Path, status

from pay_enhancement.api.dependencies import Engine
from pay_enhancement.api.schemas import ErrorResponse, GradeScaleResponse, PayScaleSummary
from pay_enhancement.pay_scales import GRADE_OPTIONS

router = APIRouter(prefix="/pay-scales", tags=["pay-scales"])


@router.get("", response_model=PayScaleSummary)
async def list_pay_scales(engine: Engine) -> PayScaleSummary:
    """List selectable grades and the grades present in each period."""
    return PayScaleSummary(
        grade_options=list(GRADE_OPTIONS),
        historical_grades=engine.historical.grades,
        current_grades=engine.current.grades,
    )


@router.get(
    "/{period}/{grade}",
    response_model=GradeScaleResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_grade_scale(
    engine: Engine,
    period: Annotated[Literal["historical", "current"], Path()],
    grade: Annotated[int, Path()],
) -> GradeScaleResponse:
    """Get the stage sequence of one grade."""
    table = engine.historical if period == "historical" else engine.current
    stages = table.lookup(grade)
    if stages is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"BPS-{grade} not found in {table.name}",
        )
    return GradeScaleResponse(
        period=period,
        table=table.name,
        grade=grade,
        stages=list(stages),
    )
