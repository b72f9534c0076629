"""Stage detection and enhancement calculation endpoints."""

from fastapi import APIRouter, status

from pay_enhancement.api.dependencies import Engine
from pay_enhancement.api.errors import CalculationFailed
from pay_enhancement.api.schemas import (
    CalculateRequest,
    CalculateResponse,
    ErrorResponse,
    StageResolveRequest,
    StageResolveResponse,
)
from pay_enhancement.calculators import CalculationError

router = APIRouter(tags=["enhancements"])


@router.post(
    "/stages/resolve",
    response_model=StageResolveResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def resolve_stage(
    engine: Engine,
    payload: StageResolveRequest,
) -> StageResolveResponse:
    """Detect the stage for a running basic pay on the current scale."""
    resolution = engine.resolve_stage(payload.grade, payload.current_pay)
    if resolution.error is not None:
        raise CalculationFailed(resolution.error)

    stage = resolution.stage
    return StageResolveResponse(
        grade=payload.grade,
        stage=stage,
        stage_number=stage + 1,
        stage_pay=engine.current.pay_at(payload.grade, stage),
        current_pay=payload.current_pay,
    )


@router.post(
    "/enhancements/calculate",
    response_model=CalculateResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def calculate_enhancement(
    engine: Engine,
    payload: CalculateRequest,
) -> CalculateResponse:
    """Calculate the allowance and increase. Deterministic."""
    outcome = engine.calculate(payload.to_inputs())
    if isinstance(outcome, CalculationError):
        raise CalculationFailed(outcome, promoted=payload.promoted)
    return CalculateResponse.from_result(outcome)
