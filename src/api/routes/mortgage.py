"""Mortgage calculation routes."""

from fastapi import APIRouter, HTTPException

from src.api.schemas import CalculateRequest, LoanResultResponse, ValidationErrorDetail
from src.engine.submission import submit

router = APIRouter(prefix="/api/v1/mortgage", tags=["mortgage"])


@router.post(
    "/calculate",
    response_model=LoanResultResponse,
    responses={422: {"model": ValidationErrorDetail}},
)
async def calculate_mortgage(req: CalculateRequest):
    """Validate the three loan fields and return the repayment figures.

    Invalid input produces a 422 with one message per failing field and no result.
    """
    outcome = submit(req.loan_amount, req.interest_rate, req.repayment_period)
    if not outcome.ok:
        raise HTTPException(
            status_code=422,
            detail=ValidationErrorDetail(
                message="Invalid loan input", errors=outcome.errors
            ).model_dump(),
        )

    result = outcome.result
    return LoanResultResponse(
        monthly_payment=result.monthly_payment,
        total_interest=result.total_interest,
        total_payment=result.total_payment,
    )
