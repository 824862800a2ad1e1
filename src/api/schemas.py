"""Pydantic schemas for API request/response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Request schemas ----

class CalculateRequest(_CamelModel):
    # Raw values are passed through untouched; src.engine.validation decides
    # what counts as a number so every surface reports the same errors.
    loan_amount: Any = Field(None, description="Loan amount in currency units")
    interest_rate: Any = Field(None, description="Annual rate in percent, e.g. 5.5")
    repayment_period: Any = Field(None, description="Repayment period in years (< 20)")


# ---- Response schemas ----

class LoanResultResponse(_CamelModel):
    monthly_payment: float
    total_interest: float
    total_payment: float


class ValidationErrorDetail(BaseModel):
    message: str
    errors: dict[str, str]
