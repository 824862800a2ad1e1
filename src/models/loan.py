from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoanInput:
    loan_amount: float  # Currency units
    annual_interest_rate: float  # Percentage points, e.g. 5.5 for 5.5%
    repayment_years: float  # 0 < years < 20, fractional allowed


@dataclass(frozen=True)
class LoanResult:
    monthly_payment: float
    total_interest: float
    total_payment: float

    def as_dict(self) -> dict[str, float]:
        return {
            "monthlyPayment": self.monthly_payment,
            "totalInterest": self.total_interest,
            "totalPayment": self.total_payment,
        }


@dataclass(frozen=True)
class ValidationError:
    """A single invalid field, keyed by its public (camelCase) name."""
    field: str
    message: str


class InvalidLoanInput(ValueError):
    """Raised when one or more loan fields fail validation.

    All failing fields are reported together, never just the first one.
    """

    def __init__(self, errors: list[ValidationError]):
        self.errors = tuple(errors)
        super().__init__(
            "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        )

    def as_dict(self) -> dict[str, str]:
        return {e.field: e.message for e in self.errors}


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of one form submission: either a result or field errors."""
    result: LoanResult | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.result is not None
