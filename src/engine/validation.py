"""Field validation for raw mortgage calculator input.

Each field is checked on its own and every failure is collected, so a caller
can show all error messages from one submission at once.
"""

import logging
import math
from decimal import Decimal

from src.models.loan import InvalidLoanInput, LoanInput, ValidationError

logger = logging.getLogger(__name__)

# Public field names (as exposed by the API and the form)
LOAN_AMOUNT = "loanAmount"
INTEREST_RATE = "interestRate"
REPAYMENT_PERIOD = "repaymentPeriod"

MAX_REPAYMENT_YEARS = 20

POSITIVE_NUMBER_MESSAGE = "Invalid number, please enter a number greater than 0"
REPAYMENT_PERIOD_MESSAGE = (
    "Invalid number, please enter a number greater than 0 "
    f"and less than {MAX_REPAYMENT_YEARS}"
)


def parse_number(raw) -> float | None:
    """Coerce a raw form value to a finite float, or None if it isn't one.

    Accepts ints, floats, Decimals and numeric strings. Blank strings,
    booleans, NaN and infinities are not numbers here.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    if not isinstance(raw, (str, int, float, Decimal)):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(value):
        return None
    return value


def validate_loan_input(loan_amount, interest_rate, repayment_period) -> LoanInput:
    """Validate the three raw fields and build a LoanInput.

    Raises:
        InvalidLoanInput: carrying one ValidationError per failing field.
    """
    errors: list[ValidationError] = []

    amount = parse_number(loan_amount)
    if amount is None or amount <= 0:
        errors.append(ValidationError(LOAN_AMOUNT, POSITIVE_NUMBER_MESSAGE))

    rate = parse_number(interest_rate)
    if rate is None or rate <= 0:
        errors.append(ValidationError(INTEREST_RATE, POSITIVE_NUMBER_MESSAGE))

    years = parse_number(repayment_period)
    if years is None or not (0 < years < MAX_REPAYMENT_YEARS):
        errors.append(ValidationError(REPAYMENT_PERIOD, REPAYMENT_PERIOD_MESSAGE))

    if errors:
        logger.debug("Rejected loan input: %s", [e.field for e in errors])
        raise InvalidLoanInput(errors)

    return LoanInput(
        loan_amount=amount,
        annual_interest_rate=rate,
        repayment_years=years,
    )
