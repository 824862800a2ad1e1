"""Fixed-payment mortgage computation.

Pure functions: float in, dataclass out. No I/O.
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from src.models.loan import LoanInput, LoanResult

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

# Enough digits to quantize the largest finite double to cents
ROUNDING_PRECISION = 400


def round_currency(value: float) -> float:
    """Round to cents, half away from zero on the shortest decimal form.

    Non-finite values pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        ctx.prec = ROUNDING_PRECISION
        return float(Decimal(str(value)).quantize(TWO_PLACES, ROUND_HALF_UP))


def monthly_payment(principal: float, annual_rate_pct: float, term_years: float) -> float:
    """Unrounded fixed monthly payment.

    Args:
        principal: Loan amount
        annual_rate_pct: Annual rate in percentage points (e.g. 6 for 6%)
        term_years: Repayment period, may be fractional
    """
    r = annual_rate_pct / 100 / 12
    n = term_years * 12
    # M = P * [r(1+r)^n] / [(1+r)^n - 1] = P * r / [1 - (1+r)^-n]
    # expm1/log1p keep this finite for tiny and huge r
    exponent = n * math.log1p(r)
    if exponent == 0:
        # Rate (or term) too small to register: the zero-interest limit
        return principal / n
    return principal * r / -math.expm1(-exponent)


def calculate(
    loan_amount: float,
    annual_interest_rate: float,
    repayment_years: float,
) -> LoanResult:
    """Monthly payment, total interest and total payment, rounded to cents.

    Never raises for validated input. Results too large for a double come
    back as inf rather than an error.
    """
    n = repayment_years * 12
    pmt = monthly_payment(loan_amount, annual_interest_rate, repayment_years)
    total_payment = round_currency(pmt * n)
    total_interest = round_currency(total_payment - loan_amount)

    result = LoanResult(
        monthly_payment=round_currency(pmt),
        total_interest=total_interest,
        total_payment=total_payment,
    )
    logger.debug(
        "Calculated %.2f over %s years at %s%%: %s",
        loan_amount, repayment_years, annual_interest_rate, result,
    )
    return result


def calculate_loan(loan: LoanInput) -> LoanResult:
    return calculate(loan.loan_amount, loan.annual_interest_rate, loan.repayment_years)
