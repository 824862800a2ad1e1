"""One form submission: validate, then calculate only if every field passed."""

from src.engine.mortgage import calculate_loan
from src.engine.validation import validate_loan_input
from src.models.loan import InvalidLoanInput, SubmissionOutcome


def submit(loan_amount, interest_rate, repayment_period) -> SubmissionOutcome:
    try:
        loan = validate_loan_input(loan_amount, interest_rate, repayment_period)
    except InvalidLoanInput as e:
        return SubmissionOutcome(errors=e.as_dict())
    return SubmissionOutcome(result=calculate_loan(loan))
