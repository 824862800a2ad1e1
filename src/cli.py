"""Mortgage calculator CLI — computes locally or via the API and prints a report.

Usage:
    python -m src.cli 300000 6 15
    python -m src.cli 300000 6 15 --json
    python -m src.cli 300000 6 15 --api
    python -m src.cli --api-url http://localhost:8000 300000 6 15
"""

import argparse
import asyncio
import json
import logging
import sys

import httpx

from src.config import settings
from src.engine.submission import submit
from src.logging_setup import configure_logging
from src.models.loan import LoanResult, SubmissionOutcome

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_API_ERROR = 2


class ApiError(Exception):
    """The API could not be reached or answered with an unexpected status."""


# ── Helpers ──────────────────────────────────────────────────────────────────

def _dollar(v) -> str:
    return f"${float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 48}")
    print(f"  {title}")
    print(f"{'=' * 48}")


def print_result(result: LoanResult) -> None:
    _header("Calculation Results")
    print(f"  Monthly Payment:  {_dollar(result.monthly_payment)}")
    print(f"  Total Interest:   {_dollar(result.total_interest)}")
    print(f"  Total Payment:    {_dollar(result.total_payment)}")
    print()


def print_errors(errors: dict[str, str]) -> None:
    for field, message in errors.items():
        print(f"{field}: {message}", file=sys.stderr)


# ── API mode ─────────────────────────────────────────────────────────────────

async def fetch_from_api(
    api_url: str,
    payload: dict,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SubmissionOutcome:
    """POST the raw fields to the calculate endpoint and map the response."""
    url = f"{api_url.rstrip('/')}/api/v1/mortgage/calculate"

    async with httpx.AsyncClient(timeout=settings.api_timeout_seconds, transport=transport) as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.ConnectError as e:
            logger.warning("Could not connect to %s: %s", url, e)
            raise ApiError(
                f"Could not connect to API at {api_url}. "
                "Is the server running? Start with: uvicorn src.api.app:app --reload"
            ) from e
        except httpx.TimeoutException as e:
            logger.warning("Request to %s timed out", url)
            raise ApiError("Request timed out") from e

    if resp.status_code not in (200, 422):
        raise ApiError(f"API returned {resp.status_code}: {resp.text}")

    try:
        data = resp.json()
        if resp.status_code == 422:
            return SubmissionOutcome(errors=dict(data["detail"]["errors"]))
        return SubmissionOutcome(result=LoanResult(
            monthly_payment=data["monthlyPayment"],
            total_interest=data["totalInterest"],
            total_payment=data["totalPayment"],
        ))
    except (ValueError, KeyError, TypeError) as e:
        logger.warning("Unexpected response from %s: %s", url, e)
        raise ApiError(
            f"Unexpected response from API ({resp.status_code}): {resp.text[:200]}"
        ) from e


# ── Entry point ──────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fixed-rate mortgage repayment calculator")
    parser.add_argument("loan_amount", help="Loan amount ($)")
    parser.add_argument("interest_rate", help="Annual interest rate (%), e.g. 5.5")
    parser.add_argument("repayment_period", help="Repayment period in years (less than 20)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--api",
        action="store_true",
        help=f"Calculate via the API at {settings.api_base_url} instead of locally",
    )
    parser.add_argument("--api-url", default=None, help="Calculate via the API at this base URL")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    api_url = args.api_url or (settings.api_base_url if args.api else None)
    if api_url:
        payload = {
            "loanAmount": args.loan_amount,
            "interestRate": args.interest_rate,
            "repaymentPeriod": args.repayment_period,
        }
        try:
            outcome = asyncio.run(fetch_from_api(api_url, payload))
        except ApiError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_API_ERROR
    else:
        outcome = submit(args.loan_amount, args.interest_rate, args.repayment_period)

    if not outcome.ok:
        print_errors(outcome.errors)
        return EXIT_INVALID_INPUT

    if args.json:
        print(json.dumps(outcome.result.as_dict()))
    else:
        print_result(outcome.result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
