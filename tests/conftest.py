"""Canonical test fixtures shared across engine, API and CLI tests.

Fixture: $300K loan, 6% annual rate, 15 years (r = 0.005, n = 180).
"""

import pytest
from fastapi.testclient import TestClient

from src.api.app import app
from src.models.loan import LoanInput


@pytest.fixture
def canonical_loan() -> LoanInput:
    """$300K over 15 years at 6%."""
    return LoanInput(
        loan_amount=300000.0,
        annual_interest_rate=6.0,
        repayment_years=15.0,
    )


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client."""
    return TestClient(app)
