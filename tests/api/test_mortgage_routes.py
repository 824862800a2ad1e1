"""API tests for the mortgage calculation endpoint."""

import pytest

from src.engine.validation import POSITIVE_NUMBER_MESSAGE, REPAYMENT_PERIOD_MESSAGE

URL = "/api/v1/mortgage/calculate"


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestCalculateEndpoint:
    def test_valid_request(self, client):
        resp = client.post(URL, json={"loanAmount": 300000, "interestRate": 6, "repaymentPeriod": 15})
        assert resp.status_code == 200
        assert resp.json() == {
            "monthlyPayment": 2531.57,
            "totalInterest": 155682.69,
            "totalPayment": 455682.69,
        }

    def test_snake_case_fields_accepted(self, client):
        resp = client.post(URL, json={"loan_amount": 250000, "interest_rate": 5, "repayment_period": 10})
        assert resp.status_code == 200
        assert resp.json()["monthlyPayment"] == 2651.64

    def test_numeric_strings_accepted(self, client):
        resp = client.post(URL, json={"loanAmount": "300000", "interestRate": "6", "repaymentPeriod": "15"})
        assert resp.status_code == 200
        assert resp.json()["totalPayment"] == 455682.69

    def test_negative_amount(self, client):
        resp = client.post(URL, json={"loanAmount": -100, "interestRate": 5, "repaymentPeriod": 10})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["errors"] == {"loanAmount": POSITIVE_NUMBER_MESSAGE}
        assert "monthlyPayment" not in resp.json()

    def test_period_of_twenty_rejected(self, client):
        resp = client.post(URL, json={"loanAmount": 300000, "interestRate": 6, "repaymentPeriod": 20})
        assert resp.status_code == 422
        assert resp.json()["detail"]["errors"] == {"repaymentPeriod": REPAYMENT_PERIOD_MESSAGE}

    def test_extreme_rates_still_calculate(self, client):
        for rate in (1e-15, 100000):
            resp = client.post(URL, json={"loanAmount": 300000, "interestRate": rate, "repaymentPeriod": 15})
            assert resp.status_code == 200

    def test_huge_principal_still_calculates(self, client):
        resp = client.post(URL, json={"loanAmount": 1e26, "interestRate": 6, "repaymentPeriod": 15})
        assert resp.status_code == 200
        assert resp.json()["totalPayment"] == pytest.approx(1.5189422904872124e26, rel=1e-12)

    def test_empty_body_reports_every_field(self, client):
        resp = client.post(URL, json={})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["message"] == "Invalid loan input"
        assert set(detail["errors"]) == {"loanAmount", "interestRate", "repaymentPeriod"}

    def test_non_numeric_values(self, client):
        resp = client.post(URL, json={"loanAmount": "lots", "interestRate": [5], "repaymentPeriod": None})
        assert resp.status_code == 422
        assert len(resp.json()["detail"]["errors"]) == 3
