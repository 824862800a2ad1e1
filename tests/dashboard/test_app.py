"""Tests for the dashboard submit callback (no browser required)."""

from dash import no_update

from src.dashboard.app import handle_submit
from src.engine.validation import POSITIVE_NUMBER_MESSAGE, REPAYMENT_PERIOD_MESSAGE


def _text(component) -> str:
    """Flatten a Dash component tree into its text content."""
    if component is None:
        return ""
    if isinstance(component, str):
        return component
    if isinstance(component, (list, tuple)):
        return "".join(_text(c) for c in component)
    return _text(getattr(component, "children", None))


class TestHandleSubmit:
    def test_no_clicks_is_noop(self):
        assert all(v is no_update for v in handle_submit(0, 300000, 6, 15))

    def test_valid_submission_renders_and_resets(self):
        results, amount_err, rate_err, period_err, *values = handle_submit(1, 300000, 6, 15)
        text = _text(results)
        assert "Calculation Results" in text
        assert "$2,531.57" in text
        assert "$155,682.69" in text
        assert "$455,682.69" in text
        assert (amount_err, rate_err, period_err) == ("", "", "")
        assert values == [None, None, None]

    def test_invalid_submission_keeps_previous_result(self):
        results, amount_err, rate_err, period_err, *values = handle_submit(2, -100, 5, 10)
        assert results is no_update
        assert amount_err == POSITIVE_NUMBER_MESSAGE
        assert rate_err == ""
        assert period_err == ""
        assert all(v is no_update for v in values)

    def test_empty_form_flags_all_fields(self):
        _, amount_err, rate_err, period_err, *_ = handle_submit(1, None, None, None)
        assert amount_err == POSITIVE_NUMBER_MESSAGE
        assert rate_err == POSITIVE_NUMBER_MESSAGE
        assert period_err == REPAYMENT_PERIOD_MESSAGE
