"""Plotly Dash application — single-page mortgage calculator form."""

import sys
from pathlib import Path

# Ensure project root is on sys.path so `src.*` imports work
# even when Dash's reloader spawns a child process.
_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from dash import Dash, html, dcc, callback, Input, Output, State, no_update

from src.config import settings
from src.engine.submission import submit
from src.engine.validation import LOAN_AMOUNT, INTEREST_RATE, REPAYMENT_PERIOD
from src.logging_setup import configure_logging
from src.models.loan import LoanResult

FIELD_STYLE = {
    "width": "100%",
    "padding": "1rem 0.65rem",
    "fontSize": "0.9rem",
    "borderRadius": "8px",
    "border": "none",
    "backgroundColor": "#e2e8f0",
    "boxSizing": "border-box",
}

BTN_STYLE = {
    "width": "100%",
    "padding": "1.25rem",
    "fontSize": "0.9rem",
    "fontWeight": "500",
    "backgroundColor": "#94a3b8",
    "color": "white",
    "border": "none",
    "borderRadius": "9999px",
    "cursor": "pointer",
}

ERROR_STYLE = {"color": "#e94560", "fontSize": "0.8rem", "minHeight": "1rem", "marginTop": "0.25rem"}

# Input component id -> public field name reported by the validator
FIELD_IDS = {
    "loan-amount": LOAN_AMOUNT,
    "interest-rate": INTEREST_RATE,
    "repayment-period": REPAYMENT_PERIOD,
}


def _field(component_id, placeholder):
    return html.Div([
        dcc.Input(id=component_id, type="number", placeholder=placeholder, style=FIELD_STYLE),
        html.Div(id=f"{component_id}-error", style=ERROR_STYLE),
    ])


def render_result(result: LoanResult):
    """The 'Calculation Results' card."""
    return html.Div([
        html.H2("Calculation Results", style={"fontSize": "1.1rem", "fontWeight": "bold", "marginBottom": "1rem"}),
        html.P([html.Strong("Monthly Payment:"), f" ${result.monthly_payment:,.2f}"]),
        html.P([html.Strong("Total Interest:"), f" ${result.total_interest:,.2f}"]),
        html.P([html.Strong("Total Payment:"), f" ${result.total_payment:,.2f}"]),
    ], style={
        "marginTop": "2rem",
        "padding": "1rem",
        "backgroundColor": "#f3f4f6",
        "borderRadius": "8px",
        "boxShadow": "0 4px 6px rgba(0, 0, 0, 0.1)",
    })


def handle_submit(n_clicks, loan_amount, interest_rate, repayment_period):
    """Validate and calculate one submission.

    Returns (results, loan error, rate error, period error, loan value,
    rate value, period value). A valid submission replaces the result card and
    clears the inputs; an invalid one keeps the previous card and the inputs.
    """
    if not n_clicks:
        return (no_update,) * 7

    outcome = submit(loan_amount, interest_rate, repayment_period)
    errors = [outcome.errors.get(name, "") for name in FIELD_IDS.values()]

    if not outcome.ok:
        return (no_update, *errors, no_update, no_update, no_update)
    return (render_result(outcome.result), *errors, None, None, None)


app = Dash(
    __name__,
    suppress_callback_exceptions=True,
    title="Mortgage Calculator",
)

app.layout = html.Div([
    html.Div([
        _field("loan-amount", "Loan Amount ($)"),
        _field("interest-rate", "Interest Rate (%)"),
        _field("repayment-period", "Repayment Period (years)"),
        html.Button("Calculate", id="calculate-btn", n_clicks=0, style=BTN_STYLE),
    ], style={"display": "flex", "flexDirection": "column", "gap": "1.25rem"}),

    # Last successful result; replaced on each valid submission
    html.Div(id="results-container"),
], style={"maxWidth": "420px", "margin": "3rem auto", "padding": "0 1rem"})


@callback(
    [
        Output("results-container", "children"),
        *[Output(f"{cid}-error", "children") for cid in FIELD_IDS],
        *[Output(cid, "value") for cid in FIELD_IDS],
    ],
    Input("calculate-btn", "n_clicks"),
    [State(cid, "value") for cid in FIELD_IDS],
    prevent_initial_call=True,
)
def on_calculate(n_clicks, loan_amount, interest_rate, repayment_period):
    return handle_submit(n_clicks, loan_amount, interest_rate, repayment_period)


if __name__ == "__main__":
    configure_logging()
    app.run(debug=settings.debug, port=settings.dashboard_port)
