"""
Full scenario analysis.

Runs every calculation for one CalculationInputs snapshot and collects the
results a report or a stored record needs.
"""

import logging

from rentalroi.calculations.cashflow import calculate_cash_flow, monthly_operating_expenses
from rentalroi.calculations.exit import calculate_exit
from rentalroi.calculations.metrics import (
    calculate_cap_rate,
    calculate_cash_on_cash_return,
    calculate_dscr,
    calculate_grm,
)
from rentalroi.calculations.mortgage import (
    calculate_monthly_payment,
    generate_amortization_schedule,
)
from rentalroi.calculations.projections import calculate_multi_year_projection
from rentalroi.models import AnalysisResult, CalculationInputs, InvestmentMetrics
from rentalroi.validation import validate_inputs

logger = logging.getLogger(__name__)


def run_analysis(inputs: CalculationInputs) -> AnalysisResult:
    """
    Analyze a rental investment scenario.

    Year-one metrics are taken from the monthly snapshot: cap rate against
    the purchase price and GRM against gross monthly rent. Equity multiple
    and IRR come from the exit analysis, where an IRR that cannot be
    computed is reported as 0.

    Args:
        inputs: Validated scenario inputs

    Returns:
        AnalysisResult
    """
    loan_amount = inputs.loan_amount
    monthly_payment = calculate_monthly_payment(
        loan_amount, inputs.interest_rate, inputs.loan_term_years
    )
    operating_expenses = monthly_operating_expenses(inputs)

    cash_flow = calculate_cash_flow(
        inputs.monthly_rent,
        inputs.vacancy_rate,
        operating_expenses,
        monthly_payment,
    )

    total_investment = round(inputs.total_investment, 2)
    annual_cash_flow = cash_flow.cash_flow * 12
    annual_noi = cash_flow.noi * 12
    annual_debt_service = monthly_payment * 12

    projections = calculate_multi_year_projection(inputs)
    sale_proceeds, total_return = calculate_exit(inputs, projections)

    metrics = InvestmentMetrics(
        cash_on_cash_return=calculate_cash_on_cash_return(annual_cash_flow, total_investment),
        cap_rate=calculate_cap_rate(annual_noi, inputs.purchase_price),
        dscr=calculate_dscr(annual_noi, annual_debt_service),
        grm=calculate_grm(inputs.purchase_price, inputs.monthly_rent * 12),
        equity_multiple=total_return.equity_multiple,
        irr=total_return.irr,
    )

    warnings = validate_inputs(inputs)
    if warnings:
        logger.info(
            "%d advisory warning(s) for %r: %s",
            len(warnings), inputs.title, ", ".join(w.field for w in warnings),
        )

    return AnalysisResult(
        loan_amount=round(loan_amount, 2),
        down_payment=round(inputs.down_payment, 2),
        total_investment=total_investment,
        monthly_payment=monthly_payment,
        monthly_operating_expenses=operating_expenses,
        cash_flow=cash_flow,
        metrics=metrics,
        projections=projections,
        sale_proceeds=sale_proceeds,
        total_return=total_return,
        amortization_schedule=generate_amortization_schedule(
            loan_amount, inputs.interest_rate, inputs.loan_term_years
        ),
        warnings=warnings,
    )
