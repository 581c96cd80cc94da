"""
Multi-Year Projections

Projects property performance year over year: compounding rent and
expenses, loan amortization, appreciation and equity buildup.
"""

import logging
from typing import List, Sequence

from rentalroi.calculations.metrics import (
    calculate_cap_rate,
    calculate_cash_on_cash_return,
    calculate_dscr,
)
from rentalroi.calculations.mortgage import (
    calculate_monthly_payment,
    generate_amortization_schedule,
)
from rentalroi.models import CalculationInputs, ProjectionYear

logger = logging.getLogger(__name__)


def calculate_growth_factor(annual_rate: float, years: int) -> float:
    """Compounding factor (1 + rate/100)^years for a percentage rate."""
    return (1 + annual_rate / 100) ** years


def calculate_multi_year_projection(inputs: CalculationInputs) -> List[ProjectionYear]:
    """
    Calculate year-by-year projections over the holding period.

    Rent and expenses compound from year 1 (year 1 uses the entered values);
    property value compounds from purchase (year 1 already includes one year
    of appreciation). The management fee follows gross income rather than
    the expense growth rate. Loan figures come from a schedule generated for
    the full loan term; once the term ends there is no debt service.

    Args:
        inputs: Complete calculation inputs

    Returns:
        List of ProjectionYear, one per holding year
    """
    loan_amount = inputs.loan_amount
    monthly_payment = calculate_monthly_payment(
        loan_amount, inputs.interest_rate, inputs.loan_term_years
    )
    annual_mortgage_payment = round(monthly_payment * 12, 2)

    schedule = generate_amortization_schedule(
        loan_amount, inputs.interest_rate, inputs.loan_term_years
    )

    total_investment = inputs.total_investment
    management_percent = inputs.management_percent

    projections = []
    cumulative_cash_flow = 0.0

    for year in range(1, inputs.holding_length + 1):
        # === INCOME ===
        rent_factor = calculate_growth_factor(inputs.annual_rent_increase, year - 1)
        monthly_rent = inputs.monthly_rent * rent_factor
        other_income = inputs.other_monthly_income * rent_factor

        gross_income = round((monthly_rent + other_income) * 12, 2)
        vacancy_loss = round(gross_income * inputs.vacancy_rate / 100, 2)
        net_income = round(gross_income - vacancy_loss, 2)

        # === EXPENSES ===
        expense_factor = calculate_growth_factor(inputs.annual_expense_increase, year - 1)

        property_tax = round(inputs.property_tax_annual * expense_factor, 2)
        insurance = round(inputs.insurance_annual * expense_factor, 2)
        hoa = round(inputs.hoa_monthly * 12 * expense_factor, 2)
        maintenance = round(inputs.maintenance_monthly * 12 * expense_factor, 2)
        utilities = round(inputs.utilities_monthly * 12 * expense_factor, 2)
        other_expenses = round(inputs.other_expenses_monthly * 12 * expense_factor, 2)

        # Management tracks this year's gross income
        management = round(gross_income * management_percent / 100, 2)

        total_expenses = round(
            property_tax + insurance + hoa + maintenance + management + utilities + other_expenses,
            2,
        )

        # === DEBT ===
        if year <= len(schedule):
            amort_year = schedule[year - 1]
            mortgage_payment = annual_mortgage_payment
            principal_paid = amort_year.principal
            interest_paid = amort_year.interest
            loan_balance = amort_year.ending_balance
        else:
            mortgage_payment = principal_paid = interest_paid = loan_balance = 0.0

        # === PERFORMANCE ===
        noi = round(net_income - total_expenses, 2)
        cash_flow = round(noi - mortgage_payment, 2)
        cumulative_cash_flow = round(cumulative_cash_flow + cash_flow, 2)

        # === EQUITY ===
        property_value = round(
            inputs.purchase_price
            * calculate_growth_factor(inputs.annual_appreciation_rate, year),
            2,
        )
        equity = round(property_value - loan_balance, 2)

        projections.append(
            ProjectionYear(
                year=year,
                gross_income=gross_income,
                vacancy_loss=vacancy_loss,
                net_income=net_income,
                property_tax=property_tax,
                insurance=insurance,
                hoa=hoa,
                maintenance=maintenance,
                management=management,
                utilities=utilities,
                other_expenses=other_expenses,
                total_expenses=total_expenses,
                mortgage_payment=mortgage_payment,
                principal_paid=principal_paid,
                interest_paid=interest_paid,
                loan_balance=loan_balance,
                noi=noi,
                cash_flow=cash_flow,
                cumulative_cash_flow=cumulative_cash_flow,
                property_value=property_value,
                equity=equity,
                cash_on_cash_return=calculate_cash_on_cash_return(cash_flow, total_investment),
                cap_rate=calculate_cap_rate(noi, property_value),
                dscr=calculate_dscr(noi, mortgage_payment),
            )
        )

    logger.debug(
        "Projected %d years for %r", inputs.holding_length, inputs.title
    )
    return projections


def build_cash_flow_series(
    total_investment: float,
    projections: Sequence[ProjectionYear],
    sale_net_proceeds: float,
) -> List[float]:
    """
    Build the IRR cash flow series for a holding period.

    The initial investment is period 0 and the sale proceeds are folded into
    the final year's cash flow rather than added as an extra period.
    """
    series = [-total_investment] + [p.cash_flow for p in projections]
    if projections:
        series[-1] = round(series[-1] + sale_net_proceeds, 2)
    return series
