"""
Cash Flow Calculations

Single-period (monthly) income, expense and debt-service breakdown for a
rental property.
"""

from rentalroi.models import CalculationInputs, CashFlowBreakdown


def calculate_noi(net_income: float, operating_expenses: float) -> float:
    """
    Calculate Net Operating Income.

    NOI excludes debt service, depreciation, capital expenditures and
    income taxes.
    """
    return round(net_income - operating_expenses, 2)


def calculate_cash_flow(
    monthly_rent: float,
    vacancy_rate: float,
    monthly_operating_expenses: float,
    monthly_mortgage_payment: float,
) -> CashFlowBreakdown:
    """
    Calculate a monthly cash flow breakdown.

    Cash Flow = (Gross Rent - Vacancy) - Operating Expenses - Mortgage

    Each figure is rounded to cents and every derived figure is computed
    from the rounded figures before it, so ``noi == net_income -
    total_expenses`` and ``cash_flow == noi - debt_service`` hold exactly.

    Args:
        monthly_rent: Monthly rental income
        vacancy_rate: Vacancy rate as percentage (e.g., 5 for 5%)
        monthly_operating_expenses: Total monthly operating expenses
        monthly_mortgage_payment: Monthly mortgage payment (P&I)

    Returns:
        CashFlowBreakdown for the month

    Example:
        >>> calculate_cash_flow(4000, 5, 1000, 2000).cash_flow
        800.0
    """
    gross_income = round(monthly_rent, 2)
    vacancy_loss = round(monthly_rent * vacancy_rate / 100, 2)
    net_income = round(gross_income - vacancy_loss, 2)

    total_expenses = round(monthly_operating_expenses, 2)
    noi = calculate_noi(net_income, total_expenses)

    debt_service = round(monthly_mortgage_payment, 2)
    cash_flow = round(noi - debt_service, 2)

    return CashFlowBreakdown(
        gross_income=gross_income,
        vacancy_loss=vacancy_loss,
        net_income=net_income,
        total_expenses=total_expenses,
        noi=noi,
        debt_service=debt_service,
        cash_flow=cash_flow,
    )


def calculate_annual_cash_flow(
    monthly_rent: float,
    vacancy_rate: float,
    monthly_operating_expenses: float,
    monthly_mortgage_payment: float,
) -> float:
    """Annual cash flow: the monthly breakdown's cash flow times 12."""
    monthly = calculate_cash_flow(
        monthly_rent, vacancy_rate, monthly_operating_expenses, monthly_mortgage_payment
    )
    return round(monthly.cash_flow * 12, 2)


def calculate_operating_expenses(
    property_tax_annual: float,
    insurance_annual: float,
    hoa_monthly: float,
    maintenance_monthly: float,
    management_percent: float,
    monthly_rent: float,
    utilities_monthly: float,
    other_monthly: float,
) -> float:
    """
    Calculate total monthly operating expenses.

    Args:
        property_tax_annual: Annual property tax
        insurance_annual: Annual insurance premium
        hoa_monthly: Monthly HOA fees
        maintenance_monthly: Monthly maintenance budget
        management_percent: Management fee as % of monthly rent
        monthly_rent: Monthly rent the management fee is charged on
        utilities_monthly: Owner-paid monthly utilities
        other_monthly: Other monthly expenses

    Returns:
        Total monthly operating expenses

    Example:
        >>> calculate_operating_expenses(4800, 1200, 0, 250, 8, 3500, 0, 0)
        1030.0
    """
    management_fee = monthly_rent * management_percent / 100

    total = (
        property_tax_annual / 12
        + insurance_annual / 12
        + hoa_monthly
        + maintenance_monthly
        + management_fee
        + utilities_monthly
        + other_monthly
    )

    return round(total, 2)


def monthly_operating_expenses(inputs: CalculationInputs) -> float:
    """
    Monthly operating expenses for a scenario with dual-mode fields resolved.

    A dollar-mode management fee is charged as entered rather than
    re-derived from a percentage.
    """
    total = (
        inputs.property_tax_annual / 12
        + inputs.insurance_annual / 12
        + inputs.hoa_monthly
        + inputs.maintenance_monthly
        + inputs.management_monthly
        + inputs.utilities_monthly
        + inputs.other_expenses_monthly
    )
    return round(total, 2)


def is_positive_cash_flow(cash_flow: float) -> bool:
    """Whether the property cash flows positively."""
    return cash_flow > 0
