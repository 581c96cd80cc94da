"""
Exit Calculations

Sale proceeds at the end of the holding period and the total return over
the full investment lifecycle.
"""

from typing import Sequence, Tuple

from rentalroi.calculations.irr import calculate_irr
from rentalroi.calculations.metrics import calculate_equity_multiple
from rentalroi.calculations.projections import build_cash_flow_series
from rentalroi.models import CalculationInputs, ProjectionYear, SaleProceeds, TotalReturn


def calculate_sale_proceeds(
    sale_price: float, selling_costs_percent: float, loan_payoff: float
) -> SaleProceeds:
    """
    Calculate net proceeds from a property sale.

    Net Proceeds = Sale Price - Selling Costs - Loan Payoff. An underwater
    sale yields negative proceeds.

    Args:
        sale_price: Property sale price
        selling_costs_percent: Selling costs as percentage (e.g., 6 for 6%)
        loan_payoff: Remaining loan balance at sale

    Example:
        >>> calculate_sale_proceeds(600000, 6, 300000).net_proceeds
        264000.0
    """
    selling_costs = sale_price * selling_costs_percent / 100
    net_proceeds = sale_price - selling_costs - loan_payoff

    return SaleProceeds(
        sale_price=round(sale_price, 2),
        selling_costs=round(selling_costs, 2),
        loan_payoff=round(loan_payoff, 2),
        net_proceeds=round(net_proceeds, 2),
    )


def calculate_total_return(
    cumulative_cash_flow: float,
    sale_proceeds: float,
    total_investment: float,
    cash_flows: Sequence[float],
) -> TotalReturn:
    """
    Calculate the complete investment return.

    Args:
        cumulative_cash_flow: Sum of annual cash flows over the hold
        sale_proceeds: Net proceeds from the sale
        total_investment: Cash invested up front
        cash_flows: IRR series ``[-investment, cf1, ..., cfN + sale]``

    Returns:
        TotalReturn. An IRR that cannot be computed is reported as 0.
    """
    total_return = cumulative_cash_flow + sale_proceeds
    irr = calculate_irr(cash_flows)

    return TotalReturn(
        total_cash_flow=round(cumulative_cash_flow, 2),
        sale_proceeds=round(sale_proceeds, 2),
        total_return=round(total_return, 2),
        total_investment=round(total_investment, 2),
        equity_multiple=calculate_equity_multiple(total_return, total_investment),
        irr=irr if irr is not None else 0.0,
    )


def calculate_exit(
    inputs: CalculationInputs, projections: Sequence[ProjectionYear]
) -> Tuple[SaleProceeds, TotalReturn]:
    """
    Sell at the end of the final projection year.

    The sale price is that year's property value and the payoff is its
    ending loan balance. Without any projection years there is nothing to
    sell: the sale and the returns are all zero apart from the investment.
    """
    if not projections:
        return (
            calculate_sale_proceeds(0.0, inputs.sale_closing_costs_percent, 0.0),
            calculate_total_return(0.0, 0.0, inputs.total_investment, []),
        )

    final_year = projections[-1]
    sale = calculate_sale_proceeds(
        final_year.property_value,
        inputs.sale_closing_costs_percent,
        final_year.loan_balance,
    )

    total_investment = inputs.total_investment
    series = build_cash_flow_series(total_investment, projections, sale.net_proceeds)

    total = calculate_total_return(
        final_year.cumulative_cash_flow,
        sale.net_proceeds,
        total_investment,
        series,
    )
    return sale, total
