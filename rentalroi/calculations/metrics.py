"""
Investment Metrics

Standard rental investment ratios. Every ratio guards its own zero
denominator with a sentinel value instead of raising.
"""

from typing import Sequence

from rentalroi.calculations.irr import calculate_irr
from rentalroi.models import InvestmentMetrics

# DSCR reported when there is income but no debt to cover
DSCR_NO_DEBT = 999.99


def calculate_cap_rate(noi: float, property_value: float) -> float:
    """
    Calculate Capitalization Rate.

    Cap Rate = NOI / Property Value. Unlevered: ignores financing.

    Args:
        noi: Annual Net Operating Income
        property_value: Current property value

    Returns:
        Cap rate as percentage (0 when property value is 0)
    """
    if property_value == 0:
        return 0.0
    return round(noi / property_value * 100, 2)


def calculate_cash_on_cash_return(
    annual_cash_flow: float, total_investment: float
) -> float:
    """
    Calculate Cash-on-Cash Return.

    CoC = Annual Pre-Tax Cash Flow / Total Cash Invested. Levered: accounts
    for financing.

    Returns:
        Return as percentage (0 when nothing was invested)
    """
    if total_investment == 0:
        return 0.0
    return round(annual_cash_flow / total_investment * 100, 2)


def calculate_dscr(noi: float, annual_debt_service: float) -> float:
    """
    Calculate Debt Service Coverage Ratio (DSCR).

    Args:
        noi: Annual Net Operating Income
        annual_debt_service: Annual mortgage payments (P&I)

    Returns:
        DSCR ratio. Without debt service returns DSCR_NO_DEBT when NOI is
        positive and 0 otherwise.
    """
    if annual_debt_service == 0:
        return DSCR_NO_DEBT if noi > 0 else 0.0
    return round(noi / annual_debt_service, 2)


def calculate_grm(property_price: float, annual_rent: float) -> float:
    """Gross Rent Multiplier: price / gross annual rent, to one decimal."""
    if annual_rent == 0:
        return 0.0
    return round(property_price / annual_rent, 1)


def calculate_equity_multiple(
    total_distributions: float, total_investment: float
) -> float:
    """
    Calculate equity multiple.

    Equity Multiple = Total Distributions / Total Equity Invested. Not
    adjusted for the time value of money.

    Returns:
        Multiple (e.g., 1.5 = 1.5x), 0 when nothing was invested
    """
    if total_investment == 0:
        return 0.0
    return round(total_distributions / total_investment, 2)


def calculate_all_metrics(
    annual_cash_flow: float,
    annual_noi: float,
    annual_debt_service: float,
    property_value: float,
    total_investment: float,
    cash_flows: Sequence[float],
    total_distributions: float,
    annual_rent: float,
) -> InvestmentMetrics:
    """
    Calculate all investment metrics at once.

    An IRR that cannot be computed is reported as 0 here; use
    ``calculate_irr`` directly to tell "no IRR" apart from a 0% IRR.
    """
    irr = calculate_irr(cash_flows)

    return InvestmentMetrics(
        cash_on_cash_return=calculate_cash_on_cash_return(annual_cash_flow, total_investment),
        cap_rate=calculate_cap_rate(annual_noi, property_value),
        dscr=calculate_dscr(annual_noi, annual_debt_service),
        grm=calculate_grm(property_value, annual_rent),
        equity_multiple=calculate_equity_multiple(total_distributions, total_investment),
        irr=irr if irr is not None else 0.0,
    )
