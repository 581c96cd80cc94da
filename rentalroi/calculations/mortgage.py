"""
Loan Amortization Calculations

Implements the fixed-rate mortgage payment and a year-by-year amortization
schedule, matching Excel's PMT function and standard bank calculators.
"""

import logging
from typing import List

from rentalroi.models import AmortizationYear

logger = logging.getLogger(__name__)

# Balances below one cent are treated as paid off
BALANCE_EPSILON = 0.01


def calculate_loan_amount(purchase_price: float, down_payment_percent: float) -> float:
    """Loan principal after the down payment (percent, e.g. 20 for 20%)."""
    return purchase_price * (1 - down_payment_percent / 100)


def calculate_monthly_payment(
    principal: float, annual_rate: float, years: int
) -> float:
    """
    Calculate monthly loan payment (principal and interest).

    M = P * [r(1 + r)^n] / [(1 + r)^n - 1], with r = annual_rate / 100 / 12
    and n = years * 12.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as percentage (e.g., 6.5 for 6.5%)
        years: Loan term in years

    Returns:
        Monthly payment rounded to cents. A 0% loan returns principal / n
        unrounded.

    Example:
        >>> calculate_monthly_payment(500000, 6, 30)
        2997.75
    """
    if principal <= 0:
        return 0.0
    if years <= 0:
        return 0.0

    num_payments = years * 12

    if annual_rate == 0:
        return principal / num_payments

    monthly_rate = annual_rate / 100 / 12
    growth = (1 + monthly_rate) ** num_payments

    payment = principal * monthly_rate * growth / (growth - 1)

    return round(payment, 2)


def generate_amortization_schedule(
    principal: float, annual_rate: float, years: int
) -> List[AmortizationYear]:
    """
    Generate a year-by-year amortization schedule.

    Each year is simulated as 12 monthly payments. The final month of the
    final year pays off whatever balance remains, so the schedule always ends
    at exactly zero regardless of rounding drift.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as percentage
        years: Loan term in years

    Returns:
        List of AmortizationYear rows, one per loan year
    """
    monthly_payment = calculate_monthly_payment(principal, annual_rate, years)
    monthly_rate = annual_rate / 100 / 12

    schedule = []
    balance = max(0.0, principal)

    for year in range(1, years + 1):
        beginning_balance = balance
        yearly_principal = 0.0
        yearly_interest = 0.0

        for month in range(1, 13):
            interest = balance * monthly_rate
            principal_pmt = monthly_payment - interest

            # Last payment of the loan clears the balance exactly
            if year == years and month == 12:
                principal_pmt = balance

            yearly_interest += interest
            yearly_principal += principal_pmt
            balance -= principal_pmt

            if balance < BALANCE_EPSILON:
                balance = 0.0

        schedule.append(
            AmortizationYear(
                year=year,
                beginning_balance=round(beginning_balance, 2),
                payment=round(monthly_payment * 12, 2),
                principal=round(yearly_principal, 2),
                interest=round(yearly_interest, 2),
                ending_balance=round(balance, 2),
            )
        )

    logger.debug(
        "Amortized %.2f at %s%% over %d years (payment %.2f)",
        principal, annual_rate, years, monthly_payment,
    )
    return schedule


def calculate_total_interest(schedule: List[AmortizationYear]) -> float:
    """Calculate total interest paid over the schedule."""
    return round(sum(row.interest for row in schedule), 2)


def calculate_remaining_balance(
    schedule: List[AmortizationYear], at_year: int
) -> float:
    """
    Loan balance at the end of a given year.

    Years past the end of the schedule return 0 (the loan is paid off);
    years before the first return the original principal.
    """
    if not schedule:
        return 0.0
    if at_year < 1:
        return schedule[0].beginning_balance
    if at_year > len(schedule):
        return 0.0
    return schedule[at_year - 1].ending_balance
