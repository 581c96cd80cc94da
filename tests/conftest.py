"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rentalroi.config import get_settings
from rentalroi.models import CalculationInputs


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


# $500k single-family rental, 20% down at 6.5% for 30 years, 10-year hold
BASE_SCENARIO = {
    "title": "Test Rental",
    "purchase_price": 500000,
    "down_payment_percent": 20,
    "interest_rate": 6.5,
    "loan_term_years": 30,
    "closing_costs": 10000,
    "repair_costs": 5000,
    "monthly_rent": 3500,
    "other_monthly_income": 0,
    "vacancy_rate": 5,
    "annual_rent_increase": 3,
    "property_tax": 6000,  # Annual dollars
    "insurance": 1500,  # Annual dollars
    "hoa_monthly": 0,
    "maintenance": 200,  # Monthly dollars
    "property_management": 8,  # Percent of rent
    "utilities_monthly": 0,
    "other_expenses_monthly": 0,
    "annual_expense_increase": 2.5,
    "holding_length": 10,
    "annual_appreciation_rate": 3,
    "sale_closing_costs_percent": 6,
}


@pytest.fixture
def make_inputs():
    """Build CalculationInputs from the base scenario with overrides."""

    def _make(**overrides):
        return CalculationInputs(**{**BASE_SCENARIO, **overrides})

    return _make


@pytest.fixture
def scenario_inputs(make_inputs):
    """The base scenario as validated inputs."""
    return make_inputs()


@pytest.fixture
def clear_settings_cache():
    """Reset cached settings around a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
