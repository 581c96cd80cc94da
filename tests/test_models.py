"""
Tests for input validation and dual-mode expense conversion.
"""

import pytest
from pydantic import ValidationError

from rentalroi.models import (
    CalculationInputs,
    ExpenseAmount,
    ExpenseMode,
    PropertyType,
    dollars_to_percent,
    percent_to_dollars,
)


class TestConversions:
    """Test dollar and percent conversions."""

    def test_percent_to_dollars(self):
        """Test percent of base converted to dollars."""
        assert percent_to_dollars(1.2, 500000) == 6000
        assert percent_to_dollars(1.2, 500000, monthly=True) == 500

    def test_dollars_to_percent(self):
        """Test dollars converted to percent of base."""
        assert dollars_to_percent(6000, 500000) == pytest.approx(1.2)
        assert dollars_to_percent(500, 500000, monthly=True) == pytest.approx(1.2)

    def test_zero_base(self):
        """Test conversions against a zero base give 0."""
        assert percent_to_dollars(1.2, 0) == 0
        assert dollars_to_percent(6000, 0) == 0


class TestExpenseAmount:
    """Test dual-mode expense amounts."""

    def test_dollar_mode(self):
        """Test a dollar-mode amount."""
        amount = ExpenseAmount(mode=ExpenseMode.dollar, value=6000)
        assert amount.to_dollars(500000) == 6000
        assert amount.to_percent(500000) == pytest.approx(1.2)

    def test_percent_mode(self):
        """Test a percent-mode amount."""
        amount = ExpenseAmount(mode=ExpenseMode.percent, value=8)
        assert amount.to_percent(3500) == 8
        assert amount.to_dollars(3500) == 280

    def test_defaults_to_zero_dollars(self):
        """Test the default amount is 0 dollars."""
        amount = ExpenseAmount()
        assert amount.mode == ExpenseMode.dollar
        assert amount.value == 0

    def test_mode_from_string(self):
        """Test the mode accepts its string value."""
        assert ExpenseAmount(mode="percent", value=1).mode == ExpenseMode.percent

    def test_negative_value_rejected(self):
        """Test negative amounts are rejected."""
        with pytest.raises(ValidationError):
            ExpenseAmount(value=-1)

    def test_frozen(self):
        """Test amounts cannot be reassigned."""
        amount = ExpenseAmount(value=100)
        with pytest.raises(ValidationError):
            amount.value = 200


class TestCalculationInputs:
    """Test input validation and derived values."""

    def test_derived_amounts(self, scenario_inputs):
        """Test loan, down payment and investment are derived."""
        assert scenario_inputs.loan_amount == 400000
        assert scenario_inputs.down_payment == 100000
        assert scenario_inputs.total_investment == 115000
        assert scenario_inputs.gross_monthly_income == 3500

    def test_bare_numbers_coerced(self, scenario_inputs):
        """Test bare numbers get each field's default mode."""
        assert scenario_inputs.property_tax.mode == ExpenseMode.dollar
        assert scenario_inputs.maintenance.mode == ExpenseMode.dollar
        assert scenario_inputs.property_management.mode == ExpenseMode.percent

    def test_resolved_expenses(self, scenario_inputs):
        """Test dual-mode expenses resolved to dollars and percent."""
        assert scenario_inputs.property_tax_annual == 6000
        assert scenario_inputs.insurance_annual == 1500
        assert scenario_inputs.maintenance_monthly == 200
        assert scenario_inputs.management_percent == 8
        assert scenario_inputs.management_monthly == 280

    def test_expense_as_mapping(self, make_inputs):
        """Test an expense given as a mapping."""
        inputs = make_inputs(property_tax={"mode": "percent", "value": 1.5})
        assert inputs.property_tax_annual == 7500

    def test_minimal_inputs(self):
        """Test only price and rent are required."""
        inputs = CalculationInputs(purchase_price=250000, monthly_rent=1800)
        assert inputs.property_type == PropertyType.single_family
        assert inputs.title == "Untitled Property"
        assert inputs.property_management.mode == ExpenseMode.percent
        assert inputs.management_percent == 0

    def test_no_rent_means_no_management_fee(self, make_inputs):
        """Test a dollar fee on zero rent converts to 0%."""
        inputs = make_inputs(
            monthly_rent=0,
            property_management=ExpenseAmount(mode=ExpenseMode.dollar, value=300),
        )
        assert inputs.management_percent == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"purchase_price": 0},
            {"monthly_rent": -1},
            {"down_payment_percent": 101},
            {"interest_rate": 31},
            {"loan_term_years": 0},
            {"vacancy_rate": -5},
            {"holding_length": 0},
            {"holding_length": 51},
            {"annual_appreciation_rate": -60},
            {"title": ""},
            {"title": "x" * 101},
            {"property_type": "castle"},
            {"property_tax": -100},
            {"unknown_field": 1},
        ],
    )
    def test_rejects_invalid_values(self, make_inputs, overrides):
        """Test out-of-range and unknown values are rejected."""
        with pytest.raises(ValidationError):
            make_inputs(**overrides)

    def test_frozen(self, scenario_inputs):
        """Test inputs cannot be reassigned."""
        with pytest.raises(ValidationError):
            scenario_inputs.monthly_rent = 4000

    def test_model_copy_for_what_if(self, scenario_inputs):
        """Test a what-if copy leaves the original untouched."""
        changed = scenario_inputs.model_copy(update={"monthly_rent": 4000})
        assert changed.monthly_rent == 4000
        assert scenario_inputs.monthly_rent == 3500
