"""
Default input values, globally and per property type.

The tables are read-only; callers get fresh merged dictionaries.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from rentalroi.config import get_settings
from rentalroi.models import CalculationInputs, ExpenseAmount, ExpenseMode, PropertyType

DEFAULT_VALUES: Mapping[str, Any] = MappingProxyType({
    # Financing
    "down_payment_percent": 20.0,
    "interest_rate": 6.5,
    "loan_term_years": 30,
    "closing_costs": 0.0,
    "repair_costs": 0.0,
    # Income
    "other_monthly_income": 0.0,
    "vacancy_rate": 5.0,  # Typical residential
    "annual_rent_increase": 3.0,  # Tied to inflation
    # Expenses
    "property_tax": ExpenseAmount(mode=ExpenseMode.percent, value=1.2),  # % of price
    "insurance": ExpenseAmount(mode=ExpenseMode.percent, value=0.5),  # % of price
    "maintenance": ExpenseAmount(mode=ExpenseMode.percent, value=1.0),  # 1% rule
    "property_management": ExpenseAmount(mode=ExpenseMode.percent, value=0.0),
    "hoa_monthly": 0.0,
    "utilities_monthly": 0.0,
    "other_expenses_monthly": 0.0,
    "annual_expense_increase": 2.5,
    # Multi-year
    "holding_length": 5,
    "annual_appreciation_rate": 3.0,  # Historical average
    "sale_closing_costs_percent": 6.0,  # Realtor + closing costs
})

PROPERTY_TYPE_DEFAULTS: Mapping[PropertyType, Mapping[str, Any]] = MappingProxyType({
    PropertyType.single_family: MappingProxyType({
        "vacancy_rate": 5.0,
    }),
    PropertyType.multi_family: MappingProxyType({
        "vacancy_rate": 7.0,
        "maintenance": ExpenseAmount(mode=ExpenseMode.percent, value=1.5),
        "property_management": ExpenseAmount(mode=ExpenseMode.percent, value=8.0),
    }),
    PropertyType.condo: MappingProxyType({
        "vacancy_rate": 6.0,
        "maintenance": ExpenseAmount(mode=ExpenseMode.dollar, value=0.0),  # Covered by HOA
    }),
    PropertyType.townhouse: MappingProxyType({
        "vacancy_rate": 5.0,
    }),
    PropertyType.commercial: MappingProxyType({
        "vacancy_rate": 10.0,
        "maintenance": ExpenseAmount(mode=ExpenseMode.percent, value=2.0),
        "property_management": ExpenseAmount(mode=ExpenseMode.percent, value=5.0),
    }),
    PropertyType.other: MappingProxyType({
        "vacancy_rate": 5.0,
    }),
})


def get_defaults_for_property_type(
    property_type: Union[PropertyType, str]
) -> Dict[str, Any]:
    """Get defaults for a property type (global defaults with type overrides)."""
    property_type = PropertyType(property_type)
    return {
        **DEFAULT_VALUES,
        **PROPERTY_TYPE_DEFAULTS[property_type],
    }


def build_inputs(
    property_type: Optional[Union[PropertyType, str]] = None, **provided: Any
) -> CalculationInputs:
    """
    Build validated inputs from a partial set of values plus defaults.

    A value of None means "not provided" and falls back to the default;
    any other value, including 0, is kept as given.

    Args:
        property_type: Property type; defaults to the configured type
        **provided: CalculationInputs fields supplied by the caller

    Returns:
        CalculationInputs

    Raises:
        pydantic.ValidationError: If required fields are missing or values
            are out of range
    """
    if property_type is None:
        property_type = get_settings().default_property_type
    property_type = PropertyType(property_type)

    values = get_defaults_for_property_type(property_type)
    values.update({key: value for key, value in provided.items() if value is not None})
    values["property_type"] = property_type

    return CalculationInputs(**values)
