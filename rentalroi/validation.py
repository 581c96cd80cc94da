"""
Advisory warnings for unusual input values.

Warnings never block a calculation; they flag assumptions worth a second
look.
"""

from dataclasses import dataclass
from typing import List, Mapping, Optional

from rentalroi.models import CalculationInputs, ValidationWarning, WarningSeverity


@dataclass(frozen=True)
class ValidationThreshold:
    """A low or high bound on one input field."""

    field: str
    message: str
    low: Optional[float] = None
    high: Optional[float] = None
    severity: WarningSeverity = WarningSeverity.warning


VALIDATION_THRESHOLDS = (
    ValidationThreshold(
        field="interest_rate",
        high=10,
        message="Interest rate above 10% is unusual for residential properties. "
        "Typical rates are 5-8%.",
    ),
    ValidationThreshold(
        field="interest_rate",
        low=2,
        message="Interest rate below 2% is unusually low. Verify this is accurate.",
        severity=WarningSeverity.info,
    ),
    ValidationThreshold(
        field="vacancy_rate",
        high=15,
        message="Vacancy rate above 15% is very high. Typical ranges are 5-10%.",
    ),
    ValidationThreshold(
        field="down_payment_percent",
        low=10,
        message="Down payment below 10% may require PMI and result in higher "
        "interest rates.",
    ),
    ValidationThreshold(
        field="down_payment_percent",
        high=50,
        message="Down payment above 50% is uncommon. Consider keeping more liquidity.",
        severity=WarningSeverity.info,
    ),
    ValidationThreshold(
        field="management_percent",
        high=12,
        message="Property management fee above 12% is high. Typical rates are 8-10%.",
    ),
    ValidationThreshold(
        field="annual_rent_increase",
        high=7,
        message="Rent increase above 7% annually is aggressive. Historical average "
        "is 3-4%.",
    ),
    ValidationThreshold(
        field="annual_appreciation_rate",
        high=6,
        message="Appreciation above 6% annually is aggressive. Historical average "
        "is 3-4%.",
    ),
    ValidationThreshold(
        field="sale_closing_costs_percent",
        low=3,
        message="Closing costs below 3% is optimistic. Typical costs are 6-8% "
        "including realtor fees.",
        severity=WarningSeverity.info,
    ),
)

VALIDATED_FIELDS = tuple(dict.fromkeys(t.field for t in VALIDATION_THRESHOLDS))


def check_validation_warnings(field: str, value: float) -> Optional[ValidationWarning]:
    """
    Check a single value against the thresholds for its field.

    A value exactly on a threshold does not warn.

    Returns:
        The first triggered warning, or None
    """
    for threshold in VALIDATION_THRESHOLDS:
        if threshold.field != field:
            continue

        if threshold.high is not None and value > threshold.high:
            bound = threshold.high
        elif threshold.low is not None and value < threshold.low:
            bound = threshold.low
        else:
            continue

        return ValidationWarning(
            field=field,
            value=value,
            threshold=bound,
            message=threshold.message,
            severity=threshold.severity,
        )

    return None


def get_all_validation_warnings(values: Mapping[str, float]) -> List[ValidationWarning]:
    """Get warnings for every numeric value in a field -> value mapping."""
    warnings = []
    for field, value in values.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        warning = check_validation_warnings(field, value)
        if warning:
            warnings.append(warning)
    return warnings


def validate_inputs(inputs: CalculationInputs) -> List[ValidationWarning]:
    """Get warnings for a complete set of inputs."""
    return get_all_validation_warnings(
        {field: getattr(inputs, field) for field in VALIDATED_FIELDS}
    )
