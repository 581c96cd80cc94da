"""
Input and result models for the calculation engine.

Inputs are validated Pydantic models; results are frozen dataclasses
created fresh by every calculation call.
"""

import enum
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PropertyType(str, enum.Enum):
    """Property type enumeration."""

    single_family = "single_family"
    multi_family = "multi_family"
    condo = "condo"
    townhouse = "townhouse"
    commercial = "commercial"
    other = "other"


class ExpenseMode(str, enum.Enum):
    """How a dual-mode expense value is expressed."""

    dollar = "dollar"
    percent = "percent"


class WarningSeverity(str, enum.Enum):
    """Severity of an advisory input warning."""

    warning = "warning"
    info = "info"


def percent_to_dollars(percent: float, base: float, monthly: bool = False) -> float:
    """
    Convert a percent-of-base expense to dollars.

    Args:
        percent: Percent of the base (e.g., 1.2 for 1.2%)
        base: Value the percentage applies to (purchase price, rent)
        monthly: Spread the result over 12 months (annual percentage,
            monthly dollar figure)

    Returns:
        Dollar amount (0 when there is no base)
    """
    if not base:
        return 0.0
    dollars = base * percent / 100
    return dollars / 12 if monthly else dollars


def dollars_to_percent(dollars: float, base: float, monthly: bool = False) -> float:
    """Convert a dollar expense to a percent of base (inverse of percent_to_dollars)."""
    if not base:
        return 0.0
    period_dollars = dollars * 12 if monthly else dollars
    return period_dollars / base * 100


class ExpenseAmount(BaseModel):
    """
    An expense entered either as dollars or as a percent of some base.

    Only ``value`` interpreted through ``mode`` is authoritative; the other
    representation is always derived.
    """

    model_config = ConfigDict(frozen=True)

    mode: ExpenseMode = ExpenseMode.dollar
    value: float = Field(default=0.0, ge=0)

    def to_dollars(self, base: float, monthly: bool = False) -> float:
        if self.mode == ExpenseMode.dollar:
            return self.value
        return percent_to_dollars(self.value, base, monthly)

    def to_percent(self, base: float, monthly: bool = False) -> float:
        if self.mode == ExpenseMode.percent:
            return self.value
        return dollars_to_percent(self.value, base, monthly)


def _coerce_expense(value: Any, mode: ExpenseMode) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return {"mode": mode, "value": value}
    return value


class CalculationInputs(BaseModel):
    """Complete, validated snapshot of a rental investment scenario."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Property
    property_type: PropertyType = PropertyType.single_family
    title: str = Field(default="Untitled Property", min_length=1, max_length=100)

    # Purchase & financing
    purchase_price: float = Field(gt=0)
    down_payment_percent: float = Field(default=20.0, ge=0, le=100)
    interest_rate: float = Field(default=6.5, ge=0, le=30)
    loan_term_years: int = Field(default=30, ge=1, le=50)
    closing_costs: float = Field(default=0.0, ge=0)
    repair_costs: float = Field(default=0.0, ge=0)

    # Income
    monthly_rent: float = Field(ge=0)
    other_monthly_income: float = Field(default=0.0, ge=0)
    vacancy_rate: float = Field(default=5.0, ge=0, le=100)
    annual_rent_increase: float = Field(default=3.0, ge=-50, le=50)

    # Expenses
    property_tax: ExpenseAmount = Field(default_factory=ExpenseAmount)  # annual $ or % of price
    insurance: ExpenseAmount = Field(default_factory=ExpenseAmount)  # annual $ or % of price
    maintenance: ExpenseAmount = Field(default_factory=ExpenseAmount)  # monthly $ or % of price per year
    property_management: ExpenseAmount = Field(
        default_factory=lambda: ExpenseAmount(mode=ExpenseMode.percent)
    )  # monthly $ or % of gross rent
    hoa_monthly: float = Field(default=0.0, ge=0)
    utilities_monthly: float = Field(default=0.0, ge=0)
    other_expenses_monthly: float = Field(default=0.0, ge=0)
    annual_expense_increase: float = Field(default=2.5, ge=-50, le=50)

    # Multi-year / exit
    holding_length: int = Field(default=5, ge=1, le=50)
    annual_appreciation_rate: float = Field(default=3.0, ge=-50, le=50)
    sale_closing_costs_percent: float = Field(default=6.0, ge=0, le=100)

    @field_validator("property_tax", "insurance", "maintenance", mode="before")
    @classmethod
    def _dollar_amount(cls, value: Any) -> Any:
        return _coerce_expense(value, ExpenseMode.dollar)

    @field_validator("property_management", mode="before")
    @classmethod
    def _percent_amount(cls, value: Any) -> Any:
        return _coerce_expense(value, ExpenseMode.percent)

    @property
    def loan_amount(self) -> float:
        return self.purchase_price * (1 - self.down_payment_percent / 100)

    @property
    def down_payment(self) -> float:
        return self.purchase_price * self.down_payment_percent / 100

    @property
    def total_investment(self) -> float:
        """Cash invested up front: down payment + closing + repairs."""
        return self.down_payment + self.closing_costs + self.repair_costs

    @property
    def gross_monthly_income(self) -> float:
        return self.monthly_rent + self.other_monthly_income

    @property
    def property_tax_annual(self) -> float:
        return self.property_tax.to_dollars(self.purchase_price)

    @property
    def insurance_annual(self) -> float:
        return self.insurance.to_dollars(self.purchase_price)

    @property
    def maintenance_monthly(self) -> float:
        return self.maintenance.to_dollars(self.purchase_price, monthly=True)

    @property
    def management_percent(self) -> float:
        """Management fee as percent of rent; a dollar fee is converted against monthly rent."""
        return self.property_management.to_percent(self.monthly_rent)

    @property
    def management_monthly(self) -> float:
        return self.property_management.to_dollars(self.monthly_rent)


class _Record:
    """Mixin giving result dataclasses a plain-dict view for storage."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AmortizationYear(_Record):
    """One loan year of an amortization schedule."""

    year: int
    beginning_balance: float
    payment: float  # Annual payment
    principal: float
    interest: float
    ending_balance: float


@dataclass(frozen=True)
class CashFlowBreakdown(_Record):
    """Income, expenses and debt service for one period."""

    gross_income: float
    vacancy_loss: float
    net_income: float
    total_expenses: float
    noi: float
    debt_service: float
    cash_flow: float


@dataclass(frozen=True)
class ProjectionYear(_Record):
    """A single year of the multi-year projection."""

    year: int

    # Income
    gross_income: float
    vacancy_loss: float
    net_income: float

    # Expenses
    property_tax: float
    insurance: float
    hoa: float
    maintenance: float
    management: float
    utilities: float
    other_expenses: float
    total_expenses: float

    # Debt
    mortgage_payment: float  # Annual
    principal_paid: float
    interest_paid: float
    loan_balance: float

    # Performance
    noi: float
    cash_flow: float
    cumulative_cash_flow: float

    # Equity
    property_value: float
    equity: float

    # Metrics
    cash_on_cash_return: float
    cap_rate: float
    dscr: float

    @property
    def debt_service(self) -> float:
        return self.mortgage_payment


@dataclass(frozen=True)
class SaleProceeds(_Record):
    """Result of selling the property at exit."""

    sale_price: float
    selling_costs: float
    loan_payoff: float
    net_proceeds: float


@dataclass(frozen=True)
class TotalReturn(_Record):
    """Return over the full holding period."""

    total_cash_flow: float
    sale_proceeds: float
    total_return: float
    total_investment: float
    equity_multiple: float
    irr: float  # Percentage


@dataclass(frozen=True)
class InvestmentMetrics(_Record):
    """Headline investment ratios."""

    cash_on_cash_return: float  # Percentage
    cap_rate: float  # Percentage
    dscr: float
    grm: float
    equity_multiple: float
    irr: float  # Percentage


@dataclass(frozen=True)
class ValidationWarning(_Record):
    """Advisory warning for an unusual input value."""

    field: str
    value: float
    threshold: float
    message: str
    severity: WarningSeverity = WarningSeverity.warning


@dataclass(frozen=True)
class AnalysisResult(_Record):
    """Everything the engine derives from one CalculationInputs snapshot."""

    loan_amount: float
    down_payment: float
    total_investment: float
    monthly_payment: float
    monthly_operating_expenses: float
    cash_flow: CashFlowBreakdown
    metrics: InvestmentMetrics
    projections: List[ProjectionYear]
    sale_proceeds: SaleProceeds
    total_return: TotalReturn
    amortization_schedule: List[AmortizationYear]
    warnings: List[ValidationWarning] = field(default_factory=list)
