"""
RentalROI calculation engine.

Deterministic analytics for rental property investments: mortgage
amortization, cash flow, investment ratios, multi-year projections and
exit analysis.
"""

from rentalroi.calculations.analysis import run_analysis
from rentalroi.calculations.cashflow import (
    calculate_annual_cash_flow,
    calculate_cash_flow,
    calculate_noi,
    calculate_operating_expenses,
    is_positive_cash_flow,
    monthly_operating_expenses,
)
from rentalroi.calculations.exit import (
    calculate_exit,
    calculate_sale_proceeds,
    calculate_total_return,
)
from rentalroi.calculations.irr import calculate_irr, calculate_npv
from rentalroi.calculations.metrics import (
    DSCR_NO_DEBT,
    calculate_all_metrics,
    calculate_cap_rate,
    calculate_cash_on_cash_return,
    calculate_dscr,
    calculate_equity_multiple,
    calculate_grm,
)
from rentalroi.calculations.mortgage import (
    calculate_loan_amount,
    calculate_monthly_payment,
    calculate_remaining_balance,
    calculate_total_interest,
    generate_amortization_schedule,
)
from rentalroi.calculations.projections import (
    build_cash_flow_series,
    calculate_multi_year_projection,
)
from rentalroi.defaults import (
    DEFAULT_VALUES,
    PROPERTY_TYPE_DEFAULTS,
    build_inputs,
    get_defaults_for_property_type,
)
from rentalroi.models import (
    AmortizationYear,
    AnalysisResult,
    CalculationInputs,
    CashFlowBreakdown,
    ExpenseAmount,
    ExpenseMode,
    InvestmentMetrics,
    ProjectionYear,
    PropertyType,
    SaleProceeds,
    TotalReturn,
    ValidationWarning,
    WarningSeverity,
    dollars_to_percent,
    percent_to_dollars,
)
from rentalroi.validation import (
    VALIDATION_THRESHOLDS,
    check_validation_warnings,
    get_all_validation_warnings,
    validate_inputs,
)

__version__ = "0.1.0"

__all__ = [
    # Analysis
    "run_analysis",
    # Mortgage
    "calculate_loan_amount",
    "calculate_monthly_payment",
    "generate_amortization_schedule",
    "calculate_total_interest",
    "calculate_remaining_balance",
    # Cash flow
    "calculate_cash_flow",
    "calculate_annual_cash_flow",
    "calculate_noi",
    "calculate_operating_expenses",
    "monthly_operating_expenses",
    "is_positive_cash_flow",
    # Metrics
    "DSCR_NO_DEBT",
    "calculate_cap_rate",
    "calculate_cash_on_cash_return",
    "calculate_dscr",
    "calculate_grm",
    "calculate_equity_multiple",
    "calculate_irr",
    "calculate_npv",
    "calculate_all_metrics",
    # Projections & exit
    "calculate_multi_year_projection",
    "build_cash_flow_series",
    "calculate_sale_proceeds",
    "calculate_total_return",
    "calculate_exit",
    # Defaults & validation
    "DEFAULT_VALUES",
    "PROPERTY_TYPE_DEFAULTS",
    "get_defaults_for_property_type",
    "build_inputs",
    "VALIDATION_THRESHOLDS",
    "check_validation_warnings",
    "get_all_validation_warnings",
    "validate_inputs",
    # Models
    "AmortizationYear",
    "AnalysisResult",
    "CalculationInputs",
    "CashFlowBreakdown",
    "ExpenseAmount",
    "ExpenseMode",
    "InvestmentMetrics",
    "ProjectionYear",
    "PropertyType",
    "SaleProceeds",
    "TotalReturn",
    "ValidationWarning",
    "WarningSeverity",
    "percent_to_dollars",
    "dollars_to_percent",
]
