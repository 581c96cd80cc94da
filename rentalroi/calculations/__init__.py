"""
Financial Calculation Engine

Core calculation modules for rental property investment analysis.
All functions are pure: they take values and return fresh results.
"""

from rentalroi.calculations import (
    analysis,
    cashflow,
    exit,
    irr,
    metrics,
    mortgage,
    projections,
)

__all__ = ["analysis", "cashflow", "exit", "irr", "metrics", "mortgage", "projections"]
