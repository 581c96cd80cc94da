"""
IRR and NPV Calculations

Implements IRR using the Newton-Raphson method on periodic cash flows.
"""

import logging
import math
from typing import Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 1000
NPV_TOLERANCE = 1e-5
DERIVATIVE_TOLERANCE = 1e-7
DEFAULT_GUESS = 0.1


def calculate_npv(cash_flows: Sequence[float], discount_rate: float) -> float:
    """
    Calculate NPV (Net Present Value) of cash flows.

    Args:
        cash_flows: Array of cash flows (negative = outflow, positive = inflow),
            the first at period 0
        discount_rate: Periodic discount rate (e.g., 0.10 for 10%)

    Returns:
        NPV value
    """
    flows = np.asarray(cash_flows, dtype=float)
    periods = np.arange(flows.size)
    with np.errstate(all="ignore"):
        return float(np.sum(flows / (1 + discount_rate) ** periods))


def _npv_derivative(cash_flows: Sequence[float], rate: float) -> float:
    """Calculate derivative of NPV with respect to rate (for Newton-Raphson)."""
    flows = np.asarray(cash_flows, dtype=float)
    periods = np.arange(flows.size)
    with np.errstate(all="ignore"):
        return float(-np.sum(periods * flows / (1 + rate) ** (periods + 1)))


def calculate_irr(cash_flows: Sequence[float]) -> Optional[float]:
    """
    Calculate IRR (Internal Rate of Return) using Newton-Raphson method.

    Starts from a 10% guess and stops as soon as |NPV| < 1e-5. There is no
    bracketing fallback: cash flows with several sign changes may fail to
    converge, in which case None is returned.

    Args:
        cash_flows: Periodic cash flows; the initial investment is negative

    Returns:
        IRR as a percentage rounded to 2 decimals (e.g., 10.0 for 10%), or
        None when the cash flows have no well-posed root or the iteration
        does not converge. Callers decide how to present None.

    Example:
        >>> calculate_irr([-100000, 110000])
        10.0
    """
    if len(cash_flows) < 2:
        return None

    has_positive = any(cf > 0 for cf in cash_flows)
    has_negative = any(cf < 0 for cf in cash_flows)

    if not has_positive or not has_negative:
        logger.debug("IRR undefined: cash flows need both signs")
        return None

    rate = DEFAULT_GUESS

    for iteration in range(MAX_ITERATIONS):
        npv = calculate_npv(cash_flows, rate)
        dnpv = _npv_derivative(cash_flows, rate)

        if abs(npv) < NPV_TOLERANCE:
            logger.debug("IRR converged after %d iterations", iteration)
            # + 0.0 turns a -0.0 root into 0.0
            return round(rate * 100, 2) + 0.0

        if abs(dnpv) < DERIVATIVE_TOLERANCE:
            logger.debug("IRR failed: derivative too small at rate %r", rate)
            return None

        rate = rate - npv / dnpv

        if not math.isfinite(rate):
            logger.debug("IRR failed: rate diverged")
            return None

    logger.debug("IRR did not converge in %d iterations", MAX_ITERATIONS)
    return None
