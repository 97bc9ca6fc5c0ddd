"""Closed-form interval computations for descriptives.

Collects the normal quantile and interval formulas so both estimators
share one implementation.
"""

from .statistical import (
    agresti_coull_interval,
    normal_bootstrap_interval,
    normal_quantile,
)

__all__ = [
    "agresti_coull_interval",
    "normal_bootstrap_interval",
    "normal_quantile",
]
