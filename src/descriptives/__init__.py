"""Top-level package for descriptives (bootstrapped and binomial summaries)."""

import logging
from importlib.metadata import version

__version__ = version("descriptives")  # Read from package metadata (pyproject.toml)

# Binomial proportion
from .binomial import (
    BinomialSummary,
    binom_summary,
    count_successes,
)

# Bootstrapped mean
from .bootstrap import (
    DEFAULT_CONFIDENCE,
    DEFAULT_REPEATS,
    BootstrapSummary,
    bootstrap_means,
    bootstrapped_summary,
)

# Closed-form bounds
from .bounds import (
    agresti_coull_interval,
    normal_bootstrap_interval,
    normal_quantile,
)

# Errors
from .exceptions import InvalidInput

# Utility functions
from .utils import drop_missing

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Bootstrap
    "BootstrapSummary",
    "bootstrap_means",
    "bootstrapped_summary",
    "DEFAULT_CONFIDENCE",
    "DEFAULT_REPEATS",
    # Binomial
    "BinomialSummary",
    "binom_summary",
    "count_successes",
    # Bounds
    "agresti_coull_interval",
    "normal_bootstrap_interval",
    "normal_quantile",
    # Errors
    "InvalidInput",
    # Utilities
    "drop_missing",
]
