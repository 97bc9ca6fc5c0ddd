"""Closed-form interval computations.

This module holds the normal-theory pieces shared by the estimators: the
two-sided normal quantile, the bias-adjusted normal interval built from a
bootstrap distribution, and the Agresti-Coull interval for a binomial
proportion.
"""

import logging
from typing import Any

import numpy as np
from scipy import stats

from ..exceptions import InvalidInput
from ..utils import validate_confidence

# Exported public API
__all__ = [
    "normal_quantile",
    "normal_bootstrap_interval",
    "agresti_coull_interval",
]

logger = logging.getLogger(__name__)


def normal_quantile(confidence: float = 0.95) -> float:
    """Compute the two-sided standard normal quantile for a confidence level.

    Parameters
    ----------
    confidence : float, default=0.95
        Confidence level (e.g., 0.95 for 95% confidence)

    Returns
    -------
    float
        z such that P(-z <= Z <= z) = confidence for Z ~ N(0, 1)

    Examples
    --------
    >>> round(normal_quantile(0.95), 6)
    1.959964
    """
    confidence = validate_confidence(confidence)
    alpha = 1 - confidence
    return float(stats.norm.ppf(1 - alpha / 2))


def normal_bootstrap_interval(
    t0: float,
    distribution: np.ndarray,
    confidence: float = 0.95,
) -> tuple[float, float, float, float]:
    """Compute the bias-adjusted normal interval from a bootstrap distribution.

    Parameters
    ----------
    t0 : float
        Statistic computed on the original sample
    distribution : np.ndarray
        Statistic computed on each resample
    confidence : float, default=0.95
        Confidence level

    Returns
    -------
    tuple[float, float, float, float]
        (lower, upper, bias, std_error)

    Notes
    -----
    bias = mean(distribution) - t0 and std_error is the population standard
    deviation of the distribution (divisor R). The interval is centered on
    t0 - bias with half-width z * std_error, so it need not contain t0.
    """
    distribution = np.asarray(distribution, dtype=float)
    if distribution.ndim != 1 or distribution.size == 0:
        raise InvalidInput("distribution must be a non-empty 1D array")
    z = normal_quantile(confidence)

    if np.all(distribution == distribution[0]):
        # exact zero spread; np.mean of repeated values can be off by an ulp
        bias = float(distribution[0]) - t0
        std_error = 0.0
    else:
        bias = float(np.mean(distribution)) - t0
        std_error = float(np.std(distribution, ddof=0))
    center = t0 - bias
    halfwidth = z * std_error

    logger.debug("normal interval: bias=%g se=%g z=%g", bias, std_error, z)
    return center - halfwidth, center + halfwidth, bias, std_error


def agresti_coull_interval(successes: int, trials: int, confidence: float = 0.95) -> dict[str, Any]:
    """Compute the Agresti-Coull confidence interval for a proportion.

    Parameters
    ----------
    successes : int
        Number of successes (0 <= successes <= trials)
    trials : int
        Total number of trials (>= 1)
    confidence : float, default=0.95
        Confidence level

    Returns
    -------
    dict
        Dictionary with keys:
        - 'successes': number of successes
        - 'trials': number of trials
        - 'proportion': observed proportion successes / trials
        - 'mean': adjusted proportion p'
        - 'lower': lower CI bound, clamped at 0
        - 'upper': upper CI bound, clamped at 1

    Examples
    --------
    >>> ci = agresti_coull_interval(successes=14, trials=20)
    >>> print(f"{ci['mean']:.4f} [{ci['lower']:.4f}, {ci['upper']:.4f}]")
    0.6678 [0.4787, 0.8568]

    Notes
    -----
    With z the two-sided normal quantile:
    n' = n + z^2, p' = (x + z^2 / 2) / n', and the interval is
    p' +/- z * sqrt(p' (1 - p') / n').
    """
    for name, value in (("successes", successes), ("trials", trials)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidInput(f"{name} must be an integer, got {value!r}")
    if trials < 1:
        raise InvalidInput(f"trials must be >= 1, got {trials}")
    if not (0 <= successes <= trials):
        raise InvalidInput(f"Require 0 <= successes <= trials, got {successes} of {trials}")
    z = normal_quantile(confidence)

    z2 = z * z
    n_adjusted = trials + z2
    p_adjusted = (successes + z2 / 2) / n_adjusted
    halfwidth = z * np.sqrt(p_adjusted * (1 - p_adjusted) / n_adjusted)

    return {
        "successes": int(successes),
        "trials": int(trials),
        "proportion": successes / trials,
        "mean": float(p_adjusted),
        "lower": float(max(p_adjusted - halfwidth, 0.0)),
        "upper": float(min(p_adjusted + halfwidth, 1.0)),
    }
