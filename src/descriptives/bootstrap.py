"""Bootstrapped mean with a bias-adjusted normal confidence interval.

The sample is resampled with replacement ``repeats`` times; the spread of the
resample means gives the standard error and their offset from the observed
mean gives the bias correction:

    lower, upper = (t0 - bias) -/+ z * se

Randomness comes from an explicit ``numpy.random.Generator`` so results are
reproducible without touching global state.
"""

import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from typing import Any

import numpy as np

from .bounds import normal_bootstrap_interval
from .exceptions import InvalidInput
from .utils import drop_missing, resolve_rng, validate_confidence

__all__ = [
    "DEFAULT_CONFIDENCE",
    "DEFAULT_REPEATS",
    "BootstrapSummary",
    "bootstrap_means",
    "bootstrapped_summary",
]

logger = logging.getLogger(__name__)

DEFAULT_REPEATS = 1000
DEFAULT_CONFIDENCE = 0.95

# Upper bound on resampled values held in memory at once
_MAX_BATCH_DRAWS = 1 << 20


@dataclass(frozen=True)
class BootstrapSummary:
    """Bootstrapped mean and confidence interval.

    Attributes
    ----------
    statistic : float
        Mean of the non-missing sample values
    lower : float
        Lower confidence bound
    upper : float
        Upper confidence bound
    bias : float
        Mean of the bootstrap distribution minus ``statistic``
    std_error : float
        Population standard deviation of the bootstrap distribution
    repeats : int
        Number of resamples drawn
    confidence : float
        Two-sided confidence level of the interval
    distribution : np.ndarray or None
        Resample means, only kept when requested
    """

    statistic: float
    lower: float
    upper: float
    bias: float
    std_error: float
    repeats: int
    confidence: float
    distribution: np.ndarray | None = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the summary as a flat row, without the distribution."""
        row = asdict(self)
        row.pop("distribution")
        return row


def _validate_repeats(repeats: int) -> int:
    if isinstance(repeats, bool) or not isinstance(repeats, (int, np.integer)):
        raise InvalidInput(f"repeats must be an integer, got {repeats!r}")
    if repeats < 1:
        raise InvalidInput(f"repeats must be >= 1, got {repeats}")
    return int(repeats)


def bootstrap_means(values: np.ndarray, repeats: int, rng: np.random.Generator) -> np.ndarray:
    """Draw ``repeats`` resamples of ``values`` and return their means.

    Parameters
    ----------
    values : np.ndarray
        Missing-free 1D sample
    repeats : int
        Number of resamples
    rng : np.random.Generator
        Source of the resampling indices

    Returns
    -------
    np.ndarray
        Array of shape (repeats,) with one mean per resample
    """
    n = len(values)
    batch = max(1, min(repeats, _MAX_BATCH_DRAWS // n))
    means = np.empty(repeats, dtype=float)

    for start in range(0, repeats, batch):
        stop = min(start + batch, repeats)
        indices = rng.integers(0, n, size=(stop - start, n))
        means[start:stop] = values[indices].mean(axis=1)

    return means


def bootstrapped_summary(
    data: Sequence[float] | np.ndarray,
    repeats: int = DEFAULT_REPEATS,
    confidence: float = DEFAULT_CONFIDENCE,
    *,
    rng: np.random.Generator | None = None,
    random_seed: int | None = None,
    return_distribution: bool = False,
) -> BootstrapSummary:
    """Compute a bootstrapped mean and its bias-adjusted normal interval.

    Parameters
    ----------
    data : sequence of float or np.ndarray
        Numeric sample; NaN, inf and None entries are ignored
    repeats : int, default=1000
        Number of bootstrap resamples
    confidence : float, default=0.95
        Two-sided confidence level
    rng : np.random.Generator, optional
        Generator to draw resampling indices from
    random_seed : int, optional
        Seed for a fresh generator; mutually exclusive with ``rng``
    return_distribution : bool, default=False
        Keep the resample means on the result

    Returns
    -------
    BootstrapSummary
        Observed mean with lower and upper bounds

    Raises
    ------
    InvalidInput
        If fewer than 2 non-missing values remain, ``repeats < 1``,
        ``confidence`` is outside (0, 1), or the values overflow when
        averaged

    Examples
    --------
    >>> summary = bootstrapped_summary([4.1, 5.3, 4.8, 5.9, 5.0], random_seed=0)
    >>> summary.lower <= summary.upper
    True
    """
    repeats = _validate_repeats(repeats)
    confidence = validate_confidence(confidence)
    values = drop_missing(data)
    if len(values) < 2:
        raise InvalidInput(f"data must contain at least 2 non-missing values, got {len(values)}")
    generator = resolve_rng(rng, random_seed)

    logger.debug("bootstrapping mean of %d values with %d repeats", len(values), repeats)
    with np.errstate(over="ignore", invalid="ignore"):
        if np.all(values == values[0]):
            # every resample of a constant sample is the sample itself
            t0 = float(values[0])
            means = np.full(repeats, t0)
        else:
            t0 = float(np.mean(values))
            means = bootstrap_means(values, repeats, generator)
        lower, upper, bias, std_error = normal_bootstrap_interval(t0, means, confidence)

    if not np.all(np.isfinite([t0, lower, upper, bias, std_error])):
        raise InvalidInput("data values are too large in magnitude to average in floating point")

    return BootstrapSummary(
        statistic=t0,
        lower=lower,
        upper=upper,
        bias=bias,
        std_error=std_error,
        repeats=repeats,
        confidence=confidence,
        distribution=means if return_distribution else None,
    )
