"""Summary statistics for a binary outcome variable.

The proportion of successes is reported with an Agresti-Coull confidence
interval. Outcomes may be booleans or zeros and ones, where True and 1 mark
a success; every element is checked before anything is computed.
"""

import logging
import numbers
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

from .bounds import agresti_coull_interval
from .exceptions import InvalidInput
from .utils import validate_confidence

__all__ = [
    "BinomialSummary",
    "binom_summary",
    "count_successes",
]

logger = logging.getLogger(__name__)

OUTCOME_ERROR = "The outcome variable has to be either logical or zero/one"


@dataclass(frozen=True)
class BinomialSummary:
    """Agresti-Coull summary of a binary outcome.

    Attributes
    ----------
    successes : int
        Number of successes
    trials : int
        Number of outcomes
    statistic : float
        Agresti-Coull adjusted proportion p'
    lower : float
        Lower confidence bound, never below 0
    upper : float
        Upper confidence bound, never above 1
    proportion : float
        Raw observed proportion successes / trials
    confidence : float
        Two-sided confidence level of the interval
    """

    successes: int
    trials: int
    statistic: float
    lower: float
    upper: float
    proportion: float
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        """Return the summary as a flat row."""
        return asdict(self)


def _is_binary(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return True
    if isinstance(value, numbers.Real):
        return value == 0 or value == 1
    return False


def count_successes(outcomes: Sequence[Any] | np.ndarray) -> tuple[int, int]:
    """Validate binary outcomes and count them.

    Parameters
    ----------
    outcomes : sequence or np.ndarray
        Booleans or values exactly equal to 0 or 1

    Returns
    -------
    tuple[int, int]
        (successes, trials)

    Raises
    ------
    InvalidInput
        If the sample is empty, not one-dimensional, or any element is not
        logical or zero/one
    """
    try:
        arr = np.asarray(outcomes)
    except ValueError as exc:
        raise InvalidInput(OUTCOME_ERROR) from exc
    if arr.ndim != 1:
        raise InvalidInput(f"outcomes must be a 1D sequence, got {arr.ndim}D")
    if arr.size == 0:
        raise InvalidInput("outcomes must contain at least one value")

    if arr.dtype.kind == "b":
        valid = True
    elif arr.dtype.kind in "iuf":
        valid = bool(np.isin(arr, (0, 1)).all())
    elif arr.dtype.kind == "O":
        valid = all(_is_binary(value) for value in arr)
    else:
        valid = False
    if not valid:
        raise InvalidInput(OUTCOME_ERROR)

    return int(arr.astype(int).sum()), int(arr.size)


def binom_summary(
    outcomes: Sequence[Any] | np.ndarray,
    confidence: float = 0.95,
) -> BinomialSummary:
    """Compute the Agresti-Coull proportion and interval for binary outcomes.

    Parameters
    ----------
    outcomes : sequence or np.ndarray
        Booleans or zeros and ones; True and 1 are successes
    confidence : float, default=0.95
        Two-sided confidence level

    Returns
    -------
    BinomialSummary
        Counts, adjusted proportion and clamped interval

    Raises
    ------
    InvalidInput
        If ``outcomes`` is empty or holds anything but logical or zero/one
        values, or ``confidence`` is outside (0, 1)

    Examples
    --------
    >>> summary = binom_summary([1] * 14 + [0] * 6)
    >>> (summary.successes, summary.trials)
    (14, 20)
    """
    confidence = validate_confidence(confidence)
    successes, trials = count_successes(outcomes)
    logger.debug("binomial summary: %d successes in %d trials", successes, trials)

    ci = agresti_coull_interval(successes, trials, confidence)
    return BinomialSummary(
        successes=ci["successes"],
        trials=ci["trials"],
        statistic=ci["mean"],
        lower=ci["lower"],
        upper=ci["upper"],
        proportion=ci["proportion"],
        confidence=confidence,
    )
