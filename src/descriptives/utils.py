"""Utility functions shared by the estimators."""

from collections.abc import Sequence

import numpy as np

from .exceptions import InvalidInput


def validate_confidence(confidence: float) -> float:
    """Check that ``confidence`` is a two-sided level strictly inside (0, 1).

    Parameters
    ----------
    confidence : float
        Confidence level (e.g., 0.95 for a 95% interval)

    Returns
    -------
    float
        The confidence level as a Python float

    Raises
    ------
    InvalidInput
        If confidence is not a real number in the open interval (0, 1)
    """
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float, np.integer, np.floating)):
        raise InvalidInput(f"confidence must be a number in (0, 1), got {confidence!r}")
    if not (0.0 < confidence < 1.0):
        raise InvalidInput(f"confidence must be in (0, 1), got {confidence}")
    return float(confidence)


def drop_missing(data: Sequence[float] | np.ndarray) -> np.ndarray:
    """Convert a sample to a float array with missing entries removed.

    NaN, +/-inf and ``None`` count as missing. The input is never modified;
    a new array is always returned.

    Parameters
    ----------
    data : sequence of float or np.ndarray
        One-dimensional numeric sample

    Returns
    -------
    np.ndarray
        Float array holding only the finite values, in their original order

    Raises
    ------
    InvalidInput
        If the sample is not one-dimensional or holds non-numeric or
        complex values

    Examples
    --------
    >>> drop_missing([1.0, None, 3.0, float("nan")])
    array([1., 3.])
    """
    try:
        raw = np.asarray(data)
    except ValueError as exc:
        raise InvalidInput("data must be a flat numeric sequence") from exc
    if raw.dtype.kind in "USVc":
        raise InvalidInput("data must be numeric")
    if raw.dtype.kind == "O":
        # None marks a missing entry
        raw = np.where(raw == None, np.nan, raw)  # noqa: E711
    try:
        values = raw.astype(float)
    except (TypeError, ValueError) as exc:
        raise InvalidInput("data must be numeric") from exc
    if values.ndim != 1:
        raise InvalidInput(f"data must be a 1D sequence, got {values.ndim}D")
    return values[np.isfinite(values)]


def resolve_rng(
    rng: np.random.Generator | None = None,
    random_seed: int | None = None,
) -> np.random.Generator:
    """Return the random generator an estimator should draw from.

    Parameters
    ----------
    rng : np.random.Generator, optional
        Caller-owned generator; used as is, so its state advances
    random_seed : int, optional
        Seed for a fresh PCG64 generator

    Returns
    -------
    np.random.Generator
        ``rng`` if given, else a generator seeded with ``random_seed``
        (unseeded when both are None)
    """
    if rng is not None and random_seed is not None:
        raise InvalidInput("Pass either rng or random_seed, not both")
    if rng is not None:
        if not isinstance(rng, np.random.Generator):
            raise InvalidInput(f"rng must be a numpy.random.Generator, got {type(rng).__name__}")
        return rng
    return np.random.default_rng(random_seed)
