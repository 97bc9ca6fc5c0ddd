"""Exception types raised by descriptives."""


class InvalidInput(ValueError):
    """Raised when an estimator receives values outside its domain.

    Covers non-binary outcomes, empty samples, samples too small for a
    variance estimate, and out-of-range ``repeats`` or ``confidence``.
    Subclasses ``ValueError`` so existing ``except ValueError`` handlers
    still catch it.
    """
