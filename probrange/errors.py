"""Exception classes for weighted range generation.

All errors raised by probrange derive from ProbRangeError so callers can
catch the whole family with a single handler.
"""

from __future__ import annotations


class ProbRangeError(Exception):
    """Base exception for all probrange errors."""


class InvalidConfigError(ProbRangeError, ValueError):
    """Raised when a generator configuration is illegal.

    Covers inverted bounds (min > max), a probabilities count that does not
    match the proportions count, probabilities outside [0, 1] and
    probabilities that do not sum to exactly 1.

    Parameters
    ----------
    message : str
        Error message.
    field : str | None
        Name of the offending setting (e.g., "probabilities").

    Examples
    --------
    >>> error = InvalidConfigError("probabilities must sum to 1", field="probabilities")
    >>> str(error)
    'probabilities must sum to 1'
    >>> error.field
    'probabilities'
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class RandomSourceError(ProbRangeError):
    """Raised by a random source asked to draw from an empty interval.

    Parameters
    ----------
    low : int
        Requested lower bound.
    high : int
        Requested upper bound.
    """

    def __init__(self, low: int, high: int) -> None:
        self.low = low
        self.high = high
        super().__init__(f"cannot draw from [{low}, {high}]: low must be <= high")


class SelectionExhaustedError(ProbRangeError):
    """Raised by strict selection when no cumulative threshold is reached.

    Parameters
    ----------
    draw : int
        The percentile draw in [1, 100] that was not consumed.
    remaining : str
        Remaining (positive) value after walking every probability.
    """

    def __init__(self, draw: int, remaining: str) -> None:
        self.draw = draw
        self.remaining = remaining
        super().__init__(
            f"no sub-range selected for draw {draw} "
            f"({remaining} left after walking all probabilities)"
        )
