"""Sub-range selection and expected value computation.

Selection works on a percentile scale: a single integer draw in [1, 100]
is walked down by each probability times 100, and the first sub-range at
which the running value reaches zero or below wins.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from probrange.data.range import SubRange
from probrange.errors import SelectionExhaustedError

logger = logging.getLogger(__name__)

PERCENTILE_MIN = 1
PERCENTILE_MAX = 100

_HUNDRED = Decimal(100)


def select_index(
    probabilities: Sequence[Decimal], draw: int, strict: bool = False
) -> int:
    """Select a sub-range index from a percentile draw.

    Parameters
    ----------
    probabilities : Sequence[Decimal]
        Probability of each sub-range, in order. Must be non-empty.
    draw : int
        Percentile draw in [1, 100].
    strict : bool
        Raise instead of falling back when no sub-range is selected.

    Returns
    -------
    int
        Index of the first probability at which the running value
        (draw minus the accumulated probabilities times 100) is <= 0.
        If the walk ends with a positive remainder, the last index.

    Raises
    ------
    SelectionExhaustedError
        If strict is True and no index is selected.

    Examples
    --------
    >>> from decimal import Decimal
    >>> probabilities = [Decimal("0.01"), Decimal("0.36"), Decimal("0.63")]
    >>> select_index(probabilities, 1)
    0
    >>> select_index(probabilities, 2)
    1
    >>> select_index(probabilities, 38)
    2
    """
    remaining = Decimal(draw)
    for index, probability in enumerate(probabilities):
        remaining -= probability * _HUNDRED
        if remaining <= 0:
            return index

    if strict:
        raise SelectionExhaustedError(draw, str(remaining))

    logger.warning(
        "No sub-range selected for draw %d (%s left), using last sub-range",
        draw,
        remaining,
    )
    return len(probabilities) - 1


def uniform_expected_value(min_value: int, max_value: int) -> float:
    """Expected value of a uniform draw over [min_value, max_value]."""
    return (min_value + max_value) / 2


def weighted_expected_value(
    ranges: Sequence[SubRange], probabilities: Sequence[Decimal]
) -> float:
    """Probability-weighted average of sub-range midpoints.

    This is the midpoint approximation of the expectation: every sub-range
    contributes (lo + hi) / 2 times its probability.

    Parameters
    ----------
    ranges : Sequence[SubRange]
        Sub-ranges from the partitioner.
    probabilities : Sequence[Decimal]
        Probability of each sub-range (same length as ranges).

    Returns
    -------
    float
        The weighted midpoint sum.
    """
    total = sum(
        (
            sub_range.midpoint * probability
            for sub_range, probability in zip(ranges, probabilities, strict=True)
        ),
        Decimal(0),
    )
    return float(total)
