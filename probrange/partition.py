"""Range partitioner.

Turns a list of proportions into concrete integer sub-ranges covering
[min, max]. Each proportion scales the full span (max - min) and is added
onto the previous floored boundary, so later proportions are not fractions
of the remaining span:

    span = 999, proportions = [0.04, 0.08]
    first  = floor(1 + 999 * 0.04)   = 40   -> [1, 40]
    second = floor(40 + 999 * 0.08)  = 119  -> [41, 119]
    trailing                                -> [120, 1000]
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal

from probrange.data.range import SubRange


def actual_range_values(
    min_value: int, max_value: int, proportions: Sequence[Decimal]
) -> list[SubRange]:
    """Partition [min_value, max_value] into len(proportions) + 1 sub-ranges.

    Parameters
    ----------
    min_value : int
        Interval lower bound (inclusive).
    max_value : int
        Interval upper bound (inclusive).
    proportions : Sequence[Decimal]
        Boundary proportions, in order.

    Returns
    -------
    list[SubRange]
        Contiguous sub-ranges; the first starts at min_value, the last ends
        at max_value and each starts one past the previous end. Sub-ranges
        may be inverted when a proportion is too large or the span too
        small.

    Examples
    --------
    >>> from decimal import Decimal
    >>> ranges = actual_range_values(1, 1000, [Decimal("0.04"), Decimal("0.08")])
    >>> [r.as_pair() for r in ranges]
    [(1, 40), (41, 119), (120, 1000)]
    """
    span = max_value - min_value
    ranges: list[SubRange] = []
    last = min_value - 1

    for index, proportion in enumerate(proportions):
        base = min_value if index == 0 else last
        target = math.floor(base + span * proportion)
        ranges.append(SubRange(lo=last + 1, hi=target))
        last = target

    ranges.append(SubRange(lo=last + 1, hi=max_value))
    return ranges


def is_safe_range(ranges: Sequence[SubRange]) -> bool:
    """Return True iff every sub-range satisfies lo <= hi."""
    return all(sub_range.is_well_formed for sub_range in ranges)
