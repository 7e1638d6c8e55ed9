"""Empirical summaries of generator output.

Used to check a configured table against its closed-form expected value:
draw a large sample, summarize it and compare the sample mean with
WeightedRange.expected_value().
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from probrange.data.range import SubRange


class SampleSummary(BaseModel):
    """Summary statistics of a sample of draws.

    Attributes
    ----------
    count : int
        Number of draws.
    mean : float
        Sample mean.
    std : float
        Population standard deviation of the sample.
    minimum : int
        Smallest draw.
    maximum : int
        Largest draw.
    range_frequencies : list[float]
        Fraction of draws falling into each sub-range, in sub-range order.
        Empty when no sub-ranges were given.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    count: int = Field(..., gt=0)
    mean: float
    std: float
    minimum: int
    maximum: int
    range_frequencies: list[float] = Field(default_factory=list)

    def mean_within(self, expected: float, tolerance: float) -> bool:
        """Check whether |mean - expected| <= tolerance."""
        return abs(self.mean - expected) <= tolerance


def summarize(
    values: Sequence[int], ranges: Sequence[SubRange] | None = None
) -> SampleSummary:
    """Summarize a sample of draws.

    Parameters
    ----------
    values : Sequence[int]
        Drawn integers (must be non-empty).
    ranges : Sequence[SubRange] | None
        Sub-ranges to compute hit frequencies for.

    Returns
    -------
    SampleSummary
        Summary statistics.

    Raises
    ------
    ValueError
        If values is empty.

    Examples
    --------
    >>> summary = summarize([1, 2, 3, 4], [SubRange(lo=1, hi=2), SubRange(lo=3, hi=4)])
    >>> summary.mean
    2.5
    >>> summary.range_frequencies
    [0.5, 0.5]
    """
    if len(values) == 0:
        raise ValueError("cannot summarize an empty sample")

    data = np.asarray(values, dtype=np.int64)
    frequencies: list[float] = []
    for sub_range in ranges or ():
        hits = np.count_nonzero((data >= sub_range.lo) & (data <= sub_range.hi))
        frequencies.append(float(hits) / data.size)

    return SampleSummary(
        count=int(data.size),
        mean=float(data.mean()),
        std=float(data.std()),
        minimum=int(data.min()),
        maximum=int(data.max()),
        range_frequencies=frequencies,
    )
