"""Weighted interval generators.

This module provides the two-phase generator API:

- ProbabilityRandom: a mutable builder with chained setters for
  proportions and probabilities. Every query recomputes the sub-ranges from
  the current settings, so it must not be reconfigured while another thread
  queries it.
- WeightedRange: the immutable generator produced by
  ProbabilityRandom.finalize(). Its configuration is validated once and its
  sub-ranges are computed once, so it can be shared read-only.

Examples
--------
>>> from probrange.random_source import SeededRandomSource
>>> generator = (
...     ProbabilityRandom.build(1, 1000, source=SeededRandomSource(7))
...     .set_proportions([0.04, 0.08, 0.2, 0.08, 0.17])
...     .set_probabilities([0.01, 0.36, 0.34, 0.2, 0.06, 0.03])
... )
>>> [r.as_pair() for r in generator.actual_range_values()][:2]
[(1, 40), (41, 119)]
>>> 1 <= generator.random() <= 1000
True
>>> table = generator.finalize()
>>> round(table.expected_value(), 2)
227.49
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    field_validator,
    model_validator,
)

from probrange.data.range import SubRange
from probrange.errors import InvalidConfigError
from probrange.partition import actual_range_values, is_safe_range
from probrange.random_source import RandomSource, SystemRandomSource
from probrange.sampling import (
    PERCENTILE_MAX,
    PERCENTILE_MIN,
    select_index,
    uniform_expected_value,
    weighted_expected_value,
)
from probrange.validation import (
    Number,
    check_probabilities_setting_legal,
    check_range_setting_legal,
    to_decimals,
)

logger = logging.getLogger(__name__)

# Bypass weighting when the interval is too small for the configured
# proportions (otherwise a draw could be asked for an inverted sub-range).
USE_SAFE_RANGE = True


def _check_bounds(min_value: int, max_value: int) -> None:
    if min_value > max_value:
        raise InvalidConfigError(
            f"min ({min_value}) must be less than or equal to max ({max_value})",
            field="min",
        )


def _uses_weighting(
    use_safe_range: bool, proportions: Sequence[Decimal], ranges: Sequence[SubRange]
) -> bool:
    """Decide whether a draw goes through the sub-ranges or the full interval."""
    if use_safe_range and not is_safe_range(ranges):
        logger.debug("Sub-ranges %s are not safe, weighting bypassed", ranges)
        return False
    # Probabilities without proportions are accepted but still draw uniformly.
    return bool(proportions)


def _draw(
    source: RandomSource,
    min_value: int,
    max_value: int,
    weighted: bool,
    ranges: Sequence[SubRange],
    probabilities: Sequence[Decimal],
    strict: bool,
) -> int:
    if not weighted:
        return source.uniform(min_value, max_value)

    draw = source.uniform(PERCENTILE_MIN, PERCENTILE_MAX)
    selected = ranges[select_index(probabilities, draw, strict=strict)]
    return source.uniform(selected.lo, selected.hi)


class ProbabilityRandom:
    """Mutable builder for a weighted interval generator.

    Parameters
    ----------
    min_value : int
        Interval lower bound (inclusive).
    max_value : int
        Interval upper bound (inclusive).
    use_safe_range : bool
        Draw uniformly over the whole interval when any sub-range is
        inverted (default: True). With False, an inverted sub-range is
        passed to the random source, which raises RandomSourceError.
    source : RandomSource | None
        Uniform integer source (default: SystemRandomSource).
    strict_selection : bool
        Raise SelectionExhaustedError instead of falling back to the last
        sub-range when a draw selects nothing.

    Raises
    ------
    InvalidConfigError
        If min_value > max_value.
    """

    def __init__(
        self,
        min_value: int,
        max_value: int,
        use_safe_range: bool = USE_SAFE_RANGE,
        source: RandomSource | None = None,
        strict_selection: bool = False,
    ) -> None:
        _check_bounds(min_value, max_value)
        self._min = min_value
        self._max = max_value
        self._use_safe_range = use_safe_range
        self._source = source if source is not None else SystemRandomSource()
        self._strict_selection = strict_selection
        self._proportions: tuple[Number, ...] = ()
        self._probabilities: tuple[Number, ...] = ()

    @classmethod
    def build(
        cls,
        min_value: int,
        max_value: int,
        use_safe_range: bool = USE_SAFE_RANGE,
        source: RandomSource | None = None,
        strict_selection: bool = False,
    ) -> ProbabilityRandom:
        """Create a builder for [min_value, max_value].

        Raises
        ------
        InvalidConfigError
            If min_value > max_value.
        """
        return cls(
            min_value,
            max_value,
            use_safe_range=use_safe_range,
            source=source,
            strict_selection=strict_selection,
        )

    @property
    def min(self) -> int:
        """Interval lower bound."""
        return self._min

    @property
    def max(self) -> int:
        """Interval upper bound."""
        return self._max

    @property
    def use_safe_range(self) -> bool:
        """Whether inverted sub-ranges bypass weighting."""
        return self._use_safe_range

    @property
    def source(self) -> RandomSource:
        """The random source used for draws."""
        return self._source

    @property
    def proportions(self) -> tuple[Decimal, ...]:
        """Configured proportions as Decimals."""
        return to_decimals(self._proportions, field="proportions")

    @property
    def probabilities(self) -> tuple[Decimal, ...]:
        """Configured probabilities as Decimals."""
        return to_decimals(self._probabilities, field="probabilities")

    def set_proportions(
        self, proportions: Iterable[Number] | None
    ) -> ProbabilityRandom:
        """Replace the sub-range proportions (not validated here)."""
        self._proportions = tuple(proportions) if proportions is not None else ()
        return self

    def set_probabilities(
        self, probabilities: Iterable[Number] | None
    ) -> ProbabilityRandom:
        """Replace the sub-range probabilities (not validated here)."""
        self._probabilities = tuple(probabilities) if probabilities is not None else ()
        return self

    def actual_range_values(self) -> list[SubRange]:
        """Compute the sub-ranges for the current proportions."""
        return actual_range_values(self._min, self._max, self.proportions)

    def check_range_setting_legal(self) -> bool:
        """Check the probabilities count against the proportions count.

        Returns
        -------
        bool
            True when legal.

        Raises
        ------
        InvalidConfigError
            If the counts do not satisfy len(probabilities) == len(proportions) + 1
            and they are not both empty.
        """
        return check_range_setting_legal(self.proportions, self.probabilities)

    def check_probabilities_setting_legal(self) -> bool:
        """Check that probabilities lie in [0, 1] and sum to exactly 1.

        Raises
        ------
        InvalidConfigError
            If the probabilities are illegal.
        """
        return check_probabilities_setting_legal(self.probabilities)

    def is_safe_range(self) -> bool:
        """Whether every current sub-range satisfies lo <= hi."""
        return is_safe_range(self.actual_range_values())

    def random(self) -> int:
        """Draw a weighted random integer in [min, max].

        Returns
        -------
        int
            The drawn integer.

        Raises
        ------
        InvalidConfigError
            If the configuration is illegal.
        RandomSourceError
            If use_safe_range is False and the selected sub-range is inverted.
        SelectionExhaustedError
            If strict selection is enabled and no sub-range is selected.
        """
        self.check_range_setting_legal()
        self.check_probabilities_setting_legal()
        proportions = self.proportions
        ranges = actual_range_values(self._min, self._max, proportions)
        return _draw(
            self._source,
            self._min,
            self._max,
            _uses_weighting(self._use_safe_range, proportions, ranges),
            ranges,
            self.probabilities,
            self._strict_selection,
        )

    def expected_value(self) -> float:
        """Expected value of random() under the current settings.

        Returns (min + max) / 2 whenever random() would draw uniformly,
        otherwise the probability-weighted sum of sub-range midpoints.

        Raises
        ------
        InvalidConfigError
            If the configuration is illegal.
        """
        self.check_range_setting_legal()
        self.check_probabilities_setting_legal()
        proportions = self.proportions
        ranges = actual_range_values(self._min, self._max, proportions)
        if not _uses_weighting(self._use_safe_range, proportions, ranges):
            return uniform_expected_value(self._min, self._max)
        return weighted_expected_value(ranges, self.probabilities)

    def finalize(self) -> WeightedRange:
        """Validate the settings and freeze them into a WeightedRange.

        Raises
        ------
        InvalidConfigError
            If the configuration is illegal.
        """
        self.check_range_setting_legal()
        self.check_probabilities_setting_legal()
        weighted_range = WeightedRange(
            min=self._min,
            max=self._max,
            use_safe_range=self._use_safe_range,
            proportions=self.proportions,
            probabilities=self.probabilities,
            strict_selection=self._strict_selection,
        )
        return weighted_range.using(self._source)

    def __repr__(self) -> str:
        return (
            f"ProbabilityRandom(min={self._min}, max={self._max}, "
            f"use_safe_range={self._use_safe_range}, "
            f"proportions={list(self._proportions)}, "
            f"probabilities={list(self._probabilities)})"
        )


class WeightedRange(BaseModel):
    """Immutable, validated weighted interval generator.

    Usually obtained from ProbabilityRandom.finalize(). Constructing it
    directly validates the same rules, reported as a pydantic
    ValidationError.

    Attributes
    ----------
    min : int
        Interval lower bound (inclusive).
    max : int
        Interval upper bound (inclusive).
    use_safe_range : bool
        Whether inverted sub-ranges bypass weighting.
    proportions : tuple[Decimal, ...]
        Boundary proportions.
    probabilities : tuple[Decimal, ...]
        Sub-range probabilities, summing to exactly 1 when non-empty.
    strict_selection : bool
        Raise instead of falling back when a draw selects nothing.

    Examples
    --------
    >>> table = WeightedRange(
    ...     min=1, max=10, proportions=[0.5], probabilities=[0.5, 0.5]
    ... )
    >>> [r.as_pair() for r in table.ranges]
    [(1, 5), (6, 10)]
    >>> table.expected_value()
    5.5
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    min: int
    max: int
    use_safe_range: bool = USE_SAFE_RANGE
    proportions: tuple[Decimal, ...] = ()
    probabilities: tuple[Decimal, ...] = ()
    strict_selection: bool = False

    _ranges: tuple[SubRange, ...] = PrivateAttr(default=())
    _weighted: bool = PrivateAttr(default=False)
    _source: RandomSource = PrivateAttr(default_factory=SystemRandomSource)

    @field_validator("proportions", "probabilities", mode="before")
    @classmethod
    def convert_numbers(cls, v: Any) -> tuple[Decimal, ...]:
        """Convert floats through str() so 0.01 stays exactly 0.01."""
        return to_decimals(v)

    @model_validator(mode="after")
    def validate_settings(self) -> WeightedRange:
        """Validate bounds, counts and probabilities.

        Raises
        ------
        ValueError
            If the configuration is illegal.
        """
        _check_bounds(self.min, self.max)
        check_range_setting_legal(self.proportions, self.probabilities)
        check_probabilities_setting_legal(self.probabilities)
        return self

    def model_post_init(self, __context: Any) -> None:
        """Compute the sub-ranges once."""
        ranges = actual_range_values(self.min, self.max, self.proportions)
        self._ranges = tuple(ranges)
        self._weighted = _uses_weighting(self.use_safe_range, self.proportions, ranges)

    @property
    def ranges(self) -> tuple[SubRange, ...]:
        """The sub-ranges partitioning [min, max]."""
        return self._ranges

    @property
    def is_weighted(self) -> bool:
        """Whether draws go through the sub-ranges rather than uniformly."""
        return self._weighted

    @property
    def source(self) -> RandomSource:
        """The random source used for draws."""
        return self._source

    def using(self, source: RandomSource) -> WeightedRange:
        """Return a copy of this generator that draws from another source."""
        copy = self.model_copy()
        copy._source = source
        return copy

    def actual_range_values(self) -> list[SubRange]:
        """Return the sub-ranges as a list."""
        return list(self._ranges)

    def check_range_setting_legal(self) -> bool:
        """Always True: the counts are checked at construction."""
        return True

    def check_probabilities_setting_legal(self) -> bool:
        """Always True: the probabilities are checked at construction."""
        return True

    def is_safe_range(self) -> bool:
        """Whether every sub-range satisfies lo <= hi."""
        return is_safe_range(self._ranges)

    def random(self) -> int:
        """Draw a weighted random integer in [min, max].

        Raises
        ------
        RandomSourceError
            If use_safe_range is False and the selected sub-range is inverted.
        SelectionExhaustedError
            If strict selection is enabled and no sub-range is selected.
        """
        return _draw(
            self._source,
            self.min,
            self.max,
            self._weighted,
            self._ranges,
            self.probabilities,
            self.strict_selection,
        )

    def sample(self, count: int) -> list[int]:
        """Draw count values with random().

        Parameters
        ----------
        count : int
            Number of draws (must be >= 0).

        Returns
        -------
        list[int]
            The drawn values, in draw order.
        """
        if count < 0:
            raise ValueError(f"count ({count}) must be non-negative")
        return [self.random() for _ in range(count)]

    def expected_value(self) -> float:
        """Expected value of random().

        Returns
        -------
        float
            (min + max) / 2 for uniform draws, otherwise the
            probability-weighted sum of sub-range midpoints.
        """
        if not self._weighted:
            return uniform_expected_value(self.min, self.max)
        return weighted_expected_value(self._ranges, self.probabilities)
