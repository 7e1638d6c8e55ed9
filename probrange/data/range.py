"""Integer sub-range model produced by the range partitioner.

Provides the SubRange model for representing one [lo, hi] slice of a
generator interval, with well-formedness testing, containment testing and
midpoint computation.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class SubRange(BaseModel):
    """An integer sub-range with inclusive bounds.

    Unlike a validated range, a SubRange may be inverted (lo > hi). The
    partitioner is allowed to produce such ranges from oversized
    proportions; detecting them is left to the safety check.

    Attributes
    ----------
    lo
        Lower bound (inclusive).
    hi
        Upper bound (inclusive).

    Examples
    --------
    >>> sub_range = SubRange(lo=1, hi=40)
    >>> sub_range.is_well_formed
    True
    >>> sub_range.contains(40)
    True
    >>> sub_range.midpoint
    Decimal('20.5')

    >>> SubRange(lo=2, hi=1).is_well_formed
    False
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    lo: int
    hi: int

    @property
    def is_well_formed(self) -> bool:
        """Whether lo <= hi."""
        return self.lo <= self.hi

    @property
    def size(self) -> int:
        """Number of integers in the sub-range (0 when inverted)."""
        return max(0, self.hi - self.lo + 1)

    @property
    def midpoint(self) -> Decimal:
        """Exact midpoint (lo + hi) / 2."""
        return Decimal(self.lo + self.hi) / 2

    def contains(self, value: int) -> bool:
        """Check if a value is within the sub-range (inclusive).

        Parameters
        ----------
        value
            The value to check.

        Returns
        -------
        bool
            True if lo <= value <= hi, False otherwise. Always False for an
            inverted sub-range.

        Examples
        --------
        >>> r = SubRange(lo=41, hi=119)
        >>> r.contains(41)
        True
        >>> r.contains(120)
        False
        """
        return self.lo <= value <= self.hi

    def as_pair(self) -> tuple[int, int]:
        """Return the bounds as a (lo, hi) tuple."""
        return (self.lo, self.hi)
