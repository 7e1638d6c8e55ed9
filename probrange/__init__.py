"""probrange - Weighted random integers over partitioned intervals.

Draw integers from [min, max] where contiguous sub-ranges of the interval
carry their own probabilities ("loot table" randomness), falling back to
uniform draws when the configuration is empty or the interval is too small
for it.
"""

from __future__ import annotations

from probrange.data.range import SubRange
from probrange.errors import (
    InvalidConfigError,
    ProbRangeError,
    RandomSourceError,
    SelectionExhaustedError,
)
from probrange.generator import USE_SAFE_RANGE, ProbabilityRandom, WeightedRange
from probrange.random_source import (
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    default_source,
)

__version__ = "0.1.0"

__all__ = [
    # Generators
    "ProbabilityRandom",
    "WeightedRange",
    "USE_SAFE_RANGE",
    # Data
    "SubRange",
    # Random sources
    "RandomSource",
    "SystemRandomSource",
    "SeededRandomSource",
    "default_source",
    # Errors
    "ProbRangeError",
    "InvalidConfigError",
    "RandomSourceError",
    "SelectionExhaustedError",
]
