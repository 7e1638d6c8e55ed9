"""Table configuration models for the probrange package."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from probrange.config.logging import LoggingConfig
from probrange.errors import InvalidConfigError
from probrange.generator import USE_SAFE_RANGE, ProbabilityRandom, WeightedRange
from probrange.random_source import default_source
from probrange.validation import to_decimals


class TableConfig(BaseModel):
    """Configuration for one named weighted interval generator.

    Legality of proportions and probabilities is not checked here; it is
    checked when the table is finalized or drawn from, like any generator
    built in code.

    Parameters
    ----------
    min : int
        Interval lower bound (inclusive).
    max : int
        Interval upper bound (inclusive).
    use_safe_range : bool
        Bypass weighting when any sub-range is inverted.
    proportions : list[Decimal]
        Boundary proportions.
    probabilities : list[Decimal]
        Sub-range probabilities.
    seed : int | None
        Seed for a reproducible random source.
    strict_selection : bool
        Raise instead of falling back when a draw selects nothing.

    Examples
    --------
    >>> table = TableConfig(
    ...     min=1, max=1000, proportions=[0.5], probabilities=[0.9, 0.1], seed=3
    ... )
    >>> table.to_weighted_range().expected_value()
    300.5
    """

    model_config = ConfigDict(extra="forbid")

    min: int = Field(..., description="Interval lower bound")
    max: int = Field(..., description="Interval upper bound")
    use_safe_range: bool = Field(
        default=USE_SAFE_RANGE, description="Bypass weighting for unsafe ranges"
    )
    proportions: list[Decimal] = Field(
        default_factory=list, description="Boundary proportions"
    )
    probabilities: list[Decimal] = Field(
        default_factory=list, description="Sub-range probabilities"
    )
    seed: int | None = Field(default=None, ge=0, description="Random seed")
    strict_selection: bool = Field(
        default=False, description="Raise when a draw selects no sub-range"
    )

    @field_validator("proportions", "probabilities", mode="before")
    @classmethod
    def convert_numbers(cls, v: Any) -> list[Decimal]:
        """Convert YAML floats through str() to keep them exact."""
        if v is None:
            return []
        if not isinstance(v, list | tuple):
            raise ValueError("must be a list of numbers")
        return list(to_decimals(v))

    def to_generator(self, seed: int | None = None) -> ProbabilityRandom:
        """Build a ProbabilityRandom builder from this table.

        Parameters
        ----------
        seed : int | None
            Seed overriding the table's own seed.

        Raises
        ------
        InvalidConfigError
            If min > max.
        """
        source = default_source(seed if seed is not None else self.seed)
        return (
            ProbabilityRandom.build(
                self.min,
                self.max,
                use_safe_range=self.use_safe_range,
                source=source,
                strict_selection=self.strict_selection,
            )
            .set_proportions(self.proportions)
            .set_probabilities(self.probabilities)
        )

    def to_weighted_range(self, seed: int | None = None) -> WeightedRange:
        """Build and finalize the generator.

        Raises
        ------
        InvalidConfigError
            If the table is illegal.
        """
        return self.to_generator(seed=seed).finalize()


class ProbRangeConfig(BaseModel):
    """Top-level configuration: logging settings plus named tables.

    Parameters
    ----------
    logging : LoggingConfig
        Logging settings.
    tables : dict[str, TableConfig]
        Named generator tables.
    """

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tables: dict[str, TableConfig] = Field(default_factory=dict)

    def get_table(self, name: str | None = None) -> TableConfig:
        """Look up a table by name.

        Parameters
        ----------
        name : str | None
            Table name. May be omitted when exactly one table is configured.

        Returns
        -------
        TableConfig
            The table.

        Raises
        ------
        InvalidConfigError
            If the name is unknown, or omitted while the number of tables is
            not exactly one.
        """
        available = ", ".join(sorted(self.tables)) or "none"
        if name is None:
            if len(self.tables) != 1:
                raise InvalidConfigError(
                    f"a table name is required when the config has "
                    f"{len(self.tables)} tables (available: {available})",
                    field="tables",
                )
            return next(iter(self.tables.values()))

        if name not in self.tables:
            raise InvalidConfigError(
                f"unknown table '{name}' (available: {available})", field="tables"
            )
        return self.tables[name]

