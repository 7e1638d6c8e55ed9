"""Environment variable overrides for probrange configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

from probrange.config.logging import LoggingConfig
from probrange.config.table import ProbRangeConfig
from probrange.errors import InvalidConfigError

ENV_PREFIX = "PROBRANGE_"


def load_from_env(
    config: ProbRangeConfig, environ: Mapping[str, str] | None = None
) -> ProbRangeConfig:
    """Apply PROBRANGE_* environment overrides to a configuration.

    Recognized variables:

    - PROBRANGE_LOG_LEVEL: logging level (e.g., "DEBUG").
    - PROBRANGE_SEED: seed given to every table that has none. Replay a
      simulation by setting PROBRANGE_SEED=<seed>.

    Parameters
    ----------
    config : ProbRangeConfig
        Configuration to override.
    environ : Mapping[str, str] | None
        Environment to read (default: os.environ).

    Returns
    -------
    ProbRangeConfig
        New configuration with overrides applied; the input is unchanged.

    Raises
    ------
    InvalidConfigError
        If PROBRANGE_SEED is not a non-negative integer.
    """
    env = os.environ if environ is None else environ
    updated = config.model_copy(deep=True)

    log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
    if log_level:
        updated.logging = LoggingConfig(
            **{**updated.logging.model_dump(), "level": log_level.upper()}
        )

    seed_str = env.get(f"{ENV_PREFIX}SEED")
    if seed_str:
        try:
            seed = int(seed_str)
        except ValueError as e:
            raise InvalidConfigError(
                f"{ENV_PREFIX}SEED must be an integer, got '{seed_str}'", field="seed"
            ) from e
        if seed < 0:
            raise InvalidConfigError(
                f"{ENV_PREFIX}SEED must be non-negative, got {seed}", field="seed"
            )
        for table in updated.tables.values():
            if table.seed is None:
                table.seed = seed

    return updated
