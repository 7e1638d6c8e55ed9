"""Configuration system for probrange.

Provides configuration models for named generator tables and logging,
YAML loading and environment overrides.
"""

from __future__ import annotations

from probrange.config.env import ENV_PREFIX, load_from_env
from probrange.config.loader import load_config, load_yaml_file
from probrange.config.logging import LoggingConfig, configure_logging
from probrange.config.table import ProbRangeConfig, TableConfig

__all__ = [
    # Main config
    "ProbRangeConfig",
    # Config sections
    "TableConfig",
    "LoggingConfig",
    # Loading
    "load_config",
    "load_yaml_file",
    # Environment
    "ENV_PREFIX",
    "load_from_env",
    # Logging
    "configure_logging",
]
