"""YAML configuration loading."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from probrange.config.env import load_from_env
from probrange.config.table import ProbRangeConfig
from probrange.errors import InvalidConfigError


def load_yaml_file(path: Path | str) -> dict[str, Any]:
    """Load a YAML file into a dictionary.

    Parameters
    ----------
    path : Path | str
        Path to the YAML file.

    Returns
    -------
    dict[str, Any]
        Parsed mapping (empty for an empty file).

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    InvalidConfigError
        If the file is not valid YAML or its top level is not a mapping.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigError(
            f"top level of {path} must be a mapping, got {type(data).__name__}"
        )
    return data


def load_config(
    path: Path | str,
    apply_env: bool = True,
    environ: Mapping[str, str] | None = None,
) -> ProbRangeConfig:
    """Load and validate a configuration file.

    Parameters
    ----------
    path : Path | str
        Path to the YAML file.
    apply_env : bool
        Apply PROBRANGE_* environment overrides (default: True).
    environ : Mapping[str, str] | None
        Environment to read overrides from (default: os.environ).

    Returns
    -------
    ProbRangeConfig
        Validated configuration.

    Raises
    ------
    pydantic.ValidationError
        If the file does not match the configuration schema.
    """
    config = ProbRangeConfig.model_validate(load_yaml_file(path))
    if apply_env:
        config = load_from_env(config, environ=environ)
    return config
