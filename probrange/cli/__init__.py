"""Command-line interface.

Provides commands for inspecting, validating, sampling and simulating
weighted range tables defined in YAML configuration files.
"""

from __future__ import annotations

from probrange.cli.main import cli

__all__ = ["cli"]
