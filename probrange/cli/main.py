"""Main CLI entry point for probrange."""

from __future__ import annotations

import click

from probrange import __version__
from probrange.cli.tables import expect, ranges, sample, simulate, validate


@click.group()
@click.version_option(version=__version__, prog_name="probrange")
def cli() -> None:
    r"""Weighted random integers over partitioned intervals.

    Tables are read from a YAML file with a top-level "tables" mapping.

    \b
    Examples:
        $ probrange validate loot.yaml
        $ probrange ranges loot.yaml --table gold
        $ probrange sample loot.yaml --table gold -n 10 --seed 42
        $ probrange expect loot.yaml --table gold
        $ probrange simulate loot.yaml --table gold --tolerance 2
    """


cli.add_command(ranges)
cli.add_command(sample)
cli.add_command(expect)
cli.add_command(validate)
cli.add_command(simulate)
