"""Table commands for the probrange CLI.

Each command reads a YAML configuration file holding one or more named
tables and operates on a single table (or on every table, for validate).
"""

from __future__ import annotations

import json
from pathlib import Path

import click
from pydantic import ValidationError
from rich.table import Table

from probrange.cli.utils import (
    console,
    format_percent,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from probrange.config import ProbRangeConfig, configure_logging, load_config
from probrange.errors import ProbRangeError
from probrange.stats import summarize

_config_argument = click.argument(
    "config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
_table_option = click.option(
    "--table",
    "table_name",
    type=str,
    default=None,
    help="Table name (optional when the file defines a single table)",
)
_seed_option = click.option(
    "--seed",
    type=click.IntRange(min=0),
    default=None,
    help="Random seed for reproducibility (overrides the table seed)",
)


def _load(config_file: Path) -> ProbRangeConfig:
    config = load_config(config_file)
    configure_logging(config.logging)
    return config


@click.command()
@_config_argument
@_table_option
@click.pass_context
def ranges(ctx: click.Context, config_file: Path, table_name: str | None) -> None:
    """Show the sub-ranges of a table.

    Parameters
    ----------
    ctx : click.Context
        Click context object.
    config_file : Path
        YAML configuration file.
    table_name : str | None
        Table to show.

    Examples
    --------
    $ probrange ranges loot.yaml --table gold
    """
    try:
        config = _load(config_file)
        generator = config.get_table(table_name).to_generator()
        generator.check_range_setting_legal()
        generator.check_probabilities_setting_legal()

        sub_ranges = generator.actual_range_values()
        probabilities = generator.probabilities

        table = Table(title=f"Sub-ranges of [{generator.min}, {generator.max}]")
        table.add_column("#", justify="right", style="yellow")
        table.add_column("Low", justify="right", style="cyan")
        table.add_column("High", justify="right", style="cyan")
        table.add_column("Probability", justify="right", style="green")
        table.add_column("Well-formed", justify="center")

        for index, sub_range in enumerate(sub_ranges):
            probability = (
                format_percent(probabilities[index]) if probabilities else "-"
            )
            table.add_row(
                str(index),
                str(sub_range.lo),
                str(sub_range.hi),
                probability,
                "yes" if sub_range.is_well_formed else "[red]no[/red]",
            )
        console.print(table)

        if not generator.is_safe_range():
            if generator.use_safe_range:
                print_warning("Sub-ranges are not safe: draws will be uniform")
            else:
                print_warning("Sub-ranges are not safe and the safe-range guard is off")

    except (ValidationError, ProbRangeError) as e:
        print_error(f"Invalid table: {e}")
        ctx.exit(1)


@click.command()
@_config_argument
@_table_option
@_seed_option
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    help="Number of values to draw (default: 1)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text, one value per line)",
)
@click.pass_context
def sample(
    ctx: click.Context,
    config_file: Path,
    table_name: str | None,
    seed: int | None,
    count: int,
    output_format: str,
) -> None:
    """Draw weighted random values from a table.

    Parameters
    ----------
    ctx : click.Context
        Click context object.
    config_file : Path
        YAML configuration file.
    table_name : str | None
        Table to draw from.
    seed : int | None
        Random seed.
    count : int
        Number of values to draw.
    output_format : str
        "text" or "json".

    Examples
    --------
    $ probrange sample loot.yaml --table gold -n 10 --seed 42
    """
    try:
        config = _load(config_file)
        weighted_range = config.get_table(table_name).to_weighted_range(seed=seed)
        values = weighted_range.sample(count)
    except (ValidationError, ProbRangeError) as e:
        print_error(f"Failed to sample: {e}")
        ctx.exit(1)

    if output_format == "json":
        click.echo(json.dumps(values))
    else:
        for value in values:
            click.echo(value)


@click.command()
@_config_argument
@_table_option
@click.pass_context
def expect(ctx: click.Context, config_file: Path, table_name: str | None) -> None:
    """Print the expected value of a table.

    Examples
    --------
    $ probrange expect loot.yaml --table gold
    """
    try:
        config = _load(config_file)
        weighted_range = config.get_table(table_name).to_weighted_range()
    except (ValidationError, ProbRangeError) as e:
        print_error(f"Invalid table: {e}")
        ctx.exit(1)

    click.echo(weighted_range.expected_value())


@click.command()
@_config_argument
@click.pass_context
def validate(ctx: click.Context, config_file: Path) -> None:
    """Validate every table in a configuration file.

    Exits with status 1 if any table is illegal. Tables whose sub-ranges
    are not safe are reported as warnings only.

    Examples
    --------
    $ probrange validate loot.yaml
    """
    try:
        config = _load(config_file)
    except (ValidationError, ProbRangeError) as e:
        print_error(f"Invalid configuration: {e}")
        ctx.exit(1)

    if not config.tables:
        print_warning("No tables defined")
        return

    failures = 0
    for name, table in config.tables.items():
        try:
            weighted_range = table.to_weighted_range()
        except ProbRangeError as e:
            print_error(f"{name}: {e}")
            failures += 1
            continue

        if not weighted_range.is_safe_range():
            print_warning(f"{name}: sub-ranges are not safe")
        print_success(f"{name}: valid")

    if failures:
        print_error(f"{failures} of {len(config.tables)} table(s) invalid")
        ctx.exit(1)


@click.command()
@_config_argument
@_table_option
@_seed_option
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=100_000,
    help="Number of draws (default: 100000)",
)
@click.option(
    "--tolerance",
    type=float,
    default=None,
    help="Fail if |mean - expected value| exceeds this tolerance",
)
@click.pass_context
def simulate(
    ctx: click.Context,
    config_file: Path,
    table_name: str | None,
    seed: int | None,
    count: int,
    tolerance: float | None,
) -> None:
    """Draw many values and compare the sample mean with the expected value.

    Parameters
    ----------
    ctx : click.Context
        Click context object.
    config_file : Path
        YAML configuration file.
    table_name : str | None
        Table to simulate.
    seed : int | None
        Random seed.
    count : int
        Number of draws.
    tolerance : float | None
        Maximum accepted distance between sample mean and expected value.

    Examples
    --------
    $ probrange simulate loot.yaml --table gold -n 100000 --seed 1 --tolerance 2
    """
    try:
        config = _load(config_file)
        weighted_range = config.get_table(table_name).to_weighted_range(seed=seed)
        print_info(f"Drawing {count} values")
        values = weighted_range.sample(count)
    except (ValidationError, ProbRangeError) as e:
        print_error(f"Failed to simulate: {e}")
        ctx.exit(1)

    summary = summarize(
        values, weighted_range.ranges if weighted_range.is_weighted else None
    )
    expected = weighted_range.expected_value()

    table = Table(title="Simulation summary")
    table.add_column("Statistic", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Draws", str(summary.count))
    table.add_row("Mean", f"{summary.mean:.4f}")
    table.add_row("Expected value", f"{expected:.4f}")
    table.add_row("Std", f"{summary.std:.4f}")
    table.add_row("Min", str(summary.minimum))
    table.add_row("Max", str(summary.maximum))
    console.print(table)

    if summary.range_frequencies:
        freq_table = Table(title="Sub-range frequencies")
        freq_table.add_column("#", justify="right", style="yellow")
        freq_table.add_column("Range", style="cyan")
        freq_table.add_column("Observed", justify="right", style="green")
        freq_table.add_column("Configured", justify="right")
        for index, (sub_range, frequency) in enumerate(
            zip(weighted_range.ranges, summary.range_frequencies, strict=True)
        ):
            freq_table.add_row(
                str(index),
                f"{sub_range.lo}-{sub_range.hi}",
                f"{frequency:.2%}",
                format_percent(weighted_range.probabilities[index]),
            )
        console.print(freq_table)

    if tolerance is not None:
        if summary.mean_within(expected, tolerance):
            print_success(f"Mean within {tolerance} of expected value")
        else:
            print_error(f"Mean differs from expected value by more than {tolerance}")
            ctx.exit(1)
