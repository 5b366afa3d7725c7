"""Define a command-line interface previewing the generators declared in a YAML file."""

from __future__ import annotations

from pathlib import Path

import click

from pullgen.io.generator_schemata import load_generators
from pullgen.io.logging import configure_logging, console, log_info
from pullgen.io.preview import preview_table


@click.command()
@click.argument("config_yaml", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--num-values", "-n", default=10, show_default=True, type=click.IntRange(min=0))
@click.option("--verbose", "-v", is_flag=True, help="Log debug messages.")
def preview_cli(config_yaml: Path, num_values: int, verbose: bool) -> None:
    """Print the leading values of each generator declared in CONFIG_YAML."""
    configure_logging(verbose)

    try:
        generators = load_generators(config_yaml)
    except (RuntimeError, KeyError) as err:
        console.print(f"[red]{err}[/]")
        raise SystemExit(1) from err

    try:
        log_info(f"Pulling up to {num_values} values from each generator...")
        console.print(preview_table(generators, num_values))
    except (TypeError, ValueError, ArithmeticError) as err:
        console.print(f"[red]Failed to pull values from a generator: {err}[/]")
        raise SystemExit(1) from err
    finally:
        for generator in generators.values():
            generator.close()
