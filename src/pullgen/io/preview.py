"""Define functions to display the leading values of generators in the terminal."""

from __future__ import annotations

from collections.abc import Mapping

from rich.table import Table

from pullgen.core import Generator

END_MARKER = "[dim]<end>[/]"
"""Cell text marking the position at which a generator's sequence ended."""


def pull_values(generator: Generator, num_values: int) -> list:
    """Pull up to `num_values` values from the generator, stopping early if it is exhausted."""
    if num_values < 0:
        raise ValueError(f"Cannot pull a negative number of values: {num_values}.")

    values = []
    while len(values) < num_values:
        value = generator.next_optional()
        if value is None:
            break
        values.append(value)

    return values


def preview_table(generators: Mapping[str, Generator], num_values: int) -> Table:
    """Create a table listing the leading values pulled from each of the given generators.

    Note: Pulling values advances each generator's state.

    :param generators: Map from generator names to the generators to be previewed
    :param num_values: Maximum number of values pulled from each generator
    :return: Table with one row per generator and one column per pulled value
    """
    table = Table(title="Generator Preview", border_style="cyan", title_style="bold cyan")
    table.add_column("Generator", style="bold")
    for i in range(num_values):
        table.add_column(str(i), justify="right")

    for name, generator in generators.items():
        cells = [str(v) for v in pull_values(generator, num_values)]
        if len(cells) < num_values:
            cells.append(END_MARKER)
            cells.extend("" for _ in range(num_values - len(cells)))
        table.add_row(name, *cells)

    return table
