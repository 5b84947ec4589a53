# Argstyle CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Generates a Rich table view of parsed arguments.

Named arguments are listed in parse order and the positional default, when
present, is shown last.
"""
from typing import Mapping

from rich import box
from rich.table import Table
from rich.text import Text

from argstyle.parser import DEFAULT_KEY


def build_argument_table(
    arguments: Mapping[str, str | bool], title: str = "Arguments"
) -> Table:
    """Build a two-column table of argument names and values."""
    table = Table(title=title, box=box.SIMPLE)  # type: ignore[arg-type]
    table.add_column("Name", style="bold")
    table.add_column("Value")

    for name, value in arguments.items():
        if name == DEFAULT_KEY:
            continue
        table.add_row(Text(name), _render_value(value))

    if DEFAULT_KEY in arguments:
        table.add_row(Text("(positional)", style="italic"), _render_value(arguments[DEFAULT_KEY]))

    return table


def _render_value(value: str | bool) -> Text:
    if value is True:
        return Text("✔", style="green")
    return Text(str(value))
