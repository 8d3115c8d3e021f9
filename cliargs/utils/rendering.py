import json
from typing import Any

from rich import box
from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from cliargs.models.parsed import ParsedArgs

PRINT_R_INDENT = 4


def get_rich_table(
    rows: list[list[str]],
    headers: list[str],
    *,
    title: str = "",
    style: str = "white",
) -> Table:
    assert not rows or len(headers) == len(rows[0]), (
        f"Number of headers must match number of columns in rows: {len(headers)} != {len(rows[0])}"
    )

    table = Table(
        title=title,
        show_lines=True,
        show_header=bool(headers),
        style=style,
        box=box.ROUNDED,
    )
    for header in headers:
        table.add_column(header, justify="left")
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))
    return table


def to_renderable(parsed: ParsedArgs) -> RenderableType:
    commands = get_rich_table(
        [[str(i), cmd] for i, cmd in enumerate(parsed.commands)],
        ["#", "command"],
        title="COMMANDS",
        style="cyan",
    )
    options = get_rich_table(
        [[opt, repr(value)] for opt, value in parsed.options.items()],
        ["option", "value"],
        title="OPTIONS",
        style="green",
    )
    errors = get_rich_table(
        [[str(i), err] for i, err in enumerate(parsed.errors)],
        ["#", "token"],
        title="ERRORS",
        style="red" if parsed.errors else "white",
    )
    return Group(commands, options, errors)


def to_json(parsed: ParsedArgs) -> str:
    return json.dumps(parsed.as_dict(), indent=2, ensure_ascii=False)


def _print_r_value(value: Any, indent: int) -> str:
    if isinstance(value, list):
        value = dict(enumerate(value))
    if not isinstance(value, dict):
        return str(value)
    pad = " " * indent
    inner = " " * (indent + PRINT_R_INDENT)
    lines = [f"Array\n{pad}(\n"]
    for key, item in value.items():
        nested = _print_r_value(item, indent + 2 * PRINT_R_INDENT)
        lines.append(f"{inner}[{key}] => {nested}\n")
    lines.append(f"{pad})\n")
    return "".join(lines)


def to_print_r(parsed: ParsedArgs) -> str:
    """Dump the result the way PHP's `print_r` prints a nested array."""
    return _print_r_value(parsed.as_dict(), 0)

