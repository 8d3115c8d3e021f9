"""CLI entry point: classify the given arguments and print the result."""

import click
from click.core import ParameterSource
from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from cliargs.classifier import classify
from cliargs.exceptions import EmptyInputError
from cliargs.settings import Settings
from cliargs.setup_logging import setup_logging
from cliargs.utils.rendering import to_json, to_print_r, to_renderable

FORMATS = ["table", "json", "print_r"]


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise click.UsageError(f"Invalid settings: {e}") from e


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(FORMATS),
    default=None,
    help="Output format (default: table, or CLIARGS_OUTPUT_FORMAT).",
)
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Exit with status 1 when any token is malformed (or CLIARGS_STRICT).",
)
@click.version_option(package_name="cliargs")
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx: click.Context, fmt: str | None, strict: bool, tokens: tuple[str, ...]) -> None:
    """Sort TOKENS into commands, options with values, and errors.

    Options of this tool go first; use `--` to pass tokens that look like them.
    """
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)

    fmt = fmt or settings.output_format
    if ctx.get_parameter_source("strict") is ParameterSource.DEFAULT:
        strict = settings.strict

    try:
        parsed = classify(list(tokens))
    except EmptyInputError as e:
        raise click.UsageError(str(e)) from e

    match fmt:
        case "json":
            click.echo(to_json(parsed))
        case "print_r":
            click.echo(to_print_r(parsed))
        case _:
            Console().print(to_renderable(parsed))

    if strict and not parsed.ok:
        logger.error(f"malformed arguments: {parsed.errors}")
        raise SystemExit(1)
