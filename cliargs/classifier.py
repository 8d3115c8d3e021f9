from collections.abc import Sequence
from string import ascii_letters, digits

from loguru import logger

from cliargs.exceptions import BalanceInvariantError, EmptyInputError
from cliargs.models.parsed import ParsedArgs

SHORT_OPTION_CHARS = frozenset(ascii_letters)
LONG_OPTION_CHARS = frozenset(ascii_letters + digits + "_")
LONG_OPTION_MIN_LENGTH = 2


def is_short_option(token: str) -> bool:
    """`-` followed by exactly one letter, e.g. `-h`."""
    return (
        len(token) == 2
        and token[0] == "-"
        and token[1] in SHORT_OPTION_CHARS
    )


def is_long_option(token: str) -> bool:
    """`--` followed by two or more letters, digits or underscores, e.g. `--dry_run`."""
    if not token.startswith("--"):
        return False
    name = token[2:]
    return len(name) >= LONG_OPTION_MIN_LENGTH and all(
        ch in LONG_OPTION_CHARS for ch in name
    )


def is_option(token: str) -> bool:
    return is_short_option(token) or is_long_option(token)


def _check_balance(options: list[str], values: list[str]) -> int:
    balance = len(options) - len(values)
    if balance not in (0, 1):
        raise BalanceInvariantError(
            f"Difference between number of options and values is neither 0 nor 1: {balance}"
        )
    return balance


def classify(tokens: Sequence[str]) -> ParsedArgs:
    """
    Sort command line tokens into commands, options with their values, and errors.

    Commands come first; once an option has been seen, a bare token is the value of
    the pending option or, if that option already has one, an error.
    An option without a value gets an empty string.

    >>> classify(["cmd1", "cmd2", "-x", "-y", "alpha"])
    ParsedArgs(commands=['cmd1', 'cmd2'], options={'-x': '', '-y': 'alpha'}, errors=[])
    >>> classify(["foo", "-x", "bar", "baz"])
    ParsedArgs(commands=['foo'], options={'-x': 'bar'}, errors=['baz'])
    >>> classify(["-1"])
    ParsedArgs(commands=[], options={}, errors=['-1'])
    >>> classify([])
    Traceback (most recent call last):
        ...
    cliargs.exceptions.EmptyInputError: No commands or options given.

    Repeated options keep the position of their first occurrence and the value of the last.

    Raises
        EmptyInputError: If no tokens are given.
        BalanceInvariantError: If the option/value bookkeeping breaks (a bug, not bad input).
    """
    if not tokens:
        raise EmptyInputError("No commands or options given.")

    commands: list[str] = []
    options: list[str] = []
    values: list[str] = []
    errors: list[str] = []

    for token in tokens:
        balance = _check_balance(options, values)

        if not token.startswith("-"):
            if not options:
                logger.debug(f"{token!r}: command")
                commands.append(token)
            elif balance == 1:
                logger.debug(f"{token!r}: value of {options[-1]!r}")
                values.append(token)
            else:
                logger.debug(f"{token!r}: error, no option is waiting for a value")
                errors.append(token)
        elif not is_option(token):
            logger.debug(f"{token!r}: error, not a valid option")
            errors.append(token)
        else:
            if balance == 1:
                # the pending option never got a value
                values.append("")
            logger.debug(f"{token!r}: option")
            options.append(token)

    if len(options) > len(values):
        values.append("")

    if len(options) != len(values):
        raise BalanceInvariantError(
            f"Number of options and values are not equal: {len(options)} != {len(values)}"
        )

    parsed = ParsedArgs(
        commands=commands,
        options=dict(zip(options, values)),
        errors=errors,
    )
    logger.info(
        f"classified {len(tokens)} tokens: {len(parsed.commands)} commands, "
        f"{len(parsed.options)} options, {len(parsed.errors)} errors"
    )
    return parsed
