import io
import json

import pytest
from rich.console import Console

from cliargs.classifier import classify
from cliargs.utils.rendering import to_json, to_print_r, to_renderable

PRINT_R_SCENARIO_D = """\
Array
(
    [COMMANDS] => Array
        (
            [0] => foo
        )

    [OPTIONS] => Array
        (
            [-x] => bar
        )

    [ERRORS] => Array
        (
            [0] => baz
        )

)
"""

PRINT_R_EMPTY_GROUPS = """\
Array
(
    [COMMANDS] => Array
        (
        )

    [OPTIONS] => Array
        (
            [-x] => 
        )

    [ERRORS] => Array
        (
        )

)
"""


def test_print_r():
    assert to_print_r(classify(["foo", "-x", "bar", "baz"])) == PRINT_R_SCENARIO_D


def test_print_r_empty_groups():
    assert to_print_r(classify(["-x"])) == PRINT_R_EMPTY_GROUPS


def test_json():
    parsed = classify(["--option", "alpha", "-X", "-y", "beta"])
    assert json.loads(to_json(parsed)) == {
        "COMMANDS": [],
        "OPTIONS": {"--option": "alpha", "-X": "", "-y": "beta"},
        "ERRORS": [],
    }


def test_json_keeps_option_order():
    parsed = classify(["-b", "1", "-a", "2"])
    assert list(json.loads(to_json(parsed))["OPTIONS"]) == ["-b", "-a"]


def test_table():
    buf = io.StringIO()
    console = Console(file=buf, width=120, color_system=None)
    console.print(to_renderable(classify(["cmd1", "-x", "alpha", "oops"])))
    text = buf.getvalue()
    for expected in ("COMMANDS", "OPTIONS", "ERRORS", "cmd1", "-x", "'alpha'", "oops"):
        assert expected in text


@pytest.mark.parametrize(
    "token",
    [
        "[/red]",
        "[bold]x",
        ":smile:",
        "[link=https://example.com]y[/link]",
        "a[1]",
        "[",
    ],
)
def test_table_shows_tokens_verbatim(token):
    buf = io.StringIO()
    console = Console(file=buf, width=120, color_system=None)
    parsed = classify([token, "-x", token, token])
    assert parsed.commands == [token]
    assert parsed.options == {"-x": token}
    assert parsed.errors == [token]
    console.print(to_renderable(parsed))
    text = buf.getvalue()
    assert f"│ {token} " in text
    assert f"'{token}'" in text
    assert "😄" not in text
