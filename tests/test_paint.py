import pytest
from rich.text import Text

from clopts.paint import paint_value


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (3000, "3000"),
        (0.5, "0.5"),
        ("text", "text"),
        (["a", "b"], "[a, b]"),
        ([], "[]"),
        ({"a": "1"}, "{a: 1}"),
        ({"a": "1", "b": "2"}, "{ a: 1, b: 2 }"),
        ({"a": ["x", None]}, "{a: [x, null]}"),
    ],
)
def test_paint_value_plain_text(value, expected):
    assert Text.from_markup(paint_value(value)).plain == expected


def test_paint_value_escapes_markup():
    assert Text.from_markup(paint_value("[bold]x")).plain == "[bold]x"
