from pekoms.basics import optional
from pekoms.errors import ParseError


def dot(inp):
    if inp.startswith("."):
        return ".", inp[1:]
    raise ParseError()


def dash(inp):
    if inp.startswith("-"):
        return "-", inp[1:]
    raise ParseError()


def test_optional():
    text = "."
    opt_dot = optional(dot)
    opt_dash = optional(dash)

    value, rest = opt_dot.parse(text)
    assert value == "."
    assert rest == ""

    value, rest = opt_dash.parse(text)
    assert value is None
    assert rest == text


def test_optional_on_empty_input():
    assert optional(dot).parse("") == (None, "")


def test_optional_keeps_remaining_input():
    assert optional(dash).parse("-.-") == ("-", ".-")
    assert optional(dot).parse("-.-") == (None, "-.-")