import pytest

from pekoms.errors import ParseError
from pekoms.sequential import sequence
from pekoms.text import (
    alphanum,
    decimal,
    decimal_digits,
    digit,
    digits,
    end,
    integer,
    lower_w,
    one_of,
    pfx,
    quoted,
    spaces,
    word,
    ws,
)


def test_lower_w():
    assert lower_w("abcDEF") == ("abc", "DEF")
    with pytest.raises(ParseError):
        lower_w("Abc")


def test_word():
    assert word("hello_world2 rest") == ("hello_world2", " rest")
    assert word("abc") == ("abc", "")
    with pytest.raises(ParseError):
        word("2abc")
    with pytest.raises(ParseError):
        word("")


def test_alphanum_accepts_unicode():
    assert alphanum("héllo!") == ("héllo", "!")
    with pytest.raises(ParseError):
        alphanum("!x")


def test_digits_and_digit():
    assert digits("123abc") == ("123", "abc")
    assert digit("12") == ("1", "2")
    with pytest.raises(ParseError):
        digits("abc")
    with pytest.raises(ParseError):
        digit("x1")


def test_decimal_digits_single_dot():
    assert decimal_digits("3.14.15") == ("3.14", ".15")
    with pytest.raises(ParseError):
        decimal_digits("x")


def test_integer():
    assert integer("-42abc") == ("-42", "abc")
    assert integer("42") == ("42", "")
    with pytest.raises(ParseError):
        integer("-x")
    with pytest.raises(ParseError):
        integer("abc")


def test_decimal():
    assert decimal("-3.2,") == ("-3.2", ",")
    out, rest = decimal("15 ")
    assert out + rest == "15 "
    with pytest.raises(ParseError):
        decimal("-")


def test_ws_counts_ascii_whitespace():
    assert ws("  \t\nx") == (4, "x")
    with pytest.raises(ParseError):
        ws("\x0bx")
    with pytest.raises(ParseError):
        ws("x")


def test_spaces():
    assert spaces("   \tx") == (3, "\tx")
    with pytest.raises(ParseError):
        spaces("\t")


def test_end():
    assert end("") == ("", "")
    with pytest.raises(ParseError):
        end("a")


def test_pfx():
    assert pfx("null").parse("nullx") == ("null", "x")
    with pytest.raises(ParseError):
        pfx("null").parse("nul")


def test_one_of():
    sign = one_of("+-")
    assert sign.parse("-5") == ("-", "5")
    with pytest.raises(ParseError):
        sign.parse("5")
    with pytest.raises(ParseError):
        sign.parse("")


def test_quoted_includes_closing_quote():
    assert quoted('"hogs", x') == ('hogs"', ", x")
    with pytest.raises(ParseError):
        quoted("hogs")
    with pytest.raises(ParseError):
        quoted('"unterminated')


def test_parsers_compose():
    seq = sequence(pfx("("), lower_w, pfx(")"))
    assert seq.parse("(dogs)") == (("(", "dogs", ")"), "")
    with pytest.raises(ParseError):
        seq.parse("(Dogs)")


@pytest.mark.parametrize("func", [lower_w, word, alphanum, digits, integer, decimal])
def test_output_and_rest_rebuild_input(func):
    text = "abc123_x.5 rest"
    try:
        out, rest = func(text)
    except ParseError:
        out, rest = "", text
    assert out + rest == text