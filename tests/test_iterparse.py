import pytest

from pekoms.errors import ParseError
from pekoms.iterparse import ParseIter, plus, sep_list, sep_list_plus, star


def guy(input):
    if input and input[0].isalnum():
        return input[0], input[1:]
    raise ParseError(None)


def bad_guy(input):
    if input == "" or input.startswith("f"):
        raise ParseError(None)
    return input[0], input[1:]


def comma(input):
    if input.startswith(","):
        return ",", input[1:]
    raise ParseError(None)


def test_star_consumes_everything():
    out, res = star(guy).parse("fish")
    assert out == ["f", "i", "s", "h"]
    assert res == ""


def test_star_stops_at_failure():
    out, res = star(bad_guy).parse("dangfish")
    assert out == ["d", "a", "n", "g"]
    assert res == "fish"


def test_star_zero_matches():
    out, res = star(bad_guy).parse("fish")
    assert out == []
    assert res == "fish"


def test_plus_fails_without_first_match():
    with pytest.raises(ParseError):
        plus(bad_guy).parse("fish")


def test_plus_collects():
    out, res = plus(bad_guy).parse("stabs")
    assert out == ["s", "t", "a", "b", "s"]
    assert res == ""


def test_sep_list_empty():
    out, res = sep_list(guy, comma).parse(",f,i,s,h")
    assert out == []
    assert res == ",f,i,s,h"


def test_sep_list_items():
    out, res = sep_list(guy, comma).parse("s,t,a,b,s")
    assert out == ["s", "t", "a", "b", "s"]
    assert res == ""


def test_sep_list_plus_fails_on_leading_separator():
    with pytest.raises(ParseError):
        sep_list_plus(guy, comma).parse(",f,i,s,h")


def test_sep_list_plus_items():
    out, res = sep_list_plus(guy, comma).parse("s,t,a,b,s")
    assert out == ["s", "t", "a", "b", "s"]
    assert res == ""


def test_sep_list_plus_single_item_without_separator():
    out, res = sep_list_plus(guy, comma).parse("s ffff")
    assert out == ["s"]
    assert res == " ffff"


def test_parse_iter_yields_and_remains():
    items = ParseIter(bad_guy, "abcfx")
    assert list(items) == ["a", "b", "c"]
    assert items.remains() == "fx"


def test_parse_iter_stays_exhausted():
    items = ParseIter(bad_guy, "f")
    with pytest.raises(StopIteration):
        next(items)
    assert items.remains() == "f"