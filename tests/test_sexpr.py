import pytest

from pekoms.errors import ParseError
from pekoms.sexpr import Expr, Symbol, Text, expr, main, num, sym, txt


def test_nested_example():
    out, rest = expr(
        '(dogs (hogs 15)  (     logs  "the entire constitution here")     )'
    )
    assert out == Expr(
        "dogs",
        [
            Expr("hogs", [15]),
            Expr("logs", [Text('the entire constitution here"')]),
        ],
    )
    assert rest == ""


def test_bad_example_fails():
    with pytest.raises(ParseError):
        expr("fish (bats 34) igbort")


def test_expression_without_elements():
    assert expr("(a) tail") == (Expr("a", []), " tail")


def test_mixed_elements():
    out, rest = expr('(f -7 x "y")')
    assert out.head == "f"
    assert out.items == [-7, Symbol("x"), Text('y"')]
    assert rest == ""


def test_num_parses_negative():
    assert num("-42 rest") == (-42, " rest")


def test_num_rejects_out_of_range():
    with pytest.raises(ParseError):
        num(str(2**63))


def test_num_accepts_i64_max():
    value, rest = num(str(2**63 - 1))
    assert value == 2**63 - 1
    assert rest == ""


def test_sym_stops_at_non_lowercase():
    assert sym("abc1") == (Symbol("abc"), "1")


def test_sym_rejects_upper_case():
    with pytest.raises(ParseError):
        sym("Abc")


def test_txt_wraps_quoted_text():
    assert txt('"hi" x') == (Text('hi"'), " x")


def test_unclosed_expression_fails():
    with pytest.raises(ParseError):
        expr("(a 1 2")


def test_main_reports_results(capsys):
    assert main(["(a 1)", "nope"]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == repr((Expr("a", [1]), ""))
    assert lines[1].startswith("error")