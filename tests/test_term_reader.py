import io

import pytest

from mlisp.reader.term_reader import read_terms, read_terms_from_string
from mlisp.types.errors import MissingSymbol, UnexpectedSymbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", ["(+ 1 2)"]),
        ("(+ 1 2) (* 3 4)", ["(+ 1 2)", "(* 3 4)"]),
        ("(define x 1)\n\n(+ x\n   2)\n", ["(define x 1)", "(+ x    2)"]),
        ("x  (f y)", ["x", "(f y)"]),
        ("'(1 2) {3 4}", ["'(1 2)", "{3 4}"]),
        ("(head {1 (2)})", ["(head {1 (2)})"]),
        ("", []),
        ("   \n\t", []),
    ]
)
def test_read_terms(source, expected):
    assert read_terms_from_string(source) == expected


def test_read_terms_from_file_object():
    f = io.StringIO("(define x 1)\n(print x)\n")
    assert read_terms(f) == ["(define x 1)", "(print x)"]


def test_line_break_inside_term_separates_tokens():
    assert read_terms_from_string("(+ 1\n2)") == ["(+ 1 2)"]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("' (1 2)", ["'(1 2)"]),
        ("'\n(1 2) x", ["'(1 2)", "x"]),
        ("x '", ["x", "'"]),
    ]
)
def test_top_level_quote_joins_next_term(source, expected):
    assert read_terms_from_string(source) == expected


@pytest.mark.parametrize("source,char", [(")", ")"), ("(+ 1 2))", ")"), ("}", "}")])
def test_unexpected_closer(source, char):
    with pytest.raises(UnexpectedSymbol) as exc:
        read_terms_from_string(source)
    assert exc.value.char == char


@pytest.mark.parametrize("source,char", [("(+ 1 2", ")"), ("(a {b", "}"), ("{(a)", "}")])
def test_missing_closer(source, char):
    with pytest.raises(MissingSymbol) as exc:
        read_terms_from_string(source)
    assert exc.value.char == char
