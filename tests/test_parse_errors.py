import pytest

from lisplib.errors import EvalError, LispError, ParseError, ParseErrorKind
from lisplib.reader.parser import parse, parse_all, parse_key


def parse_error(source, **kwargs) -> ParseError:
    with pytest.raises(ParseError) as exc_info:
        parse(source, **kwargs)
    return exc_info.value


def test_empty_application():
    err = parse_error("()")
    assert err.kind is ParseErrorKind.EMPTY_APPLICATION
    assert err.position == 0
    assert err.rules == ["application", "expr"]


def test_empty_application_with_whitespace():
    assert parse_error("(   )").kind is ParseErrorKind.EMPTY_APPLICATION


def test_unterminated_application():
    err = parse_error("(+ 1 2")
    assert err.kind is ParseErrorKind.UNTERMINATED_APPLICATION
    assert err.position == 6
    assert err.contexts == [("application", 0), ("expr", 0)]


def test_nested_unterminated_application():
    err = parse_error("(+ 1 (* 2 3)")
    assert err.kind is ParseErrorKind.UNTERMINATED_APPLICATION
    assert err.rules == ["application", "expr"]


def test_integer_overflow_is_malformed_integer():
    err = parse_error("2147483648")
    assert err.kind is ParseErrorKind.MALFORMED_INTEGER
    assert err.position == 0
    assert err.rules == ["integer", "atom", "constant", "expr"]


def test_integer_overflow_inside_application():
    err = parse_error("(+ 1 99999999999)")
    assert err.kind is ParseErrorKind.MALFORMED_INTEGER
    assert err.position == 5
    assert err.rules == ["integer", "atom", "constant", "expr", "application", "expr"]


def test_unrecognized_atom():
    err = parse_error("'x'")
    assert err.kind is ParseErrorKind.UNRECOGNIZED_ATOM
    assert err.position == 0
    assert err.rules == ["atom", "constant", "expr"]


def test_unrecognized_atom_inside_application():
    err = parse_error("(+ 1 'x)")
    assert err.kind is ParseErrorKind.UNRECOGNIZED_ATOM
    assert err.position == 5
    assert err.rules == ["atom", "constant", "expr", "application", "expr"]


def test_leading_whitespace_is_not_skipped():
    err = parse_error(" 1")
    assert err.kind is ParseErrorKind.UNRECOGNIZED_ATOM
    assert err.position == 0


def test_empty_input():
    assert parse_error("").kind is ParseErrorKind.UNRECOGNIZED_ATOM


def test_require_complete_rejects_trailing_input():
    err = parse_error("1 2", require_complete=True)
    assert err.kind is ParseErrorKind.TRAILING_INPUT
    assert err.position == 1


def test_partial_define_sugar_reports_furthest_failure():
    err = parse_error("define(x 42)")
    assert err.kind is ParseErrorKind.EXPECTED_TOKEN
    assert err.position == 8
    assert err.rules == ["define", "expr"]


def test_reserved_word_is_not_a_key():
    with pytest.raises(ParseError) as exc_info:
        parse_key("define")
    assert exc_info.value.rules == ["key"]


def test_line_and_column():
    err = parse_error("(+ 1\n  'x)")
    assert err.position == 7
    assert (err.line, err.column) == (2, 3)
    assert "line 2, column 3" in str(err)


def test_trace_lists_rules_innermost_first():
    trace = parse_error("(+ 1 'x)").trace().splitlines()
    assert trace[0].startswith("unrecognized atom at offset 5")
    assert trace[1:] == [
        "  in atom at offset 5",
        "  in constant at offset 5",
        "  in expr at offset 5",
        "  in application at offset 0",
        "  in expr at offset 0",
    ]


def test_parse_all_propagates_errors():
    with pytest.raises(ParseError):
        parse_all("(+ 1 2) (")


def test_parse_error_is_not_an_eval_error():
    err = parse_error("()")
    assert isinstance(err, LispError)
    assert not isinstance(err, EvalError)
