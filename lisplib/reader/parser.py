"""
  lisplib Reader: ordered-choice (PEG) parser

Grammar, leftmost alternative wins:

    integer     := digit+                                  -> Int (signed 32-bit)
    key         := (letter | "_") (letter | digit | "_")*  -> Key, reserved words excluded
    boolean     := ("t" | "f") whitespace*                 -> Boolean
    instruction := "+" | "-" | "*" | "/" | "=" | "not" | "define"
    atom        := integer | key | boolean | instruction
    constant    := atom                                    -> Constant
    application := "(" (whitespace* expr)+ whitespace* ")"  -> Application(head, tail)
    define      := "define" "(" whitespace* key "(" whitespace* expr whitespace* ")" ")"
    expr        := constant | application | define

- Reserved words (define, not, t, f) are never keys, so key and instruction stay
  mutually exclusive and `define` always reads as an instruction.
- Word instructions must end at whitespace, ")" or end of input.
- Whitespace is only skipped inside applications and after a boolean.
- Every rule records itself on the ParseError context stack when it fails.
- An integer that overflows, and anything after an application's "(", are committed
  failures: ordered choice does not backtrack past them.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

from lisplib.errors import ParseError, ParseErrorKind
from lisplib.types.atom import INT_MAX, Atom, Boolean, Instruction, InstructionAtom, Int, Key
from lisplib.types.expr import Application, Constant, Expr

logger = logging.getLogger(__name__)

T = TypeVar("T")

WHITESPACE = " \t\r\n"
DELIMITERS = WHITESPACE + ")"

INTEGER_RE = re.compile(r"[0-9]+")
KEY_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

RESERVED_WORDS = frozenset({"define", "not", "t", "f"})

BOOLEANS: dict[str, bool] = {"t": True, "f": False}

# Tried in this order
INSTRUCTION_TOKENS: tuple[tuple[str, Instruction], ...] = (
    ("+", Instruction.ADD),
    ("-", Instruction.SUBTRACT),
    ("*", Instruction.MULTIPLY),
    ("/", Instruction.DIVIDE),
    ("=", Instruction.EQUAL),
    ("not", Instruction.NOT),
    ("define", Instruction.DEFINE),
)


class Parser:
    """Recursive-descent parser over one input string.

    Each rule takes a start offset and returns (value, end offset), or raises
    ParseError. Rules are pure, so a parser can be reused for any offset.
    """

    def __init__(self, text: str):
        self.text = text
        self.length = len(text)

    # ------------------------
    # Helpers
    # ------------------------

    def fail(
        self, kind: ParseErrorKind, pos: int, detail: str = "", committed: bool = False
    ) -> ParseError:
        return ParseError(kind, self.text, pos, detail, committed)

    @contextmanager
    def context(self, name: str, pos: int) -> Iterator[None]:
        try:
            yield
        except ParseError as err:
            err.contexts.append((name, pos))
            raise

    def alt(self, pos: int, *rules: Callable[[int], tuple[T, int]]) -> tuple[T, int]:
        """Ordered choice: first rule to succeed wins.

        A committed failure aborts the choice. Otherwise the failure that got
        furthest into the input is raised, the earliest rule winning ties.
        """
        best: ParseError | None = None
        for rule in rules:
            try:
                return rule(pos)
            except ParseError as err:
                if err.committed:
                    raise
                if best is None or err.position > best.position:
                    best = err
        assert best is not None
        raise best

    def skip_ws(self, pos: int) -> int:
        while pos < self.length and self.text[pos] in WHITESPACE:
            pos += 1
        return pos

    def expect(self, pos: int, literal: str) -> int:
        if self.text.startswith(literal, pos):
            return pos + len(literal)
        raise self.fail(ParseErrorKind.EXPECTED_TOKEN, pos, f"expected {literal!r}")

    def at_delimiter(self, pos: int) -> bool:
        return pos >= self.length or self.text[pos] in DELIMITERS

    # ------------------------
    # Atoms
    # ------------------------

    def integer(self, pos: int) -> tuple[Int, int]:
        with self.context("integer", pos):
            m = INTEGER_RE.match(self.text, pos)
            if not m:
                raise self.fail(ParseErrorKind.EXPECTED_TOKEN, pos, "expected a digit")
            value = int(m.group())
            if value > INT_MAX:
                raise self.fail(
                    ParseErrorKind.MALFORMED_INTEGER,
                    pos,
                    f"{m.group()} does not fit in a signed 32-bit integer",
                    committed=True,
                )
            return Int(value), m.end()

    def key(self, pos: int) -> tuple[Key, int]:
        with self.context("key", pos):
            m = KEY_RE.match(self.text, pos)
            if not m:
                raise self.fail(ParseErrorKind.EXPECTED_TOKEN, pos, "expected an identifier")
            if m.group() in RESERVED_WORDS:
                raise self.fail(
                    ParseErrorKind.EXPECTED_TOKEN, pos, f"{m.group()!r} is a reserved word"
                )
            return Key(m.group()), m.end()

    def boolean(self, pos: int) -> tuple[Boolean, int]:
        with self.context("boolean", pos):
            if pos < self.length and self.text[pos] in BOOLEANS:
                return Boolean(BOOLEANS[self.text[pos]]), self.skip_ws(pos + 1)
            raise self.fail(ParseErrorKind.EXPECTED_TOKEN, pos, "expected 't' or 'f'")

    def instruction(self, pos: int) -> tuple[InstructionAtom, int]:
        with self.context("instruction", pos):
            for token, instruction in INSTRUCTION_TOKENS:
                if not self.text.startswith(token, pos):
                    continue
                end = pos + len(token)
                if token.isalpha() and not self.at_delimiter(end):
                    continue
                return InstructionAtom(instruction), end
            raise self.fail(ParseErrorKind.EXPECTED_TOKEN, pos, "expected an instruction")

    def atom(self, pos: int) -> tuple[Atom, int]:
        with self.context("atom", pos):
            try:
                return self.alt(pos, self.integer, self.key, self.boolean, self.instruction)
            except ParseError as err:
                if err.committed:
                    raise
                found = self.text[pos:pos + 1]
                raise self.fail(
                    ParseErrorKind.UNRECOGNIZED_ATOM,
                    pos,
                    f"unexpected {found!r}" if found else "unexpected end of input",
                ) from err

    # ------------------------
    # Expressions
    # ------------------------

    def constant(self, pos: int) -> tuple[Expr, int]:
        with self.context("constant", pos):
            atom, end = self.atom(pos)
            return Constant(atom), end

    def application(self, pos: int) -> tuple[Expr, int]:
        with self.context("application", pos):
            cur = self.expect(pos, "(")
            items: list[Expr] = []
            last_error: ParseError | None = None
            while True:
                try:
                    item, cur = self.expr(self.skip_ws(cur))
                except ParseError as err:
                    if err.committed:
                        raise
                    last_error = err
                    break
                items.append(item)

            end = self.skip_ws(cur)
            if end < self.length and self.text[end] == ")":
                if not items:
                    raise self.fail(
                        ParseErrorKind.EMPTY_APPLICATION,
                        pos,
                        "an application needs at least an operator",
                        committed=True,
                    )
                return Application(items[0], tuple(items[1:])), end + 1
            if end >= self.length:
                raise self.fail(
                    ParseErrorKind.UNTERMINATED_APPLICATION,
                    end,
                    "expected ')' before end of input",
                    committed=True,
                )
            assert last_error is not None
            last_error.committed = True
            raise last_error

    def define(self, pos: int) -> tuple[Expr, int]:
        with self.context("define", pos):
            cur = self.expect(pos, "define")
            cur = self.expect(cur, "(")
            name, cur = self.key(self.skip_ws(cur))
            cur = self.expect(cur, "(")
            value, cur = self.expr(self.skip_ws(cur))
            cur = self.expect(self.skip_ws(cur), ")")
            cur = self.expect(cur, ")")
            return Application(Constant(name), (value,)), cur

    def expr(self, pos: int) -> tuple[Expr, int]:
        with self.context("expr", pos):
            return self.alt(pos, self.constant, self.application, self.define)


# -----------------------------------------------------
# Entry points
# -----------------------------------------------------

def _run(rule: str, text: str) -> tuple[T, str]:
    value, end = getattr(Parser(text), rule)(0)
    return value, text[end:]


def parse_integer(text: str) -> tuple[Int, str]:
    return _run("integer", text)


def parse_key(text: str) -> tuple[Key, str]:
    return _run("key", text)


def parse_boolean(text: str) -> tuple[Boolean, str]:
    return _run("boolean", text)


def parse_instruction(text: str) -> tuple[InstructionAtom, str]:
    return _run("instruction", text)


def parse_atom(text: str) -> tuple[Atom, str]:
    return _run("atom", text)


def parse_constant(text: str) -> tuple[Expr, str]:
    return _run("constant", text)


def parse_application(text: str) -> tuple[Expr, str]:
    return _run("application", text)


def parse_define(text: str) -> tuple[Expr, str]:
    return _run("define", text)


def parse_expr(text: str) -> tuple[Expr, str]:
    return _run("expr", text)


def parse_prefix(text: str) -> tuple[Expr, str]:
    """Parse one expression at the start of `text`; return it and the unconsumed rest."""
    return parse_expr(text)


def parse(text: str, *, require_complete: bool = False) -> Expr:
    """Parse one expression starting at the first character of `text`.

    Leading whitespace is not skipped. Input after the expression is ignored
    unless `require_complete` is set, in which case it is a TRAILING_INPUT error.
    """
    parser = Parser(text)
    expr, end = parser.expr(0)
    if require_complete and end < parser.length:
        raise parser.fail(
            ParseErrorKind.TRAILING_INPUT,
            end,
            f"unexpected {text[end:end + 10]!r} after expression",
        )
    logger.debug("parsed %r -> %r", text, expr)
    return expr


def parse_all(text: str) -> list[Expr]:
    """Parse every whitespace-separated top-level expression in `text`."""
    parser = Parser(text)
    exprs: list[Expr] = []
    pos = parser.skip_ws(0)
    while pos < parser.length:
        expr, pos = parser.expr(pos)
        exprs.append(expr)
        pos = parser.skip_ws(pos)
    logger.debug("parsed %d expression(s) from %r", len(exprs), text)
    return exprs
