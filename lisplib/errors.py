from __future__ import annotations

from enum import Enum
from typing import Any


class LispError(Exception):
    """ Base class for all lisplib errors"""
    pass


# -----------------------------------------------------
# Parse errors
# -----------------------------------------------------

class ParseErrorKind(Enum):
    MALFORMED_INTEGER = "malformed integer"
    EMPTY_APPLICATION = "empty application"
    UNTERMINATED_APPLICATION = "unterminated application"
    UNRECOGNIZED_ATOM = "unrecognized atom"
    EXPECTED_TOKEN = "expected token"
    TRAILING_INPUT = "trailing input"


class ParseError(LispError):
    """ Raised when the text does not match the grammar.

    `contexts` is the stack of grammar rules that were active when the failure
    happened, innermost first, as (rule_name, offset) pairs. A `committed` error
    stops ordered choice from trying further alternatives.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        text: str,
        position: int,
        detail: str = "",
        committed: bool = False,
    ):
        self.kind = kind
        self.text = text
        self.position = position
        self.detail = detail
        self.committed = committed
        self.contexts: list[tuple[str, int]] = []
        super().__init__(kind, position)

    @property
    def line(self) -> int:
        return self.text.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        return self.position - (self.text.rfind("\n", 0, self.position) + 1) + 1

    @property
    def rules(self) -> list[str]:
        return [name for name, _ in self.contexts]

    def trace(self) -> str:
        """Render the rule context stack, innermost first, one rule per line."""
        lines = [f"{self.kind.value} at offset {self.position}: {self.detail or self._snippet()}"]
        for name, offset in self.contexts:
            lines.append(f"  in {name} at offset {offset}")
        return "\n".join(lines)

    def _snippet(self) -> str:
        rest = self.text[self.position:self.position + 10]
        return f"found {rest!r}" if rest else "found end of input"

    def __str__(self) -> str:
        where = f"line {self.line}, column {self.column}"
        inner = f" in {self.contexts[0][0]}" if self.contexts else ""
        msg = f"{self.kind.value} at {where}{inner}"
        if self.detail:
            msg += f": {self.detail}"
        return msg


# -----------------------------------------------------
# Evaluation errors
# -----------------------------------------------------

class EvalError(LispError):
    """ Base class for errors raised while reducing an expression"""
    pass


class UndefinedVariable(EvalError):
    """ Raised when a key is looked up before it is defined"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined variable: {name}")


class TypeMismatch(EvalError):
    """ Raised when an operand has the wrong atom kind for an operation"""

    def __init__(self, operation: str, found: Any = None, expected: str = "integers"):
        self.operation = operation
        self.found = found
        self.expected = expected
        msg = f"Expected {expected} for {operation}"
        if found is not None:
            msg += f", found {found!r}"
        super().__init__(msg)


class ArityError(EvalError):
    """ Raised when an operation receives the wrong number of operands"""

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        super().__init__(detail or f"Wrong number of operands for {operation}")


class DivisionByZero(EvalError):
    """ Raised when a divisor in a division fold is zero"""

    def __init__(self):
        super().__init__("Division by zero")


class ArithmeticOverflow(EvalError):
    """ Raised when an integer result leaves the signed 32-bit range"""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Integer overflow in {operation}")


class InvalidOperator(EvalError):
    """ Raised when an application's operator is neither an instruction nor define"""

    def __init__(self, operator: Any = None):
        self.operator = operator
        super().__init__(f"Expected an instruction or a keyword as the operator, found {operator!r}")


class UnsupportedInstruction(EvalError):
    """ Raised for instruction tags that have no evaluation rule"""

    def __init__(self, instruction: Any = None):
        self.instruction = instruction
        super().__init__(f"Unsupported instruction: {instruction}")


class UnsupportedExpression(EvalError):
    """ Raised for expression variants the evaluator does not reduce (if, quote)"""

    def __init__(self, expr: Any = None):
        self.expr = expr
        name = type(expr).__name__ if expr is not None else "expression"
        super().__init__(f"Unsupported expression: {name}")
