"""Arithmetic instruction handlers.

Each handler receives the already-evaluated operands (left to right) and returns
an Int. Every operand is checked to be an Int before any folding starts.
Arithmetic is signed 32-bit: results outside the range raise ArithmeticOverflow
and division truncates toward zero.
"""

from __future__ import annotations

from typing import Callable, Sequence

from lisplib.errors import ArithmeticOverflow, ArityError, DivisionByZero, TypeMismatch
from lisplib.types.atom import INT_MAX, INT_MIN, Atom, Instruction, Int

InstructionHandler = Callable[[Sequence[Atom]], Atom]


def _integers(operands: Sequence[Atom], operation: str) -> list[int]:
    values = []
    for atom in operands:
        if not isinstance(atom, Int):
            raise TypeMismatch(operation, atom)
        values.append(atom.value)
    return values


def _checked(value: int, operation: str) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise ArithmeticOverflow(operation)
    return value


def _truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def add(operands: Sequence[Atom]) -> Int:
    """Sum of all operands; (+) is 0."""
    total = 0
    for x in _integers(operands, "addition"):
        total = _checked(total + x, "addition")
    return Int(total)


def subtract(operands: Sequence[Atom]) -> Int:
    """Fold left from the first operand: (- 10 3 2) is 5."""
    values = _integers(operands, "subtraction")
    if not values:
        raise ArityError("subtraction", "Expected at least one operand for subtraction")
    result = values[0]
    for x in values[1:]:
        result = _checked(result - x, "subtraction")
    return Int(result)


def multiply(operands: Sequence[Atom]) -> Int:
    """Product of all operands; (*) is 1."""
    product = 1
    for x in _integers(operands, "multiplication"):
        product = _checked(product * x, "multiplication")
    return Int(product)


def divide(operands: Sequence[Atom]) -> Int:
    """Fold left from the first operand, stopping at the first zero divisor."""
    values = _integers(operands, "division")
    if not values:
        raise ArityError("division", "Expected at least one operand for division")
    result = values[0]
    for x in values[1:]:
        if x == 0:
            raise DivisionByZero()
        result = _checked(_truncating_div(result, x), "division")
    return Int(result)


ARITHMETIC: dict[Instruction, InstructionHandler] = {
    Instruction.ADD: add,
    Instruction.SUBTRACT: subtract,
    Instruction.MULTIPLY: multiply,
    Instruction.DIVIDE: divide,
}
