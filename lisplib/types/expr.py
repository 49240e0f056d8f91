"""Syntax tree nodes.

An `Expr` is either a `Constant` wrapping an atom or an `Application` of an
operator expression to an ordered tuple of operand expressions. `If`, `IfElse` and
`Quote` are part of the tree's shape but no parser rule builds them and the
evaluator rejects them.
"""

from __future__ import annotations

from dataclasses import dataclass

from lisplib.types.atom import Atom


class Expr:
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    atom: Atom


@dataclass(frozen=True, slots=True)
class Application(Expr):
    operator: Expr
    operands: tuple[Expr, ...] = ()

    def __post_init__(self):
        if not isinstance(self.operands, tuple):
            object.__setattr__(self, "operands", tuple(self.operands))


@dataclass(frozen=True, slots=True)
class If(Expr):
    condition: Expr
    then: Expr


@dataclass(frozen=True, slots=True)
class IfElse(Expr):
    condition: Expr
    then: Expr
    otherwise: Expr


@dataclass(frozen=True, slots=True)
class Quote(Expr):
    exprs: tuple[Expr, ...] = ()

    def __post_init__(self):
        if not isinstance(self.exprs, tuple):
            object.__setattr__(self, "exprs", tuple(self.exprs))
