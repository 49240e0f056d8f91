"""Core tree-walking evaluator for lisplib.

Reduces an Expr to an Atom against a caller-owned Environment. Evaluation is a
plain recursive descent: children are fully evaluated before their parent, and
the first error raised aborts the whole call.
"""

from __future__ import annotations

import logging

from lisplib.errors import InvalidOperator, UnsupportedExpression, UnsupportedInstruction
from lisplib.evaluation.instructions import ARITHMETIC
from lisplib.evaluation.special_forms import SPECIAL_FORMS
from lisplib.types.atom import Atom, InstructionAtom, Key
from lisplib.types.environment import Environment
from lisplib.types.expr import Application, Constant, Expr, If, IfElse, Quote

logger = logging.getLogger(__name__)


def evaluate(expr: Expr, env: Environment) -> Atom:
    """Reduce `expr` to an atom, mutating `env` on define."""
    match expr:
        case Constant(atom=Key() as key):
            return env.lookup(key)

        case Constant(atom=atom):
            return atom

        case Application(operator=Constant(atom=head), operands=operands) if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](operands, env, evaluate)

        case Application(operator=Constant(atom=InstructionAtom(instruction=instruction)), operands=operands):
            # left to right; a define among the operands is visible to later ones
            args = [evaluate(operand, env) for operand in operands]
            handler = ARITHMETIC.get(instruction)
            if handler is None:
                raise UnsupportedInstruction(instruction)
            result = handler(args)
            logger.debug("%s %r -> %r", instruction, args, result)
            return result

        case Application(operator=operator):
            raise InvalidOperator(operator)

        case If() | IfElse() | Quote():
            raise UnsupportedExpression(expr)

    raise TypeError(f"Cannot evaluate {expr!r}: not an expression")
