import logging

from lisplib import EvaluatorFn
from lisplib.errors import ArityError, TypeMismatch
from lisplib.types.atom import Atom, Key
from lisplib.types.environment import Environment
from lisplib.types.expr import Constant, Expr

logger = logging.getLogger(__name__)


def define_form(
    operands: tuple[Expr, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Atom:
    """
    (define name value)
    The name slot is taken as written, never evaluated. Returns the defined key.
    """
    if len(operands) != 2:
        raise ArityError(
            "define",
            "The 'define' instruction requires exactly two operands: a variable name and its value",
        )

    target, val_expr = operands
    if not (isinstance(target, Constant) and isinstance(target.atom, Key)):
        raise TypeMismatch("define", target, expected="a variable name")

    value = evaluate_fn(val_expr, env)  # normal evaluation
    env.define(target.atom, value)
    logger.debug("define %s = %r", target.atom, value)
    return target.atom
