# Core type aliases for lisplib.
#
# Code (forms) is an Expr tree from lisplib.types.expr; runtime values are Atoms
# from lisplib.types.atom. The evaluator threads one mutable Environment through
# every recursive call.
#
# Naming guidance:
# - EvaluatorFn: the evaluator as passed into special forms, (expr, env) -> Atom.

from typing import Callable

# Evaluator function type: Python evaluator used inside special forms
EvaluatorFn = Callable[..., "Atom"]

__version__ = "0.1.0"

from lisplib.types.atom import Atom, Boolean, Instruction, InstructionAtom, Int, Key  # noqa: E402
from lisplib.types.expr import Application, Constant, Expr, If, IfElse, Quote  # noqa: E402
from lisplib.types.environment import Environment  # noqa: E402
from lisplib.reader.parser import parse, parse_all, parse_prefix  # noqa: E402
from lisplib.evaluation.evaluator import evaluate  # noqa: E402

__all__ = [
    "Atom", "Boolean", "Instruction", "InstructionAtom", "Int", "Key",
    "Application", "Constant", "Expr", "If", "IfElse", "Quote",
    "Environment",
    "parse", "parse_all", "parse_prefix",
    "evaluate",
]
