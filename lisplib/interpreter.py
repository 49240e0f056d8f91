import logging

from lisplib.errors import LispError, ParseError
from lisplib.evaluation.evaluator import evaluate
from lisplib.reader.parser import parse, parse_all
from lisplib.types.atom import Atom
from lisplib.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    An evaluation session for lisplib expressions.
    Keeps one Environment so definitions persist across calls to eval.
    """
    def __init__(self, env: Environment | None = None):
        self.env = env if env is not None else Environment()

    def eval(self, code: str) -> Atom | list[Atom] | None:
        """Parse every top-level expression in `code` and evaluate them in order.

        Returns the single result, a list when there are several, None when
        `code` holds no expression. The first error aborts the call; bindings
        made by earlier expressions are kept.
        """
        results = [evaluate(expr, self.env) for expr in parse_all(code)]
        if not results:
            return None
        if len(results) == 1:
            return results[0]
        return results

    def reset(self) -> None:
        """Drop every binding of the session."""
        self.env.clear()


DEMO_INPUTS = [
    "(+ 1 2 3)",
    "(- 1 2)",
    "(* 5 4)",
    "(/ 10 2)",
    "(define x 42)",
    "x",
    "'x'",
]


def run_demo(inputs=DEMO_INPUTS) -> None:
    """Parse and evaluate each input against one shared environment, printing
    the parsed tree and its result or error."""
    from lisplib.debug_utils.pprint import format_expr

    env = Environment()
    for code in inputs:
        try:
            expr = parse(code, require_complete=True)
        except ParseError as err:
            print(f"Parse error: {err}")
            logger.debug("parse failure for %r:\n%s", code, err.trace())
            continue
        print(f"Parsed expression: {expr!r}  ;; {format_expr(expr)}")
        try:
            print(f"Evaluated result: {evaluate(expr, env)!r}")
        except LispError as err:
            print(f"Error: {err}")


# Example usage:
if __name__ == "__main__":
    from lisplib.log_support import setup_loggers

    setup_loggers()
    run_demo()
