from __future__ import annotations

from typing import Optional

from lisplib.config import color_enabled
from lisplib.types.atom import Atom, Boolean, InstructionAtom, Int, Key
from lisplib.types.expr import Application, Constant, Expr, If, IfElse, Quote

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_KEY = "\033[94m"
COLOR_INSTRUCTION = "\033[95m"
COLOR_LITERAL = "\033[92m"
COLOR_RESERVED_FORM = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "color": None,  # None: follow LISPLIB_COLOR / tty detection
}


def _use_color(options: dict) -> bool:
    color = options.get("color")
    return color_enabled() if color is None else bool(color)


def _paint(text: str, color: str, options: dict) -> str:
    return f"{color}{text}{RESET}" if _use_color(options) else text


# ----------------- Atoms -----------------
def format_atom(atom: Atom, options: Optional[dict] = None) -> str:
    """Render an atom in the concrete syntax the parser reads."""
    options = {**DEFAULT_OPTIONS, **(options or {})}
    if isinstance(atom, Int):
        return _paint(str(atom.value), COLOR_LITERAL, options)
    if isinstance(atom, Boolean):
        return _paint("t" if atom.value else "f", COLOR_LITERAL, options)
    if isinstance(atom, Key):
        return _paint(atom.name, COLOR_KEY, options)
    if isinstance(atom, InstructionAtom):
        return _paint(atom.instruction.token, COLOR_INSTRUCTION, options)
    raise TypeError(f"Cannot format {atom!r}: not an atom")


# ----------------- Pretty printer -----------------
def format_expr(expr: Expr, options: Optional[dict] = None, indent: int = 0) -> str:
    """Render a tree back to source text.

    Forms that fit in max_line_length stay on one line; longer ones put each
    operand on its own indented line.
    """
    options = {**DEFAULT_OPTIONS, **(options or {})}
    pad = "  " * indent

    if isinstance(expr, Constant):
        return format_atom(expr.atom, options)

    if isinstance(expr, Application):
        children = [expr.operator, *expr.operands]
        head = None
    elif isinstance(expr, If):
        children = [expr.condition, expr.then]
        head = "if"
    elif isinstance(expr, IfElse):
        children = [expr.condition, expr.then, expr.otherwise]
        head = "if"
    elif isinstance(expr, Quote):
        children = list(expr.exprs)
        head = "quote"
    else:
        raise TypeError(f"Cannot format {expr!r}: not an expression")

    parts = [format_expr(e, options, indent + 1) for e in children]
    if head is not None:
        parts.insert(0, _paint(head, COLOR_RESERVED_FORM, options))

    single_line = "(" + " ".join(parts) + ")"
    if len(single_line) + indent * 2 <= options["max_line_length"] or len(parts) < 2:
        return single_line

    aligned_lines = ["(" + parts[0]]
    for part in parts[1:]:
        aligned_lines.append(pad + "  " + part)
    aligned_lines[-1] += ")"
    return "\n".join(aligned_lines)


def pprint_expr(expr: Expr, options: Optional[dict] = None) -> None:
    print(format_expr(expr, options))
