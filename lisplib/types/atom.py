"""Atoms: the resolved scalar values of lisplib.

Four variants share the `Atom` base: `Int` (signed 32-bit), `Key` (identifier),
`Boolean` and `InstructionAtom` (a built-in operator tag). Atoms are immutable and
compare structurally, so they can be copied freely and used as dict keys.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


class Instruction(Enum):
    """Closed set of operator tags; the value is the token the parser recognises."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EQUAL = "="
    NOT = "not"
    DEFINE = "define"

    @property
    def token(self) -> str:
        return self.value

    def __str__(self):
        return self.value


class Atom:
    """Base class of all atom variants."""
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Int(Atom):
    value: int

    def __post_init__(self):
        # bool is an int subclass; keep the variants apart
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Int expects an int, got {self.value!r}")
        if not INT_MIN <= self.value <= INT_MAX:
            raise ValueError(f"{self.value} does not fit in a signed 32-bit integer")

    def __repr__(self):
        return f"Int({self.value})"


class Key(Atom):
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "name", sys.intern(name))

    def __setattr__(self, key, value):
        raise AttributeError("Key is immutable")

    def __eq__(self, other) -> bool:
        return isinstance(other, Key) and self.name == other.name

    def __hash__(self) -> int:
        return hash((Key, self.name))

    def __reduce__(self):
        return Key, (self.name,)

    def __repr__(self):
        return f"Key({self.name!r})"

    def __str__(self):
        return self.name


@dataclass(frozen=True, slots=True)
class Boolean(Atom):
    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError(f"Boolean expects a bool, got {self.value!r}")

    def __repr__(self):
        return f"Boolean({self.value})"


@dataclass(frozen=True, slots=True)
class InstructionAtom(Atom):
    instruction: Instruction

    def __repr__(self):
        return f"InstructionAtom({self.instruction.name})"


TRUE = Boolean(True)
FALSE = Boolean(False)
