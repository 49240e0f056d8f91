"""Runtime environment for lisplib.

The Environment is the single mutable binding scope of an evaluation session: a
mapping from variable names to atoms. The caller creates it, passes it to every
`evaluate` call that should share bindings, and drops it when done. There is no
parent link, so there is no nested scoping.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from lisplib.errors import UndefinedVariable
from lisplib.types.atom import Atom, Key


class Environment:
    """Flat mapping from variable names to atoms."""

    __slots__ = ("vars",)

    def __init__(self, bindings: dict[str, Atom] | None = None):
        self.vars: dict[str, Atom] = {}
        if bindings:
            for name, value in bindings.items():
                self.define(name, value)

    @staticmethod
    def _name(name: str | Key) -> str:
        if isinstance(name, Key):
            return name.name
        if not isinstance(name, str):
            raise TypeError(f"Cannot bind {name!r}: variable names are strings")
        return name

    def define(self, name: str | Key, value: Atom) -> None:
        """Bind `name` to `value`, overwriting any earlier binding."""
        if not isinstance(value, Atom):
            raise TypeError(f"Cannot bind {value!r}: environments hold atoms")
        self.vars[self._name(name)] = value

    def lookup(self, name: str | Key) -> Atom:
        """Return the atom bound to `name`.

        Raises UndefinedVariable if there is no binding.
        """
        key = self._name(name)
        try:
            return self.vars[key]
        except KeyError:
            raise UndefinedVariable(key) from None

    def get(self, name: str | Key, default: Atom | None = None) -> Atom | None:
        return self.vars.get(self._name(name), default)

    def snapshot(self) -> dict[str, Atom]:
        """Plain copy of the current bindings."""
        return dict(self.vars)

    def clear(self) -> None:
        self.vars.clear()

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Key):
            name = name.name
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
