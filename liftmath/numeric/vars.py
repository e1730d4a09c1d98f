"""Named numeric variables."""

from __future__ import annotations

from typing import Callable, Mapping

from liftmath.errors import MissingVariableError

Op = Callable[[float, float], float]


class Vars(dict):
    """A mapping of variable names to numeric values."""

    def access(self, name: str):
        """Return the value of ``name``, raising MissingVariableError if absent."""
        try:
            return self[name]
        except KeyError:
            raise MissingVariableError(
                f"Requested: {name} Have: {dict(self)}"
            ) from None

    def copy(self) -> "Vars":
        """Return a shallow copy as a new Vars."""
        return Vars(self)

    def apply(self, other: Mapping, op: Op) -> "Vars":
        """Combine each shared key in place with ``op(self[k], other[k])``.

        Keys only present in ``other`` are ignored. Errors raised by ``op``
        propagate, leaving earlier updates in place.
        """
        for key, other_value in other.items():
            if key in self:
                self[key] = op(self[key], other_value)
        return self

    def apply_const(self, const, op: Op) -> "Vars":
        """Replace every value in place with ``op(value, const)``."""
        for key, value in self.items():
            self[key] = op(value, const)
        return self