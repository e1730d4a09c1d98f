"""Symbolic values: scalars, vectors and the errors they produce.

Operations never raise. An operation that cannot be done returns a
``SymbolicError`` holding the exception, and every later operation passes
that error along, so a whole expression can be evaluated and checked once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, TypeVar, Union

from liftmath.errors import (
    DimensionsDoNotAgreeError,
    DivByZeroError,
    InvalidOperationError,
    MathError,
    MissingVariableError,
)

Number = Union[int, float]


class Symbol(ABC):
    """Something that takes part in symbolic arithmetic."""

    @abstractmethod
    def add(self, other: "Symbol") -> "Symbol":
        """Return ``self + other``."""

    @abstractmethod
    def sub(self, other: "Symbol") -> "Symbol":
        """Return ``self - other``."""

    @abstractmethod
    def mul(self, other: "Symbol") -> "Symbol":
        """Return ``self * other``."""

    @abstractmethod
    def div(self, other: "Symbol") -> "Symbol":
        """Return ``self / other``."""


@dataclass(frozen=True)
class SymbolicError(Symbol):
    """The result of an operation that failed; absorbs every later operation."""

    error: MathError

    def add(self, other: Symbol) -> Symbol:
        return self

    def sub(self, other: Symbol) -> Symbol:
        return self

    def mul(self, other: Symbol) -> Symbol:
        return self

    def div(self, other: Symbol) -> Symbol:
        return self


def _invalid(s1: Symbol, s2: Symbol, op: str) -> SymbolicError:
    return SymbolicError(
        InvalidOperationError(f"{type(s1).__name__} {op} {type(s2).__name__}")
    )


def _divide(a: Number, b: Number) -> Number:
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


@dataclass(frozen=True)
class Scalar(Symbol):
    """A single number."""

    v: Number

    def add(self, other: Symbol) -> Symbol:
        if isinstance(other, Scalar):
            return Scalar(self.v + other.v)
        if isinstance(other, SymbolicError):
            return other
        return _invalid(self, other, "+")

    def sub(self, other: Symbol) -> Symbol:
        if isinstance(other, Scalar):
            return Scalar(self.v - other.v)
        if isinstance(other, SymbolicError):
            return other
        return _invalid(self, other, "-")

    def mul(self, other: Symbol) -> Symbol:
        if isinstance(other, Scalar):
            return Scalar(self.v * other.v)
        if isinstance(other, EuclideanVector):
            return EuclideanVector(val.mul(self) for val in other)
        if isinstance(other, PolarVector):
            result = copy_vector(other)
            result[0] = result[0].mul(self)
            return result
        if isinstance(other, SymbolicError):
            return other
        return _invalid(self, other, "*")

    def div(self, other: Symbol) -> Symbol:
        if isinstance(other, Scalar):
            if other.v == 0:
                return SymbolicError(DivByZeroError(""))
            return Scalar(_divide(self.v, other.v))
        if isinstance(other, EuclideanVector):
            return EuclideanVector(val.div(self) for val in other)
        if isinstance(other, PolarVector):
            result = copy_vector(other)
            result[0] = result[0].div(self)
            return result
        if isinstance(other, SymbolicError):
            return other
        return _invalid(self, other, "/")


class EuclideanVector(list, Symbol):
    """A vector given by its components along each axis."""

    def _elementwise(
        self, other: "EuclideanVector", op: Callable[[Symbol, Symbol], Symbol]
    ) -> Symbol:
        if len(self) != len(other):
            return SymbolicError(
                DimensionsDoNotAgreeError(f"len(v1)={len(self)} len(v2)={len(other)}")
            )
        return EuclideanVector(op(a, b) for a, b in zip(self, other))

    def add(self, other: Symbol) -> Symbol:
        if isinstance(other, EuclideanVector):
            return self._elementwise(other, lambda a, b: a.add(b))
        if isinstance(other, SymbolicError):
            return other
        return _invalid(self, other, "+")

    def sub(self, other: Symbol) -> Symbol:
        if isinstance(other, EuclideanVector):
            return self._elementwise(other, lambda a, b: a.sub(b))
        if isinstance(other, SymbolicError):
            return other
        return _invalid(self, other, "-")

    def mul(self, other: Symbol) -> Symbol:
        if isinstance(other, Scalar):
            return EuclideanVector(val.mul(other) for val in self)
        if isinstance(other, SymbolicError):
            return other
        return _invalid(self, other, "*")

    def div(self, other: Symbol) -> Symbol:
        if isinstance(other, Scalar):
            return EuclideanVector(val.div(other) for val in self)
        if isinstance(other, SymbolicError):
            return other
        return _invalid(self, other, "/")


class PolarVector(list, Symbol):
    """A vector given by its radius followed by its angles.

    Its own operations are not defined yet and leave it unchanged.
    """

    def add(self, other: Symbol) -> Symbol:
        return self

    def sub(self, other: Symbol) -> Symbol:
        return self

    def mul(self, other: Symbol) -> Symbol:
        return self

    def div(self, other: Symbol) -> Symbol:
        return self


V = TypeVar("V", EuclideanVector, PolarVector)


def new_vector(kind: type, length: int):
    """Return a vector of the given kind with ``length`` empty slots."""
    if kind not in (EuclideanVector, PolarVector):
        raise TypeError(f"Not a vector type: {kind!r}")
    return kind([None] * length)


def copy_vector(v: V) -> V:
    """Return a shallow copy of a vector, keeping its kind."""
    return type(v)(v)


class SymbolicVars(dict, Symbol):
    """A mapping of variable names to symbols.

    Arithmetic on the mapping itself is not defined and leaves it unchanged.
    """

    def access(self, name: str) -> Symbol:
        """Return the symbol for ``name``, raising MissingVariableError if absent."""
        try:
            return self[name]
        except KeyError:
            raise MissingVariableError(
                f"Requested: {name} Have: {dict(self)}"
            ) from None

    def add(self, other: Symbol) -> Symbol:
        return self

    def sub(self, other: Symbol) -> Symbol:
        return self

    def mul(self, other: Symbol) -> Symbol:
        return self

    def div(self, other: Symbol) -> Symbol:
        return self