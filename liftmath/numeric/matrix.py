"""Dense matrices of numbers with in-place arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterator

from liftmath.errors import (
    InverseOfNonSquareMatrixError,
    MatrixDimensionsDoNotAgreeError,
    MatrixSingularToWorkingPrecisionError,
    SingularMatrixError,
)
from liftmath.numeric.common import WORKING_PRECISION, absolute

Fill = Callable[[int, int], float]


def const_fill(v) -> Fill:
    """Return a fill that puts ``v`` in every cell."""
    return lambda r, c: v


_ZERO = const_fill(0)


def zero_fill(r: int, c: int):
    """Fill every cell with zero."""
    return _ZERO(r, c)


def identity_fill(r: int, c: int):
    """Fill the diagonal with one and everything else with zero."""
    return int(r == c)


def array_fill(vals) -> Fill:
    """Return a fill that copies values out of a nested sequence."""
    return lambda r, c: vals[r][c]


def duplicate_fill(m: "Matrix") -> Fill:
    """Return a fill that copies values out of another matrix."""
    return array_fill(m.v)


@dataclass
class Matrix:
    """A row-major matrix; arithmetic methods modify it in place."""

    v: list = field(default_factory=list)

    @classmethod
    def filled(cls, rows: int, cols: int, fill: Fill) -> "Matrix":
        """Create a ``rows`` x ``cols`` matrix whose cells are ``fill(r, c)``."""
        return cls([[fill(r, c) for c in range(cols)] for r in range(rows)])

    def copy(self) -> "Matrix":
        """Return an independent copy of the matrix."""
        return Matrix([list(row) for row in self.v])

    def rows(self) -> int:
        """Number of rows; zero if the rows hold no columns."""
        if self.v and not self.v[0]:
            return 0
        return len(self.v)

    def cols(self) -> int:
        """Number of columns."""
        return len(self.v[0]) if self.v else 0

    def fill(self, fill: Fill) -> None:
        """Overwrite every cell with ``fill(r, c)``."""
        for r, row in enumerate(self.v):
            for c in range(len(row)):
                row[c] = fill(r, c)

    def iter(self) -> Iterator[tuple[int, int, object]]:
        """Yield ``(row, col, value)`` for every cell in row-major order."""
        for r, row in enumerate(self.v):
            for c, value in enumerate(row):
                yield r, c, value

    def equals(self, other: "Matrix", tol) -> bool:
        """Return whether every cell differs from ``other`` by at most ``tol``."""
        self._check_same_dims(other)
        return all(
            absolute(a - b) <= tol
            for row, other_row in zip(self.v, other.v)
            for a, b in zip(row, other_row)
        )

    def _apply_scalar(self, op: Callable) -> None:
        for row in self.v:
            for c, value in enumerate(row):
                row[c] = op(value)

    def add_scalar(self, v) -> None:
        """Add ``v`` to every cell."""
        self._apply_scalar(lambda x: x + v)

    def sub_scalar(self, v) -> None:
        """Subtract ``v`` from every cell."""
        self._apply_scalar(lambda x: x - v)

    def mul_scalar(self, v) -> None:
        """Multiply every cell by ``v``."""
        self._apply_scalar(lambda x: x * v)

    def add(self, other: "Matrix") -> None:
        """Add ``other`` cell by cell."""
        self._check_same_dims(other)
        for row, other_row in zip(self.v, other.v):
            for c, value in enumerate(other_row):
                row[c] += value

    def sub(self, other: "Matrix") -> None:
        """Subtract ``other`` cell by cell."""
        self._check_same_dims(other)
        for row, other_row in zip(self.v, other.v):
            for c, value in enumerate(other_row):
                row[c] -= value

    def mul(self, other: "Matrix") -> None:
        """Replace the matrix with the product ``self x other``."""
        if self.cols() != other.rows():
            raise MatrixDimensionsDoNotAgreeError(
                f"[r1={self.rows()} c1={self.cols()}] "
                f"[r2={other.rows()} c2={other.cols()}] | Need c1=r2"
            )
        other_cols = [list(col) for col in zip(*other.v)] if other.rows() else []
        self.v = [
            [sum(a * b for a, b in zip(row, col)) for col in other_cols]
            for row in self.v[: self.rows()]
        ]

    def transpose(self) -> None:
        """Replace the matrix with its transpose."""
        if self.rows() == 0:
            self.v = []
            return
        self.v = [list(col) for col in zip(*self.v)]

    def inverse(self) -> float:
        """Invert the matrix in place by Gauss-Jordan elimination.

        Returns the reciprocal condition number: near 1 for a well
        conditioned matrix, near 0 for a badly conditioned one. Raises
        SingularMatrixError on a zero pivot, and
        MatrixSingularToWorkingPrecisionError, carrying ``rcond``, when the
        reciprocal condition number is below working precision; in that case
        the matrix still holds the computed inverse.
        """
        if self.cols() != self.rows():
            raise InverseOfNonSquareMatrixError(
                f"[r1={self.rows()} c1={self.cols()}] | Need r1=c1"
            )
        n = self.rows()
        col_max = absolute(self._max_col_sum())
        result = Matrix.filled(n, n, identity_fill)
        for i in range(n):
            pivot = self.v[i][i]
            if pivot == 0:
                raise SingularMatrixError(f"M[r={i} c={i}]=0")
            result._divide_row(i, pivot)
            self._divide_row(i, pivot)
            for j in range(n):
                if j != i:
                    _zero_val(self, result, i, j)
        self.v = result.v
        inv_col_max = absolute(self._max_col_sum())
        denom = col_max * inv_col_max
        rcond = 1.0 / float(denom) if denom else math.inf
        if rcond < WORKING_PRECISION:
            err = MatrixSingularToWorkingPrecisionError(f"RCOND={rcond:e}")
            err.rcond = rcond
            raise err
        return rcond

    def _max_col_sum(self):
        sums = [sum(col) for col in zip(*self.v)]
        return max(sums, default=0)

    def _divide_row(self, r: int, div_val) -> None:
        row = self.v[r]
        for c, value in enumerate(row):
            row[c] = value / div_val

    def _check_same_dims(self, other: "Matrix") -> None:
        if self.rows() != other.rows() or self.cols() != other.cols():
            raise MatrixDimensionsDoNotAgreeError(
                f"[r1={self.rows()} c1={self.cols()}] "
                f"[r2={other.rows()} c2={other.cols()}] | Need r1=r2 and c1=c2"
            )


def _zero_val(m1: Matrix, m2: Matrix, pivot: int, changed_row: int) -> None:
    mul_val = -m1.v[changed_row][pivot]
    row1, piv1 = m1.v[changed_row], m1.v[pivot]
    row2, piv2 = m2.v[changed_row], m2.v[pivot]
    for c in range(len(row1)):
        row1[c] += piv1[c] * mul_val
        row2[c] += piv2[c] * mul_val