"""Least-squares linear regression over arbitrary summation ops.

A summation op computes one term of the model from the variables of a data
point. Linear regression finds constants ``b_i`` for the model
``y = b_1*f_1(x...) + b_2*f_2(x...) + ... + b_n*f_n(x...)`` where each
``f_i`` is a summation op.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Mapping, Sequence

from liftmath.errors import MatrixSingularToWorkingPrecisionError
from liftmath.numeric.matrix import Matrix, zero_fill
from liftmath.numeric.vars import Vars

SummationOp = Callable[[Vars], float]
SummationOpGen = Callable[
    [Sequence[str], str], "tuple[list[SummationOp], SummationOp]"
]


def _as_vars(vals: Mapping) -> Vars:
    return vals if isinstance(vals, Vars) else Vars(vals)


def const_summation_op(v) -> SummationOp:
    """A summation op that always yields ``v``."""
    return lambda vals: v


def linear_summation_op(name: str) -> SummationOp:
    """A summation op that yields the variable ``name``."""
    return lambda vals: vals.access(name)


def negated_linear_summation_op(name: str) -> SummationOp:
    """A summation op that yields the negated variable ``name``."""
    return lambda vals: -vals.access(name)


def const_sum_op_gen(v) -> SummationOpGen:
    """Return a generator making constant ops for every variable."""

    def gen(i_vars: Sequence[str], d_var: str):
        return [const_summation_op(v) for _ in i_vars], const_summation_op(v)

    return gen


def linear_sum_op_gen(i_vars: Sequence[str], d_var: str):
    """Linear ops for each independent variable and the dependent one."""
    return [linear_summation_op(name) for name in i_vars], linear_summation_op(d_var)


def linear_sum_op_gen_with_error(i_vars: Sequence[str], d_var: str):
    """Like ``linear_sum_op_gen`` with an extra constant (intercept) term."""
    ops = [linear_summation_op(name) for name in i_vars]
    ops.append(const_summation_op(1))
    return ops, linear_summation_op(d_var)


@dataclass
class LinRegResult:
    """The fitted constants, as a column matrix, with the ops they weight."""

    matrix: Matrix
    i_var_ops: Sequence[SummationOp]

    def get_constant(self, i: int):
        """Return the ``i``-th fitted constant, or zero if out of range."""
        if i < self.matrix.rows():
            return self.matrix.v[i][0]
        return 0

    def predict(self, i_vars: Mapping):
        """Evaluate the fitted model at the given independent variables."""
        vals = _as_vars(i_vars)
        total = 0
        for row, op in zip(self.matrix.v, self.i_var_ops):
            total += row[0] * op(vals)
        return total


class LinearReg:
    """Accumulates the normal equations ``A b = B`` from data points."""

    def __init__(self, i_var_ops: Sequence[SummationOp], d_var_op: SummationOp):
        self.i_var_ops = list(i_var_ops)
        self.d_var_op = d_var_op
        n = len(self.i_var_ops)
        self.a = Matrix.filled(n, n, zero_fill)
        self.b = Matrix.filled(n, 1, zero_fill)
        self.summation_ops = [
            [self._a_op(r, c) for c in range(n)] + [self._b_op(r)]
            for r in range(n)
        ]

    def _a_op(self, r: int, c: int) -> SummationOp:
        def op(vals: Vars):
            v1 = self.i_var_ops[c](vals)
            v2 = self.i_var_ops[r](vals)
            return v1 * v2

        return op

    def _b_op(self, r: int) -> SummationOp:
        def op(vals: Vars):
            v1 = self.d_var_op(vals)
            v2 = self.i_var_ops[r](vals)
            return v1 * v2

        return op

    def iter_summation_ops(self) -> Iterator[tuple[int, int, SummationOp]]:
        """Yield ``(row, col, op)`` for every summation op."""
        for r, row in enumerate(self.summation_ops):
            for c, op in enumerate(row):
                yield r, c, op

    def iter_lhs(self) -> Iterator[tuple[int, int, object]]:
        """Yield ``(row, col, value)`` of the left-hand side matrix."""
        return self.a.iter()

    def iter_rhs(self) -> Iterator[tuple[int, int, object]]:
        """Yield ``(row, col, value)`` of the right-hand side matrix."""
        return self.b.iter()

    def update_summations(self, vals: Mapping) -> None:
        """Add one data point to the accumulated sums.

        Raises MissingVariableError if an op needs an absent variable; sums
        updated before the failing op keep their new values.
        """
        vals = _as_vars(vals)
        n = self.a.cols()
        for r, row in enumerate(self.summation_ops):
            for c, op in enumerate(row):
                value = op(vals)
                if c < n:
                    self.a.v[r][c] += value
                else:
                    self.b.v[r][c - n] += value

    def run(self) -> tuple[LinRegResult, float]:
        """Solve for the constants; return the result and the rcond.

        Raises SingularMatrixError for a singular system. When the system is
        singular to working precision, the raised error carries ``result``
        and ``rcond``.
        """
        matrix = self.a.copy()
        try:
            rcond = matrix.inverse()
        except MatrixSingularToWorkingPrecisionError as err:
            matrix.mul(self.b)
            err.result = LinRegResult(matrix, self.i_var_ops)
            raise
        matrix.mul(self.b)
        return LinRegResult(matrix, self.i_var_ops), rcond