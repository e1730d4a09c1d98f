# liftmath

A small math toolkit written in pure Python. It has no dependencies outside
the standard library.

## What is in it

- `liftmath.numeric.common` holds the basic numeric helpers:
  - `maximum`, `minimum` and `absolute`.
  - `sq_err` and `mean_sq_err`.
  - The range constraints `no_op_constraint`, `positive_constraint`,
    `negative_constraint` and `constrain`.
  - `num_range`, a generator over `start + k*step` that stops strictly short
    of `stop`.
  - The reducers `add`, `sub`, `mul` and `div`. `div` raises
    `DivByZeroError` when the divisor is zero.
- `liftmath.numeric.vars` provides `Vars`, a `dict` of named numbers. It adds
  `access`, `copy`, `apply` and `apply_const`.
- `liftmath.numeric.calculus` provides:
  - `derivative`, a five-point central difference.
  - `integral` and `double_integral`, both using Simpson's rule.
  - `const_integral_bound`, for fixed inner bounds.
- `liftmath.numeric.matrix` provides `Matrix`, a row-major matrix whose
  arithmetic modifies it in place:
  - Scalar and matrix `add`, `sub` and `mul`.
  - `transpose`, `equals` with a tolerance, and `inverse`, a Gauss–Jordan
    inverse that returns the reciprocal condition number.
  - The fill functions `zero_fill`, `identity_fill`, `const_fill`,
    `array_fill` and `duplicate_fill`, for use with `Matrix.filled`.
- `liftmath.numeric.linear_reg` provides `LinearReg`, which fits least squares
  over arbitrary summation ops one data point at a time. It also has the op
  helpers `const_summation_op`, `linear_summation_op`,
  `negated_linear_summation_op`, `const_sum_op_gen`, `linear_sum_op_gen` and
  `linear_sum_op_gen_with_error`. `LinearReg.run` returns a `LinRegResult`
  together with the rcond. The result offers `get_constant` and `predict`.
- `liftmath.symbolic.symbols` provides `Scalar`, `EuclideanVector`,
  `PolarVector`, `SymbolicVars` and `SymbolicError`. All of them are `Symbol`s.
  It also has `new_vector` and `copy_vector`.
- `liftmath.structreflect` provides helpers over dataclass instances:
  - `get_struct_name`, `get_struct_field_names`, `get_struct_vals` and
    `get_struct_field_refs`. The last returns `FieldRef` objects with `get`
    and `set`.
  - `is_struct_val`, `no_filter` and `get_error`.
- `liftmath.timeutil` provides `between`, which returns a predicate for times
  within a day of a span, and `days_between`.
- `liftmath.errors` holds every exception the package raises. They all derive
  from `MathError`.

## Installation

```
pip install .
```

## Examples

Fitting `y = b1*x1` by linear regression:

```python
from liftmath.numeric.linear_reg import LinearReg, linear_sum_op_gen

reg = LinearReg(*linear_sum_op_gen(["x1"], "y"))
for i in range(11):
    reg.update_summations({"x1": float(i), "y": float(i)})

result, rcond = reg.run()
result.get_constant(0)        # about 1.0
result.predict({"x1": 4.0})   # about 4.0
```

`predict` and `update_summations` raise `MissingVariableError` when a variable
they need is absent.

Inverting a matrix:

```python
from liftmath.numeric.matrix import Matrix, identity_fill

m = Matrix.filled(3, 3, identity_fill)
rcond = m.inverse()
```

`inverse` can raise three errors:

- `InverseOfNonSquareMatrixError` for a non-square matrix.
- `SingularMatrixError` when it meets a zero pivot.
- `MatrixSingularToWorkingPrecisionError` when the reciprocal condition number
  falls below `1e-16`. This error carries the value as `rcond`. When
  `LinearReg.run` raises it, the error also carries the partial `result`.

Integrating with Simpson's rule:

```python
from liftmath.numeric.calculus import integral, double_integral, const_integral_bound

area = integral(lambda x: x * x)(0.0, 3.0, 5)   # about 9.0
volume = double_integral(lambda x1, x2: 1.0)(
    0.0, 1.0, const_integral_bound(0.0), const_integral_bound(1.0), 3
)                                               # about 1.0
```

The number of points must be odd and at least 3, and the end must lie above
the start. Otherwise `InvalidValueError` is raised.

Symbolic arithmetic:

```python
from liftmath.symbolic.symbols import Scalar, EuclideanVector

v = EuclideanVector([Scalar(1), Scalar(2)]).mul(Scalar(3))   # [Scalar(3), Scalar(6)]
```

Symbolic operations never raise. An unsupported combination, a length mismatch
or a division by zero returns a `SymbolicError` that wraps the exception. Any
further operation passes that error along. The arithmetic of `PolarVector` and
`SymbolicVars` is not defined, and those operations return the object
unchanged.

## What it does not do

This is a library only. It has no command-line tool, and it does not store or
load data.

## Running the tests

```
pip install .[test]
pytest
```