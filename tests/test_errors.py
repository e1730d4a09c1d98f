import pytest

from liftmath.errors import (
    DimensionsDoNotAgreeError,
    DivByZeroError,
    InvalidOperationError,
    InvalidValueError,
    InverseOfNonSquareMatrixError,
    MathError,
    MatrixDimensionsDoNotAgreeError,
    MatrixSingularToWorkingPrecisionError,
    MissingVariableError,
    NonStructValueError,
    SingularMatrixError,
)


def test_every_error_is_a_math_error():
    errors = [
        DivByZeroError("a"),
        DimensionsDoNotAgreeError("b"),
        MatrixDimensionsDoNotAgreeError("c"),
        InverseOfNonSquareMatrixError("d"),
        SingularMatrixError("e"),
        MatrixSingularToWorkingPrecisionError("f"),
        MissingVariableError("g"),
        InvalidValueError("h"),
        NonStructValueError("i"),
        InvalidOperationError("j"),
    ]
    with pytest.raises(MathError) as info:
        raise errors[4]
    assert info.value.detail == "e"
    assert [err.detail for err in errors if isinstance(err, MathError)] == list(
        "abcdefghij"
    )


def test_message_without_detail_is_description():
    assert str(DivByZeroError()) == DivByZeroError.description
    assert str(SingularMatrixError()) == SingularMatrixError.description
    assert str(MissingVariableError()) == MissingVariableError.description
    assert str(InvalidOperationError()) == InvalidOperationError.description
    assert str(NonStructValueError()) == NonStructValueError.description
    assert InvalidValueError().detail == ""
    assert MatrixDimensionsDoNotAgreeError().detail == ""


def test_message_with_detail_keeps_both():
    err = InverseOfNonSquareMatrixError("extra info")
    assert str(err).startswith(InverseOfNonSquareMatrixError.description)
    assert str(err).endswith("extra info")
    assert err.detail == "extra info"

    other = MatrixSingularToWorkingPrecisionError("RCOND=1e-20")
    assert str(other).startswith(MatrixSingularToWorkingPrecisionError.description)
    assert str(other).endswith("RCOND=1e-20")
    assert other.detail == "RCOND=1e-20"


def test_div_by_zero_description_pinned():
    assert str(DivByZeroError()) == "Attempted division by zero."


@pytest.mark.parametrize(
    "error_cls, builtin, detail",
    [
        (DivByZeroError, ZeroDivisionError, "1/0"),
        (MissingVariableError, LookupError, "x"),
        (NonStructValueError, TypeError, "int"),
        (InvalidValueError, ValueError, "bad"),
    ],
)
def test_builtin_compatibility(error_cls, builtin, detail):
    err = error_cls(detail)
    caught = None
    try:
        raise err
    except builtin as exc:
        caught = exc
    assert caught is err
    assert caught.detail == detail
    message = str(caught)
    assert message.startswith(error_cls.description)
    assert message.endswith(detail)


def test_distinct_errors_are_not_confused():
    err = MatrixDimensionsDoNotAgreeError("m")
    assert isinstance(err, DimensionsDoNotAgreeError) is False
    assert err.detail == "m"
    assert str(err).startswith(MatrixDimensionsDoNotAgreeError.description)