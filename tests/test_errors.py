import pytest

from rlox.errors import (
    EmptyChunkError,
    LoxError,
    LoxRuntimeError,
    MissingValueError,
    OperationNotSupportedError,
    ParsingError,
)


def test_missing_value_message():
    assert str(MissingValueError()) == "Missing value error"


def test_empty_chunk_message():
    assert str(EmptyChunkError()) == "Empty chunk error"


def test_parsing_error_message():
    assert str(ParsingError()) == "Error while parsing"


def test_operation_not_supported_message_and_fields():
    err = OperationNotSupportedError(value_type="float", operation_type="+")
    assert err.value_type == "float"
    assert err.operation_type == "+"
    assert str(err) == "Operation + is not supported for value of type float"


@pytest.mark.parametrize(
    "error, base, message",
    [
        (MissingValueError(), LoxRuntimeError, "Missing value error"),
        (
            OperationNotSupportedError("float", "*"),
            LoxRuntimeError,
            "Operation * is not supported for value of type float",
        ),
        (EmptyChunkError(), LoxError, "Empty chunk error"),
        (ParsingError(), LoxError, "Error while parsing"),
    ],
)
def test_hierarchy(error, base, message):
    with pytest.raises(base) as info:
        raise error
    assert info.value is error
    assert str(info.value) == message


def test_runtime_errors_caught_as_lox_error():
    err = MissingValueError()
    message = str(err)
    assert message == "Missing value error"
    assert issubclass(MissingValueError, LoxRuntimeError)
    assert issubclass(LoxRuntimeError, LoxError)
    with pytest.raises(LoxError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == message