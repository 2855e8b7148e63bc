from shared.errors import (
    ConfigurationError,
    ErrorKind,
    ModelError,
    RequestValidationError,
    TracingError,
    error_kind,
    original_error,
)


def test_error_kinds() -> None:
    assert error_kind(RequestValidationError("x")) is ErrorKind.VALIDATION
    assert error_kind(ModelError("x")) is ErrorKind.MODEL
    assert error_kind(TracingError("x")) is ErrorKind.TRACING
    assert error_kind(ConfigurationError("x")) is ErrorKind.CONFIGURATION
    assert error_kind(KeyError("x")) is ErrorKind.UNKNOWN


def test_original_error_unwraps_cause() -> None:
    cause = TimeoutError("deadline")
    try:
        raise ModelError("deadline") from cause
    except ModelError as e:
        assert original_error(e) is cause
    plain = ValueError("v")
    assert original_error(plain) is plain
