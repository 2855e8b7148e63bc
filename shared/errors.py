"""Error taxonomy for the summary service.

All failures still surface to callers through one top-level handler, but
each carries an ``ErrorKind`` so logs, debug payloads and tests can tell a
model outage apart from a tracing outage or a bad request.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    MODEL = "model"
    TRACING = "tracing"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class SummaryError(Exception):
    """Base class for all application errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN


class RequestValidationError(SummaryError):
    """The request body is missing a required field or has the wrong shape."""

    kind = ErrorKind.VALIDATION


class ModelError(SummaryError):
    """The generative model call failed or returned no usable text."""

    kind = ErrorKind.MODEL


class TracingError(SummaryError):
    """The tracing backend rejected a trace, generation or end call."""

    kind = ErrorKind.TRACING


class ConfigurationError(SummaryError):
    """A required setting (for example an API key) is missing."""

    kind = ErrorKind.CONFIGURATION


def error_kind(exc: BaseException) -> ErrorKind:
    """Return the kind of ``exc``; foreign exceptions are ``UNKNOWN``."""
    if isinstance(exc, SummaryError):
        return exc.kind
    return ErrorKind.UNKNOWN


def original_error(exc: BaseException) -> BaseException:
    """Unwrap a ``SummaryError`` raised ``from`` another exception."""
    if isinstance(exc, SummaryError) and exc.__cause__ is not None:
        return exc.__cause__
    return exc
