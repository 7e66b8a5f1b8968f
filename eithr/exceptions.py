"""
Exception hierarchy for eithr.

Every operation in the library is total except the partial extractors
(``unwrap_left``/``unwrap_right`` and their Option/Result counterparts).
Calling one of those on the wrong variant is a bug at the call site and
surfaces as ``WrongVariantError``.
"""

import logging
import reprlib
from datetime import UTC, datetime

from eithr.config import get_config

logger = logging.getLogger(__name__)

type ErrorContextData = str | int | float | bool | datetime | None
type ErrorContextDict = dict[str, ErrorContextData]


class EithrError(Exception):
    """
    Base exception for all eithr errors.

    Carries a stable error code and structured context so callers can log
    the failure without parsing the message.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: ErrorContextDict | None = None,
        recoverable: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.recoverable = recoverable
        self.timestamp = datetime.now(UTC)

    def get_error_context(self) -> ErrorContextDict:
        """Get structured error context for logging and debugging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": str(self.context),
            "recoverable": self.recoverable,
            "timestamp": self.timestamp.isoformat(),
        }


class WrongVariantError(EithrError):
    """Raised when a value is extracted from the variant it does not hold."""

    def __init__(
        self,
        message: str,
        expected: str,
        actual: str,
        error_code: str | None = None,
    ):
        super().__init__(
            message,
            error_code=error_code,
            context={"expected": expected, "actual": actual},
            recoverable=False,
        )
        self.expected = expected
        self.actual = actual

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context.update({"expected": self.expected, "actual": self.actual})
        return context


_NO_VALUE = object()


def wrong_variant(
    operation: str, expected: str, actual: str, value: object = _NO_VALUE
) -> WrongVariantError:
    """Build (and log) the error for calling ``operation`` on the wrong variant."""
    config = get_config()
    shown = reprlib.Repr(maxother=config.repr_limit, maxstring=config.repr_limit)
    held = "" if value is _NO_VALUE else shown.repr(value)
    error = WrongVariantError(
        f"called {operation} on {actual}({held})",
        expected=expected,
        actual=actual,
    )
    if config.log_wrong_variant:
        logger.log(
            config.wrong_variant_log_levelno,
            "%s misuse: %s",
            operation,
            error.message,
            extra={"eithr_error": error.get_error_context()},
        )
    return error


__all__ = [
    "EithrError",
    "ErrorContextData",
    "ErrorContextDict",
    "WrongVariantError",
    "wrong_variant",
]
