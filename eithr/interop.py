"""
Conversions between Either and the neighbouring abstractions.

Conventions:
- ``Option``: a present value is the Right side. An absent value carries
  nothing, so the caller supplies the Left payload.
- ``Result``: ``Err`` is Left and ``Ok`` is Right. ``from_result`` and
  ``to_result`` are exact inverses.
- exceptions: ``try_either`` turns a raised exception into a Left holding
  the exception object itself.

``to_optional_left``/``to_optional_right`` are the only lossy conversions:
the side that is not selected is dropped on purpose.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from eithr.either import Either, Left, Right
from eithr.option import Empty, Option, Some
from eithr.result import Err, Ok, Result

logger = logging.getLogger(__name__)

L = TypeVar("L")
R = TypeVar("R")
E = TypeVar("E", bound=BaseException)


def from_optional(opt: Option[R], default_left: L) -> Either[L, R]:
    """``Some(v)`` -> ``Right(v)``; ``Empty`` -> ``Left(default_left)``."""
    return opt.fold(Left(default_left), Right)


def from_nullable(value: R | None, default_left: L) -> Either[L, R]:
    """``None`` -> ``Left(default_left)``; any other value -> ``Right(value)``."""
    if value is None:
        return Left(default_left)
    return Right(value)


def to_optional_left(value: Either[L, R]) -> Option[L]:
    """Keep the Left value; a Right value is discarded."""
    return value.fold(Some, lambda _: Empty())


def to_optional_right(value: Either[L, R]) -> Option[R]:
    """Keep the Right value; a Left value is discarded."""
    return value.fold(lambda _: Empty(), Some)


def from_result(result: Result[R, L]) -> Either[L, R]:
    """``Err(e)`` -> ``Left(e)``; ``Ok(v)`` -> ``Right(v)``."""
    return result.fold(Left, Right)


def to_result(value: Either[L, R]) -> Result[R, L]:
    """``Left(e)`` -> ``Err(e)``; ``Right(v)`` -> ``Ok(v)``."""
    return value.fold(Err, Ok)


def try_either(
    func: Callable[..., R],
    *args: Any,
    catch: type[E] | tuple[type[E], ...] = Exception,
    **kwargs: Any,
) -> Either[E, R]:
    """
    Call ``func(*args, **kwargs)`` and capture the outcome.

    Returns ``Right`` with the return value, or ``Left`` with the raised
    exception if it is an instance of ``catch``. Anything else propagates.
    """
    try:
        return Right(func(*args, **kwargs))
    except catch as e:
        logger.debug("try_either captured %s from %r", type(e).__name__, func)
        return Left(e)


__all__ = [
    "from_nullable",
    "from_optional",
    "from_result",
    "to_optional_left",
    "to_optional_right",
    "to_result",
    "try_either",
]
