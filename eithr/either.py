"""
Either type: a value that is one of exactly two alternatives.

``Left`` and ``Right`` are symmetric. Neither side means "error" to the type
itself; every combinator comes in a left-handed and a right-handed form.
The only place a bias shows up is the interop with ``Result``, where
``Right`` lines up with ``Ok`` ("right is right").

Every combinator is derived from ``fold``, which is the one eliminator:

    >>> Right(10).map_left(lambda x: x + 1)
    Right(10)
    >>> Right(10).map_right(lambda x: x * 2)
    Right(20)
    >>> Right(10).fold(lambda _: "L", lambda r: f"R:{r}")
    'R:10'
"""

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from eithr.exceptions import wrong_variant
from eithr.option import Empty, Option, Some

if TYPE_CHECKING:
    from eithr.result import Result

L = TypeVar("L")
R = TypeVar("R")
L2 = TypeVar("L2")
R2 = TypeVar("R2")
T = TypeVar("T")


class Either(Generic[L, R], ABC):
    """
    Abstract base class for Either.

    Build values with ``Left(v)``/``Right(v)`` or the ``left(v)``/``right(v)``
    factories; the ``left()``/``right()`` methods are accessors returning ``Option``.
    """

    __slots__ = ()

    @abstractmethod
    def fold(self, left_func: Callable[[L], T], right_func: Callable[[R], T]) -> T:
        """Apply ``left_func`` or ``right_func``, whichever matches the variant."""

    @abstractmethod
    def is_left(self) -> bool:
        """Check if this is a Left value."""

    def is_right(self) -> bool:
        """Check if this is a Right value."""
        return not self.is_left()

    # Inspection and extraction

    def left(self) -> Option[L]:
        """``Some`` with the Left value, ``Empty`` for a Right."""
        return self.fold(Some, lambda _: Empty())

    def right(self) -> Option[R]:
        """``Some`` with the Right value, ``Empty`` for a Left."""
        return self.fold(lambda _: Empty(), Some)

    def unwrap_left(self) -> L:
        """
        Return the Left value.

        Raises:
            WrongVariantError: if this is a Right.
        """
        fail = _raise_for("unwrap_left", "Left", "Right")
        return self.fold(lambda value: value, fail)

    def unwrap_right(self) -> R:
        """
        Return the Right value.

        Raises:
            WrongVariantError: if this is a Left.
        """
        fail = _raise_for("unwrap_right", "Right", "Left")
        return self.fold(fail, lambda value: value)

    def as_ref(self) -> "Either[L, R]":
        """
        Same variant, same held object.

        Nothing is copied: mutating the held object through the view is visible
        through the original.
        """
        return self.fold(Left, Right)

    def copied(self) -> "Either[L, R]":
        """Same variant holding a shallow copy of the value."""
        return self.fold(
            lambda value: Left(copy.copy(value)),
            lambda value: Right(copy.copy(value)),
        )

    def cloned(self) -> "Either[L, R]":
        """Same variant holding a deep copy of the value."""
        return self.fold(
            lambda value: Left(copy.deepcopy(value)),
            lambda value: Right(copy.deepcopy(value)),
        )

    def into_iter(self) -> "Either[Iterator[Any], Iterator[Any]]":
        """Same variant holding an iterator over the (iterable) value."""
        return self.fold(
            lambda value: Left(iter(cast("Iterable[Any]", value))),
            lambda value: Right(iter(cast("Iterable[Any]", value))),
        )

    # Transformations

    def map_left(self, func: Callable[[L], L2]) -> "Either[L2, R]":
        """Map function over Left value, preserving Right."""
        return self.fold(lambda value: Left(func(value)), Right)

    def map_right(self, func: Callable[[R], R2]) -> "Either[L, R2]":
        """Map function over Right value, preserving Left."""
        return self.fold(Left, lambda value: Right(func(value)))

    def bimap(
        self, left_func: Callable[[L], L2], right_func: Callable[[R], R2]
    ) -> "Either[L2, R2]":
        """Map whichever side is present; the other function is never called."""
        return self.fold(
            lambda value: Left(left_func(value)),
            lambda value: Right(right_func(value)),
        )

    def and_then_left(self, func: Callable[[L], "Either[L2, R]"]) -> "Either[L2, R]":
        """Chain a computation on the Left value; a Right passes through."""
        return self.fold(func, Right)

    def and_then_right(self, func: Callable[[R], "Either[L, R2]"]) -> "Either[L, R2]":
        """Chain a computation on the Right value; a Left passes through."""
        return self.fold(Left, func)

    def swap(self) -> "Either[R, L]":
        """Exchange the sides without touching the value."""
        return self.fold(Right, Left)

    transpose = swap

    def resolve(self, left_func: Callable[[L], T], right_func: Callable[[R], T]) -> T:
        """Alias of ``fold``."""
        return self.fold(left_func, right_func)

    # Conversions (implemented in eithr.interop)

    def to_optional_left(self) -> Option[L]:
        """Left value as an Option; a Right value is dropped."""
        from eithr.interop import to_optional_left

        return to_optional_left(self)

    def to_optional_right(self) -> Option[R]:
        """Right value as an Option; a Left value is dropped."""
        from eithr.interop import to_optional_right

        return to_optional_right(self)

    def to_result(self) -> "Result[R, L]":
        """``Right`` becomes ``Ok`` and ``Left`` becomes ``Err``."""
        from eithr.interop import to_result

        return to_result(self)

    @staticmethod
    def from_optional(opt: Option[R], default_left: L) -> "Either[L, R]":
        """``Some(v)`` -> ``Right(v)``; ``Empty`` -> ``Left(default_left)``."""
        from eithr.interop import from_optional

        return from_optional(opt, default_left)

    @staticmethod
    def from_nullable(value: R | None, default_left: L) -> "Either[L, R]":
        """``None`` becomes ``Left(default_left)``, anything else ``Right(value)``."""
        from eithr.interop import from_nullable

        return from_nullable(value, default_left)

    @staticmethod
    def from_result(result: "Result[R, L]") -> "Either[L, R]":
        """``Err(e)`` becomes ``Left(e)`` and ``Ok(v)`` becomes ``Right(v)``."""
        from eithr.interop import from_result

        return from_result(result)


@dataclass(frozen=True, slots=True)
class Left(Either[L, R]):
    """The Left alternative."""

    value: L

    def fold(self, left_func: Callable[[L], T], right_func: Callable[[R], T]) -> T:
        return left_func(self.value)

    def is_left(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True, slots=True)
class Right(Either[L, R]):
    """The Right alternative."""

    value: R

    def fold(self, left_func: Callable[[L], T], right_func: Callable[[R], T]) -> T:
        return right_func(self.value)

    def is_left(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


def _raise_for(operation: str, expected: str, actual: str) -> Callable[[Any], Any]:
    def fail(value: Any) -> Any:
        raise wrong_variant(operation, expected, actual, value)

    return fail


def left(value: L) -> Either[L, Any]:
    """Create a Left Either."""
    return Left(value)


def right(value: R) -> Either[Any, R]:
    """Create a Right Either."""
    return Right(value)


def either(
    left_func: Callable[[L], T], right_func: Callable[[R], T], value: Either[L, R]
) -> T:
    """Free-function form of ``Either.fold``."""
    return value.fold(left_func, right_func)


__all__ = ["Either", "Left", "Right", "either", "left", "right"]
