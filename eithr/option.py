"""
Option type for values that may or may not be present.

``Some`` holds a value and ``Empty`` holds nothing. Unlike a bare ``None``
check, ``Some(None)`` is a real, present value, which lets ``Either``
convert to and from ``Option`` without losing a ``None`` payload.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

from eithr.exceptions import wrong_variant

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T], ABC):
    """Abstract base class for Option."""

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> bool:
        """Check if this is a Some (has value)."""

    @abstractmethod
    def fold(self, empty_value: U, some_func: Callable[[T], U]) -> U:
        """Fold Option by providing value for Empty and function for Some."""

    def is_empty(self) -> bool:
        """Check if this is Empty (no value)."""
        return not self.is_some()

    def map(self, func: Callable[[T], U]) -> "Option[U]":
        """Map function over Some value, preserving Empty."""
        return self.fold(cast("Option[U]", self), lambda value: Some(func(value)))

    def flat_map(self, func: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Flat map function over Some value."""
        return self.fold(cast("Option[U]", self), func)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        """Keep the value only if it satisfies ``predicate``."""
        return self.fold(self, lambda value: self if predicate(value) else Empty())

    def get_or_else(self, default: T) -> T:
        """Get Some value or return default."""
        return self.fold(default, lambda value: value)

    def or_else(self, other: "Option[T]") -> "Option[T]":
        """Return this if Some, otherwise return other."""
        return self if self.is_some() else other

    def unwrap(self) -> T:
        """Get the Some value, raising WrongVariantError on Empty."""
        if self.is_some():
            return cast("Some[T]", self).value
        raise wrong_variant("unwrap", "Some", "Empty")

    def to_list(self) -> list[T]:
        """Convert Option to list (empty list for Empty, single-item list for Some)."""
        return self.fold([], lambda value: [value])

    def to_nullable(self) -> T | None:
        """Convert to a plain value or ``None``. ``Some(None)`` also gives ``None``."""
        return self.fold(None, lambda value: value)


@dataclass(frozen=True, slots=True)
class Some(Option[T]):
    """Some variant of Option representing a value."""

    value: T

    def is_some(self) -> bool:
        return True

    def fold(self, empty_value: U, some_func: Callable[[T], U]) -> U:
        return some_func(self.value)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True, slots=True)
class Empty(Option[T]):
    """Empty variant of Option representing absence of value."""

    def is_some(self) -> bool:
        return False

    def fold(self, empty_value: U, some_func: Callable[[T], U]) -> U:
        return empty_value

    def __repr__(self) -> str:
        return "Empty()"


def some(value: T) -> Option[T]:
    """Create a Some Option."""
    return Some(value)


def empty() -> Option[T]:
    """Create an Empty Option."""
    return Empty()


def option_from_nullable(value: T | None) -> Option[T]:
    """Create Option from potentially null value."""
    return Some(value) if value is not None else Empty()


__all__ = [
    "Empty",
    "Option",
    "Some",
    "empty",
    "option_from_nullable",
    "some",
]
