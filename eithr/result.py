"""
Result type for computations that may fail.

Unlike ``Either``, ``Result`` is biased: ``Ok`` is success and ``Err`` is
failure, and ``map``/``flat_map`` act on ``Ok`` only.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from eithr.exceptions import wrong_variant

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


# Monad Laws:
# 1. Left Identity: Ok(a).flat_map(f) == f(a)
# 2. Right Identity: m.flat_map(Ok) == m
# 3. Associativity: m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))


@dataclass(frozen=True, slots=True)
class Ok(Generic[T, E]):
    """Successful result containing a value."""

    value: T

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply function to the contained value."""
        return Ok(f(self.value))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply function that returns a Result."""
        return f(self.value)

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the error type (no-op for Ok)."""
        return Ok(self.value)

    def fold(self, on_err: Callable[[E], U], on_ok: Callable[[T], U]) -> U:
        return on_ok(self.value)

    def unwrap(self) -> T:
        """Extract the value."""
        return self.value

    def unwrap_err(self) -> E:
        raise wrong_variant("unwrap_err", "Err", "Ok", self.value)

    def unwrap_or(self, default: T) -> T:
        """Return the value."""
        return self.value

    def is_ok(self) -> bool:
        """Check if this is an Ok variant."""
        return True

    def is_err(self) -> bool:
        """Check if this is an Err variant."""
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[T, E]):
    """Failed result containing an error."""

    error: E

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """No-op for Err."""
        return Err(self.error)

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """No-op for Err."""
        return Err(self.error)

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the error."""
        return Err(f(self.error))

    def fold(self, on_err: Callable[[E], U], on_ok: Callable[[T], U]) -> U:
        return on_err(self.error)

    def unwrap(self) -> T:
        """Raise WrongVariantError carrying the error."""
        raise wrong_variant("unwrap", "Ok", "Err", self.error)

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        """Return the default value."""
        return default

    def is_ok(self) -> bool:
        """Check if this is an Ok variant."""
        return False

    def is_err(self) -> bool:
        """Check if this is an Err variant."""
        return True


type Result[T, E] = Ok[T, E] | Err[T, E]


__all__ = ["Err", "Ok", "Result"]
