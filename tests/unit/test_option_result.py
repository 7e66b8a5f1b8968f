"""Tests for the Option and Result collaborator types."""

import pytest

from eithr import (
    Empty,
    Err,
    Ok,
    Result,
    Some,
    WrongVariantError,
    empty,
    option_from_nullable,
    some,
)


class TestOption:
    def test_predicates(self):
        assert Some(1).is_some()
        assert not Some(1).is_empty()
        assert Empty().is_empty()
        assert not Empty().is_some()

    def test_factories(self):
        assert some(1) == Some(1)
        assert empty() == Empty()
        assert option_from_nullable(None) == Empty()
        assert option_from_nullable(0) == Some(0)

    def test_some_may_hold_none(self):
        assert Some(None).is_some()
        assert Some(None) != Empty()

    def test_map_and_flat_map(self):
        assert Some(2).map(lambda x: x * 3) == Some(6)
        assert Empty().map(lambda x: x * 3) == Empty()
        assert Some(2).flat_map(lambda x: Some(x + 1)) == Some(3)
        assert Some(2).flat_map(lambda _: Empty()) == Empty()

    def test_filter(self):
        assert Some(4).filter(lambda x: x > 3) == Some(4)
        assert Some(2).filter(lambda x: x > 3) == Empty()
        assert Empty().filter(lambda x: True) == Empty()

    def test_defaults(self):
        assert Some(1).get_or_else(9) == 1
        assert Empty().get_or_else(9) == 9
        assert Empty().or_else(Some(2)) == Some(2)
        assert Some(1).or_else(Some(2)) == Some(1)

    def test_conversions(self):
        assert Some("a").to_list() == ["a"]
        assert Empty().to_list() == []
        assert Some("a").to_nullable() == "a"
        assert Empty().to_nullable() is None

    def test_unwrap(self):
        assert Some(1).unwrap() == 1
        with pytest.raises(WrongVariantError) as exc_info:
            Empty().unwrap()
        assert exc_info.value.actual == "Empty"

    def test_repr(self):
        assert repr(Some("x")) == "Some('x')"
        assert repr(Empty()) == "Empty()"


class TestResult:
    def test_predicates(self):
        assert Ok(1).is_ok() and not Ok(1).is_err()
        assert Err("e").is_err() and not Err("e").is_ok()

    def test_map_family(self):
        assert Ok(2).map(lambda x: x + 1) == Ok(3)
        assert Err("e").map(lambda x: x + 1) == Err("e")
        assert Err("e").map_error(str.upper) == Err("E")
        assert Ok(2).map_error(str.upper) == Ok(2)

    def test_fold(self):
        assert Ok(2).fold(len, lambda x: x * 10) == 20
        assert Err("abc").fold(len, lambda x: x * 10) == 3

    def test_unwraps(self):
        assert Ok(1).unwrap() == 1
        assert Err("e").unwrap_err() == "e"
        assert Err("e").unwrap_or(5) == 5
        assert Ok(1).unwrap_or(5) == 1

        with pytest.raises(WrongVariantError):
            Err("e").unwrap()
        with pytest.raises(WrongVariantError):
            Ok(1).unwrap_err()

    def test_left_identity(self):
        f = lambda x: Ok(x * 2)
        assert Ok(21).flat_map(f) == f(21)

    def test_right_identity(self):
        m: Result[int, str] = Ok(42)
        assert m.flat_map(Ok) == m

    def test_associativity(self):
        m: Result[int, str] = Ok(10)
        f = lambda x: Ok(x * 2)
        g = lambda x: Err("odd") if x % 2 else Ok(x + 1)

        assert m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))

    def test_failure_propagation(self):
        result: Result[int, str] = Err("Test error")
        chained = result.flat_map(lambda x: Ok(x * 2)).flat_map(lambda x: Ok(x + 1))

        assert chained == Err("Test error")
