"""Tests for mtag.core.result module."""

import pytest

from mtag.core.result import Err, Ok, Result


def test_ok_carries_value() -> None:
    result: Result[int, str] = Ok(42)
    assert isinstance(result, Ok)
    assert result.value == 42


def test_err_carries_error() -> None:
    result: Result[int, str] = Err("boom")
    assert isinstance(result, Err)
    assert result.error == "boom"


def test_frozen() -> None:
    result = Ok(1)
    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]


def test_equality() -> None:
    assert Ok(1) == Ok(1)
    assert Err("x") != Ok("x")


def test_pattern_matching() -> None:
    match Ok(3):
        case Ok(value):
            assert value == 3
        case Err(_):
            pytest.fail("expected Ok")


def test_repr() -> None:
    assert repr(Ok("a")) == "Ok('a')"
    assert repr(Err(1)) == "Err(1)"
