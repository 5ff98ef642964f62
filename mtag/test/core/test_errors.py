"""Tests for mtag.core.errors module."""

from mtag.core.errors import ErrorCode


def test_values_are_stable() -> None:
    assert ErrorCode.OK == 0
    assert ErrorCode.USER_ERROR == 1
    assert ErrorCode.ENV_ERROR == 2
    assert ErrorCode.NETWORK_ERROR == 4
