"""Tests for rpcpath.routing.variable — Variable value object."""

import dataclasses

import pytest

from rpcpath.routing.variable import Variable


class TestVariable:
    def test_fields(self) -> None:
        var = Variable("user.id", "42")
        assert var.name == "user.id"
        assert var.value == "42"

    def test_equality(self) -> None:
        assert Variable("a", "1") == Variable("a", "1")
        assert Variable("a", "1") != Variable("a", "2")
        assert Variable("a", "1") != Variable("b", "1")

    def test_hashable(self) -> None:
        assert len({Variable("a", "1"), Variable("a", "1")}) == 1

    def test_frozen(self) -> None:
        var = Variable("a", "1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            var.value = "2"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Variable("user.id", "42")) == "user.id=42"

    def test_repr(self) -> None:
        assert repr(Variable("a", "1")) == "Variable(name='a', value='1')"
