"""Tests for coercion hints and operator results."""

from __future__ import annotations

import math
import operator
from decimal import Decimal
from fractions import Fraction

import pytest

from standin.domain.coercion import (
    DEFAULT_TEXT,
    Hint,
    add,
    arithmetic,
    compare,
    format_value,
    primitive_for,
    to_primitive,
)


def _spawn(operation: str) -> str:
    return f"spawned:{operation}"


class TestHints:
    def test_number_hint(self) -> None:
        assert to_primitive(Hint.NUMBER) == 0

    def test_string_hint(self) -> None:
        assert to_primitive(Hint.STRING) == ""

    def test_default_hint(self) -> None:
        assert to_primitive(Hint.DEFAULT) is True

    def test_hint_values(self) -> None:
        assert {h.value for h in Hint} == {"number", "string", "default"}


class TestPrimitiveFor:
    def test_string(self) -> None:
        assert primitive_for("abc") == ""

    def test_bytes(self) -> None:
        assert primitive_for(b"abc") == b""
        assert primitive_for(bytearray(b"abc")) == b""

    @pytest.mark.parametrize("other", [1, 2.5, None, object(), [1]])
    def test_everything_else(self, other: object) -> None:
        assert primitive_for(other) == 0


class TestCompare:
    def test_numeric(self) -> None:
        assert compare(operator.gt, 0) is False
        assert compare(operator.lt, 10) is True
        assert compare(operator.ge, 0) is True
        assert compare(operator.le, -1) is False

    def test_string(self) -> None:
        assert compare(operator.lt, "a") is True
        assert compare(operator.gt, "a") is False

    def test_unorderable(self) -> None:
        assert compare(operator.lt, object()) is False
        assert compare(operator.ge, None) is False
        assert compare(operator.lt, [1]) is False


class TestAdd:
    def test_number(self) -> None:
        assert add(10, reflected=False, spawn=_spawn) == 11
        assert add(0, reflected=True, spawn=_spawn) == 1

    def test_float(self) -> None:
        assert add(1.5, reflected=False, spawn=_spawn) == 2.5

    def test_string_left_and_right(self) -> None:
        assert add("Hello ", reflected=True, spawn=_spawn) == "Hello true"
        assert add("!", reflected=False, spawn=_spawn) == "true!"

    def test_bytes(self) -> None:
        assert add(b"x", reflected=True, spawn=_spawn) == b"xtrue"

    def test_default_text(self) -> None:
        assert DEFAULT_TEXT == "true"

    def test_other_spawns(self) -> None:
        assert add([1], reflected=False, spawn=_spawn) == "spawned:add"


class TestArithmetic:
    def test_number_hint_is_zero(self) -> None:
        assert arithmetic("sub", 3, reflected=False, spawn=_spawn) == -3
        assert arithmetic("sub", 3, reflected=True, spawn=_spawn) == 3
        assert arithmetic("mul", 3, reflected=False, spawn=_spawn) == 0

    def test_true_division(self) -> None:
        assert arithmetic("truediv", 4, reflected=False, spawn=_spawn) == 0.0
        assert arithmetic("truediv", 4, reflected=True, spawn=_spawn) == math.inf
        assert arithmetic("truediv", -4, reflected=True, spawn=_spawn) == -math.inf
        assert math.isnan(arithmetic("truediv", 0, reflected=False, spawn=_spawn))

    def test_floor_division(self) -> None:
        assert arithmetic("floordiv", 4, reflected=True, spawn=_spawn) == math.inf

    def test_modulo(self) -> None:
        assert arithmetic("mod", 4, reflected=False, spawn=_spawn) == 0
        assert math.isnan(arithmetic("mod", 4, reflected=True, spawn=_spawn))

    def test_power(self) -> None:
        assert arithmetic("pow", 3, reflected=False, spawn=_spawn) == 0
        assert arithmetic("pow", 3, reflected=True, spawn=_spawn) == 1
        assert arithmetic("pow", -2, reflected=False, spawn=_spawn) == math.inf

    def test_shift_negative_count(self) -> None:
        assert arithmetic("lshift", -3, reflected=False, spawn=_spawn) == 0
        assert arithmetic("rshift", 5, reflected=True, spawn=_spawn) == 5

    def test_bitwise_rejects_floats(self) -> None:
        assert arithmetic("and", 1.5, reflected=False, spawn=_spawn) == "spawned:and"

    def test_non_number_spawns(self) -> None:
        assert arithmetic("sub", "x", reflected=False, spawn=_spawn) == "spawned:sub"
        assert arithmetic("mul", None, reflected=True, spawn=_spawn) == "spawned:mul"

    def test_decimal_division(self) -> None:
        result = arithmetic("truediv", Decimal(2), reflected=True, spawn=_spawn)
        assert result == math.inf

    def test_fraction(self) -> None:
        assert arithmetic("sub", Fraction(1, 2), reflected=True, spawn=_spawn) == Fraction(1, 2)

    def test_complex_floor_division_spawns(self) -> None:
        assert arithmetic("floordiv", 1j, reflected=False, spawn=_spawn) == "spawned:floordiv"


class TestFormatValue:
    def test_empty_spec(self) -> None:
        assert format_value("") == ""

    def test_string_spec(self) -> None:
        assert format_value("<4") == "    "

    def test_numeric_spec(self) -> None:
        assert format_value("d") == "0"
        assert format_value("05.1f") == "000.0"

    def test_invalid_spec(self) -> None:
        assert format_value("invalid-spec!") == ""
