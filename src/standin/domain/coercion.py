"""Coercion hints and operator results for stand-ins.

Three hints decide which primitive a stand-in turns into:
- number  -> 0
- string  -> ""
- default -> True

Binary ``+`` uses the default hint, every other arithmetic operator uses the
number hint. Relational operators compare the primitive matching the other
operand. None of these functions raise: unsupported operands produce a
fresh stand-in (arithmetic) or ``False`` (comparisons).
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable
from enum import Enum
from numbers import Number
from typing import Any

Spawn = Callable[[str], Any]


class Hint(Enum):
    """Preference supplied by the consuming context."""

    NUMBER = "number"
    STRING = "string"
    DEFAULT = "default"


PRIMITIVES: dict[Hint, object] = {
    Hint.NUMBER: 0,
    Hint.STRING: "",
    Hint.DEFAULT: True,
}

# Text of the default primitive when it meets a string.
DEFAULT_TEXT = "true"


def to_primitive(hint: Hint) -> object:
    """Return the primitive a stand-in becomes under *hint*."""
    return PRIMITIVES[hint]


def primitive_for(other: object) -> object:
    """Primitive a stand-in is compared against when the other side is *other*."""
    if isinstance(other, str):
        return ""
    if isinstance(other, (bytes, bytearray)):
        return b""
    return 0


def compare(op: Callable[[Any, Any], Any], other: object) -> bool:
    """Evaluate ``op(stand_in, other)`` with the stand-in's primitive.

    Unorderable pairs compare ``False``.
    """
    try:
        return bool(op(primitive_for(other), other))
    except TypeError:
        return False


def _is_number(value: object) -> bool:
    return isinstance(value, Number)


def add(other: object, *, reflected: bool, spawn: Spawn) -> Any:
    """``stand_in + other`` (or ``other + stand_in`` when *reflected*)."""
    if _is_number(other):
        try:
            return other + True
        except TypeError:
            return spawn("add")
    if isinstance(other, str):
        return other + DEFAULT_TEXT if reflected else DEFAULT_TEXT + other
    if isinstance(other, (bytes, bytearray)):
        text = DEFAULT_TEXT.encode()
        return other + text if reflected else text + other
    return spawn("add")


def _divide(left: Any, right: Any, op: Callable[[Any, Any], Any]) -> Any:
    try:
        return op(left, right)
    except ArithmeticError:
        if op is operator.mod or left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left)


def _power(left: Any, right: Any) -> Any:
    try:
        return left**right
    except ZeroDivisionError:
        return math.inf


def _divmod(left: Any, right: Any) -> tuple[Any, Any]:
    return (
        _divide(left, right, operator.floordiv),
        _divide(left, right, operator.mod),
    )


def _shift(left: int, right: int, *, leftward: bool) -> int:
    # Negative counts shift the other way instead of raising.
    if right < 0:
        right, leftward = -right, not leftward
    return left << right if leftward else left >> right


OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "sub": operator.sub,
    "mul": operator.mul,
    "truediv": lambda a, b: _divide(a, b, operator.truediv),
    "floordiv": lambda a, b: _divide(a, b, operator.floordiv),
    "mod": lambda a, b: _divide(a, b, operator.mod),
    "divmod": _divmod,
    "pow": _power,
    "lshift": lambda a, b: _shift(a, b, leftward=True),
    "rshift": lambda a, b: _shift(a, b, leftward=False),
    "and": operator.and_,
    "or": operator.or_,
    "xor": operator.xor,
}

# Shift and bitwise operators only accept integers.
_INTEGER_ONLY = frozenset({"lshift", "rshift", "and", "or", "xor"})


def arithmetic(name: str, other: object, *, reflected: bool, spawn: Spawn) -> Any:
    """Apply operator *name* between the stand-in's number hint and *other*."""
    if not _is_number(other) or (name in _INTEGER_ONLY and not isinstance(other, int)):
        return spawn(name)
    fn = OPERATORS[name]
    zero = to_primitive(Hint.NUMBER)
    try:
        return fn(other, zero) if reflected else fn(zero, other)
    except (ArithmeticError, TypeError, ValueError):
        return spawn(name)


def format_value(spec: str) -> str:
    """Format the stand-in for ``format()`` and f-strings."""
    if not spec:
        return str(to_primitive(Hint.STRING))
    for primitive in (to_primitive(Hint.STRING), to_primitive(Hint.NUMBER)):
        try:
            return format(primitive, spec)
        except (TypeError, ValueError):
            continue
    return str(to_primitive(Hint.STRING))
