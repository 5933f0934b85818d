"""Stand-in factory: one value that fits every shape a consumer expects.

A stand-in is an object, a callable, a class and an iterable at once. Every
operation that would normally produce "some other value" (an attribute, an
item, a call result, an instance, a sequence element) produces another
stand-in, created lazily at the moment it is observed. Operations that must
produce a primitive follow the coercion hints in
:mod:`standin.domain.coercion`.

INVARIANT: no operation on a stand-in raises. The only exception is Python's
own protocol probing: ``__dunder__`` attribute names behave as on a plain
object, so ``copy``, ``pickle``, ``inspect`` and class creation see the
protocols implemented below instead of an endless chain of stand-ins.
"""

from __future__ import annotations

import logging
import operator
import sys
from collections.abc import AsyncIterator, Generator, Iterator
from functools import partial
from typing import Any

from standin.domain import coercion, iteration
from standin.domain.coercion import Hint

logger = logging.getLogger(__name__)


def _to_string() -> object:
    return coercion.to_primitive(Hint.STRING)


def _value_of() -> object:
    return coercion.to_primitive(Hint.NUMBER)


# Attribute and item names answered with a primitive instead of a stand-in.
# ``toString`` and ``valueOf`` are callables so ``s.toString()`` yields ``""``.
RESERVED: dict[str, object] = {
    "length": 0,
    "toString": _to_string,
    "valueOf": _value_of,
}


def _spawn(operation: str) -> StandIn:
    logger.debug("Spawned stand-in via %s", operation)
    return StandIn()


def _is_protocol_name(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _read(key: object, operation: str) -> Any:
    if isinstance(key, str) and key in RESERVED:
        return RESERVED[key]
    return _spawn(operation)


class StandIn:
    """Universal test double.

    Attribute reads, item reads, calls and construction all return a new
    ``StandIn``. Writes and deletions are accepted and leave no trace.
    ``len()`` and ``.length`` are ``0``, ``str()`` is ``""``, ``int()`` is
    ``0`` and truth testing is ``True``.

    No public names live on this class; every non-dunder attribute is
    answered by :meth:`__getattr__`.
    """

    __slots__ = ("__weakref__",)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        # Arguments are ignored so ``class Foo(stand_in): ...`` also works.
        pass

    def __repr__(self) -> str:
        return f"<StandIn at {id(self):#x}>"

    # ── Property access ──────────────────────────────────────────────

    def __getattr__(self, name: str) -> Any:
        if _is_protocol_name(name):
            raise AttributeError(name)
        return _read(name, "getattr")

    def __getitem__(self, key: object) -> Any:
        return _read(key, "getitem")

    def __setattr__(self, name: str, value: object) -> None:
        pass

    def __setitem__(self, key: object, value: object) -> None:
        pass

    def __delattr__(self, name: str) -> None:
        pass

    def __delitem__(self, key: object) -> None:
        pass

    def __contains__(self, item: object) -> bool:
        return True

    def __len__(self) -> int:
        return 0

    # ── Call and construction ────────────────────────────────────────

    def __call__(self, *args: Any, **kwargs: Any) -> StandIn:
        return _spawn("call")

    def __instancecheck__(self, instance: object) -> bool:
        return True

    def __subclasscheck__(self, subclass: type) -> bool:
        return True

    # ── Primitive coercion ───────────────────────────────────────────

    def __bool__(self) -> bool:
        return bool(coercion.to_primitive(Hint.DEFAULT))

    def __int__(self) -> int:
        return 0

    def __index__(self) -> int:
        return 0

    def __float__(self) -> float:
        return 0.0

    def __complex__(self) -> complex:
        return 0j

    def __round__(self, ndigits: int | None = None) -> int:
        return 0

    def __trunc__(self) -> int:
        return 0

    def __floor__(self) -> int:
        return 0

    def __ceil__(self) -> int:
        return 0

    def __str__(self) -> str:
        return str(coercion.to_primitive(Hint.STRING))

    def __bytes__(self) -> bytes:
        return b""

    def __format__(self, format_spec: str) -> str:
        return coercion.format_value(format_spec)

    def __fspath__(self) -> str:
        return str(coercion.to_primitive(Hint.STRING))

    # ── Comparison ───────────────────────────────────────────────────
    # Equality and hashing stay identity-based: no two stand-ins are equal.

    def __lt__(self, other: object) -> bool:
        return coercion.compare(operator.lt, other)

    def __le__(self, other: object) -> bool:
        return coercion.compare(operator.le, other)

    def __gt__(self, other: object) -> bool:
        return coercion.compare(operator.gt, other)

    def __ge__(self, other: object) -> bool:
        return coercion.compare(operator.ge, other)

    # ── Arithmetic ───────────────────────────────────────────────────

    def __add__(self, other: object) -> Any:
        return coercion.add(other, reflected=False, spawn=_spawn)

    def __radd__(self, other: object) -> Any:
        return coercion.add(other, reflected=True, spawn=_spawn)

    def __sub__(self, other: object) -> Any:
        return coercion.arithmetic("sub", other, reflected=False, spawn=_spawn)

    def __rsub__(self, other: object) -> Any:
        return coercion.arithmetic("sub", other, reflected=True, spawn=_spawn)

    def __mul__(self, other: object) -> Any:
        return coercion.arithmetic("mul", other, reflected=False, spawn=_spawn)

    def __rmul__(self, other: object) -> Any:
        return coercion.arithmetic("mul", other, reflected=True, spawn=_spawn)

    def __truediv__(self, other: object) -> Any:
        return coercion.arithmetic("truediv", other, reflected=False, spawn=_spawn)

    def __rtruediv__(self, other: object) -> Any:
        return coercion.arithmetic("truediv", other, reflected=True, spawn=_spawn)

    def __floordiv__(self, other: object) -> Any:
        return coercion.arithmetic("floordiv", other, reflected=False, spawn=_spawn)

    def __rfloordiv__(self, other: object) -> Any:
        return coercion.arithmetic("floordiv", other, reflected=True, spawn=_spawn)

    def __mod__(self, other: object) -> Any:
        return coercion.arithmetic("mod", other, reflected=False, spawn=_spawn)

    def __rmod__(self, other: object) -> Any:
        return coercion.arithmetic("mod", other, reflected=True, spawn=_spawn)

    def __divmod__(self, other: object) -> Any:
        return coercion.arithmetic("divmod", other, reflected=False, spawn=_spawn)

    def __rdivmod__(self, other: object) -> Any:
        return coercion.arithmetic("divmod", other, reflected=True, spawn=_spawn)

    def __pow__(self, other: object, modulo: object = None) -> Any:
        return coercion.arithmetic("pow", other, reflected=False, spawn=_spawn)

    def __rpow__(self, other: object, modulo: object = None) -> Any:
        return coercion.arithmetic("pow", other, reflected=True, spawn=_spawn)

    def __lshift__(self, other: object) -> Any:
        return coercion.arithmetic("lshift", other, reflected=False, spawn=_spawn)

    def __rlshift__(self, other: object) -> Any:
        return coercion.arithmetic("lshift", other, reflected=True, spawn=_spawn)

    def __rshift__(self, other: object) -> Any:
        return coercion.arithmetic("rshift", other, reflected=False, spawn=_spawn)

    def __rrshift__(self, other: object) -> Any:
        return coercion.arithmetic("rshift", other, reflected=True, spawn=_spawn)

    def __and__(self, other: object) -> Any:
        return coercion.arithmetic("and", other, reflected=False, spawn=_spawn)

    def __rand__(self, other: object) -> Any:
        return coercion.arithmetic("and", other, reflected=True, spawn=_spawn)

    def __or__(self, other: object) -> Any:
        return coercion.arithmetic("or", other, reflected=False, spawn=_spawn)

    def __ror__(self, other: object) -> Any:
        return coercion.arithmetic("or", other, reflected=True, spawn=_spawn)

    def __xor__(self, other: object) -> Any:
        return coercion.arithmetic("xor", other, reflected=False, spawn=_spawn)

    def __rxor__(self, other: object) -> Any:
        return coercion.arithmetic("xor", other, reflected=True, spawn=_spawn)

    def __matmul__(self, other: object) -> StandIn:
        return _spawn("matmul")

    def __rmatmul__(self, other: object) -> StandIn:
        return _spawn("matmul")

    def __neg__(self) -> int:
        return 0

    def __pos__(self) -> int:
        return 0

    def __abs__(self) -> int:
        return 0

    def __invert__(self) -> int:
        return -1

    # ── Iteration ────────────────────────────────────────────────────

    def __iter__(self) -> Iterator[StandIn]:
        return iteration.sequence_for(sys._getframe(1), partial(_spawn, "iter"))

    def __next__(self) -> StandIn:
        return _spawn("next")

    def __aiter__(self) -> AsyncIterator[StandIn]:
        return iteration.unbounded_async(partial(_spawn, "aiter"))

    def __anext__(self) -> StandIn:
        # The result is itself awaitable.
        return _spawn("anext")

    # ── Context managers and awaiting ────────────────────────────────

    def __enter__(self) -> StandIn:
        return _spawn("enter")

    def __exit__(self, *exc_info: object) -> bool:
        return False

    async def __aenter__(self) -> StandIn:
        return _spawn("aenter")

    async def __aexit__(self, *exc_info: object) -> bool:
        return False

    def __await__(self) -> Generator[Any, None, StandIn]:
        yield from ()
        return _spawn("await")

    # ── Copying and pickling ─────────────────────────────────────────

    def __copy__(self) -> StandIn:
        return _spawn("copy")

    def __deepcopy__(self, memo: dict[int, Any]) -> StandIn:
        return _spawn("deepcopy")

    def __reduce__(self) -> tuple[type[StandIn], tuple[()]]:
        return StandIn, ()


def create_stand_in() -> StandIn:
    """Return a fresh stand-in.

    Each call returns a distinct object; stand-ins never share state.
    """
    return _spawn("factory")


anything = create_stand_in
