"""Lazy sequences handed out when a stand-in is iterated.

Every iteration request gets its own generator, so two loops over the same
stand-in never share a cursor. Elements are created on demand and never
cached.

Plain iteration is unbounded. Unpacking (``a, b, c = stand_in``) is the one
case where the consumer's arity is known up front: the requesting frame is
executing an ``UNPACK_SEQUENCE`` or ``UNPACK_EX`` instruction whose argument
carries the number of targets, and the interpreter rejects iterators that
yield more values than that.
"""

from __future__ import annotations

import dis
import functools
import itertools
from collections.abc import AsyncIterator, Callable, Iterator
from types import CodeType, FrameType
from typing import TypeVar

T = TypeVar("T")

UNPACK_SEQUENCE = "UNPACK_SEQUENCE"
UNPACK_EX = "UNPACK_EX"


def unbounded(factory: Callable[[], T]) -> Iterator[T]:
    """Yield ``factory()`` forever."""
    while True:
        yield factory()


async def unbounded_async(factory: Callable[[], T]) -> AsyncIterator[T]:
    """Async counterpart of :func:`unbounded`."""
    while True:
        yield factory()


@functools.lru_cache(maxsize=256)
def _instructions_by_offset(code: CodeType) -> dict[int, dis.Instruction]:
    return {instruction.offset: instruction for instruction in dis.get_instructions(code)}


def _current_instruction(frame: FrameType) -> dis.Instruction | None:
    return _instructions_by_offset(frame.f_code).get(frame.f_lasti)


def unpack_arity(frame: FrameType | None) -> int | None:
    """Number of values *frame* is about to unpack, or None if it is not unpacking.

    For starred targets (``first, *rest, last = ...``) the count covers the
    plain targets only, which leaves the starred one with an empty list.
    """
    if frame is None:
        return None
    instruction = _current_instruction(frame)
    if instruction is None or instruction.arg is None:
        return None
    if instruction.opname == UNPACK_SEQUENCE:
        return instruction.arg
    if instruction.opname == UNPACK_EX:
        # Low byte counts targets before the star, high byte those after it.
        return (instruction.arg & 0xFF) + (instruction.arg >> 8)
    return None


def sequence_for(frame: FrameType | None, factory: Callable[[], T]) -> Iterator[T]:
    """Iterator for an iteration request coming from *frame*."""
    arity = unpack_arity(frame)
    if arity is None:
        return unbounded(factory)
    return itertools.islice(unbounded(factory), arity)
