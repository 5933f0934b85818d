"""JSON rendering that treats stand-ins as "not representable".

A stand-in has no JSON form. Following the convention of serializers that
have an explicit "undefined" signal:

- a stand-in at the top level renders as ``None`` (no text at all),
- a stand-in stored as a mapping value, or used as a key, drops the entry,
- a stand-in inside a list or tuple renders as ``null``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from standin.domain.stand_in import StandIn


def is_representable(obj: object) -> bool:
    """Whether *obj* has a JSON form (stand-ins do not)."""
    return not isinstance(obj, StandIn)


def _prune(obj: Any, active: set[int]) -> Any:
    if isinstance(obj, StandIn):
        return None
    if not isinstance(obj, (Mapping, list, tuple)):
        return obj
    marker = id(obj)
    if marker in active:
        raise ValueError("Circular reference detected")
    active.add(marker)
    try:
        if isinstance(obj, Mapping):
            return {
                key: _prune(value, active)
                for key, value in obj.items()
                if is_representable(key) and is_representable(value)
            }
        return [_prune(item, active) for item in obj]
    finally:
        active.discard(marker)


class StandInEncoder(json.JSONEncoder):
    """``json.JSONEncoder`` that renders stand-ins as ``null``.

    Use it directly with ``json.dumps(obj, cls=StandInEncoder)`` when keys
    holding stand-ins should stay in the output.
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, StandIn):
            return None
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str | None:
    """Serialize *obj* to JSON, or return None if *obj* is a stand-in.

    Keyword arguments are passed to :func:`json.dumps`.
    """
    if not is_representable(obj):
        return None
    kwargs.setdefault("cls", StandInEncoder)
    return json.dumps(_prune(obj, set()), **kwargs)
