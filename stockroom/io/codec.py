"""Strict record <-> JSON object conversion.

Field names map one-to-one onto object keys. ``date``/``datetime`` values are
stored as ISO-8601 strings. Decoding rejects missing keys, unknown keys and
values of the wrong type.
"""

from __future__ import annotations

from dataclasses import fields
from datetime import date, datetime
from typing import Any, Dict, Type, get_type_hints

from ..core.errors import MalformedSnapshot
from ..core.types import T


def encode(item: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for f in fields(item):
        value = getattr(item, f.name)
        if isinstance(value, (date, datetime)):
            value = value.isoformat()
        out[f.name] = value
    return out


def _decode_value(name: str, kind: Any, value: Any) -> Any:
    # datetime is a date subclass, so it has to be checked first
    if kind is datetime:
        if not isinstance(value, str):
            raise MalformedSnapshot(f"field {name!r} must be an ISO datetime string")
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            raise MalformedSnapshot(f"field {name!r}: bad datetime {value!r}") from None
    if kind is date:
        if not isinstance(value, str):
            raise MalformedSnapshot(f"field {name!r} must be an ISO date string")
        try:
            return date.fromisoformat(value)
        except ValueError:
            raise MalformedSnapshot(f"field {name!r}: bad date {value!r}") from None
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise MalformedSnapshot(f"field {name!r} must be an integer")
        return value
    if kind is str:
        if not isinstance(value, str):
            raise MalformedSnapshot(f"field {name!r} must be a string")
        return value
    raise TypeError(f"unsupported field type {kind!r} for {name!r}")


def decode(cls: Type[T], obj: Any) -> T:
    if not isinstance(obj, dict):
        raise MalformedSnapshot(f"expected an object, got {type(obj).__name__}")
    hints = get_type_hints(cls)
    names = [f.name for f in fields(cls)]  # type: ignore[arg-type]
    missing = [n for n in names if n not in obj]
    unknown = sorted(set(obj) - set(names))
    if missing:
        raise MalformedSnapshot(f"missing field(s) {', '.join(missing)}")
    if unknown:
        raise MalformedSnapshot(f"unknown field(s) {', '.join(unknown)}")
    kwargs = {n: _decode_value(n, hints[n], obj[n]) for n in names}
    return cls(**kwargs)
