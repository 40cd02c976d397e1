"""
TOON Normalization

Bridges native Python values and TValue trees.

normalize() never fails: anything without a TOON counterpart becomes null.
- float NaN / Inf -> null, -0.0 -> 0.0
- datetime / date / time -> ISO-8601 string
- Enum -> its value
- Mapping -> map (keys stringified, order kept); an empty mapping stays a map
- list / tuple / set / other sequences -> list
- objects with to_dict() or __json__(), and dataclass instances -> their fields
- bytes, callables, files and other objects -> null
"""

from __future__ import annotations
import dataclasses
import math
from collections.abc import Mapping, Sequence, Set
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any

from .types import TType, TValue, MapEntry


def _normalize_float(f: float) -> TValue:
    if not math.isfinite(f):
        return TValue.null()
    if f == 0:
        # Folds -0.0 into 0.0
        return TValue.float_(0.0)
    return TValue.float_(f)


def _normalize_hook(data: Any) -> Any:
    """Return the result of a serialization hook, or None if there is none."""
    if isinstance(data, type):
        return None
    to_dict = getattr(data, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    to_json = getattr(data, "__json__", None)
    if callable(to_json):
        return to_json()
    if dataclasses.is_dataclass(data):
        return {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
    return None


def normalize(data: Any) -> TValue:
    """Convert a Python value to a TValue."""
    if isinstance(data, TValue):
        return data
    if data is None:
        return TValue.null()
    elif isinstance(data, bool):
        return TValue.bool_(data)
    elif isinstance(data, int):
        if isinstance(data, Enum):
            return normalize(data.value)
        return TValue.int_(data)
    elif isinstance(data, float):
        return _normalize_float(data)
    elif isinstance(data, str):
        if isinstance(data, Enum):
            return normalize(data.value)
        return TValue.str_(data)
    elif isinstance(data, Decimal):
        if not data.is_finite():
            return TValue.null()
        return _normalize_float(float(data))
    elif isinstance(data, (datetime, date, time)):
        return TValue.str_(data.isoformat())
    elif isinstance(data, Enum):
        return normalize(data.value)
    elif isinstance(data, Mapping):
        return TValue.map_(*[MapEntry(str(k), normalize(v)) for k, v in data.items()])
    elif isinstance(data, (bytes, bytearray, memoryview)):
        return TValue.null()
    elif isinstance(data, (Sequence, Set)):
        return TValue.list_(*[normalize(item) for item in data])

    # A hook wins even on callables; files and other objects become null
    hooked = _normalize_hook(data)
    if hooked is not None:
        return normalize(hooked)
    return TValue.null()


def to_python(v: TValue) -> Any:
    """Convert a TValue to plain Python values."""
    t = v.type

    if t == TType.NULL:
        return None
    elif t == TType.BOOL:
        return v.as_bool()
    elif t == TType.INT:
        return v.as_int()
    elif t == TType.FLOAT:
        return v.as_float()
    elif t == TType.STR:
        return v.as_str()
    elif t == TType.LIST:
        return [to_python(item) for item in v.as_list()]
    elif t == TType.MAP:
        return {e.key: to_python(e.value) for e in v.as_map()}

    return None
