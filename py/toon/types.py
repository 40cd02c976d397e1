"""
TOON Core Types

TValue is the canonical value container bridging Python values and TOON text.
Its type tag is decided once, when a value is normalized or decoded, so the
encoder never has to re-derive the shape of a node.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class TType(Enum):
    """TOON value types."""
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"
    LIST = "list"
    MAP = "map"


PRIMITIVE_TYPES = frozenset({TType.NULL, TType.BOOL, TType.INT, TType.FLOAT, TType.STR})


@dataclass
class MapEntry:
    """Key-value pair of an object."""
    key: str
    value: "TValue"


class TValue:
    """
    Canonical value container for TOON data.

    Supports: null, bool, int, float, str, list, map
    """

    __slots__ = ('_type', '_bool', '_int', '_float', '_str', '_list', '_map')

    def __init__(self, ttype: TType):
        self._type = ttype
        self._bool: Optional[bool] = None
        self._int: Optional[int] = None
        self._float: Optional[float] = None
        self._str: Optional[str] = None
        self._list: Optional[List[TValue]] = None
        self._map: Optional[List[MapEntry]] = None

    @property
    def type(self) -> TType:
        return self._type

    # ============================================================
    # Constructors
    # ============================================================

    @staticmethod
    def null() -> "TValue":
        return TValue(TType.NULL)

    @staticmethod
    def bool_(v: bool) -> "TValue":
        tv = TValue(TType.BOOL)
        tv._bool = bool(v)
        return tv

    @staticmethod
    def int_(v: int) -> "TValue":
        tv = TValue(TType.INT)
        tv._int = int(v)
        return tv

    @staticmethod
    def float_(v: float) -> "TValue":
        tv = TValue(TType.FLOAT)
        tv._float = float(v)
        return tv

    @staticmethod
    def str_(v: str) -> "TValue":
        tv = TValue(TType.STR)
        tv._str = v
        return tv

    @staticmethod
    def list_(*values: "TValue") -> "TValue":
        tv = TValue(TType.LIST)
        tv._list = list(values)
        return tv

    @staticmethod
    def map_(*entries: MapEntry) -> "TValue":
        tv = TValue(TType.MAP)
        tv._map = []
        for e in entries:
            tv.set(e.key, e.value)
        return tv

    # ============================================================
    # Accessors
    # ============================================================

    def is_null(self) -> bool:
        return self._type == TType.NULL

    def is_primitive(self) -> bool:
        return self._type in PRIMITIVE_TYPES

    def is_list(self) -> bool:
        return self._type == TType.LIST

    def is_map(self) -> bool:
        return self._type == TType.MAP

    def as_bool(self) -> bool:
        if self._type != TType.BOOL:
            raise TypeError("not a bool")
        return self._bool  # type: ignore

    def as_int(self) -> int:
        if self._type != TType.INT:
            raise TypeError("not an int")
        return self._int  # type: ignore

    def as_float(self) -> float:
        if self._type != TType.FLOAT:
            raise TypeError("not a float")
        return self._float  # type: ignore

    def as_str(self) -> str:
        if self._type != TType.STR:
            raise TypeError("not a str")
        return self._str  # type: ignore

    def as_list(self) -> List["TValue"]:
        if self._type != TType.LIST:
            raise TypeError("not a list")
        return self._list  # type: ignore

    def as_map(self) -> List[MapEntry]:
        if self._type != TType.MAP:
            raise TypeError("not a map")
        return self._map  # type: ignore

    def keys(self) -> List[str]:
        """Keys of a map, in insertion order."""
        return [e.key for e in self.as_map()]

    def get(self, key: str) -> Optional["TValue"]:
        """Get member of a map by key."""
        if self._type != TType.MAP:
            return None
        for e in self._map:  # type: ignore
            if e.key == key:
                return e.value
        return None

    def index(self, i: int) -> "TValue":
        """Get element from list by index."""
        if self._type != TType.LIST:
            raise TypeError("not a list")
        if i < 0 or i >= len(self._list):  # type: ignore
            raise IndexError("index out of bounds")
        return self._list[i]  # type: ignore

    def __len__(self) -> int:
        """Get length of list or map."""
        if self._type == TType.LIST:
            return len(self._list)  # type: ignore
        if self._type == TType.MAP:
            return len(self._map)  # type: ignore
        return 0

    # ============================================================
    # Mutators
    # ============================================================

    def set(self, key: str, value: "TValue") -> None:
        """Set member on map; an existing key keeps its position."""
        if self._type != TType.MAP:
            raise TypeError("cannot set on non-map")
        for i, e in enumerate(self._map):  # type: ignore
            if e.key == key:
                self._map[i].value = value  # type: ignore
                return
        self._map.append(MapEntry(key, value))  # type: ignore

    def append(self, value: "TValue") -> None:
        """Append to list."""
        if self._type != TType.LIST:
            raise TypeError("cannot append to non-list")
        self._list.append(value)  # type: ignore

    # ============================================================
    # Comparison
    # ============================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TValue):
            return NotImplemented
        if self._type != other._type:
            return False
        t = self._type
        if t == TType.NULL:
            return True
        elif t == TType.BOOL:
            return self._bool == other._bool
        elif t == TType.INT:
            return self._int == other._int
        elif t == TType.FLOAT:
            return self._float == other._float
        elif t == TType.STR:
            return self._str == other._str
        elif t == TType.LIST:
            return self._list == other._list
        # Maps compare entry by entry, so key order matters.
        return [(e.key, e.value) for e in self._map] == [  # type: ignore
            (e.key, e.value) for e in other._map  # type: ignore
        ]

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        if self._type == TType.NULL:
            return "TValue.null()"
        elif self._type == TType.BOOL:
            return f"TValue.bool_({self._bool})"
        elif self._type == TType.INT:
            return f"TValue.int_({self._int})"
        elif self._type == TType.FLOAT:
            return f"TValue.float_({self._float})"
        elif self._type == TType.STR:
            return f"TValue.str_({self._str!r})"
        elif self._type == TType.LIST:
            return f"TValue.list_({', '.join(repr(v) for v in self._list)})"  # type: ignore
        return f"TValue.map_({', '.join(f'{e.key}={e.value!r}' for e in self._map)})"  # type: ignore


# ============================================================
# Helper Functions
# ============================================================

def field(key: str, value: TValue) -> MapEntry:
    """Create a map entry for object construction."""
    return MapEntry(key, value)


# Shorthand constructors
class T:
    """Shorthand constructors for TValue."""

    @staticmethod
    def null() -> TValue:
        return TValue.null()

    @staticmethod
    def bool(v: bool) -> TValue:
        return TValue.bool_(v)

    @staticmethod
    def int(v: int) -> TValue:
        return TValue.int_(v)

    @staticmethod
    def float(v: float) -> TValue:
        return TValue.float_(v)

    @staticmethod
    def str(v: str) -> TValue:
        return TValue.str_(v)

    @staticmethod
    def list(*values: TValue) -> TValue:
        return TValue.list_(*values)

    @staticmethod
    def map(*entries: MapEntry) -> TValue:
        return TValue.map_(*entries)


t = T()
