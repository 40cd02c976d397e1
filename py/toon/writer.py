"""Line buffer for indented TOON output."""

from __future__ import annotations
from typing import Dict, List


class LineWriter:
    """Collects (depth, content) lines and renders them with indentation."""

    def __init__(self, indent: int):
        self.indent = indent
        self._lines: List[str] = []
        # indent=0 still needs one space per level to keep nesting readable
        self._unit = " " * indent if indent > 0 else " "
        self._cache: Dict[int, str] = {0: ""}

    def push(self, depth: int, content: str) -> None:
        prefix = self._cache.get(depth)
        if prefix is None:
            prefix = self._unit * depth
            self._cache[depth] = prefix
        self._lines.append(prefix + content)

    def to_string(self) -> str:
        return "\n".join(self._lines)
