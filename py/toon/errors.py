"""
TOON Errors

Every failure while decoding surfaces as a ToonDecodeError. Encoding never
fails: unsupported values normalize to null instead.
"""

from __future__ import annotations
from typing import Optional


class ToonDecodeError(ValueError):
    """Raised when TOON text is malformed.

    The `.line` attribute holds the 1-based source line when it is known.
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.reason = message
        self.line = line
        if line is not None:
            message = f"Line {line}: {message}"
        super().__init__(message)

    def with_line(self, line: int) -> "ToonDecodeError":
        """Return a copy of this error bound to a source line."""
        if self.line is not None:
            return self
        return ToonDecodeError(self.reason, line)
