"""
TOON - Token-Oriented Object Notation for Python

A compact, indentation-based notation for JSON-like data that spends far fewer
tokens than JSON on uniform arrays while staying readable.

Example:
    >>> import toon
    >>>
    >>> data = {"users": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]}
    >>> text = toon.encode(data)
    >>> print(text)
    users[2,]{id,name}:
      1,Alice
      2,Bob
    >>>
    >>> toon.decode(text) == data
    True
    >>>
    >>> # Options
    >>> print(toon.encode([1, 2, 3], {"delimiter": "|", "length_marker": "#"}))
    [#3|]: 1|2|3
"""

__version__ = "1.0.0"

# Core types
from .types import (
    TValue,
    TType,
    MapEntry,
    field,
    t,
    T,
)

# Errors
from .errors import ToonDecodeError

# Options
from .options import (
    EncodeOptions,
    DecodeOptions,
    default_encode_options,
    tab_encode_options,
    pipe_encode_options,
    default_decode_options,
    lenient_decode_options,
)

# Normalization
from .normalize import (
    normalize,
    to_python,
)

# Encoding
from .encoder import encode

# Decoding
from .decoder import (
    decode,
    parse,
)

__all__ = [
    # Version
    "__version__",
    # Core types
    "TValue",
    "TType",
    "MapEntry",
    "field",
    "t",
    "T",
    # Errors
    "ToonDecodeError",
    # Options
    "EncodeOptions",
    "DecodeOptions",
    "default_encode_options",
    "tab_encode_options",
    "pipe_encode_options",
    "default_decode_options",
    "lenient_decode_options",
    # Normalization
    "normalize",
    "to_python",
    # Codec
    "encode",
    "decode",
    "parse",
]
