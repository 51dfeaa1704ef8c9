# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
randgen: uniform random bytes, booleans, bounded integers, floats and strings.

All generators draw from the operating system CSPRNG unless called with
``secure=False``, which switches that single call to a fast,
non-cryptographic source. Bounded integers use rejection sampling, so
``get_integer(a, b)`` carries no modulo bias for any ``a <= b``.

    >>> from randgen import get_integer, get_string
    >>> 1 <= get_integer(1, 6) <= 6
    True
    >>> len(get_string(16))
    16
"""

from __future__ import annotations

from .constants import BASE64_ALPHABET, HEX_ALPHABET
from .errors import (
    DomainError,
    EntropyUnavailable,
    ErrorKind,
    InvalidArgumentError,
    RandError,
    RedrawsExhausted,
)
from .generator import (
    Rand,
    default_rand,
    get_boolean,
    get_bytes,
    get_float,
    get_integer,
    get_string,
)
from .version import __version__

__all__ = [
    "__version__",
    "BASE64_ALPHABET",
    "HEX_ALPHABET",
    "Rand",
    "default_rand",
    "get_bytes",
    "get_boolean",
    "get_integer",
    "get_float",
    "get_string",
    "RandError",
    "ErrorKind",
    "InvalidArgumentError",
    "DomainError",
    "EntropyUnavailable",
    "RedrawsExhausted",
]
