# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
randgen.utils.bytes
===================

Small utilities for working with bytes plus strict **length guards**.
Kept dependency-free (stdlib only).

Highlights
----------
- :func:`as_bytes` to normalize bytes-like values.
- :func:`ensure_len` length guard used on every buffer a source returns.
- :func:`to_hex` / :func:`to_base64` for printing random buffers.
- :func:`take_bits` to slice fixed-width groups out of a buffer.
"""

from __future__ import annotations

import base64
from typing import Iterator, Union

BytesLike = Union[bytes, bytearray, memoryview]

__all__ = [
    "as_bytes",
    "ensure_len",
    "to_hex",
    "to_base64",
    "take_bits",
]


def as_bytes(x: BytesLike) -> bytes:
    """Normalize bytes-like to immutable :class:`bytes`."""
    if isinstance(x, bytes):
        return x
    if isinstance(x, (bytearray, memoryview)):
        return bytes(x)
    raise TypeError(f"expected bytes-like, got {type(x)!r}")


def ensure_len(b: BytesLike, expected: int, *, name: str = "value") -> bytes:
    """
    Ensure ``len(b) == expected``. Returns bytes on success, raises ValueError otherwise.
    """
    bb = as_bytes(b)
    if len(bb) != expected:
        raise ValueError(f"{name} must be {expected} bytes, got {len(bb)}")
    return bb


def to_hex(b: BytesLike, *, prefix: str = "") -> str:
    """Encode bytes as lowercase hex, optionally prefixed (e.g. ``0x``)."""
    return (prefix or "") + as_bytes(b).hex()


def to_base64(b: BytesLike) -> str:
    """Standard (padded) base64 encoding of *b* as text."""
    return base64.b64encode(as_bytes(b)).decode("ascii")


def take_bits(b: BytesLike, width: int, count: int) -> Iterator[int]:
    """
    Yield *count* consecutive *width*-bit unsigned groups from *b*, most
    significant bits first. Trailing bits that do not fill a group are ignored.
    """
    if width < 1:
        raise ValueError("width must be >= 1")
    bb = as_bytes(b)
    if count * width > len(bb) * 8:
        raise ValueError(f"need {count * width} bits, buffer has {len(bb) * 8}")
    mask = (1 << width) - 1
    acc = 0
    nbits = 0
    it = iter(bb)
    for _ in range(count):
        while nbits < width:
            acc = (acc << 8) | next(it)
            nbits += 8
        nbits -= width
        yield (acc >> nbits) & mask
        acc &= (1 << nbits) - 1
