# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
randgen.sources.providers
=========================

Concrete implementations of the `EntropySource` protocol defined in
`randgen.sources`.

Providers included
------------------
- SystemSource : Operating system CSPRNG via ``os.urandom`` (secure default).
- FileSource   : Read bytes from a file-like source (e.g. /dev/urandom or a device FIFO).
- DeviceSource : Thin wrapper around FileSource with device-centric defaults.
- FastSource   : Non-cryptographic Mersenne Twister (``random.Random``). Opt-in only.

All implementations only use the Python standard library and implement:

    def random_bytes(self, n: int) -> bytes

Security notes
--------------
- FastSource output is predictable from a few hundred observed outputs. Never
  use it for tokens, keys, salts or anything an attacker may want to guess.
- FileSource performs no health checks on the device output; point it at a
  trusted device only.
"""

from __future__ import annotations

import io
import os
import random
import threading
from typing import Optional

from ..constants import DEFAULT_SECURE_DEVICE, DEVICE_IO_CHUNK_SIZE, FILE_IO_CHUNK_SIZE
from . import EntropySource, SourceUnavailable

# -----------------------------------------------------------------------------#
# Utilities
# -----------------------------------------------------------------------------#


def _read_exact_from_file(
    f: io.BufferedReader, n: int, *, chunk_size: int = FILE_IO_CHUNK_SIZE
) -> bytes:
    """
    Read exactly n bytes from an open binary file object, raising
    SourceUnavailable if not enough bytes are available.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    out = bytearray()
    remaining = n
    while remaining:
        read_len = min(remaining, chunk_size)
        chunk = f.read(read_len)
        if not chunk:
            raise SourceUnavailable(f"unexpected EOF: needed {remaining} more bytes")
        out.extend(chunk)
        remaining -= len(chunk)
    return bytes(out)


# -----------------------------------------------------------------------------#
# OS CSPRNG
# -----------------------------------------------------------------------------#


class SystemSource(EntropySource):
    """Cryptographically secure bytes from the operating system (``os.urandom``)."""

    secure = True

    def random_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("n must be non-negative")
        try:
            return os.urandom(n)
        except (NotImplementedError, OSError) as e:
            raise SourceUnavailable(f"os.urandom failed: {e}") from e

    def __repr__(self) -> str:
        return "SystemSource()"


# -----------------------------------------------------------------------------#
# File-backed provider
# -----------------------------------------------------------------------------#


class FileSource(EntropySource):
    """
    Read entropy bytes from a file path (e.g., a character device or FIFO).

    Args:
        path: File path to read from.
        reopen_each_call: If True (default), open/close the file per call to
            `random_bytes` for simplicity and resilience to rotations.
            If False, keeps a shared handle; guarded by a lock for thread safety.
        block_size: Internal read chunk size.
    """

    secure = True

    def __init__(
        self, path: str, *, reopen_each_call: bool = True, block_size: int = FILE_IO_CHUNK_SIZE
    ):
        if not path or not isinstance(path, str):
            raise ValueError("path must be a non-empty string")
        self._path = path
        self._reopen = reopen_each_call
        self._block = block_size
        self._lock = threading.Lock()
        self._fh: Optional[io.BufferedReader] = (
            None  # kept only if reopen_each_call=False
        )

    @property
    def path(self) -> str:
        return self._path

    def _ensure_open(self) -> io.BufferedReader:
        if self._fh is not None:
            return self._fh
        fh = open(self._path, "rb", buffering=0)  # unbuffered; we'll buffer ourselves
        buf = io.BufferedReader(fh, buffer_size=self._block)
        self._fh = buf
        return buf

    def close(self) -> None:
        with self._lock:
            if self._fh is not None:
                try:
                    self._fh.close()
                finally:
                    self._fh = None

    def random_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("n must be non-negative")
        if n == 0:
            return b""
        try:
            if self._reopen:
                with open(self._path, "rb", buffering=0) as fh:
                    buf = io.BufferedReader(fh, buffer_size=self._block)
                    return _read_exact_from_file(buf, n, chunk_size=self._block)
            with self._lock:
                fh = self._ensure_open()
                try:
                    return _read_exact_from_file(fh, n, chunk_size=self._block)
                except Exception:
                    # Drop the handle so the next call can recover
                    try:
                        fh.close()
                    finally:
                        self._fh = None
                    raise
        except OSError as e:
            raise SourceUnavailable(f"cannot read {self._path}: {e}") from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"


class DeviceSource(FileSource):
    """
    Device-centric provider. Defaults suit character devices, but it is just a
    thin wrapper around FileSource that keeps the handle open between calls.

    Example paths:
        - Linux: /dev/urandom, /dev/hwrng
        - BSD  : /dev/random
    """

    def __init__(
        self,
        device_path: str = DEFAULT_SECURE_DEVICE,
        *,
        reopen_each_call: bool = False,
        block_size: int = DEVICE_IO_CHUNK_SIZE,
    ):
        super().__init__(
            device_path, reopen_each_call=reopen_each_call, block_size=block_size
        )


# -----------------------------------------------------------------------------#
# Non-cryptographic provider
# -----------------------------------------------------------------------------#


class FastSource(EntropySource):
    """
    Fast, NON-cryptographic bytes from a private ``random.Random`` instance.

    The generator is seeded by the interpreter from OS entropy on construction;
    seeding policy beyond that is out of scope. Must not fail.
    """

    secure = False

    def __init__(self) -> None:
        self._rng = random.Random()
        self._lock = threading.Lock()

    def random_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("n must be non-negative")
        with self._lock:
            return self._rng.randbytes(n)

    def __repr__(self) -> str:
        return "FastSource()"


__all__ = [
    "SystemSource",
    "FileSource",
    "DeviceSource",
    "FastSource",
]
