"""Scripted entropy sources for deterministic tests."""

from __future__ import annotations

from typing import Iterable, List


class ScriptedSource:
    """Returns pre-baked chunks in order and records every request size."""

    def __init__(self, chunks: Iterable[bytes]) -> None:
        self._chunks: List[bytes] = [bytes(c) for c in chunks]
        self.requests: List[int] = []

    def random_bytes(self, n: int) -> bytes:
        self.requests.append(n)
        if not self._chunks:
            raise AssertionError(f"scripted source exhausted (asked for {n} bytes)")
        return self._chunks.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._chunks)


class ConstantSource:
    """Always returns the same byte value; a stuck device."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls = 0

    def random_bytes(self, n: int) -> bytes:
        self.calls += 1
        return bytes([self.value]) * n


class FailingSource:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def random_bytes(self, n: int) -> bytes:
        raise self.exc


class ShortSource:
    """Delivers one byte less than requested."""

    def random_bytes(self, n: int) -> bytes:
        return b"\x00" * (n - 1)

