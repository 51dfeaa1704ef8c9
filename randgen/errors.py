# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
Random generation errors.

This module defines a small, typed hierarchy of exceptions raised by the
generators (bytes → integer → boolean/float/string). Callers can catch the
base `RandError` to handle every generation error, catch the concrete
subclasses, or branch on the `kind` attribute shared by all of them.

Each concrete error also derives from the matching builtin so generic callers
keep working:

  - InvalidArgumentError : TypeError    (malformed input, caller bug)
  - DomainError          : ValueError   (well-typed but out of domain, caller bug)
  - EntropyUnavailable   : RuntimeError (source failed; callers may skip/fallback)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    DOMAIN = "domain"
    ENTROPY_UNAVAILABLE = "entropy_unavailable"


class RandError(Exception):
    """Base class for all random generation errors."""

    kind: ErrorKind

    def __init__(self, operation: str, message: str, **context: Any) -> None:
        self.operation = operation
        self.message = message
        self.context = dict(context)
        super().__init__(self._format())

    def _format(self) -> str:
        base = f"{self.operation}: {self.message}"
        if not self.context:
            return base
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{base} ({details})"


class InvalidArgumentError(RandError, TypeError):
    """
    Raised when an argument has the wrong type (e.g. a float or str where an
    integer is required). Never worth retrying.
    """

    kind = ErrorKind.INVALID_ARGUMENT


class DomainError(RandError, ValueError):
    """
    Raised when an argument is well-typed but semantically invalid, such as
    ``min > max`` or a non-positive length. Never worth retrying.
    """

    kind = ErrorKind.DOMAIN


class EntropyUnavailable(RandError, RuntimeError):
    """
    Raised when the entropy source cannot deliver bytes, delivers the wrong
    amount, or degenerates so badly that rejection sampling cannot finish.

    Attributes:
        mode: "secure" or "fast", when known.
    """

    kind = ErrorKind.ENTROPY_UNAVAILABLE

    def __init__(
        self, operation: str, message: str, *, mode: Optional[str] = None, **context: Any
    ) -> None:
        self.mode = mode
        if mode is not None:
            context = {"mode": mode, **context}
        super().__init__(operation, message, **context)


class RedrawsExhausted(EntropyUnavailable):
    """
    Raised when rejection sampling hits its redraw cap. With a healthy source
    this has probability below 2^-128; in practice it means the source is stuck.
    """


__all__ = [
    "ErrorKind",
    "RandError",
    "InvalidArgumentError",
    "DomainError",
    "EntropyUnavailable",
    "RedrawsExhausted",
]
