# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
randgen.utils.args
==================

Argument guards shared by the public entry points. Each guard raises the
typed errors from :mod:`randgen.errors` with the failing operation and
argument name in the message.
"""

from __future__ import annotations

import operator
import sys
from typing import Any

from ..errors import DomainError, InvalidArgumentError

__all__ = [
    "require_int",
    "require_positive_int",
    "require_alphabet",
    "is_power_of_two",
]


def require_int(value: Any, *, op: str, name: str) -> int:
    """
    Return *value* as a plain ``int``.

    Anything implementing ``__index__`` (int, numpy integers...) is accepted;
    bool, float, str and None are rejected with InvalidArgumentError.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(op, f"{name} must be an integer, got bool", **{name: value})
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(
            op, f"{name} must be an integer, got {type(value).__name__}", **{name: value}
        ) from None


def require_positive_int(value: Any, *, op: str, name: str = "length") -> int:
    n = require_int(value, op=op, name=name)
    if n <= 0:
        raise DomainError(op, f"{name} must be a positive number", **{name: n})
    if n > sys.maxsize:
        raise DomainError(op, f"{name} must not exceed {sys.maxsize}", **{name: n})
    return n


def require_alphabet(value: Any, *, op: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(
            op, f"alphabet must be a str, got {type(value).__name__}"
        )
    if not value:
        raise DomainError(op, "alphabet must not be empty")
    return value


def is_power_of_two(n: int) -> bool:
    """True for 1, 2, 4, 8, ...; False for zero and negatives."""
    return n > 0 and (n & (n - 1)) == 0
