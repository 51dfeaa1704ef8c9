# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
randgen.generator
=================

Public entry points: bytes, booleans, bounded integers, floats and strings.

Every operation takes a ``secure`` flag (default True) selecting the entropy
source for that call only. There is no process-wide mode switch.

Typical usage
-------------
    from randgen import get_bytes, get_integer, get_string

    key = get_bytes(32)
    die = get_integer(1, 6)
    token = get_string(24)                       # base64 alphabet
    code = get_string(6, "0123456789")
    jitter = get_integer(0, 250, secure=False)   # fast, non-cryptographic

For tests or custom devices build a :class:`Rand` with explicit sources::

    rand = Rand(secure_source=MySource())
    rand.get_integer(0, 100)

Errors
------
- InvalidArgumentError: non-integer length/bound, non-str alphabet
- DomainError: non-positive or oversized length, ``min > max``, empty alphabet
- EntropyUnavailable: the source failed, returned the wrong number of bytes,
  or was too degenerate for rejection sampling to finish
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from .config import RandConfig
from .constants import BASE64_ALPHABET, MODE_FAST, MODE_SECURE
from .derived import sample_boolean, sample_float, sample_string
from .errors import DomainError, EntropyUnavailable, RedrawsExhausted
from .metrics import METRICS, Metrics
from .sampler import sample_integer
from .sources import EntropySource, default_sources
from .utils.args import require_alphabet, require_int, require_positive_int
from .utils.bytes import ensure_len

logger = logging.getLogger(__name__)

__all__ = [
    "Rand",
    "default_rand",
    "get_bytes",
    "get_boolean",
    "get_integer",
    "get_float",
    "get_string",
]


class Rand:
    """
    Random value generator bound to a configuration and a (secure, fast)
    pair of entropy sources.

    Args:
        config: tunables; defaults to ``RandConfig()``.
        secure_source: source used when ``secure=True``; defaults to os.urandom
            (or ``config.secure_device`` when set).
        fast_source: source used when ``secure=False``; defaults to FastSource.
        metrics: Prometheus instruments; defaults to the module singleton, or
            nothing when ``config.metrics_enabled`` is False.
    """

    def __init__(
        self,
        config: Optional[RandConfig] = None,
        *,
        secure_source: Optional[EntropySource] = None,
        fast_source: Optional[EntropySource] = None,
        metrics: Optional[Metrics] = None,
    ) -> None:
        self.config = config if config is not None else RandConfig()
        self.config.validate()
        if secure_source is None or fast_source is None:
            default_secure, default_fast = default_sources(self.config.secure_device)
            secure_source = secure_source or default_secure
            fast_source = fast_source or default_fast
        self._secure = secure_source
        self._fast = fast_source
        if metrics is None and self.config.metrics_enabled:
            metrics = METRICS
        self._metrics = metrics

    def __repr__(self) -> str:
        return f"Rand(secure={self._secure!r}, fast={self._fast!r})"

    def close(self) -> None:
        """Release handles held by the sources (e.g. a shared device file)."""
        for source in (self._secure, self._fast):
            close = getattr(source, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> "Rand":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Primitives
    # ------------------------------------------------------------------ #

    def _draw(self, op: str, n: int, secure: bool) -> bytes:
        mode = MODE_SECURE if secure else MODE_FAST
        source = self._secure if secure else self._fast
        try:
            raw = source.random_bytes(n)
        except EntropyUnavailable:
            self._record_failure(mode)
            raise
        except OverflowError as e:
            # Request larger than the platform can address: a caller error.
            raise DomainError(op, f"cannot draw {n} bytes: {e}", length=n) from e
        except Exception as e:
            self._record_failure(mode)
            logger.warning("%s entropy source %r failed: %s", mode, source, e)
            raise EntropyUnavailable(op, f"{mode} entropy source failed: {e}", mode=mode) from e
        try:
            buf = ensure_len(raw, n, name="entropy")
        except (TypeError, ValueError) as e:
            self._record_failure(mode)
            raise EntropyUnavailable(op, f"{mode} entropy source misbehaved: {e}", mode=mode) from e
        if self._metrics is not None:
            self._metrics.record_bytes(mode, n)
        return buf

    def _sample(self, op: str, lo: int, hi: int, secure: bool) -> int:
        mode = MODE_SECURE if secure else MODE_FAST
        try:
            value, rejected = sample_integer(
                lambda n: self._draw(op, n, secure),
                lo,
                hi,
                max_redraws=self.config.max_redraws,
                op=op,
                mode=mode,
            )
        except RedrawsExhausted:
            self._record_failure(mode)
            raise
        if self._metrics is not None:
            self._metrics.record_redraws(rejected)
        return value

    def _sample_index(self, op: str, span: int, secure: bool) -> int:
        return self._sample(op, 0, span, secure)

    def _record_draw(self, operation: str, secure: bool) -> None:
        if self._metrics is not None:
            self._metrics.record_draw(operation, MODE_SECURE if secure else MODE_FAST)

    def _record_failure(self, mode: str) -> None:
        if self._metrics is not None:
            self._metrics.record_entropy_failure(mode)

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def get_bytes(self, length: Any, secure: bool = True) -> bytes:
        """Return exactly *length* random bytes."""
        n = require_positive_int(length, op="get_bytes")
        secure = bool(secure)
        self._record_draw("bytes", secure)
        return self._draw("get_bytes", n, secure)

    def get_boolean(self, secure: bool = True) -> bool:
        secure = bool(secure)
        self._record_draw("boolean", secure)
        return sample_boolean(lambda span: self._sample_index("get_boolean", span, secure))

    def get_integer(self, min_value: Any, max_value: Any, secure: bool = True) -> int:
        """
        Return an integer uniformly distributed over ``[min_value, max_value]``.

        Any pair of Python integers with ``min_value <= max_value`` is accepted,
        including the full signed 64-bit range.
        """
        lo = require_int(min_value, op="get_integer", name="min")
        hi = require_int(max_value, op="get_integer", name="max")
        secure = bool(secure)
        value = self._sample("get_integer", lo, hi, secure)
        self._record_draw("integer", secure)
        return value

    def get_float(self, secure: bool = True) -> float:
        """Return a float in ``[0.0, 1.0]`` (both ends inclusive)."""
        secure = bool(secure)
        self._record_draw("float", secure)
        return sample_float(
            lambda n: self._draw("get_float", n, secure), self.config.float_bits
        )

    def get_string(
        self, length: Any, alphabet: Any = BASE64_ALPHABET, secure: bool = True
    ) -> str:
        """Return exactly *length* characters drawn uniformly from *alphabet*."""
        n = require_positive_int(length, op="get_string")
        chars = require_alphabet(alphabet, op="get_string")
        secure = bool(secure)
        self._record_draw("string", secure)
        return sample_string(
            lambda k: self._draw("get_string", k, secure),
            lambda span: self._sample_index("get_string", span, secure),
            n,
            chars,
        )


# ---------------------------------------------------------------------- #
# Module-level convenience API
# ---------------------------------------------------------------------- #

_default: Optional[Rand] = None
_default_lock = threading.Lock()


def default_rand() -> Rand:
    """Return the shared generator, configured from RANDGEN_* environment variables."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Rand(RandConfig.from_env())
    return _default


def get_bytes(length: Any, secure: bool = True) -> bytes:
    return default_rand().get_bytes(length, secure)


def get_boolean(secure: bool = True) -> bool:
    return default_rand().get_boolean(secure)


def get_integer(min_value: Any, max_value: Any, secure: bool = True) -> int:
    return default_rand().get_integer(min_value, max_value, secure)


def get_float(secure: bool = True) -> float:
    return default_rand().get_float(secure)


def get_string(length: Any, alphabet: Any = BASE64_ALPHABET, secure: bool = True) -> str:
    return default_rand().get_string(length, alphabet, secure)
