# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
randgen.sources
===============

The narrow interface through which every generator consumes entropy, plus the
factory that builds the two interchangeable default sources.

A source is anything implementing::

    def random_bytes(self, n: int) -> bytes

and returning exactly ``n`` bytes or raising. Two instances are used:

- secure (default everywhere): the operating system CSPRNG, or an entropy
  device when ``RandConfig.secure_device`` is set. May fail; failures surface
  as :class:`randgen.errors.EntropyUnavailable`.
- fast (opt-in with ``secure=False``): a non-cryptographic Mersenne Twister.
  Never fails.

Typical usage
-------------
    from randgen.sources import default_sources

    secure, fast = default_sources()
    b = secure.random_bytes(32)

Callers that need deterministic behaviour (tests) pass their own source to
:class:`randgen.generator.Rand` instead.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Tuple, runtime_checkable

logger = logging.getLogger(__name__)

# --- Public protocol & error -----------------------------------------------------


@runtime_checkable
class EntropySource(Protocol):
    """Minimal entropy source protocol."""

    def random_bytes(self, n: int) -> bytes:  # pragma: no cover - protocol
        """Return exactly n bytes of entropy, or raise on failure."""
        ...


class SourceUnavailable(RuntimeError):
    """Raised by a source that cannot produce bytes (missing device, short read...)."""


# --- Factory ---------------------------------------------------------------------


def default_sources(secure_device: Optional[str] = None) -> Tuple[EntropySource, EntropySource]:
    """
    Build the (secure, fast) pair of sources.

    ``secure_device`` selects a device-backed secure source; None uses os.urandom.
    """
    from .providers import DeviceSource, FastSource, SystemSource

    secure: EntropySource
    if secure_device:
        logger.debug("secure source backed by device %s", secure_device)
        secure = DeviceSource(secure_device)
    else:
        secure = SystemSource()
    return secure, FastSource()


__all__ = [
    "EntropySource",
    "SourceUnavailable",
    "default_sources",
]
