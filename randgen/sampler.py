# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
randgen.sampler
===============

Unbiased bounded-integer sampling from a stream of uniform random bytes.

Given ``lo <= hi`` we want ``v`` uniform over ``[lo, hi]``. Reducing a random
word modulo ``hi - lo + 1`` is biased whenever that size does not divide the
number of possible words (low residues come up more often). Instead:

  1. ``span = hi - lo``; a zero span returns ``lo`` without drawing.
  2. ``bits = span.bit_length()`` is the smallest width whose values cover
     ``[0, span]``; ``nbytes = ceil(bits / 8)`` bytes are drawn per candidate.
  3. The candidate is assembled big-endian and masked down to ``bits`` bits,
     so it lies in ``[0, 2**bits - 1]``.
  4. Candidates above ``span`` are rejected and redrawn.
  5. The accepted candidate is offset by ``lo``.

Because ``2**(bits - 1) <= span``, at least half of the candidate space is
accepted and the expected number of draws is below 2. Python integers do not
overflow, so the full signed 64-bit interval (and anything wider) works
unchanged.

The redraw loop is bounded. Running out of redraws means the source is not
producing uniform bytes (e.g. a stuck device returning 0xff forever) and is
reported as EntropyUnavailable rather than hanging or returning a biased value.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from .constants import DEFAULT_MAX_REDRAWS
from .errors import DomainError, RedrawsExhausted

logger = logging.getLogger(__name__)

ByteDraw = Callable[[int], bytes]

__all__ = [
    "ByteDraw",
    "candidate_shape",
    "sample_below",
    "sample_integer",
]


def candidate_shape(span: int) -> Tuple[int, int]:
    """
    Return ``(bits, nbytes)`` needed to draw candidates covering ``[0, span]``.

    >>> candidate_shape(63)
    (6, 1)
    >>> candidate_shape(64)
    (7, 1)
    >>> candidate_shape(2**64 - 1)
    (64, 8)
    """
    if span < 0:
        raise ValueError("span must be non-negative")
    bits = span.bit_length()
    return bits, (bits + 7) // 8


def sample_below(
    draw: ByteDraw,
    span: int,
    *,
    max_redraws: int = DEFAULT_MAX_REDRAWS,
    op: str = "sample_integer",
    mode: Optional[str] = None,
) -> Tuple[int, int]:
    """
    Draw a uniform integer in ``[0, span]``.

    Returns ``(value, rejected)`` where ``rejected`` counts discarded candidates.
    """
    if span == 0:
        return 0, 0
    bits, nbytes = candidate_shape(span)
    mask = (1 << bits) - 1

    for attempt in range(max_redraws):
        candidate = int.from_bytes(draw(nbytes), "big") & mask
        if candidate <= span:
            return candidate, attempt

    logger.warning(
        "rejection sampling gave up after %d draws (span=%d, bits=%d)",
        max_redraws,
        span,
        bits,
    )
    raise RedrawsExhausted(
        op,
        f"no candidate accepted after {max_redraws} draws; entropy source looks degenerate",
        mode=mode,
        span=span,
    )


def sample_integer(
    draw: ByteDraw,
    lo: int,
    hi: int,
    *,
    max_redraws: int = DEFAULT_MAX_REDRAWS,
    op: str = "sample_integer",
    mode: Optional[str] = None,
) -> Tuple[int, int]:
    """
    Draw a uniform integer in ``[lo, hi]`` (inclusive) using *draw* for bytes.

    ``lo`` and ``hi`` must already be ints; ordering is checked here. Returns
    ``(value, rejected)`` like :func:`sample_below`.
    """
    if lo > hi:
        raise DomainError(op, "min parameter must be lower than max parameter", min=lo, max=hi)
    value, rejected = sample_below(draw, hi - lo, max_redraws=max_redraws, op=op, mode=mode)
    return lo + value, rejected
