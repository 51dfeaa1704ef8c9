# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
randgen.derived
===============

Generators derived from raw bytes and the bounded-integer sampler:

- :func:`sample_boolean` - the integer sampler over ``{0, 1}``.
- :func:`sample_float`   - a full-width unsigned word divided by its maximum.
- :func:`sample_string`  - characters drawn from an alphabet, with a
  bit-slicing fast path for power-of-two alphabet sizes.

Everything here is a pure function of the callables it is handed:

- ``draw(n) -> bytes`` returns ``n`` uniform bytes (already length-checked),
- ``sample_index(span) -> int`` returns a uniform integer in ``[0, span]``.

:class:`randgen.generator.Rand` supplies both, bound to the selected source.
"""

from __future__ import annotations

from typing import Callable

from .constants import BASE64_ALPHABET, DEFAULT_FLOAT_BITS
from .utils.args import is_power_of_two
from .utils.bytes import take_bits

ByteDraw = Callable[[int], bytes]
IndexSampler = Callable[[int], int]

__all__ = [
    "sample_boolean",
    "word_to_float",
    "sample_float",
    "sample_string",
]


def sample_boolean(sample_index: IndexSampler) -> bool:
    return sample_index(1) == 1


def word_to_float(word: int, bits: int = DEFAULT_FLOAT_BITS) -> float:
    """
    Map an unsigned *bits*-wide word onto ``[0.0, 1.0]``.

    Both ends are reachable: 0 maps to 0.0 and the all-ones word maps to 1.0.
    Float rounding can also land words just below the maximum on 1.0.
    """
    top = (1 << bits) - 1
    if not 0 <= word <= top:
        raise ValueError(f"word must be in [0, {top}]")
    return word / top


def sample_float(draw: ByteDraw, bits: int = DEFAULT_FLOAT_BITS) -> float:
    # No rejection here; the slight weight on the boundaries is accepted.
    word = int.from_bytes(draw(bits // 8), "big")
    return word_to_float(word, bits)


def sample_string(
    draw: ByteDraw,
    sample_index: IndexSampler,
    length: int,
    alphabet: str = BASE64_ALPHABET,
) -> str:
    """
    Return exactly *length* characters, each drawn uniformly from *alphabet*.

    Alphabets of size ``2**k`` consume exactly ``k`` bits per character, sliced
    out of ``ceil(length * k / 8)`` random bytes. Every other size goes through
    *sample_index* once per character. Arguments are assumed validated.
    """
    size = len(alphabet)
    if size == 1:
        return alphabet * length

    if is_power_of_two(size):
        width = size.bit_length() - 1
        buf = draw((length * width + 7) // 8)
        return "".join(alphabet[i] for i in take_bits(buf, width, length))

    span = size - 1
    return "".join(alphabet[sample_index(span)] for _ in range(length))
