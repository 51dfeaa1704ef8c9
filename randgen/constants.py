# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
Random generation constants.

This module centralizes:
- Alphabets used by string generation (base64 default, hex)
- Integer domain bounds for the signed 64-bit range the sampler must cover
- Rejection-sampling and float-width defaults (kept in sync with config)
- Buffer guidelines for device-backed sources

Operational knobs may be overridden via `randgen.config.RandConfig`, but code
that needs stable defaults can import from here.
"""

from __future__ import annotations

import string

# -----------------------------
# Alphabets
# -----------------------------
# Order matters: index i of a drawn value maps to character i.
BASE64_ALPHABET: str = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
HEX_ALPHABET: str = "0123456789abcdef"

# -----------------------------
# Integer domain
# -----------------------------
INT64_MIN: int = -(1 << 63)
INT64_MAX: int = (1 << 63) - 1
UINT64_MAX: int = (1 << 64) - 1

# -----------------------------
# Sampling defaults (mirror config)
# -----------------------------
# Every draw is accepted with probability >= 1/2, so hitting this cap with a
# healthy source has probability <= 2^-128.
DEFAULT_MAX_REDRAWS: int = 128

# Width of the unsigned word divided down by get_float.
DEFAULT_FLOAT_BITS: int = 64
SUPPORTED_FLOAT_BITS: tuple[int, ...] = (32, 64)

# -----------------------------
# Source I/O
# -----------------------------
DEFAULT_SECURE_DEVICE: str = "/dev/urandom"
FILE_IO_CHUNK_SIZE: int = 64 * 1024     # 64 KiB
DEVICE_IO_CHUNK_SIZE: int = 32 * 1024   # 32 KiB

MODE_SECURE: str = "secure"
MODE_FAST: str = "fast"

__all__ = [
    "BASE64_ALPHABET",
    "HEX_ALPHABET",
    "INT64_MIN",
    "INT64_MAX",
    "UINT64_MAX",
    "DEFAULT_MAX_REDRAWS",
    "DEFAULT_FLOAT_BITS",
    "SUPPORTED_FLOAT_BITS",
    "DEFAULT_SECURE_DEVICE",
    "FILE_IO_CHUNK_SIZE",
    "DEVICE_IO_CHUNK_SIZE",
    "MODE_SECURE",
    "MODE_FAST",
]
