# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
Version helpers for the randgen package.

Prefers the installed distribution metadata (importlib.metadata) and falls
back to a static BASE_VERSION tagged as a local dev build, normalized to PEP 440.
"""
from __future__ import annotations

import sys
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version as _pkg_version

# Bump this when making intentional, source-level releases.
BASE_VERSION = "0.1.0"

_PKG_NAME = "randgen"


@lru_cache(maxsize=1)
def get_version() -> str:
    try:
        return _pkg_version(_PKG_NAME)
    except PackageNotFoundError:
        pass
    py = f".py{sys.version_info.major}{sys.version_info.minor}"
    return f"{BASE_VERSION}+dev{py}"


__version__ = get_version()
__all__ = ["__version__", "get_version", "BASE_VERSION"]
