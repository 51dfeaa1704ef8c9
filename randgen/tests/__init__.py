"""
randgen.tests
-------------
Test package for the random generators.

Notes:
- Tests that need exact outputs use scripted sources handed to `Rand`;
  statistical tests use the real secure and fast sources.
"""

from __future__ import annotations

__all__: tuple[str, ...] = ()
