# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
randgen.cli
-----------

Command-line front end for the generators (requires `typer`).

Commands:
  - bytes   : Random bytes, hex or base64 encoded.
  - int     : Integers in [MIN, MAX].
  - float   : Floats in [0, 1].
  - bool    : true / false.
  - string  : Strings over an alphabet (base64 by default, --hex, --alphabet).
  - config  : Effective configuration.

Example:
  python -m randgen.cli int 1 6 --count 3
"""

from __future__ import annotations

from .main import app, main

__all__ = ["app", "main"]
