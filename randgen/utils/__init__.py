# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
randgen.utils
-------------

Light helpers shared by the generators: byte guards and bit slicing
(`utils.bytes`) and argument validation (`utils.args`).

Submodules are imported explicitly; nothing is re-exported here.
"""

__all__: list[str] = []
