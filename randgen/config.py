# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
Random generation configuration.

This file defines the typed configuration object for the generators:
- Rejection-sampling redraw cap for the bounded-integer sampler
- Word width used by get_float (32 or 64 bits)
- Optional device path backing the secure source (instead of os.urandom)
- Whether Prometheus counters are updated

The entropy mode (secure vs fast) is not configurable here: it is
a per-call argument everywhere and defaults to secure.

It provides:
- Dataclass-based config with validation
- Loading from environment variables (prefix configurable)
- Loading from a JSON or YAML file
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import yaml

from .constants import DEFAULT_FLOAT_BITS, DEFAULT_MAX_REDRAWS, SUPPORTED_FLOAT_BITS


@dataclass
class RandConfig:
    """
    max_redraws: upper bound on rejection-sampling draws per integer. Reaching
                 it raises EntropyUnavailable instead of returning a biased value.
    float_bits: width of the unsigned word divided down by get_float.
    secure_device: path of an entropy device backing the secure source; None
                   uses the operating system CSPRNG (os.urandom).
    metrics_enabled: update Prometheus counters on every draw.
    """

    max_redraws: int = DEFAULT_MAX_REDRAWS
    float_bits: int = DEFAULT_FLOAT_BITS
    secure_device: Optional[str] = None
    metrics_enabled: bool = True

    def validate(self) -> None:
        if isinstance(self.max_redraws, bool) or not isinstance(self.max_redraws, int):
            raise ValueError("max_redraws must be an integer")
        if self.max_redraws < 1:
            raise ValueError("max_redraws must be >= 1")
        if self.float_bits not in SUPPORTED_FLOAT_BITS:
            raise ValueError(
                f"float_bits must be one of {SUPPORTED_FLOAT_BITS}, got {self.float_bits!r}"
            )
        if self.secure_device is not None and not (
            isinstance(self.secure_device, str) and self.secure_device
        ):
            raise ValueError("secure_device must be a non-empty path or None")

    # -------------------------
    # Serialization helpers
    # -------------------------

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)

    # -------------------------
    # Loaders
    # -------------------------

    @staticmethod
    def from_env(prefix: str = "RANDGEN_") -> "RandConfig":
        """
        Load configuration from environment variables. All variables are optional.

        Supported keys:
          - RANDGEN_MAX_REDRAWS=128
          - RANDGEN_FLOAT_BITS=64
          - RANDGEN_SECURE_DEVICE=/dev/urandom
          - RANDGEN_METRICS=true
        """

        def _get(name: str, cast: Any, default: Any) -> Any:
            key = prefix + name
            raw = os.getenv(key)
            if raw is None or raw == "":
                return default
            try:
                if cast is bool:
                    return raw.lower() in {"1", "true", "yes", "on"}
                return cast(raw)
            except ValueError as e:
                raise ValueError(f"Invalid value for {key}: {raw!r}") from e

        cfg = RandConfig(
            max_redraws=_get("MAX_REDRAWS", int, DEFAULT_MAX_REDRAWS),
            float_bits=_get("FLOAT_BITS", int, DEFAULT_FLOAT_BITS),
            secure_device=_get("SECURE_DEVICE", str, None),
            metrics_enabled=_get("METRICS", bool, True),
        )
        cfg.validate()
        return cfg

    @staticmethod
    def from_file(path: str) -> "RandConfig":
        """
        Load configuration from a JSON or YAML file. Keys mirror the dataclass
        fields. Example (YAML):

            max_redraws: 128
            float_bits: 32
            secure_device: /dev/hwrng
            metrics_enabled: false
        """
        text = _read_text(path)
        data = _parse_json_or_yaml(text, path)
        if not isinstance(data, dict):
            raise ValueError(f"{path!r} must contain a mapping at the top level")

        unknown = set(data) - {"max_redraws", "float_bits", "secure_device", "metrics_enabled"}
        if unknown:
            raise ValueError(f"Unknown config keys in {path!r}: {sorted(unknown)}")

        cfg = RandConfig(
            max_redraws=data.get("max_redraws", DEFAULT_MAX_REDRAWS),
            float_bits=data.get("float_bits", DEFAULT_FLOAT_BITS),
            secure_device=data.get("secure_device"),
            metrics_enabled=bool(data.get("metrics_enabled", True)),
        )
        cfg.validate()
        return cfg


# -------------------------
# Utilities
# -------------------------


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _parse_json_or_yaml(text: str, path_hint: str) -> Any:
    # First try JSON
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    try:
        return yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(
            f"Failed to parse {path_hint!r} as JSON or YAML. Original error: {e}"
        ) from e


DEFAULT: RandConfig = RandConfig()


__all__ = [
    "RandConfig",
    "DEFAULT",
]
