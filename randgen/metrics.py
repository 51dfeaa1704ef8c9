# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
Prometheus metrics for the random generators.

This module defines counters for the generation pipeline:
  • bytes_total            - raw bytes pulled from a source, per mode
  • draws_total            - public generator calls, per operation and mode
  • redraws_total          - rejected candidates in the bounded-integer sampler
  • entropy_failures_total - source failures / exhausted redraw budgets, per mode

Design notes
------------
- Label cardinality is intentionally low: `mode` is "secure" or "fast" and
  `operation` is one of the five public generators.
- A steadily growing redraws_total relative to draws_total is expected (the
  sampler rejects up to half of its candidates); a sudden jump in
  entropy_failures_total means a source went bad.

Usage
-----
    from randgen.metrics import METRICS

    METRICS.record_draw("integer", "secure")
    METRICS.record_bytes("secure", 8)

If you need a custom Prometheus registry or different namespace/subsystem, construct
your own `Metrics` instance.
"""

from __future__ import annotations

from prometheus_client import REGISTRY, Counter

# --------- Vocabularies (kept small for bounded cardinality) ---------

_OPERATIONS = (
    "bytes",
    "boolean",
    "integer",
    "float",
    "string",
)

_MODES = (
    "secure",
    "fast",
)


class Metrics:
    """
    Container for all generator Prometheus instruments.

    Args:
        namespace: Prometheus metric namespace (prefix).
        subsystem: Prometheus metric subsystem (inserted between namespace and name).
        registry:  Prometheus registry to register the metrics with.
    """

    def __init__(
        self,
        *,
        namespace: str = "randgen",
        subsystem: str = "",
        registry=REGISTRY,
    ) -> None:
        self.bytes_total = Counter(
            "bytes_total",
            "Raw random bytes pulled from entropy sources, labeled by mode.",
            labelnames=("mode",),
            namespace=namespace,
            subsystem=subsystem,
            registry=registry,
        )
        self.draws_total = Counter(
            "draws_total",
            "Public generator calls, labeled by operation and mode.",
            labelnames=("operation", "mode"),
            namespace=namespace,
            subsystem=subsystem,
            registry=registry,
        )
        self.redraws_total = Counter(
            "redraws_total",
            "Candidates rejected by the bounded-integer sampler.",
            namespace=namespace,
            subsystem=subsystem,
            registry=registry,
        )
        self.entropy_failures_total = Counter(
            "entropy_failures_total",
            "Entropy source failures and exhausted redraw budgets, labeled by mode.",
            labelnames=("mode",),
            namespace=namespace,
            subsystem=subsystem,
            registry=registry,
        )

    # ----- Recording helpers -------------------------------------------------

    def record_bytes(self, mode: str, n: int) -> None:
        self.bytes_total.labels(mode=_mode(mode)).inc(n)

    def record_draw(self, operation: str, mode: str) -> None:
        """
        Increment the draw counter. Unknown operations are not recorded.
        """
        if operation not in _OPERATIONS:
            return
        self.draws_total.labels(operation=operation, mode=_mode(mode)).inc()

    def record_redraws(self, n: int) -> None:
        if n > 0:
            self.redraws_total.inc(n)

    def record_entropy_failure(self, mode: str) -> None:
        self.entropy_failures_total.labels(mode=_mode(mode)).inc()


def _mode(mode: str) -> str:
    return mode if mode in _MODES else "secure"


# Singleton used by most components
METRICS = Metrics()

__all__ = [
    "Metrics",
    "METRICS",
    "_OPERATIONS",
    "_MODES",
]
