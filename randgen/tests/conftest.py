from __future__ import annotations

import pytest
from prometheus_client import CollectorRegistry

from randgen.config import RandConfig
from randgen.generator import Rand
from randgen.metrics import Metrics


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def metrics(registry: CollectorRegistry) -> Metrics:
    return Metrics(registry=registry)


@pytest.fixture
def rand() -> Rand:
    """Real sources, metrics off."""
    return Rand(RandConfig(metrics_enabled=False))


@pytest.fixture
def make_rand(metrics: Metrics):
    def _make(secure=None, fast=None, **cfg) -> Rand:
        return Rand(
            RandConfig(**cfg),
            secure_source=secure,
            fast_source=fast,
            metrics=metrics,
        )

    return _make
