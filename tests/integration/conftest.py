from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from fdash.infrastructure.storage import redis_store


@pytest.fixture(scope="session", autouse=True)
def integration_environment() -> Iterator[None]:
    if not os.getenv("REDIS_URL"):
        pytest.skip("REDIS_URL is not set")

    os.environ.setdefault("OTEL_SERVICE_NAME", "fdash-test")
    os.environ.setdefault("OTEL_EXPORTER_OTLP_ENDPOINT", "")
    redis_store._build_client.cache_clear()

    redis = redis_store.get_redis_client()
    redis.flushdb()
    yield
    redis.flushdb()


@pytest.fixture(autouse=True)
def clear_redis() -> Iterator[None]:
    redis = redis_store.get_redis_client()
    redis.flushdb()
    yield
    redis.flushdb()
