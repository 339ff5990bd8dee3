from __future__ import annotations

import os
from functools import lru_cache
from typing import Mapping, Sequence

import redis

from fdash.application.ports.key_value_store import KeyValueStore
from fdash.domain.common.errors import StorageFailureError


def _redis_url() -> str:
    url = os.getenv("REDIS_URL")
    if not url:
        raise RuntimeError("REDIS_URL is not set")
    return url


@lru_cache(maxsize=8)
def _build_client(redis_url: str, timeout_seconds: float) -> redis.Redis:
    return redis.Redis.from_url(
        redis_url,
        decode_responses=True,
        socket_connect_timeout=timeout_seconds,
        socket_timeout=timeout_seconds,
    )


def get_redis_client(timeout_seconds: float = 1.0) -> redis.Redis:
    return _build_client(_redis_url(), timeout_seconds)


class RedisKeyValueStore(KeyValueStore):
    """Snapshot keys as plain Redis strings. The client is resolved on first use."""

    def __init__(self, client: redis.Redis | None = None, timeout_seconds: float = 1.0) -> None:
        self._client = client
        self._timeout_seconds = timeout_seconds

    def _redis(self) -> redis.Redis:
        if self._client is None:
            self._client = get_redis_client(timeout_seconds=self._timeout_seconds)
        return self._client

    def get_many(self, keys: Sequence[str]) -> dict[str, str | None]:
        key_list = list(keys)
        try:
            values = self._redis().mget(key_list)
        except redis.RedisError as exc:
            raise StorageFailureError(f"redis read failed: {exc}") from exc
        return {key: _decode(value) for key, value in zip(key_list, values)}

    def set_many(self, values: Mapping[str, str]) -> None:
        if not values:
            return
        try:
            # MSET applies every key in one step
            self._redis().mset(dict(values))
        except redis.RedisError as exc:
            raise StorageFailureError(f"redis write failed: {exc}") from exc


def _decode(value: object) -> str | None:
    # injected clients may not decode responses
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)
