from __future__ import annotations

import logging
import os

from fdash.application.ports.key_value_store import KeyValueStore
from fdash.infrastructure.storage.memory_store import InMemoryKeyValueStore

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ("memory", "redis", "sql")


def _storage_backend() -> str:
    return os.getenv("STORAGE_BACKEND", "memory").strip().lower()


def build_key_value_store(backend: str | None = None) -> KeyValueStore:
    selected = (backend or _storage_backend()).lower()
    if selected == "memory":
        store: KeyValueStore = InMemoryKeyValueStore()
    elif selected == "redis":
        from fdash.infrastructure.storage.redis_store import RedisKeyValueStore

        store = RedisKeyValueStore()
    elif selected == "sql":
        from fdash.infrastructure.storage.sql_store import SqlAlchemyKeyValueStore

        store = SqlAlchemyKeyValueStore()
    else:
        raise RuntimeError(
            f"unsupported STORAGE_BACKEND={selected!r}, expected one of {SUPPORTED_BACKENDS}"
        )

    logger.info("storage_backend_selected", extra={"backend": selected})
    return store
