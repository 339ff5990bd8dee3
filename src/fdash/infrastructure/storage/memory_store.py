from __future__ import annotations

from typing import Mapping, Sequence

from fdash.application.ports.key_value_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get_many(self, keys: Sequence[str]) -> dict[str, str | None]:
        return {key: self._values.get(key) for key in keys}

    def set_many(self, values: Mapping[str, str]) -> None:
        self._values.update(values)

    def clear(self) -> None:
        self._values.clear()
