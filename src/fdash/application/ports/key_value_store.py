from __future__ import annotations

from typing import Mapping, Protocol, Sequence


class KeyValueStore(Protocol):
    def get_many(self, keys: Sequence[str]) -> dict[str, str | None]: ...

    def set_many(self, values: Mapping[str, str]) -> None:
        """Write every key or none of them."""
        ...
