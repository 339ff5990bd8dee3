from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

RestaurantId = NewType("RestaurantId", int)
MenuItemId = NewType("MenuItemId", int)
OrderId = NewType("OrderId", int)


@dataclass(frozen=True)
class IdCounters:
    next_restaurant_id: int = 1
    next_menu_item_id: int = 1
    next_order_id: int = 1


def next_id(existing_max: int | None, floor: int) -> int:
    """Allocate past both the highest existing id and the persisted counter."""
    candidate = 1 if existing_max is None else existing_max + 1
    return max(candidate, floor)
