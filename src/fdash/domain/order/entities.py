from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from fdash.domain.catalog.entities import MenuItem, Restaurant
from fdash.domain.common.ids import MenuItemId, OrderId, RestaurantId


class OrderStatus(str, Enum):
    PENDING = "pending"
    DELIVERED = "delivered"


@dataclass(frozen=True)
class Order:
    order_id: OrderId
    restaurant_id: RestaurantId
    restaurant_name: str
    menu_item_id: MenuItemId
    menu_item_name: str
    price: float
    user_id: str
    status: OrderStatus
    created_at: datetime
    estimated_delivery: str | None = None
    delivered_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError("price must be >= 0")
        if self.status == OrderStatus.PENDING and self.delivered_at is not None:
            raise ValueError("pending order cannot have delivered_at")
        if self.status == OrderStatus.DELIVERED and self.delivered_at is None:
            raise ValueError("delivered_at must be set when order status is delivered")

    def deliver(self, now: datetime) -> Order:
        if self.status != OrderStatus.PENDING:
            raise OrderTransitionError(f"cannot deliver order from status={self.status.value}")
        return replace(
            self,
            status=OrderStatus.DELIVERED,
            estimated_delivery=None,
            delivered_at=now,
        )


def create_pending_order(
    order_id: OrderId,
    restaurant: Restaurant,
    menu_item: MenuItem,
    user_id: str,
    estimated_delivery: str,
    now: datetime,
) -> Order:
    return Order(
        order_id=order_id,
        restaurant_id=restaurant.restaurant_id,
        restaurant_name=restaurant.name,
        menu_item_id=menu_item.item_id,
        menu_item_name=menu_item.name,
        price=menu_item.price,
        user_id=user_id,
        status=OrderStatus.PENDING,
        created_at=now,
        estimated_delivery=estimated_delivery,
    )


class OrderTransitionError(Exception):
    pass
