from __future__ import annotations

import random
from collections import deque
from datetime import datetime, timezone
from typing import Iterable

from fdash.domain.catalog.entities import MenuItem, Restaurant
from fdash.domain.catalog.store import CatalogStore
from fdash.domain.common.errors import InconsistentReferenceError, NotFoundError
from fdash.domain.common.ids import MenuItemId, OrderId, RestaurantId, next_id
from fdash.domain.insights.delivery import estimated_delivery_estimate
from fdash.domain.order.entities import Order, OrderStatus, create_pending_order


def resolve_order_reference(
    catalog: CatalogStore,
    restaurant_id: RestaurantId,
    menu_item_id: MenuItemId,
) -> tuple[Restaurant, MenuItem]:
    restaurant = catalog.find_restaurant_by_id(restaurant_id)
    if restaurant is None:
        raise NotFoundError(f"restaurant {restaurant_id} not found")
    menu_item = catalog.find_menu_item_by_id(menu_item_id)
    if menu_item is None:
        raise NotFoundError(f"menu item {menu_item_id} not found")
    if menu_item.restaurant_id != restaurant.restaurant_id:
        raise InconsistentReferenceError(
            f"menu item {menu_item_id} does not belong to restaurant {restaurant_id}"
        )
    return restaurant, menu_item


class OrderLedger:
    """Pending orders (FIFO) and delivered order history.

    An order lives in exactly one of the two collections. The only
    transition is pending -> history, done by ``fulfill_next``. Order ids
    are never reused: allocation looks past every id either collection has
    ever held.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        pending: Iterable[Order] = (),
        history: Iterable[Order] = (),
        next_order_id: int = 1,
        rng: random.Random | None = None,
    ) -> None:
        self._catalog = catalog
        self._rng = rng
        self._pending: deque[Order] = deque()
        self._history: list[Order] = []
        self._max_order_id: int | None = None
        self._next_order_id = next_order_id

        for order in pending:
            if order.status != OrderStatus.PENDING:
                raise ValueError(f"order {order.order_id} in pending queue is {order.status.value}")
            resolve_order_reference(catalog, order.restaurant_id, order.menu_item_id)
            self._track(order)
            self._pending.append(order)
        for order in history:
            if order.status != OrderStatus.DELIVERED:
                raise ValueError(f"order {order.order_id} in history is {order.status.value}")
            resolve_order_reference(catalog, order.restaurant_id, order.menu_item_id)
            self._track(order)
            self._history.append(order)

    @property
    def pending(self) -> tuple[Order, ...]:
        return tuple(self._pending)

    @property
    def history(self) -> tuple[Order, ...]:
        return tuple(self._history)

    @property
    def next_order_id(self) -> int:
        return next_id(self._max_order_id, self._next_order_id)

    def raise_counter(self, next_order_id: int | None) -> None:
        if next_order_id is not None:
            self._next_order_id = max(self._next_order_id, next_order_id)

    def pending_count(self) -> int:
        return len(self._pending)

    def history_count(self) -> int:
        return len(self._history)

    def enqueue(
        self,
        restaurant_id: RestaurantId,
        menu_item_id: MenuItemId,
        user_id: str,
        now: datetime | None = None,
    ) -> Order:
        restaurant, menu_item = resolve_order_reference(self._catalog, restaurant_id, menu_item_id)

        order = create_pending_order(
            order_id=OrderId(self.next_order_id),
            restaurant=restaurant,
            menu_item=menu_item,
            user_id=user_id,
            estimated_delivery=estimated_delivery_estimate(self._rng),
            now=now or datetime.now(timezone.utc),
        )
        self._track(order)
        self._pending.append(order)
        return order

    def fulfill_next(self, now: datetime | None = None) -> Order | None:
        if not self._pending:
            return None
        delivered = self._pending.popleft().deliver(now or datetime.now(timezone.utc))
        self._history.append(delivered)
        return delivered

    def orders_for_user(self, user_id: str) -> list[Order]:
        orders = [order for order in self._pending if order.user_id == user_id]
        orders.extend(order for order in self._history if order.user_id == user_id)
        return sorted(orders, key=lambda order: order.order_id, reverse=True)

    def _track(self, order: Order) -> None:
        if self._max_order_id is not None and order.order_id <= self._max_order_id:
            if any(o.order_id == order.order_id for o in (*self._pending, *self._history)):
                raise ValueError(f"duplicate order id {order.order_id}")
        self._max_order_id = max(self._max_order_id or 0, order.order_id)
        self._next_order_id = max(self._next_order_id, order.order_id + 1)
