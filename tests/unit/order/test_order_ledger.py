from __future__ import annotations

import random
from dataclasses import replace
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from fdash.domain.catalog.entities import MenuItem, Restaurant
from fdash.domain.catalog.store import CatalogStore
from fdash.domain.common.errors import InconsistentReferenceError, NotFoundError
from fdash.domain.common.ids import MenuItemId, OrderId, RestaurantId
from fdash.domain.order.entities import Order, OrderStatus
from fdash.domain.order.ledger import OrderLedger


def _catalog() -> CatalogStore:
    return CatalogStore(
        [
            Restaurant(
                restaurant_id=RestaurantId(1),
                name="A",
                location="Karachi",
                rating=4.0,
                menu=[
                    MenuItem(
                        item_id=MenuItemId(1),
                        restaurant_id=RestaurantId(1),
                        name="Biryani",
                        price=100.0,
                    )
                ],
            ),
            Restaurant(
                restaurant_id=RestaurantId(2),
                name="B",
                location="Lahore",
                rating=4.5,
                menu=[
                    MenuItem(
                        item_id=MenuItemId(2),
                        restaurant_id=RestaurantId(2),
                        name="Kebab",
                        price=300.0,
                    )
                ],
            ),
        ]
    )


def _ledger(**kwargs) -> OrderLedger:
    return OrderLedger(_catalog(), rng=random.Random(7), **kwargs)


def _delivered(order_id: int) -> Order:
    placed = datetime(2024, 1, 14, 19, 30, tzinfo=timezone.utc)
    return Order(
        order_id=OrderId(order_id),
        restaurant_id=RestaurantId(1),
        restaurant_name="A",
        menu_item_id=MenuItemId(1),
        menu_item_name="Biryani",
        price=100.0,
        user_id="old",
        status=OrderStatus.PENDING,
        created_at=placed,
    ).deliver(placed)


def test_enqueue_then_fulfill_scenario() -> None:
    ledger = _ledger()

    order = ledger.enqueue(RestaurantId(1), MenuItemId(1), "u")

    assert order.order_id == 1
    assert order.status == OrderStatus.PENDING
    assert order.restaurant_name == "A"
    assert order.menu_item_name == "Biryani"
    assert order.price == 100.0
    assert order.estimated_delivery is not None
    assert ledger.pending_count() == 1

    delivered = ledger.fulfill_next()

    assert delivered is not None
    assert delivered.order_id == order.order_id
    assert delivered.restaurant_id == order.restaurant_id
    assert delivered.menu_item_id == order.menu_item_id
    assert delivered.status == OrderStatus.DELIVERED
    assert delivered.delivered_at is not None
    assert ledger.pending_count() == 0
    assert ledger.history_count() == 1
    assert ledger.history == (delivered,)


def test_enqueue_unknown_restaurant_raises_not_found() -> None:
    ledger = _ledger()

    with pytest.raises(NotFoundError):
        ledger.enqueue(RestaurantId(999), MenuItemId(1), "u")

    assert ledger.pending_count() == 0
    assert ledger.next_order_id == 1


def test_enqueue_unknown_menu_item_raises_not_found() -> None:
    ledger = _ledger()

    with pytest.raises(NotFoundError):
        ledger.enqueue(RestaurantId(1), MenuItemId(999), "u")

    assert ledger.pending_count() == 0


def test_enqueue_item_from_other_restaurant_is_inconsistent() -> None:
    ledger = _ledger()

    with pytest.raises(InconsistentReferenceError):
        ledger.enqueue(RestaurantId(1), MenuItemId(2), "u")

    assert ledger.pending_count() == 0
    assert ledger.next_order_id == 1


def test_fulfill_next_is_fifo() -> None:
    ledger = _ledger()
    first = ledger.enqueue(RestaurantId(1), MenuItemId(1), "u1")
    second = ledger.enqueue(RestaurantId(2), MenuItemId(2), "u2")
    third = ledger.enqueue(RestaurantId(1), MenuItemId(1), "u3")

    fulfilled = [ledger.fulfill_next(), ledger.fulfill_next(), ledger.fulfill_next()]

    assert [o.order_id for o in fulfilled if o] == [
        first.order_id,
        second.order_id,
        third.order_id,
    ]
    assert [o.order_id for o in ledger.history] == [1, 2, 3]


def test_fulfill_next_on_empty_queue_returns_none() -> None:
    ledger = _ledger()

    assert ledger.fulfill_next() is None
    assert ledger.history_count() == 0


def test_order_ids_look_past_history() -> None:
    ledger = _ledger(history=[_delivered(101), _delivered(108)])

    order = ledger.enqueue(RestaurantId(1), MenuItemId(1), "u")

    assert order.order_id == 109


def test_order_ids_never_reused_after_fulfillment() -> None:
    ledger = _ledger()
    ledger.enqueue(RestaurantId(1), MenuItemId(1), "u")
    ledger.enqueue(RestaurantId(1), MenuItemId(1), "u")
    ledger.fulfill_next()
    ledger.fulfill_next()

    assert ledger.enqueue(RestaurantId(1), MenuItemId(1), "u").order_id == 3


def test_counter_floor_is_respected() -> None:
    ledger = _ledger()
    ledger.raise_counter(50)
    ledger.raise_counter(None)

    assert ledger.enqueue(RestaurantId(1), MenuItemId(1), "u").order_id == 50


def test_constructor_rejects_misplaced_or_duplicate_orders() -> None:
    with pytest.raises(ValueError):
        _ledger(pending=[_delivered(1)])
    with pytest.raises(ValueError):
        _ledger(history=[_delivered(5), _delivered(5)])


def test_orders_for_user_spans_both_collections_newest_first() -> None:
    ledger = _ledger(history=[_delivered(3)])
    ledger.enqueue(RestaurantId(1), MenuItemId(1), "old")
    ledger.enqueue(RestaurantId(2), MenuItemId(2), "someone")
    ledger.enqueue(RestaurantId(2), MenuItemId(2), "old")

    orders = ledger.orders_for_user("old")

    assert [o.order_id for o in orders] == [6, 4, 3]
    assert [o.status for o in orders] == [
        OrderStatus.PENDING,
        OrderStatus.PENDING,
        OrderStatus.DELIVERED,
    ]


def test_enqueue_uses_injected_clock() -> None:
    ledger = _ledger()
    now = datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc)

    order = ledger.enqueue(RestaurantId(1), MenuItemId(1), "u", now=now)

    assert order.created_at == now


def test_constructor_rejects_orders_for_unknown_restaurant() -> None:
    stray = replace(_delivered(5), restaurant_id=RestaurantId(999))

    with pytest.raises(NotFoundError):
        _ledger(history=[stray])


def test_constructor_rejects_orders_for_unknown_menu_item() -> None:
    stray = replace(_delivered(5), menu_item_id=MenuItemId(404))

    with pytest.raises(NotFoundError):
        _ledger(history=[stray])


def test_constructor_rejects_item_owned_by_other_restaurant() -> None:
    crossed = replace(_delivered(5), menu_item_id=MenuItemId(2))

    with pytest.raises(InconsistentReferenceError):
        _ledger(history=[crossed])
