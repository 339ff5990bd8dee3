from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from fdash.domain.catalog.entities import MenuItem
from fdash.domain.catalog.store import CatalogStore
from fdash.domain.common.errors import InvalidInputError
from fdash.domain.common.ids import MenuItemId
from fdash.domain.order.ledger import OrderLedger

DEFAULT_POPULAR_LIMIT = 5


@dataclass(frozen=True)
class DashboardStatistics:
    restaurant_count: int
    menu_item_count: int
    pending_count: int
    history_count: int
    total_revenue: float


@dataclass(frozen=True)
class PopularMenuItem:
    menu_item: MenuItem
    order_count: int


def statistics(catalog: CatalogStore, ledger: OrderLedger) -> DashboardStatistics:
    history = ledger.history
    return DashboardStatistics(
        restaurant_count=len(catalog.restaurants),
        menu_item_count=len(catalog.menu_items),
        pending_count=ledger.pending_count(),
        history_count=len(history),
        total_revenue=sum(order.price for order in history),
    )


def popular_menu_items(
    catalog: CatalogStore,
    ledger: OrderLedger,
    limit: int = DEFAULT_POPULAR_LIMIT,
) -> list[PopularMenuItem]:
    """Most ordered menu items across delivered orders.

    Ties keep the order in which items were first seen in history. Items
    that no longer resolve in the catalog are dropped after ranking, so
    fewer than ``limit`` entries may come back.
    """
    if limit < 0:
        raise InvalidInputError("limit must be >= 0")

    counts: Counter[MenuItemId] = Counter(order.menu_item_id for order in ledger.history)
    ranked = sorted(counts.items(), key=lambda entry: entry[1], reverse=True)[:limit]

    popular: list[PopularMenuItem] = []
    for item_id, order_count in ranked:
        menu_item = catalog.find_menu_item_by_id(item_id)
        if menu_item is None:
            continue
        popular.append(PopularMenuItem(menu_item=menu_item, order_count=order_count))
    return popular
