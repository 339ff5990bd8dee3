from __future__ import annotations

from fdash.application.dto.responses import (
    PopularMenuItemResponse,
    PopularMenuItemsResponse,
    StatisticsResponse,
)
from fdash.application.mappers.catalog_mapper import to_menu_item_response
from fdash.domain.catalog.store import CatalogStore
from fdash.domain.insights.statistics import (
    DEFAULT_POPULAR_LIMIT,
    popular_menu_items,
    statistics,
)
from fdash.domain.order.ledger import OrderLedger


class GetDashboardStatistics:
    def __init__(self, catalog: CatalogStore, ledger: OrderLedger) -> None:
        self._catalog = catalog
        self._ledger = ledger

    def execute(self) -> StatisticsResponse:
        stats = statistics(self._catalog, self._ledger)
        return StatisticsResponse(
            totalRestaurants=stats.restaurant_count,
            totalMenuItems=stats.menu_item_count,
            pendingOrders=stats.pending_count,
            completedOrders=stats.history_count,
            totalRevenue=stats.total_revenue,
        )


class GetPopularMenuItems:
    def __init__(self, catalog: CatalogStore, ledger: OrderLedger) -> None:
        self._catalog = catalog
        self._ledger = ledger

    def execute(self, limit: int = DEFAULT_POPULAR_LIMIT) -> PopularMenuItemsResponse:
        return PopularMenuItemsResponse(
            items=[
                PopularMenuItemResponse(
                    menuItem=to_menu_item_response(entry.menu_item),
                    orderCount=entry.order_count,
                )
                for entry in popular_menu_items(self._catalog, self._ledger, limit=limit)
            ]
        )
