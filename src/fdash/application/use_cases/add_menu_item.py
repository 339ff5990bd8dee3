from __future__ import annotations

import logging

from fdash.application.dto.requests import AddMenuItemRequest
from fdash.application.dto.responses import MenuItemResponse
from fdash.application.mappers.catalog_mapper import to_menu_item_response
from fdash.application.metrics.order_lifecycle import record_catalog_mutation
from fdash.application.persistence.catalog_snapshot import CatalogPersistence, current_counters
from fdash.domain.catalog.store import CatalogStore
from fdash.domain.common.ids import RestaurantId
from fdash.domain.order.ledger import OrderLedger

logger = logging.getLogger(__name__)


class AddMenuItem:
    def __init__(
        self,
        catalog: CatalogStore,
        ledger: OrderLedger,
        persistence: CatalogPersistence,
    ) -> None:
        self._catalog = catalog
        self._ledger = ledger
        self._persistence = persistence

    def execute(self, request_dto: AddMenuItemRequest) -> MenuItemResponse:
        item = self._catalog.add_menu_item(
            restaurant_id=RestaurantId(request_dto.restaurant_id),
            name=request_dto.name,
            price=request_dto.price,
        )
        record_catalog_mutation("menu_item")
        logger.info(
            "menu_item_added",
            extra={"restaurant_id": item.restaurant_id, "menu_item_id": item.item_id},
        )

        self._persistence.save(self._catalog, current_counters(self._catalog, self._ledger))
        return to_menu_item_response(item)
