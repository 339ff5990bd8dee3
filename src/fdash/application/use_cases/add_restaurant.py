from __future__ import annotations

import logging

from fdash.application.dto.requests import AddRestaurantRequest
from fdash.application.dto.responses import RestaurantResponse
from fdash.application.mappers.catalog_mapper import to_restaurant_response
from fdash.application.metrics.order_lifecycle import record_catalog_mutation
from fdash.application.persistence.catalog_snapshot import CatalogPersistence, current_counters
from fdash.domain.catalog.store import CatalogStore
from fdash.domain.order.ledger import OrderLedger

logger = logging.getLogger(__name__)


class AddRestaurant:
    def __init__(
        self,
        catalog: CatalogStore,
        ledger: OrderLedger,
        persistence: CatalogPersistence,
    ) -> None:
        self._catalog = catalog
        self._ledger = ledger
        self._persistence = persistence

    def execute(self, request_dto: AddRestaurantRequest) -> RestaurantResponse:
        restaurant = self._catalog.add_restaurant(
            name=request_dto.name,
            location=request_dto.location,
            rating=request_dto.rating,
            image=request_dto.image,
        )
        record_catalog_mutation("restaurant")
        logger.info("restaurant_added", extra={"restaurant_id": restaurant.restaurant_id})

        self._persistence.save(self._catalog, current_counters(self._catalog, self._ledger))
        return to_restaurant_response(restaurant)
