from __future__ import annotations

from fdash.application.dto.responses import RestaurantListResponse, RestaurantResponse
from fdash.application.mappers.catalog_mapper import (
    to_restaurant_list_response,
    to_restaurant_response,
)
from fdash.domain.catalog.store import CatalogStore
from fdash.domain.common.errors import NotFoundError
from fdash.domain.common.ids import RestaurantId


class SearchRestaurants:
    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def execute(self, term: str = "") -> RestaurantListResponse:
        return to_restaurant_list_response(self._catalog.search_restaurants(term))


class ListRestaurantsByRating:
    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def execute(self) -> RestaurantListResponse:
        return to_restaurant_list_response(self._catalog.sorted_by_rating())


class GetRestaurantMenu:
    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def execute(self, restaurant_id: RestaurantId) -> RestaurantResponse:
        restaurant = self._catalog.find_restaurant_by_id(restaurant_id)
        if restaurant is None:
            raise NotFoundError(f"restaurant {restaurant_id} not found")
        return to_restaurant_response(restaurant)
