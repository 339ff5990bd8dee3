from __future__ import annotations

from typing import Iterable

from fdash.application.dto.responses import (
    MenuItemResponse,
    RestaurantListResponse,
    RestaurantResponse,
)
from fdash.domain.catalog.entities import MenuItem, Restaurant


def to_menu_item_response(item: MenuItem) -> MenuItemResponse:
    return MenuItemResponse(
        itemId=item.item_id,
        restaurantId=item.restaurant_id,
        name=item.name,
        price=item.price,
    )


def to_restaurant_response(restaurant: Restaurant) -> RestaurantResponse:
    return RestaurantResponse(
        restaurantId=restaurant.restaurant_id,
        name=restaurant.name,
        location=restaurant.location,
        rating=restaurant.rating,
        image=restaurant.image,
        menuItemCount=len(restaurant.menu),
        menu=[to_menu_item_response(item) for item in restaurant.menu],
    )


def to_restaurant_list_response(restaurants: Iterable[Restaurant]) -> RestaurantListResponse:
    return RestaurantListResponse(
        restaurants=[to_restaurant_response(restaurant) for restaurant in restaurants]
    )
