from __future__ import annotations

from typing import Iterable

from fdash.application.dto.snapshot import PersistedMenuItem, PersistedRestaurant
from fdash.domain.catalog.entities import MenuItem, Restaurant
from fdash.domain.common.ids import MenuItemId, RestaurantId


def to_persisted_restaurants(restaurants: Iterable[Restaurant]) -> list[PersistedRestaurant]:
    return [
        PersistedRestaurant(
            id=restaurant.restaurant_id,
            name=restaurant.name,
            location=restaurant.location,
            rating=restaurant.rating,
            image=restaurant.image,
            menu=[
                PersistedMenuItem(id=item.item_id, name=item.name, price=item.price)
                for item in restaurant.menu
            ],
        )
        for restaurant in restaurants
    ]


def to_domain_restaurants(persisted: Iterable[PersistedRestaurant]) -> list[Restaurant]:
    restaurants: list[Restaurant] = []
    for row in persisted:
        restaurant_id = RestaurantId(row.id)
        restaurants.append(
            Restaurant(
                restaurant_id=restaurant_id,
                name=row.name,
                location=row.location,
                rating=row.rating,
                image=row.image,
                menu=tuple(
                    MenuItem(
                        item_id=MenuItemId(item.id),
                        restaurant_id=restaurant_id,
                        name=item.name,
                        price=item.price,
                    )
                    for item in row.menu
                ),
            )
        )
    return restaurants
