from __future__ import annotations

from typing import Iterable

from fdash.domain.catalog.entities import MenuItem, Restaurant, parse_price, parse_rating
from fdash.domain.common.errors import InvalidInputError, NotFoundError
from fdash.domain.common.ids import MenuItemId, RestaurantId, next_id


class CatalogStore:
    """Restaurants and the menu items they own.

    Restaurants are the single source of truth for menu items. The flat
    ``item_id -> MenuItem`` index is maintained on every insertion and is
    only used for lookups across restaurants. Restaurants are immutable
    values, so adding a menu item replaces the owning restaurant.

    Not re-entrant: do not call mutators from code invoked by another
    mutator of the same store.
    """

    def __init__(
        self,
        restaurants: Iterable[Restaurant] = (),
        next_restaurant_id: int = 1,
        next_menu_item_id: int = 1,
    ) -> None:
        self._restaurants: list[Restaurant] = []
        self._items_by_id: dict[MenuItemId, MenuItem] = {}
        self._max_restaurant_id: int | None = None
        self._max_menu_item_id: int | None = None
        self._next_restaurant_id = next_restaurant_id
        self._next_menu_item_id = next_menu_item_id

        for restaurant in restaurants:
            self._insert_restaurant(restaurant)

    @property
    def restaurants(self) -> tuple[Restaurant, ...]:
        return tuple(self._restaurants)

    @property
    def menu_items(self) -> tuple[MenuItem, ...]:
        return tuple(self._items_by_id.values())

    @property
    def next_restaurant_id(self) -> int:
        return next_id(self._max_restaurant_id, self._next_restaurant_id)

    @property
    def next_menu_item_id(self) -> int:
        return next_id(self._max_menu_item_id, self._next_menu_item_id)

    def raise_counters(
        self,
        next_restaurant_id: int | None = None,
        next_menu_item_id: int | None = None,
    ) -> None:
        if next_restaurant_id is not None:
            self._next_restaurant_id = max(self._next_restaurant_id, next_restaurant_id)
        if next_menu_item_id is not None:
            self._next_menu_item_id = max(self._next_menu_item_id, next_menu_item_id)

    def add_restaurant(
        self,
        name: str,
        location: str,
        rating: object,
        image: str | None = None,
    ) -> Restaurant:
        parsed_rating = parse_rating(rating)
        if not isinstance(name, str) or not name.strip():
            raise InvalidInputError("name must be non-empty")
        if not isinstance(location, str):
            raise InvalidInputError("location must be a string")

        restaurant = Restaurant(
            restaurant_id=RestaurantId(self.next_restaurant_id),
            name=name,
            location=location,
            rating=parsed_rating,
            image=image,
        )
        self._insert_restaurant(restaurant)
        return restaurant

    def add_menu_item(self, restaurant_id: RestaurantId, name: str, price: object) -> MenuItem:
        position = self._position(restaurant_id)
        if position is None:
            raise NotFoundError(f"restaurant {restaurant_id} not found")
        restaurant = self._restaurants[position]
        parsed_price = parse_price(price)

        item = MenuItem(
            item_id=MenuItemId(self.next_menu_item_id),
            restaurant_id=restaurant.restaurant_id,
            name=name,
            price=parsed_price,
        )
        self._restaurants[position] = restaurant.with_menu_item(item)
        self._index_item(item)
        return item

    def find_restaurant_by_id(self, restaurant_id: RestaurantId) -> Restaurant | None:
        position = self._position(restaurant_id)
        return None if position is None else self._restaurants[position]

    def find_menu_item_by_id(self, item_id: MenuItemId) -> MenuItem | None:
        return self._items_by_id.get(item_id)

    def items_for_restaurant(self, restaurant_id: RestaurantId) -> list[MenuItem]:
        restaurant = self.find_restaurant_by_id(restaurant_id)
        if restaurant is None:
            return []
        return list(restaurant.menu)

    def search_restaurants(self, term: str) -> list[Restaurant]:
        return [restaurant for restaurant in self._restaurants if restaurant.matches(term)]

    def sorted_by_rating(self) -> list[Restaurant]:
        # sorted() is stable, equal ratings keep catalog order
        return sorted(self._restaurants, key=lambda r: r.rating, reverse=True)

    def _position(self, restaurant_id: RestaurantId) -> int | None:
        return next(
            (i for i, r in enumerate(self._restaurants) if r.restaurant_id == restaurant_id),
            None,
        )

    def _insert_restaurant(self, restaurant: Restaurant) -> None:
        if self.find_restaurant_by_id(restaurant.restaurant_id) is not None:
            raise InvalidInputError(f"duplicate restaurant id {restaurant.restaurant_id}")
        seen: set[MenuItemId] = set()
        for item in restaurant.menu:
            if item.item_id in self._items_by_id or item.item_id in seen:
                raise InvalidInputError(f"duplicate menu item id {item.item_id}")
            seen.add(item.item_id)

        self._restaurants.append(restaurant)
        self._max_restaurant_id = max(self._max_restaurant_id or 0, restaurant.restaurant_id)
        self._next_restaurant_id = max(self._next_restaurant_id, restaurant.restaurant_id + 1)
        for item in restaurant.menu:
            self._index_item(item)

    def _index_item(self, item: MenuItem) -> None:
        self._items_by_id[item.item_id] = item
        self._max_menu_item_id = max(self._max_menu_item_id or 0, item.item_id)
        self._next_menu_item_id = max(self._next_menu_item_id, item.item_id + 1)
