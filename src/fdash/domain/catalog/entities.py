from __future__ import annotations

import math
from dataclasses import dataclass, replace

from fdash.domain.common.errors import InvalidInputError
from fdash.domain.common.ids import MenuItemId, RestaurantId

MIN_RATING = 0.0
MAX_RATING = 5.0


def parse_rating(value: object) -> float:
    rating = _parse_real(value, field_name="rating")
    if rating < MIN_RATING or rating > MAX_RATING:
        raise InvalidInputError(f"rating must be between {MIN_RATING} and {MAX_RATING}")
    return rating


def parse_price(value: object) -> float:
    price = _parse_real(value, field_name="price")
    if price < 0:
        raise InvalidInputError("price must be >= 0")
    return price


def _parse_real(value: object, field_name: str) -> float:
    if isinstance(value, bool):
        raise InvalidInputError(f"{field_name} must be a number")
    try:
        parsed = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{field_name} must be a number, got {value!r}") from exc
    if not math.isfinite(parsed):
        raise InvalidInputError(f"{field_name} must be finite")
    return parsed

@dataclass(frozen=True)
class MenuItem:
    item_id: MenuItemId
    restaurant_id: RestaurantId
    name: str
    price: float

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidInputError("name must be non-empty")
        object.__setattr__(self, "price", parse_price(self.price))


@dataclass(frozen=True)
class Restaurant:
    """A restaurant and the menu it owns. Menus change only through ``with_menu_item``."""

    restaurant_id: RestaurantId
    name: str
    location: str
    rating: float
    image: str | None = None
    menu: tuple[MenuItem, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidInputError("name must be non-empty")
        if not isinstance(self.location, str):
            raise InvalidInputError("location must be a string")
        object.__setattr__(self, "rating", parse_rating(self.rating))
        object.__setattr__(self, "menu", tuple(self.menu))
        for item in self.menu:
            if item.restaurant_id != self.restaurant_id:
                raise InvalidInputError(
                    f"menu item {item.item_id} belongs to restaurant {item.restaurant_id}"
                )

    def with_menu_item(self, item: MenuItem) -> Restaurant:
        return replace(self, menu=(*self.menu, item))

    def matches(self, term: str) -> bool:
        needle = term.lower()
        return needle in self.name.lower() or needle in self.location.lower()
