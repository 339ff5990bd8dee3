from __future__ import annotations

import sys
from pathlib import Path

import dataclasses

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from fdash.domain.catalog.entities import MenuItem, Restaurant
from fdash.domain.catalog.store import CatalogStore
from fdash.domain.common.errors import InvalidInputError, NotFoundError
from fdash.domain.common.ids import MenuItemId, RestaurantId


def _restaurant(restaurant_id: int, name: str, location: str, rating: float) -> Restaurant:
    return Restaurant(
        restaurant_id=RestaurantId(restaurant_id),
        name=name,
        location=location,
        rating=rating,
    )


def test_add_restaurant_starts_at_one_on_empty_catalog() -> None:
    catalog = CatalogStore()

    restaurant = catalog.add_restaurant("A", "Karachi", 4.0)

    assert restaurant.restaurant_id == 1
    assert restaurant.menu == ()
    assert catalog.restaurants == (restaurant,)


def test_add_restaurant_ids_strictly_increase() -> None:
    catalog = CatalogStore([_restaurant(7, "Seven", "Lahore", 3.0)])

    allocated = [catalog.add_restaurant(f"R{i}", "Multan", "4.1").restaurant_id for i in range(5)]

    assert allocated == [8, 9, 10, 11, 12]


def test_add_restaurant_respects_counter_floor() -> None:
    catalog = CatalogStore([_restaurant(1, "One", "Quetta", 3.0)], next_restaurant_id=9)

    assert catalog.add_restaurant("Nine", "Quetta", 4).restaurant_id == 9


def test_add_restaurant_parses_rating_string() -> None:
    catalog = CatalogStore()

    assert catalog.add_restaurant("A", "B", " 4.5 ").rating == 4.5


@pytest.mark.parametrize("rating", ["abc", "", None, float("nan"), float("inf"), -0.1, 5.1, True])
def test_add_restaurant_rejects_bad_rating_without_mutating(rating: object) -> None:
    catalog = CatalogStore()

    with pytest.raises(InvalidInputError):
        catalog.add_restaurant("A", "B", rating)

    assert catalog.restaurants == ()
    assert catalog.next_restaurant_id == 1


def test_add_restaurant_rejects_blank_name() -> None:
    catalog = CatalogStore()

    with pytest.raises(InvalidInputError):
        catalog.add_restaurant("   ", "B", 3)


def test_add_restaurant_requires_text_location() -> None:
    catalog = CatalogStore()

    with pytest.raises(InvalidInputError):
        catalog.add_restaurant("A", None, 3)  # type: ignore[arg-type]

    assert catalog.restaurants == ()
    assert catalog.search_restaurants("a") == []


def test_add_menu_item_ids_are_global_across_restaurants() -> None:
    catalog = CatalogStore()
    first = catalog.add_restaurant("A", "X", 4)
    second = catalog.add_restaurant("B", "Y", 4)

    ids = [
        catalog.add_menu_item(first.restaurant_id, "a1", 10).item_id,
        catalog.add_menu_item(second.restaurant_id, "b1", 20).item_id,
        catalog.add_menu_item(first.restaurant_id, "a2", 30).item_id,
    ]

    assert ids == [1, 2, 3]
    assert [item.name for item in catalog.items_for_restaurant(first.restaurant_id)] == ["a1", "a2"]
    assert [item.name for item in catalog.items_for_restaurant(second.restaurant_id)] == ["b1"]


def test_add_menu_item_updates_owner_and_index() -> None:
    catalog = CatalogStore()
    restaurant = catalog.add_restaurant("A", "X", 4)

    item = catalog.add_menu_item(restaurant.restaurant_id, "Naan", "50")

    assert item.price == 50.0
    assert item.restaurant_id == restaurant.restaurant_id
    assert restaurant.menu == ()
    assert catalog.find_restaurant_by_id(restaurant.restaurant_id).menu == (item,)  # type: ignore[union-attr]
    assert catalog.find_menu_item_by_id(item.item_id) is item


def test_add_menu_item_unknown_restaurant_raises_not_found() -> None:
    catalog = CatalogStore()

    with pytest.raises(NotFoundError):
        catalog.add_menu_item(RestaurantId(42), "Ghost", 10)

    assert catalog.menu_items == ()


@pytest.mark.parametrize("price", [-1, "-0.5", "free", float("nan"), float("inf")])
def test_add_menu_item_rejects_bad_price(price: object) -> None:
    catalog = CatalogStore()
    restaurant = catalog.add_restaurant("A", "X", 4)

    with pytest.raises(InvalidInputError):
        catalog.add_menu_item(restaurant.restaurant_id, "Item", price)

    assert catalog.items_for_restaurant(restaurant.restaurant_id) == []
    assert catalog.next_menu_item_id == 1


def test_add_menu_item_accepts_zero_price() -> None:
    catalog = CatalogStore()
    restaurant = catalog.add_restaurant("A", "X", 4)

    assert catalog.add_menu_item(restaurant.restaurant_id, "Water", 0).price == 0.0


def test_lookups_return_none_for_unknown_ids() -> None:
    catalog = CatalogStore()

    assert catalog.find_restaurant_by_id(RestaurantId(1)) is None
    assert catalog.find_menu_item_by_id(MenuItemId(1)) is None
    assert catalog.items_for_restaurant(RestaurantId(1)) == []


def test_search_matches_name_or_location_case_insensitively() -> None:
    catalog = CatalogStore(
        [
            _restaurant(1, "Karachi Biryani House", "Karachi, Pakistan", 4.8),
            _restaurant(2, "Lahore BBQ Corner", "Lahore, Pakistan", 4.6),
            _restaurant(3, "Desi Dhaba", "Faisalabad, Pakistan", 4.5),
        ]
    )

    assert [r.restaurant_id for r in catalog.search_restaurants("bbq")] == [2]
    assert [r.restaurant_id for r in catalog.search_restaurants("FAISAL")] == [3]
    assert [r.restaurant_id for r in catalog.search_restaurants("pakistan")] == [1, 2, 3]
    assert [r.restaurant_id for r in catalog.search_restaurants("")] == [1, 2, 3]
    assert catalog.search_restaurants("pizza") == []


def test_sorted_by_rating_is_stable_descending() -> None:
    catalog = CatalogStore(
        [
            _restaurant(1, "A", "X", 4.5),
            _restaurant(2, "B", "X", 4.8),
            _restaurant(3, "C", "X", 4.5),
            _restaurant(4, "D", "X", 4.8),
            _restaurant(5, "E", "X", 4.5),
        ]
    )

    ordered = catalog.sorted_by_rating()

    assert [r.restaurant_id for r in ordered] == [2, 4, 1, 3, 5]
    assert [r.restaurant_id for r in catalog.restaurants] == [1, 2, 3, 4, 5]


def test_constructor_rejects_duplicate_ids() -> None:
    with pytest.raises(InvalidInputError):
        CatalogStore([_restaurant(1, "A", "X", 4), _restaurant(1, "B", "Y", 4)])

    restaurant = Restaurant(
        restaurant_id=RestaurantId(1),
        name="A",
        location="X",
        rating=4,
        menu=[
            MenuItem(item_id=MenuItemId(1), restaurant_id=RestaurantId(1), name="x", price=1),
            MenuItem(item_id=MenuItemId(1), restaurant_id=RestaurantId(1), name="y", price=2),
        ],
    )
    with pytest.raises(InvalidInputError):
        CatalogStore([restaurant])


def test_restaurant_rejects_item_owned_by_another_restaurant() -> None:
    with pytest.raises(InvalidInputError):
        Restaurant(
            restaurant_id=RestaurantId(1),
            name="A",
            location="X",
            rating=4,
            menu=[
                MenuItem(item_id=MenuItemId(1), restaurant_id=RestaurantId(2), name="x", price=1)
            ],
        )


def test_menu_cannot_be_changed_behind_the_store() -> None:
    catalog = CatalogStore()
    restaurant = catalog.add_restaurant("A", "X", 4)
    catalog.add_menu_item(restaurant.restaurant_id, "Naan", 50)
    current = catalog.find_restaurant_by_id(restaurant.restaurant_id)
    assert current is not None
    ghost = MenuItem(
        item_id=MenuItemId(7),
        restaurant_id=restaurant.restaurant_id,
        name="ghost",
        price=1.0,
    )

    with pytest.raises(AttributeError):
        current.menu.append(ghost)  # type: ignore[attr-defined]
    with pytest.raises(dataclasses.FrozenInstanceError):
        current.menu = (*current.menu, ghost)  # type: ignore[misc]

    assert [item.name for item in catalog.items_for_restaurant(restaurant.restaurant_id)] == ["Naan"]
    assert catalog.find_menu_item_by_id(MenuItemId(7)) is None
    assert len(catalog.menu_items) == 1


def test_entities_store_parsed_numbers() -> None:
    catalog = CatalogStore(
        [
            Restaurant(
                restaurant_id=RestaurantId(1),
                name="A",
                location="X",
                rating="4.5",  # type: ignore[arg-type]
                menu=[
                    MenuItem(
                        item_id=MenuItemId(1),
                        restaurant_id=RestaurantId(1),
                        name="Tea",
                        price="30",  # type: ignore[arg-type]
                    )
                ],
            ),
            _restaurant(2, "B", "X", 3.0),
        ]
    )

    assert [r.restaurant_id for r in catalog.sorted_by_rating()] == [1, 2]
    assert catalog.restaurants[0].rating == 4.5
    assert catalog.find_menu_item_by_id(MenuItemId(1)).price == 30.0  # type: ignore[union-attr]


def test_restaurant_rejects_missing_location() -> None:
    with pytest.raises(InvalidInputError):
        Restaurant(
            restaurant_id=RestaurantId(1),
            name="A",
            location=None,  # type: ignore[arg-type]
            rating=4,
        )
