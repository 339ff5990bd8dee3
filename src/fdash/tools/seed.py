from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone

from fdash.application.persistence.catalog_snapshot import CatalogPersistence, current_counters
from fdash.domain.catalog.entities import MenuItem, Restaurant
from fdash.domain.catalog.store import CatalogStore
from fdash.domain.common.ids import IdCounters, MenuItemId, OrderId, RestaurantId
from fdash.domain.order.entities import Order, OrderStatus
from fdash.domain.order.ledger import OrderLedger
from fdash.infrastructure.observability.logging_config import configure_logging
from fdash.infrastructure.storage.factory import build_key_value_store

logger = logging.getLogger(__name__)

SAMPLE_COUNTERS = IdCounters(next_restaurant_id=9, next_menu_item_id=43, next_order_id=4)

_RESTAURANTS: list[tuple[int, str, str, float, str, list[tuple[int, str, float]]]] = [
    (
        1,
        "Karachi Biryani House",
        "Karachi, Pakistan",
        4.8,
        "assets/Karachi-Biryani-House.jpeg",
        [
            (1, "Chicken Biryani", 450),
            (2, "Mutton Biryani", 650),
            (3, "Beef Biryani", 550),
            (4, "Prawn Biryani", 750),
            (5, "Vegetable Biryani", 350),
        ],
    ),
    (
        2,
        "Lahore BBQ Corner",
        "Lahore, Pakistan",
        4.6,
        "assets/Lahore-BBQ-Corner.png",
        [
            (6, "Seekh Kebab", 300),
            (7, "Chicken Tikka", 400),
            (8, "Lamb Chops", 800),
            (9, "BBQ Platter", 1200),
            (10, "Grilled Fish", 600),
        ],
    ),
    (
        3,
        "Islamabad Grill & Fast Food",
        "Islamabad, Pakistan",
        4.5,
        "assets/Islamabad-Grill.webp",
        [
            (11, "Chicken Burger", 250),
            (12, "Beef Burger", 300),
            (13, "Club Sandwich", 200),
            (14, "Chicken Roll", 180),
            (15, "French Fries", 120),
            (16, "Chicken Wings", 350),
        ],
    ),
    (
        4,
        "Peshawar Chapli Kebab",
        "Peshawar, Pakistan",
        4.7,
        "assets/Peshawri-chapli-kabab.png",
        [
            (17, "Chapli Kebab", 200),
            (18, "Peshawari Karahi", 800),
            (19, "Lamb Karahi", 900),
            (20, "Chicken Karahi", 700),
            (21, "Afghani Pulao", 400),
        ],
    ),
    (
        5,
        "Multan Sohan Halwa House",
        "Multan, Pakistan",
        4.4,
        "assets/Multani-Sohan-Halwa.webp",
        [
            (22, "Sohan Halwa", 150),
            (23, "Gulab Jamun", 100),
            (24, "Ras Malai", 120),
            (25, "Kheer", 80),
            (26, "Jalebi", 90),
        ],
    ),
    (
        6,
        "Hyderabad Sindhi Cuisine",
        "Hyderabad, Pakistan",
        4.3,
        "assets/Hyderabad-Sindhi-Cusiune.jpg",
        [
            (27, "Sindhi Biryani", 400),
            (28, "Sai Bhaji", 250),
            (29, "Koki", 80),
            (30, "Sindhi Curry", 300),
            (31, "Dal Pakwan", 150),
        ],
    ),
    (
        7,
        "Faisalabad Desi Dhaba",
        "Faisalabad, Pakistan",
        4.5,
        "assets/Faislabad-Desi-Dhaba.webp",
        [
            (32, "Daal Makhani", 200),
            (33, "Butter Chicken", 500),
            (34, "Naan", 50),
            (35, "Tandoori Roti", 30),
            (36, "Mixed Vegetables", 180),
            (37, "Lassi", 80),
        ],
    ),
    (
        8,
        "Quetta Balochi Restaurant",
        "Quetta, Pakistan",
        4.6,
        "assets/Quetta-Balochi-Resturant.jpg",
        [
            (38, "Balochi Sajji", 1000),
            (39, "Lamb Roast", 800),
            (40, "Chicken Sajji", 600),
            (41, "Balochi Pulao", 350),
            (42, "Dry Fruit Rice", 400),
        ],
    ),
]

# (id, restaurant id, item id, user, placed at, estimate)
_PENDING: list[tuple[int, int, int, str, str, str]] = [
    (1, 1, 1, "admin", "2024-01-15 14:30:00", "30-40 minutes"),
    (2, 2, 6, "user456", "2024-01-15 14:45:00", "25-35 minutes"),
    (3, 4, 17, "user789", "2024-01-15 15:00:00", "20-30 minutes"),
]

# (id, restaurant id, item id, user, placed at, delivered at)
_HISTORY: list[tuple[int, int, int, str, str, str]] = [
    (101, 1, 2, "admin", "2024-01-14 19:30:00", "2024-01-14 20:15:00"),
    (102, 3, 11, "user123", "2024-01-14 18:00:00", "2024-01-14 18:35:00"),
    (103, 2, 7, "user456", "2024-01-14 20:15:00", "2024-01-14 20:50:00"),
    (104, 5, 22, "user789", "2024-01-13 16:30:00", "2024-01-13 17:00:00"),
    (105, 6, 27, "admin", "2024-01-13 13:45:00", "2024-01-13 14:30:00"),
    (106, 7, 33, "user123", "2024-01-12 21:00:00", "2024-01-12 21:40:00"),
    (107, 8, 38, "user456", "2024-01-12 19:30:00", "2024-01-12 20:30:00"),
    (108, 4, 18, "user789", "2024-01-11 18:15:00", "2024-01-11 19:00:00"),
]


def _timestamp(value: str) -> datetime:
    return datetime.strptime(value, "%Y-%m-%d %H:%M:%S").replace(tzinfo=timezone.utc)


def sample_restaurants() -> list[Restaurant]:
    restaurants: list[Restaurant] = []
    for restaurant_id, name, location, rating, image, menu in _RESTAURANTS:
        restaurants.append(
            Restaurant(
                restaurant_id=RestaurantId(restaurant_id),
                name=name,
                location=location,
                rating=rating,
                image=image,
                menu=tuple(
                    MenuItem(
                        item_id=MenuItemId(item_id),
                        restaurant_id=RestaurantId(restaurant_id),
                        name=item_name,
                        price=float(price),
                    )
                    for item_id, item_name, price in menu
                ),
            )
        )
    return restaurants


def _sample_order(
    order_id: int,
    restaurant_id: int,
    item_id: int,
    user_id: str,
    placed_at: str,
    catalog: dict[int, Restaurant],
) -> Order:
    restaurant = catalog[restaurant_id]
    item = next(item for item in restaurant.menu if item.item_id == item_id)
    return Order(
        order_id=OrderId(order_id),
        restaurant_id=restaurant.restaurant_id,
        restaurant_name=restaurant.name,
        menu_item_id=item.item_id,
        menu_item_name=item.name,
        price=item.price,
        user_id=user_id,
        status=OrderStatus.PENDING,
        created_at=_timestamp(placed_at),
    )


def sample_orders() -> tuple[list[Order], list[Order]]:
    """Pending queue and delivered history of the demo dataset."""
    catalog = {int(r.restaurant_id): r for r in sample_restaurants()}
    pending = [
        replace(
            _sample_order(order_id, rid, item_id, user, placed_at, catalog),
            estimated_delivery=estimate,
        )
        for order_id, rid, item_id, user, placed_at, estimate in _PENDING
    ]
    history = [
        _sample_order(order_id, rid, item_id, user, placed_at, catalog).deliver(
            _timestamp(delivered_at)
        )
        for order_id, rid, item_id, user, placed_at, delivered_at in _HISTORY
    ]
    return pending, history


def main() -> None:
    configure_logging()
    catalog = CatalogStore(
        sample_restaurants(),
        next_restaurant_id=SAMPLE_COUNTERS.next_restaurant_id,
        next_menu_item_id=SAMPLE_COUNTERS.next_menu_item_id,
    )
    pending, history = sample_orders()
    ledger = OrderLedger(catalog, pending=pending, history=history)
    ledger.raise_counter(SAMPLE_COUNTERS.next_order_id)

    persistence = CatalogPersistence(build_key_value_store())
    if not persistence.save(catalog, current_counters(catalog, ledger)):
        raise SystemExit(1)
    logger.info("seed_complete")


if __name__ == "__main__":
    main()
