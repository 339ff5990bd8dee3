from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from fdash.application.persistence.catalog_snapshot import CatalogPersistence, LoadedSnapshot
from fdash.application.ports.key_value_store import KeyValueStore
from fdash.application.use_cases.add_menu_item import AddMenuItem
from fdash.application.use_cases.add_restaurant import AddRestaurant
from fdash.application.use_cases.browse_restaurants import (
    GetRestaurantMenu,
    ListRestaurantsByRating,
    SearchRestaurants,
)
from fdash.application.use_cases.dashboard_statistics import (
    GetDashboardStatistics,
    GetPopularMenuItems,
)
from fdash.application.use_cases.fulfill_next_order import FulfillNextOrder
from fdash.application.use_cases.order_queue import GetOrderQueue, ListUserOrders
from fdash.application.use_cases.place_order import PlaceOrder
from fdash.application.use_cases.simulate_courier import SimulateCourierTick
from fdash.domain.catalog.store import CatalogStore
from fdash.domain.common.errors import InconsistentReferenceError, NotFoundError
from fdash.domain.order.entities import Order
from fdash.domain.order.ledger import OrderLedger, resolve_order_reference
from fdash.infrastructure.observability.logging_config import configure_logging
from fdash.infrastructure.observability.otel import configure_otel
from fdash.infrastructure.storage.factory import build_key_value_store
from fdash.tools.seed import SAMPLE_COUNTERS, sample_orders, sample_restaurants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dashboard:
    catalog: CatalogStore
    ledger: OrderLedger
    persistence: CatalogPersistence
    add_restaurant: AddRestaurant
    add_menu_item: AddMenuItem
    place_order: PlaceOrder
    fulfill_next_order: FulfillNextOrder
    search_restaurants: SearchRestaurants
    list_restaurants_by_rating: ListRestaurantsByRating
    get_restaurant_menu: GetRestaurantMenu
    get_order_queue: GetOrderQueue
    list_user_orders: ListUserOrders
    get_statistics: GetDashboardStatistics
    get_popular_menu_items: GetPopularMenuItems
    simulate_courier_tick: SimulateCourierTick


def _build_catalog(snapshot: LoadedSnapshot) -> CatalogStore:
    if snapshot.restaurants is not None:
        try:
            catalog = CatalogStore(snapshot.restaurants)
        except ValueError:
            logger.warning("persisted_catalog_rejected", exc_info=True)
        else:
            catalog.raise_counters(snapshot.next_restaurant_id, snapshot.next_menu_item_id)
            return catalog

    catalog = CatalogStore(
        sample_restaurants(),
        next_restaurant_id=SAMPLE_COUNTERS.next_restaurant_id,
        next_menu_item_id=SAMPLE_COUNTERS.next_menu_item_id,
    )
    catalog.raise_counters(snapshot.next_restaurant_id, snapshot.next_menu_item_id)
    return catalog


def _orders_in_catalog(catalog: CatalogStore, orders: list[Order]) -> list[Order]:
    kept: list[Order] = []
    for order in orders:
        try:
            resolve_order_reference(catalog, order.restaurant_id, order.menu_item_id)
        except (NotFoundError, InconsistentReferenceError):
            logger.warning(
                "sample_order_dropped",
                extra={"order_id": order.order_id, "restaurant_id": order.restaurant_id},
            )
            continue
        kept.append(order)
    return kept


def bootstrap_dashboard(
    store: KeyValueStore,
    rng: random.Random | None = None,
) -> Dashboard:
    """Load persisted state (falling back to the sample data) and wire use cases."""
    persistence = CatalogPersistence(store)
    snapshot = persistence.load()
    catalog = _build_catalog(snapshot)

    pending, history = sample_orders()
    ledger = OrderLedger(
        catalog,
        pending=_orders_in_catalog(catalog, pending),
        history=_orders_in_catalog(catalog, history),
        rng=rng,
    )
    ledger.raise_counter(SAMPLE_COUNTERS.next_order_id)
    ledger.raise_counter(snapshot.next_order_id)

    logger.info(
        "dashboard_ready",
        extra={"operation": "bootstrap"},
    )
    return Dashboard(
        catalog=catalog,
        ledger=ledger,
        persistence=persistence,
        add_restaurant=AddRestaurant(catalog, ledger, persistence),
        add_menu_item=AddMenuItem(catalog, ledger, persistence),
        place_order=PlaceOrder(ledger),
        fulfill_next_order=FulfillNextOrder(ledger),
        search_restaurants=SearchRestaurants(catalog),
        list_restaurants_by_rating=ListRestaurantsByRating(catalog),
        get_restaurant_menu=GetRestaurantMenu(catalog),
        get_order_queue=GetOrderQueue(ledger),
        list_user_orders=ListUserOrders(ledger),
        get_statistics=GetDashboardStatistics(catalog, ledger),
        get_popular_menu_items=GetPopularMenuItems(catalog, ledger),
        simulate_courier_tick=SimulateCourierTick(ledger, rng=rng),
    )


def start_dashboard() -> Dashboard:
    configure_logging()
    configure_otel()
    return bootstrap_dashboard(build_key_value_store())
