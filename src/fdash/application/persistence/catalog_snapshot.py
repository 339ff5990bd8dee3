from __future__ import annotations

import logging
from dataclasses import dataclass

from opentelemetry import trace
from pydantic import ValidationError

from fdash.application.dto.snapshot import RESTAURANT_LIST_ADAPTER
from fdash.application.mappers.snapshot_mapper import (
    to_domain_restaurants,
    to_persisted_restaurants,
)
from fdash.application.metrics.order_lifecycle import record_storage_failure
from fdash.application.ports.key_value_store import KeyValueStore
from fdash.domain.catalog.entities import Restaurant
from fdash.domain.catalog.store import CatalogStore
from fdash.domain.common.ids import IdCounters
from fdash.domain.order.ledger import OrderLedger

RESTAURANTS_KEY = "foodDelivery_restaurants"
NEXT_RESTAURANT_ID_KEY = "foodDelivery_nextRestaurantId"
NEXT_MENU_ITEM_ID_KEY = "foodDelivery_nextMenuItemId"
NEXT_ORDER_ID_KEY = "foodDelivery_nextOrderId"

SNAPSHOT_KEYS = (
    RESTAURANTS_KEY,
    NEXT_RESTAURANT_ID_KEY,
    NEXT_MENU_ITEM_ID_KEY,
    NEXT_ORDER_ID_KEY,
)

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass(frozen=True)
class LoadedSnapshot:
    """Whatever could be read back. ``None`` means keep the in-memory value."""

    restaurants: list[Restaurant] | None = None
    next_restaurant_id: int | None = None
    next_menu_item_id: int | None = None
    next_order_id: int | None = None


class CatalogPersistence:
    """Best-effort mirror of the catalog and id counters into a key-value store.

    All four keys are written with a single ``set_many`` call, so a reader
    never sees restaurants from one save next to counters from another.
    Failures are logged and counted, never raised.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def save(self, catalog: CatalogStore, counters: IdCounters) -> bool:
        with tracer.start_as_current_span("catalog_snapshot.save"):
            try:
                payload = RESTAURANT_LIST_ADAPTER.dump_json(
                    to_persisted_restaurants(catalog.restaurants)
                ).decode("utf-8")
                self._store.set_many(
                    {
                        RESTAURANTS_KEY: payload,
                        NEXT_RESTAURANT_ID_KEY: str(counters.next_restaurant_id),
                        NEXT_MENU_ITEM_ID_KEY: str(counters.next_menu_item_id),
                        NEXT_ORDER_ID_KEY: str(counters.next_order_id),
                    }
                )
            except Exception:
                record_storage_failure("save")
                logger.exception("catalog_snapshot_save_failed", extra={"operation": "save"})
                return False

        logger.debug(
            "catalog_snapshot_saved",
            extra={"operation": "save"},
        )
        return True

    def load(self) -> LoadedSnapshot:
        with tracer.start_as_current_span("catalog_snapshot.load"):
            try:
                raw = self._store.get_many(SNAPSHOT_KEYS)
            except Exception:
                record_storage_failure("load")
                logger.exception("catalog_snapshot_load_failed", extra={"operation": "load"})
                return LoadedSnapshot()

            return LoadedSnapshot(
                restaurants=self._parse_restaurants(raw.get(RESTAURANTS_KEY)),
                next_restaurant_id=self._parse_counter(raw, NEXT_RESTAURANT_ID_KEY),
                next_menu_item_id=self._parse_counter(raw, NEXT_MENU_ITEM_ID_KEY),
                next_order_id=self._parse_counter(raw, NEXT_ORDER_ID_KEY),
            )

    def _parse_restaurants(self, payload: str | None) -> list[Restaurant] | None:
        if payload is None:
            return None
        try:
            return to_domain_restaurants(RESTAURANT_LIST_ADAPTER.validate_json(payload))
        except (ValidationError, ValueError):
            record_storage_failure("load")
            logger.warning(
                "catalog_snapshot_restaurants_unreadable",
                exc_info=True,
                extra={"operation": "load"},
            )
            return None

    def _parse_counter(self, raw: dict[str, str | None], key: str) -> int | None:
        value = raw.get(key)
        if value is None:
            return None
        try:
            counter = int(value)
        except ValueError:
            counter = 0
        if counter < 1:
            record_storage_failure("load")
            logger.warning(
                "catalog_snapshot_counter_unreadable",
                extra={"operation": "load", "key": key},
            )
            return None
        return counter


def current_counters(catalog: CatalogStore, ledger: OrderLedger) -> IdCounters:
    return IdCounters(
        next_restaurant_id=catalog.next_restaurant_id,
        next_menu_item_id=catalog.next_menu_item_id,
        next_order_id=ledger.next_order_id,
    )
