from __future__ import annotations

import logging

from fdash.application.dto.responses import OrderResponse
from fdash.application.mappers.order_mapper import to_order_response
from fdash.application.metrics.order_lifecycle import (
    record_order_status,
    record_pending_queue_size,
    record_time_to_deliver,
    record_transition,
)
from fdash.domain.order.entities import OrderStatus
from fdash.domain.order.ledger import OrderLedger

logger = logging.getLogger(__name__)


class FulfillNextOrder:
    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def execute(self) -> OrderResponse | None:
        order = self._ledger.fulfill_next()
        if order is None:
            logger.debug("order_queue_empty")
            return None

        record_transition(from_status=OrderStatus.PENDING, to_status=OrderStatus.DELIVERED)
        record_order_status(order)
        record_time_to_deliver(order)
        record_pending_queue_size(self._ledger.pending_count())
        logger.info(
            "order_fulfilled",
            extra={"order_id": order.order_id, "restaurant_id": order.restaurant_id},
        )
        return to_order_response(order)
