from __future__ import annotations

import logging

from fdash.application.dto.requests import PlaceOrderRequest
from fdash.application.dto.responses import OrderResponse
from fdash.application.mappers.order_mapper import to_order_response
from fdash.application.metrics.order_lifecycle import (
    record_order_status,
    record_pending_queue_size,
)
from fdash.domain.common.ids import MenuItemId, RestaurantId
from fdash.domain.order.ledger import OrderLedger

logger = logging.getLogger(__name__)


class PlaceOrder:
    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def execute(self, request_dto: PlaceOrderRequest) -> OrderResponse:
        order = self._ledger.enqueue(
            restaurant_id=RestaurantId(request_dto.restaurant_id),
            menu_item_id=MenuItemId(request_dto.menu_item_id),
            user_id=request_dto.user_id,
        )
        record_order_status(order)
        record_pending_queue_size(self._ledger.pending_count())
        logger.info(
            "order_enqueued",
            extra={
                "order_id": order.order_id,
                "restaurant_id": order.restaurant_id,
                "menu_item_id": order.menu_item_id,
                "user_id": order.user_id,
            },
        )
        return to_order_response(order)
