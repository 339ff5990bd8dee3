from __future__ import annotations

from fdash.application.dto.responses import OrderQueueResponse, UserOrdersResponse
from fdash.application.mappers.order_mapper import to_order_response
from fdash.domain.order.entities import OrderStatus
from fdash.domain.order.ledger import OrderLedger


class GetOrderQueue:
    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def execute(self) -> OrderQueueResponse:
        return OrderQueueResponse(
            pending=[to_order_response(order) for order in self._ledger.pending],
            history=[to_order_response(order) for order in self._ledger.history],
        )


class ListUserOrders:
    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def execute(self, user_id: str) -> UserOrdersResponse:
        orders = self._ledger.orders_for_user(user_id)
        return UserOrdersResponse(
            userId=user_id,
            orders=[to_order_response(order) for order in orders],
            totalOrders=len(orders),
            pendingOrders=sum(1 for order in orders if order.status == OrderStatus.PENDING),
        )
