from __future__ import annotations

from fdash.application.dto.responses import OrderResponse
from fdash.domain.order.entities import Order


def display_order_id(order_id: int) -> str:
    return f"#ORD{order_id:03d}"


def to_order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        orderId=order.order_id,
        displayId=display_order_id(order.order_id),
        restaurantId=order.restaurant_id,
        restaurantName=order.restaurant_name,
        menuItemId=order.menu_item_id,
        menuItemName=order.menu_item_name,
        price=order.price,
        userId=order.user_id,
        status=order.status.value,
        createdAt=order.created_at,
        estimatedDelivery=order.estimated_delivery,
        deliveredAt=order.delivered_at,
    )
