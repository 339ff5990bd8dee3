from __future__ import annotations

from datetime import datetime, timezone

from prometheus_client import Counter, Gauge, Histogram

from fdash.domain.order.entities import Order, OrderStatus

ORDERS_TOTAL = Counter(
    "fdash_orders_total",
    "Total number of orders observed by status.",
    ["status"],
)

ORDER_TRANSITION_TOTAL = Counter(
    "fdash_order_transition_total",
    "Total number of order lifecycle transitions.",
    ["from", "to"],
)

ORDER_TIME_TO_DELIVER_SECONDS = Histogram(
    "fdash_order_time_to_deliver_seconds",
    "Time between order placement and delivery.",
)

PENDING_QUEUE_SIZE = Gauge(
    "fdash_pending_queue_size",
    "Current number of orders waiting in the pending queue.",
)

CATALOG_MUTATIONS_TOTAL = Counter(
    "fdash_catalog_mutations_total",
    "Total number of catalog insertions.",
    ["kind"],
)

STORAGE_FAILURES_TOTAL = Counter(
    "fdash_storage_failures_total",
    "Total number of swallowed persistence failures.",
    ["operation"],
)


def record_order_status(order: Order) -> None:
    ORDERS_TOTAL.labels(status=order.status.value).inc()


def record_transition(from_status: OrderStatus, to_status: OrderStatus) -> None:
    ORDER_TRANSITION_TOTAL.labels(**{"from": from_status.value, "to": to_status.value}).inc()


def record_time_to_deliver(order: Order, now: datetime | None = None) -> None:
    current = now or order.delivered_at or datetime.now(timezone.utc)
    ORDER_TIME_TO_DELIVER_SECONDS.observe(max((current - order.created_at).total_seconds(), 0.0))


def record_pending_queue_size(size: int) -> None:
    PENDING_QUEUE_SIZE.set(size)


def record_catalog_mutation(kind: str) -> None:
    CATALOG_MUTATIONS_TOTAL.labels(kind=kind).inc()


def record_storage_failure(operation: str) -> None:
    STORAGE_FAILURES_TOTAL.labels(operation=operation).inc()
