from __future__ import annotations

import random

from fdash.application.dto.responses import OrderResponse
from fdash.application.use_cases.fulfill_next_order import FulfillNextOrder
from fdash.domain.order.ledger import OrderLedger

DEFAULT_DELIVERY_PROBABILITY = 0.3


class SimulateCourierTick:
    """Demo stand-in for a courier confirming a delivery.

    Callers decide when a tick happens; on each tick the oldest pending
    order is delivered with probability ``probability``.
    """

    def __init__(
        self,
        ledger: OrderLedger,
        rng: random.Random | None = None,
        probability: float = DEFAULT_DELIVERY_PROBABILITY,
    ) -> None:
        if probability < 0 or probability > 1:
            raise ValueError("probability must be between 0 and 1")
        self._ledger = ledger
        self._rng = rng or random.Random()
        self._probability = probability
        self._fulfill = FulfillNextOrder(ledger)

    def execute(self) -> OrderResponse | None:
        if self._ledger.pending_count() == 0:
            return None
        if self._rng.random() >= self._probability:
            return None
        return self._fulfill.execute()
