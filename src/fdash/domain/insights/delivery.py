from __future__ import annotations

import random

BASE_DELIVERY_MINUTES = 20
MAX_EXTRA_MINUTES = 20
WINDOW_MINUTES = 10


def estimated_delivery_estimate(rng: random.Random | None = None) -> str:
    """Return a delivery window such as ``"27-37 minutes"``.

    The lower bound is ``BASE_DELIVERY_MINUTES`` plus a uniform integer in
    ``[1, MAX_EXTRA_MINUTES]``, the upper bound is ``WINDOW_MINUTES`` later.
    Pass a seeded ``random.Random`` to make the result reproducible.
    """
    source = rng if rng is not None else random
    earliest = BASE_DELIVERY_MINUTES + source.randint(1, MAX_EXTRA_MINUTES)
    return f"{earliest}-{earliest + WINDOW_MINUTES} minutes"
