import bisect
import logging
import random
from itertools import accumulate
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


def effective_weight(card) -> int:
    """Weight used for sampling. Anything below 1 (or missing) counts as 1."""
    return max(card.weight or 1, 1)


def eligible_cards(cards: Iterable, category: Optional[str] = None) -> list:
    return [
        card for card in cards
        if not card.hidden and (not category or card.category == category)
    ]


def select_random_card(cards: Iterable, category: Optional[str] = None, rng: Optional[random.Random] = None):
    """
    Draw one visible card, optionally restricted to `category` (an empty
    category means no filter), with
    probability weight_i / sum(weights).

    Behaves as if every card were repeated `weight` times in a pool and one
    entry picked uniformly; the pool itself is never built. Returns None
    when no card is eligible.
    """
    rng = rng or random
    pool = eligible_cards(cards, category)
    if not pool:
        logger.debug("No eligible card for category=%r", category)
        return None

    bounds = list(accumulate(effective_weight(card) for card in pool))
    ticket = rng.randrange(bounds[-1])
    chosen = pool[bisect.bisect_right(bounds, ticket)]
    logger.debug("Picked card %s from %d eligible (pool size %d)", chosen.id, len(pool), bounds[-1])
    return chosen
