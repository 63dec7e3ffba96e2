"""Random hand dealing.

The dealer draws from a standard 52-card deck minus any cards already in
play. Randomness always comes from an injected numpy Generator so that deals
are reproducible from a seed and no global state is touched.
"""

import logging
from typing import Iterable, List, Optional

import numpy as np

from poker_hands.rules import (
    HAND_SIZE,
    Card,
    Hand,
    PokerRulesError,
    create_standard_deck,
    make_hand,
)

logger = logging.getLogger(__name__)


class DeckExhaustedError(PokerRulesError):
    """Raised when too few cards remain in the deck to deal a hand."""


def remaining_deck(exclude: Iterable[Card] = ()) -> List[Card]:
    """Return the standard deck without the excluded cards, in deck order."""
    excluded = set(exclude)
    return [card for card in create_standard_deck() if card not in excluded]


def deal_cards(
    count: int,
    rng: Optional[np.random.Generator] = None,
    exclude: Iterable[Card] = (),
) -> List[Card]:
    """Deal distinct cards uniformly at random.

    Args:
        count: Number of cards to deal
        rng: Random source; a fresh unseeded Generator if None
        exclude: Cards that must not be dealt

    Returns:
        List of dealt cards

    Raises:
        DeckExhaustedError: If fewer than count cards remain
    """
    if rng is None:
        rng = np.random.default_rng()

    deck = remaining_deck(exclude)
    if count > len(deck):
        raise DeckExhaustedError(f"Deck has only {len(deck)} cards, cannot deal {count}")

    picks = rng.choice(len(deck), size=count, replace=False)
    cards = [deck[int(i)] for i in picks]
    logger.debug("Dealt %s from %d remaining cards", " ".join(str(c) for c in cards), len(deck))
    return cards


def deal_hand(
    rng: Optional[np.random.Generator] = None,
    exclude: Iterable[Card] = (),
) -> Hand:
    """Deal a random five-card hand that shares no card with exclude."""
    return make_hand(deal_cards(HAND_SIZE, rng=rng, exclude=exclude))
