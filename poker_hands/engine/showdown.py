"""Head-to-head showdown between a player's hand and an opponent.

A showdown takes five or ten cards in notation. The first five are the
player's hand; the next five, when given, are the opponent's. Otherwise the
opponent is dealt at random from the cards left in the deck.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from poker_hands.rules import (
    HAND_SIZE,
    Hand,
    HandSizeError,
    Outcome,
    compare,
    make_hand,
    parse_card,
    render,
)
from .dealer import deal_hand

logger = logging.getLogger(__name__)


OUTCOME_MESSAGES = {
    Outcome.TIE: "TIE!",
    Outcome.A_WINS: "YOU WIN!",
    Outcome.B_WINS: "YOU LOSE!",
}


@dataclass(frozen=True)
class ShowdownResult:
    """Outcome of a showdown.

    Attributes:
        hand: The player's hand
        opponent: The opponent's hand
        outcome: Result from the player's point of view
        opponent_was_dealt: True when the opponent hand was dealt at random
    """

    hand: Hand
    opponent: Hand
    outcome: Outcome
    opponent_was_dealt: bool = False

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self.outcome]


def run_showdown(
    card_strings: Sequence[str],
    rng: Optional[np.random.Generator] = None,
) -> ShowdownResult:
    """Play a player's hand against a given or dealt opponent.

    Args:
        card_strings: Five or ten cards in notation, e.g. ["8C", "7D", ...]
        rng: Random source for dealing the opponent

    Returns:
        ShowdownResult

    Raises:
        CardParseError: If a card string is malformed
        HandSizeError: If not five or ten cards are given
        DuplicateCardError: If a hand repeats a card
        SharedCardError: If both given hands hold the same card
    """
    if len(card_strings) not in (HAND_SIZE, 2 * HAND_SIZE):
        raise HandSizeError(
            f"Expected {HAND_SIZE} or {2 * HAND_SIZE} cards, got {len(card_strings)}"
        )

    cards = [parse_card(s) for s in card_strings]
    hand = make_hand(cards[:HAND_SIZE])

    if len(cards) == 2 * HAND_SIZE:
        opponent = make_hand(cards[HAND_SIZE:])
        dealt = False
    else:
        opponent = deal_hand(rng=rng, exclude=hand.cards)
        dealt = True
        logger.info("Dealt opponent hand %s", " ".join(render(c) for c in opponent.cards))

    outcome = compare(hand, opponent)
    logger.debug("Showdown %s vs %s -> %s", hand, opponent, outcome.name)
    return ShowdownResult(hand=hand, opponent=opponent, outcome=outcome, opponent_was_dealt=dealt)
