"""Dealing and showdown built on top of the rules package.

This module provides:
- deal_hand / deal_cards: Random dealing from the remaining deck
- run_showdown: Player hand against a given or dealt opponent
- ShowdownResult: Outcome of a showdown
"""

from .dealer import (
    DeckExhaustedError,
    remaining_deck,
    deal_cards,
    deal_hand,
)
from .showdown import (
    OUTCOME_MESSAGES,
    ShowdownResult,
    run_showdown,
)

__all__ = [
    "DeckExhaustedError",
    "remaining_deck",
    "deal_cards",
    "deal_hand",
    "OUTCOME_MESSAGES",
    "ShowdownResult",
    "run_showdown",
]
