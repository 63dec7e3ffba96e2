"""Poker rules implementations.

This module provides:
- Card, rank and suit definitions (ranks.py)
- Hand classification and comparison (hands.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    PokerRulesError,
    OutOfRangeError,
    CardParseError,
    RANK_ALPHABET,
    SUIT_ALPHABET,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    make_card,
    render,
    parse_card,
    parse_cards,
    get_rank_counts,
    create_standard_deck,
)

from .hands import (
    HAND_SIZE,
    Category,
    Outcome,
    Signature,
    Hand,
    HandSizeError,
    DuplicateCardError,
    SharedCardError,
    CATEGORY_NAMES,
    WHEEL_RANKS,
    make_hand,
    category,
    compare,
    normalize_cards,
    compute_signature,
    classify,
    cards_are_sorted,
    signature_is_correct,
    matching_categories,
    is_flush,
    is_straight,
    describe_categories,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "PokerRulesError",
    "OutOfRangeError",
    "CardParseError",
    "RANK_ALPHABET",
    "SUIT_ALPHABET",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "make_card",
    "render",
    "parse_card",
    "parse_cards",
    "get_rank_counts",
    "create_standard_deck",
    # Hands
    "HAND_SIZE",
    "Category",
    "Outcome",
    "Signature",
    "Hand",
    "HandSizeError",
    "DuplicateCardError",
    "SharedCardError",
    "CATEGORY_NAMES",
    "WHEEL_RANKS",
    "make_hand",
    "category",
    "compare",
    "normalize_cards",
    "compute_signature",
    "classify",
    "cards_are_sorted",
    "signature_is_correct",
    "matching_categories",
    "is_flush",
    "is_straight",
    "describe_categories",
]
