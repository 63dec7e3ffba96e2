"""Card rank and suit definitions and utilities.

Rank order (high to low): A > K > Q > J > X > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

Ranks and suits are encoded as small integers (rank 0..12, suit 0..3). This
encoding, together with the two-character notation below, is the only format
the rules package commits to:

    ranks: 2 3 4 5 6 7 8 9 X J Q K A
    suits: S C D H

This module provides:
- Rank and Suit enums
- Card representation, validation and rendering
- Notation parsing
- Deck and counting helpers
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List


class PokerRulesError(ValueError):
    """Base class for every error raised by the rules package."""


class OutOfRangeError(PokerRulesError):
    """Raised when a rank or suit lies outside its valid domain."""


class CardParseError(PokerRulesError):
    """Raised when a card string is not valid two-character notation."""


class Rank(IntEnum):
    """Card ranks ordered by strength (higher value = stronger rank).

    The ace is the highest rank; it only plays low inside the wheel
    straight (5-4-3-2-A), which is handled by the hand evaluator.
    """

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


class Suit(IntEnum):
    """Card suits. Suits are interchangeable labels with no ordering."""

    SPADES = 0
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3


RANK_ALPHABET = "23456789XJQKA"
SUIT_ALPHABET = "SCDH"

# Rank symbols for display
RANK_SYMBOLS = {rank: RANK_ALPHABET[rank] for rank in Rank}

# Suit symbols for display
SUIT_SYMBOLS = {suit: SUIT_ALPHABET[suit] for suit in Suit}

# Symbol to rank/suit mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


def _check_range(name: str, value, upper: int) -> int:
    # bool is an int subclass but never a valid rank or suit
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRangeError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= upper:
        raise OutOfRangeError(f"{name} {value} outside [0, {upper}]")
    return value


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit.

    Immutable and hashable for use in sets. Two cards are equal iff both
    rank and suit match. Construction validates the ranges and coerces the
    fields to Rank and Suit.
    """

    rank: Rank
    suit: Suit

    def __post_init__(self):
        rank = _check_range("rank", self.rank, len(Rank) - 1)
        suit = _check_range("suit", self.suit, len(Suit) - 1)
        # frozen dataclass: write through object.__setattr__
        object.__setattr__(self, "rank", Rank(rank))
        object.__setattr__(self, "suit", Suit(suit))

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"Card({render(self)})"

    def same_rank(self, other: "Card") -> bool:
        """Whether both cards have the same rank, regardless of suit."""
        return self.rank == other.rank

    def same_suit(self, other: "Card") -> bool:
        """Whether both cards have the same suit, regardless of rank."""
        return self.suit == other.suit

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from notation like 'XC' or 'as'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            CardParseError: If string cannot be parsed
        """
        return parse_card(s)


def make_card(rank: int, suit: int) -> Card:
    """Create a card from its integer encoding.

    Raises:
        OutOfRangeError: If rank is not in 0..12 or suit is not in 0..3
    """
    return Card(rank=rank, suit=suit)


def render(card: Card) -> str:
    """Render a card in two-character notation, e.g. 'XC' or 'AS'."""
    return f"{RANK_SYMBOLS[card.rank]}{SUIT_SYMBOLS[card.suit]}"


def parse_card(s: str) -> Card:
    """Parse two-character notation into a card. Case-insensitive.

    Raises:
        CardParseError: If the string is not a rank symbol followed by a
            suit symbol
    """
    if not isinstance(s, str) or len(s.strip()) != 2:
        raise CardParseError(f"Card must be two characters, got {s!r}")

    rank_char, suit_char = s.strip().upper()
    if rank_char not in SYMBOL_TO_RANK:
        raise CardParseError(f"Invalid rank {rank_char!r} in {s!r}, expected one of {RANK_ALPHABET}")
    if suit_char not in SYMBOL_TO_SUIT:
        raise CardParseError(f"Invalid suit {suit_char!r} in {s!r}, expected one of {SUIT_ALPHABET}")

    return Card(rank=SYMBOL_TO_RANK[rank_char], suit=SYMBOL_TO_SUIT[suit_char])


def parse_cards(s: str) -> List[Card]:
    """Parse cards from a string like "8C 7D 6S 4D 5S"."""
    return [parse_card(cs) for cs in s.split()]


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a list of cards.

    Args:
        cards: Iterable of Card objects

    Returns:
        Dict mapping Rank to count
    """
    counts: Dict[Rank, int] = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks × 4 suits)
    """
    deck = []
    for rank in Rank:
        for suit in Suit:
            deck.append(Card(rank=rank, suit=suit))
    return deck
