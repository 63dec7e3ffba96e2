"""Five-card hand classification and comparison.

Categories (weakest to strongest):
- High card, one pair, two pair, three of a kind
- Straight: five consecutive ranks; the ace plays low only in 5-4-3-2-A
- Flush: five cards of one suit
- Full house, four of a kind
- Straight flush: straight and flush together

Every hand carries a "signature": the distinct ranks it holds paired with how
often each appears, sorted by descending count and then descending rank.

    8C 8D 6S 4D 5S -> freq (2, 1, 1, 1), ranks (8, 6, 5, 4)
    8S 7D 8H 4S 5D -> freq (2, 1, 1, 1), ranks (8, 7, 5, 4)

The count pattern identifies every category except the four that share the
all-distinct pattern (1, 1, 1, 1, 1); those are told apart by looking at the
suits and the rank run.

Comparison rules:
- Higher category wins
- Straights and straight flushes: compare the first card of the normalized
  order (the 5 for the wheel)
- Everything else: the first differing rank in the signature decides
- Suits never break ties
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from .ranks import (
    Card,
    OutOfRangeError,
    PokerRulesError,
    Rank,
    get_rank_counts,
    render,
)


HAND_SIZE = 5


class HandSizeError(PokerRulesError):
    """Raised when a hand is not made of exactly five cards."""


class DuplicateCardError(PokerRulesError):
    """Raised when the same card appears twice in one hand."""


class SharedCardError(PokerRulesError):
    """Raised when two hands being compared hold the same card."""


class Category(IntEnum):
    """Hand categories ordered by strength (higher value = stronger hand)."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


class Outcome(IntEnum):
    """Result of comparing hand A against hand B."""

    TIE = 0
    A_WINS = 1
    B_WINS = 2


CATEGORY_NAMES = {
    Category.HIGH_CARD: "HighCards",
    Category.ONE_PAIR: "OnePair",
    Category.TWO_PAIR: "TwoPair",
    Category.THREE_OF_A_KIND: "ThreeOfAKind",
    Category.STRAIGHT: "Straight",
    Category.FLUSH: "Flush",
    Category.FULL_HOUSE: "FullHouse",
    Category.FOUR_OF_A_KIND: "FourOfAKind",
    Category.STRAIGHT_FLUSH: "StraightFlush",
}

# Count patterns that pin down a category on their own
COUNT_PATTERNS: Dict[Tuple[int, ...], Category] = {
    (4, 1): Category.FOUR_OF_A_KIND,
    (3, 2): Category.FULL_HOUSE,
    (3, 1, 1): Category.THREE_OF_A_KIND,
    (2, 2, 1): Category.TWO_PAIR,
    (2, 1, 1, 1): Category.ONE_PAIR,
}

DISTINCT_PATTERN = (1, 1, 1, 1, 1)

# Canonical order of the wheel, and the order a plain descending sort gives it
WHEEL_RANKS = (Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE)
ACE_HIGH_WHEEL_RANKS = (Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO)

CardLike = Union[Card, Tuple[int, int]]


@dataclass(frozen=True)
class Signature:
    """Rank-frequency summary of a hand.

    Attributes:
        sig_freq: Count of each distinct rank, descending
        sig_rank: The distinct ranks, same index correspondence as sig_freq
    """

    sig_freq: Tuple[int, ...]
    sig_rank: Tuple[Rank, ...]

    def __len__(self) -> int:
        return len(self.sig_freq)


@dataclass(frozen=True)
class Hand:
    """A normalized, classified five-card hand.

    Build hands with make_hand(); it sorts the cards, computes the signature
    and picks the category once, after which the hand never changes.

    Attributes:
        cards: The five cards, descending by rank (wheel stored as 5,4,3,2,A)
        signature: Rank-frequency signature
        category: Hand category
    """

    cards: Tuple[Card, ...]
    signature: Signature
    category: Category

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(render(c) for c in self.cards)
        return f"{cards_str}: {CATEGORY_NAMES[self.category]}"

    @property
    def high_card(self) -> Rank:
        """Rank of the first card in normalized order."""
        return self.cards[0].rank

    @property
    def sig_freq(self) -> Tuple[int, ...]:
        return self.signature.sig_freq

    @property
    def sig_rank(self) -> Tuple[Rank, ...]:
        return self.signature.sig_rank


def _ranks(cards: Sequence[Card]) -> Tuple[Rank, ...]:
    return tuple(card.rank for card in cards)


def normalize_cards(cards: Iterable[Card]) -> Tuple[Card, ...]:
    """Sort cards descending by rank, moving the ace of a wheel to the end.

    Cards of equal rank are ordered by suit so the result does not depend on
    input order.
    """
    ordered = sorted(cards, key=lambda card: (card.rank, card.suit), reverse=True)
    if _ranks(ordered) == ACE_HIGH_WHEEL_RANKS:
        ordered = ordered[1:] + ordered[:1]
    return tuple(ordered)


def cards_are_sorted(cards: Sequence[Card]) -> bool:
    """Check that cards are in normalized order.

    Descending by rank, except that 5,4,3,2,A is accepted and A,5,4,3,2 is
    rejected.
    """
    ranks = _ranks(cards)
    if ranks == WHEEL_RANKS:
        return True
    if ranks == ACE_HIGH_WHEEL_RANKS:
        return False
    return all(ranks[i - 1] >= ranks[i] for i in range(1, len(ranks)))


def compute_signature(cards: Iterable[Card]) -> Signature:
    """Compute the rank-frequency signature of a set of cards."""
    counts = get_rank_counts(cards)
    ordered = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    return Signature(
        sig_freq=tuple(count for _, count in ordered),
        sig_rank=tuple(rank for rank, _ in ordered),
    )


def signature_is_correct(hand: Hand) -> bool:
    """Check that a hand's signature matches its cards and is correctly ordered."""
    sig = hand.signature
    if len(sig.sig_freq) != len(sig.sig_rank):
        return False
    if len(set(sig.sig_rank)) != len(sig.sig_rank):
        return False
    if dict(zip(sig.sig_rank, sig.sig_freq)) != get_rank_counts(hand.cards):
        return False

    for i in range(1, len(sig)):
        if sig.sig_freq[i - 1] < sig.sig_freq[i]:
            return False
        if sig.sig_freq[i - 1] == sig.sig_freq[i] and sig.sig_rank[i - 1] <= sig.sig_rank[i]:
            return False
    return True


def is_flush(cards: Sequence[Card]) -> bool:
    """All cards share one suit."""
    return all(card.same_suit(cards[0]) for card in cards)


def is_straight(cards: Sequence[Card]) -> bool:
    """Normalized cards form a run of consecutive descending ranks, or the wheel."""
    ranks = _ranks(cards)
    if ranks == WHEEL_RANKS:
        return True
    return all(ranks[i] + 1 == ranks[i - 1] for i in range(1, len(ranks)))


def classify(cards: Sequence[Card], signature: Signature) -> Category:
    """Pick the category of normalized cards with the given signature."""
    if signature.sig_freq != DISTINCT_PATTERN:
        return COUNT_PATTERNS[signature.sig_freq]

    flush = is_flush(cards)
    straight = is_straight(cards)
    if flush and straight:
        return Category.STRAIGHT_FLUSH
    if flush:
        return Category.FLUSH
    if straight:
        return Category.STRAIGHT
    return Category.HIGH_CARD


def matching_categories(hand: Hand) -> List[Category]:
    """List every category whose defining test holds for a hand, strongest first.

    A straight flush also passes the flush and straight tests; a hand's
    category is always the first entry of this list.
    """
    freq = hand.signature.sig_freq
    flush = is_flush(hand.cards)
    straight = is_straight(hand.cards)

    checks = [
        (Category.STRAIGHT_FLUSH, flush and straight),
        (Category.FOUR_OF_A_KIND, freq == (4, 1)),
        (Category.FULL_HOUSE, freq == (3, 2)),
        (Category.FLUSH, flush),
        (Category.STRAIGHT, straight),
        (Category.THREE_OF_A_KIND, freq == (3, 1, 1)),
        (Category.TWO_PAIR, freq == (2, 2, 1)),
        (Category.ONE_PAIR, freq == (2, 1, 1, 1)),
    ]
    matched = [cat for cat, holds in checks if holds]
    return matched or [Category.HIGH_CARD]


def _to_card(item: CardLike) -> Card:
    if isinstance(item, Card):
        return item
    try:
        rank, suit = item
    except (TypeError, ValueError):
        raise OutOfRangeError(f"Expected a Card or a (rank, suit) pair, got {item!r}") from None
    return Card(rank=rank, suit=suit)


def make_hand(cards: Iterable[CardLike]) -> Hand:
    """Build a classified hand from five cards or (rank, suit) pairs.

    Args:
        cards: Five Card objects or (rank, suit) integer pairs

    Returns:
        Normalized, classified Hand

    Raises:
        OutOfRangeError: If a rank or suit is out of range, or an item is
            neither a Card nor a (rank, suit) pair
        HandSizeError: If there are not exactly five cards
        DuplicateCardError: If the same card appears twice (same rank with
            different suits is fine)
    """
    card_list = [_to_card(item) for item in cards]
    if len(card_list) != HAND_SIZE:
        raise HandSizeError(f"A hand needs exactly {HAND_SIZE} cards, got {len(card_list)}")

    seen = set()
    for card in card_list:
        if card in seen:
            raise DuplicateCardError(f"Card {render(card)} appears more than once")
        seen.add(card)

    ordered = normalize_cards(card_list)
    signature = compute_signature(ordered)
    return Hand(cards=ordered, signature=signature, category=classify(ordered, signature))


def category(hand: Hand) -> Category:
    """Return the category of a hand."""
    return hand.category


def _outcome(a, b) -> Outcome:
    if a > b:
        return Outcome.A_WINS
    if a < b:
        return Outcome.B_WINS
    return Outcome.TIE


def compare(a: Hand, b: Hand) -> Outcome:
    """Compare hand a against hand b.

    Args:
        a: First hand
        b: Second hand

    Returns:
        Outcome.A_WINS, Outcome.B_WINS or Outcome.TIE

    Raises:
        SharedCardError: If a card appears in both hands; the two hands must
            come from a single deck
    """
    shared = set(a.cards) & set(b.cards)
    if shared:
        names = " ".join(sorted(render(c) for c in shared))
        raise SharedCardError(f"Hands share cards: {names}")

    if a.category != b.category:
        return _outcome(a.category, b.category)

    if a.category in (Category.STRAIGHT, Category.STRAIGHT_FLUSH):
        return _outcome(a.high_card, b.high_card)

    for rank_a, rank_b in zip(a.signature.sig_rank, b.signature.sig_rank):
        if rank_a != rank_b:
            return _outcome(rank_a, rank_b)
    return Outcome.TIE


def describe_categories() -> Dict[Category, str]:
    """Get a description of requirements for each category.

    Returns:
        Dict mapping Category to description string
    """
    return {
        Category.HIGH_CARD: "None of the other categories",
        Category.ONE_PAIR: "Two cards of one rank, three other distinct ranks",
        Category.TWO_PAIR: "Two pairs of different ranks plus one other card",
        Category.THREE_OF_A_KIND: "Three cards of one rank, two other distinct ranks",
        Category.STRAIGHT: "Five consecutive ranks (A may play low as 5-4-3-2-A)",
        Category.FLUSH: "Five cards of the same suit",
        Category.FULL_HOUSE: "Three cards of one rank and two of another",
        Category.FOUR_OF_A_KIND: "Four cards of one rank",
        Category.STRAIGHT_FLUSH: "A straight with all cards of the same suit",
    }
