"""Tests for the rules engine (ranks and hands).

Test coverage:
- Card construction, range checks, equality, rendering and parsing
- Hand normalization, including the wheel (5-4-3-2-A)
- Signature computation
- Classification into all nine categories
- Comparison: category, straight high card, signature walk, ties
- Error cases: duplicate cards, shared cards, wrong hand size
"""

import pytest

from poker_hands.rules import (
    Rank,
    Suit,
    Card,
    OutOfRangeError,
    CardParseError,
    PokerRulesError,
    make_card,
    render,
    parse_card,
    parse_cards,
    get_rank_counts,
    create_standard_deck,
    Category,
    Outcome,
    CATEGORY_NAMES,
    WHEEL_RANKS,
    HandSizeError,
    DuplicateCardError,
    SharedCardError,
    make_hand,
    category,
    compare,
    cards_are_sorted,
    signature_is_correct,
    describe_categories,
)


def hand_of(s: str):
    return make_hand(parse_cards(s))


def ranks_of(hand):
    return tuple(card.rank for card in hand.cards)


class TestCardBasics:
    """Test Card creation and utilities."""

    def test_card_creation(self):
        card = make_card(12, 3)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.HEARTS
        assert isinstance(card.rank, Rank)
        assert isinstance(card.suit, Suit)

    def test_card_domain_bounds(self):
        assert make_card(0, 0).rank == Rank.TWO
        assert make_card(12, 3).rank == Rank.ACE

    @pytest.mark.parametrize("rank,suit", [(-1, 0), (13, 0), (0, -1), (0, 4), (99, 99)])
    def test_out_of_range(self, rank, suit):
        with pytest.raises(OutOfRangeError):
            make_card(rank, suit)

    @pytest.mark.parametrize("rank,suit", [("A", 0), (1.0, 0), (True, 0), (0, None)])
    def test_non_integer_rejected(self, rank, suit):
        with pytest.raises(OutOfRangeError):
            make_card(rank, suit)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            make_card(13, 0)
        assert issubclass(OutOfRangeError, PokerRulesError)

    def test_card_equality_and_hashing(self):
        c1 = make_card(5, 1)
        c2 = Card(rank=Rank.SEVEN, suit=Suit.CLUBS)
        c3 = make_card(5, 2)

        assert c1 == c2
        assert c1 != c3
        assert hash(c1) == hash(c2)
        assert len({c1, c2, c3}) == 2

    def test_same_rank_and_same_suit(self):
        king_spades = parse_card("KS")
        king_hearts = parse_card("KH")
        two_spades = parse_card("2S")

        assert king_spades.same_rank(king_hearts)
        assert not king_spades.same_suit(king_hearts)
        assert king_spades.same_suit(two_spades)
        assert not king_spades.same_rank(two_spades)

    def test_card_is_immutable(self):
        card = make_card(3, 0)
        with pytest.raises(AttributeError):
            card.rank = Rank.ACE

    def test_render(self):
        assert render(make_card(8, 1)) == "XC"
        assert render(make_card(0, 0)) == "2S"
        assert render(make_card(12, 3)) == "AH"
        assert str(make_card(9, 2)) == "JD"
        assert repr(make_card(9, 2)) == "Card(JD)"

    def test_parse_card(self):
        assert parse_card("XC") == Card(rank=Rank.TEN, suit=Suit.CLUBS)
        assert parse_card("as") == Card(rank=Rank.ACE, suit=Suit.SPADES)
        assert Card.from_string("7d") == make_card(5, 2)

    @pytest.mark.parametrize("bad", ["", "A", "10S", "ZS", "AX", "SA", "A S"])
    def test_parse_card_rejects_bad_notation(self, bad):
        with pytest.raises(CardParseError):
            parse_card(bad)

    def test_render_parse_round_trip(self):
        for card in create_standard_deck():
            assert parse_card(render(card)) == card

    def test_standard_deck(self):
        deck = create_standard_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

        rank_counts = get_rank_counts(deck)
        assert all(count == 4 for count in rank_counts.values())


class TestNormalization:
    """Cards are stored descending by rank, with the wheel as 5,4,3,2,A."""

    def test_sorted_descending(self):
        hand = hand_of("4D 9S 2C KH 7S")
        assert ranks_of(hand) == (Rank.KING, Rank.NINE, Rank.SEVEN, Rank.FOUR, Rank.TWO)
        assert cards_are_sorted(hand.cards)

    def test_wheel_ace_moves_to_end(self):
        hand = hand_of("AS 2D 3C 4H 5S")
        assert ranks_of(hand) == WHEEL_RANKS
        assert hand.high_card == Rank.FIVE
        assert cards_are_sorted(hand.cards)

    def test_ace_high_wheel_order_is_not_normalized(self):
        cards = parse_cards("AS 5S 4D 3C 2H")
        assert not cards_are_sorted(cards)

    def test_ace_stays_first_outside_wheel(self):
        hand = hand_of("AS 6D 5C 4H 3S")
        assert hand.cards[0].rank == Rank.ACE
        assert hand.category == Category.HIGH_CARD

    def test_hand_string(self):
        hand = hand_of("8C 8D 6S 4D 5S")
        assert str(hand) == "8D 8C 6S 5S 4D: OnePair"


class TestSignature:
    """Signature is sorted by descending count then descending rank."""

    def test_four_of_a_kind_signature(self):
        hand = hand_of("AS AD AC AH KS")
        assert hand.sig_freq == (4, 1)
        assert hand.sig_rank == (Rank.ACE, Rank.KING)

    def test_full_house_signature(self):
        hand = hand_of("2S 2D KC KH 2H")
        assert hand.sig_freq == (3, 2)
        assert hand.sig_rank == (Rank.TWO, Rank.KING)

    def test_two_pair_signature_orders_pairs_by_rank(self):
        hand = hand_of("4S 4D KC KH 9S")
        assert hand.sig_freq == (2, 2, 1)
        assert hand.sig_rank == (Rank.KING, Rank.FOUR, Rank.NINE)

    def test_one_pair_signature(self):
        hand = hand_of("8C 8D 6S 4D 5S")
        assert hand.sig_freq == (2, 1, 1, 1)
        assert hand.sig_rank == (Rank.EIGHT, Rank.SIX, Rank.FIVE, Rank.FOUR)

    def test_distinct_signature(self):
        hand = hand_of("4D 9S 2C KH 7S")
        assert hand.sig_freq == (1, 1, 1, 1, 1)
        assert hand.sig_rank == ranks_of(hand)
        assert signature_is_correct(hand)


class TestClassification:
    """Every category, plus the boundary cases between them."""

    @pytest.mark.parametrize(
        "cards,expected",
        [
            ("AS KS QS JS XS", Category.STRAIGHT_FLUSH),
            ("5H 4H 3H 2H AH", Category.STRAIGHT_FLUSH),
            ("9C 9D 9H 9S 2C", Category.FOUR_OF_A_KIND),
            ("3S 3D 3C 7H 7S", Category.FULL_HOUSE),
            ("2D 7D 9D JD KD", Category.FLUSH),
            ("9S 8D 7C 6H 5S", Category.STRAIGHT),
            ("5S 4D 3C 2H AS", Category.STRAIGHT),
            ("AD KC QH JS XD", Category.STRAIGHT),
            ("QS QD QC 7H 2S", Category.THREE_OF_A_KIND),
            ("KS KD 4C 4H 9S", Category.TWO_PAIR),
            ("8C 8D 6S 4D 5S", Category.ONE_PAIR),
            ("4D 9S 2C KH 7S", Category.HIGH_CARD),
        ],
    )
    def test_category(self, cards, expected):
        hand = hand_of(cards)
        assert hand.category == expected
        assert category(hand) == expected

    def test_wrap_around_is_not_a_straight(self):
        assert hand_of("KS AD 2C 3H 4S").category == Category.HIGH_CARD
        assert hand_of("QS KD AC 2H 3S").category == Category.HIGH_CARD

    def test_four_card_run_is_not_a_straight(self):
        assert hand_of("9S 8D 7C 6H 4S").category == Category.HIGH_CARD

    def test_category_values(self):
        assert [int(c) for c in Category] == list(range(9))
        assert Category.HIGH_CARD < Category.ONE_PAIR < Category.STRAIGHT_FLUSH

    def test_category_names(self):
        assert CATEGORY_NAMES[Category.HIGH_CARD] == "HighCards"
        assert CATEGORY_NAMES[Category.STRAIGHT_FLUSH] == "StraightFlush"
        assert set(describe_categories()) == set(Category)


class TestHandConstruction:
    """make_hand accepts Cards or (rank, suit) pairs and validates them."""

    def test_from_pairs(self):
        hand = make_hand([(12, 0), (12, 2), (12, 1), (12, 3), (11, 0)])
        assert hand.category == Category.FOUR_OF_A_KIND
        assert len(hand) == 5

    def test_same_rank_different_suit_is_legal(self):
        hand = make_hand([(11, 0), (11, 3), (1, 2), (2, 1), (3, 3)])
        assert hand.category == Category.ONE_PAIR

    def test_duplicate_card_rejected(self):
        with pytest.raises(DuplicateCardError):
            hand_of("2S 2S 3D 4C 5H")
        with pytest.raises(DuplicateCardError):
            make_hand([(0, 0), (0, 0), (1, 2), (2, 1), (3, 3)])

    def test_out_of_range_pair_rejected(self):
        with pytest.raises(OutOfRangeError):
            make_hand([(13, 0), (0, 0), (1, 2), (2, 1), (3, 3)])

    @pytest.mark.parametrize("bad_item", [7, (1, 2, 3), (4,), None])
    def test_malformed_item_rejected(self, bad_item):
        with pytest.raises(OutOfRangeError):
            make_hand([bad_item, (0, 0), (1, 2), (2, 1), (3, 3)])

    @pytest.mark.parametrize("cards", ["2S 3D 4C 5H", "2S 3D 4C 5H 6S 7D"])
    def test_wrong_size_rejected(self, cards):
        with pytest.raises(HandSizeError):
            hand_of(cards)

    def test_hand_is_immutable(self):
        hand = hand_of("2S 3D 4C 5H 7S")
        with pytest.raises(AttributeError):
            hand.category = Category.FLUSH


class TestComparison:
    """Comparison by category, straight top card and signature walk."""

    def test_pair_of_eights_kicker_walk(self):
        a = hand_of("8C 8D 6S 4D 5S")
        b = hand_of("8S 7D 8H 4S 5D")
        assert a.category == b.category == Category.ONE_PAIR
        assert compare(a, b) == Outcome.B_WINS
        assert compare(b, a) == Outcome.A_WINS

    def test_straight_beats_high_card(self):
        a = hand_of("8C 7D 6S 4D 5S")
        b = hand_of("7S 2S 5D 8S 6C")
        assert a.category == Category.STRAIGHT
        assert b.category == Category.HIGH_CARD
        assert compare(a, b) == Outcome.A_WINS

    def test_higher_category_wins(self):
        flush = hand_of("2D 7D 9D JD KD")
        straight = hand_of("AS KC QH JS XS")
        assert compare(flush, straight) == Outcome.A_WINS
        assert compare(straight, flush) == Outcome.B_WINS

    def test_royal_flush_beats_wheel_straight_flush(self):
        royal = hand_of("AS KS QS JS XS")
        wheel = hand_of("5H 4H 3H 2H AH")
        assert compare(royal, wheel) == Outcome.A_WINS

    def test_wheel_loses_to_six_high_straight(self):
        wheel = hand_of("5S 4D 3C 2H AS")
        six_high = hand_of("6D 5C 4H 3S 2D")
        assert compare(wheel, six_high) == Outcome.B_WINS

    def test_ace_high_straight_beats_king_high(self):
        a = hand_of("AD KC QH JS XD")
        b = hand_of("KS QD JC XH 9S")
        assert compare(a, b) == Outcome.A_WINS

    def test_equal_straights_tie(self):
        a = hand_of("9S 8D 7C 6H 5S")
        b = hand_of("9D 8C 7H 6S 5D")
        assert compare(a, b) == Outcome.TIE

    def test_two_pair_second_pair_decides(self):
        a = hand_of("KS KD 4C 4H 9S")
        b = hand_of("KC KH 5D 5S 2C")
        assert compare(a, b) == Outcome.B_WINS

    def test_full_house_trips_decide(self):
        a = hand_of("4S 4D 4C 2H 2S")
        b = hand_of("3S 3D 3C AH AS")
        assert compare(a, b) == Outcome.A_WINS

    def test_flush_compared_card_by_card(self):
        a = hand_of("AD JD 9D 6D 3D")
        b = hand_of("AC JC 9C 6C 4C")
        assert compare(a, b) == Outcome.B_WINS

    def test_same_ranks_different_suits_tie(self):
        a = hand_of("KS QD 9C 7H 3S")
        b = hand_of("KD QC 9H 7S 3D")
        assert compare(a, b) == Outcome.TIE
        assert compare(b, a) == Outcome.TIE

    def test_shared_card_rejected(self):
        a = hand_of("AS KD 3C 7H 9S")
        b = hand_of("AS 2D 4C 6H 8S")
        with pytest.raises(SharedCardError):
            compare(a, b)

    def test_hand_cannot_be_compared_with_itself(self):
        a = hand_of("AS KD 3C 7H 9S")
        with pytest.raises(SharedCardError):
            compare(a, a)
