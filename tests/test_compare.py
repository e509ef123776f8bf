"""Tests for hand comparison.

Test coverage:
- Different categories: higher category wins outright
- Straights and straight flushes: top card decides, wheel tops at five
- Other categories: first differing signature rank decides
- Identical rank multisets tie regardless of suits
- Overlapping cards between hands are rejected
- Antisymmetry over randomly dealt hands
"""

import pytest
from poker_hands.agents import RandomDealer
from poker_hands.rules import (
    Category,
    Outcome,
    OverlappingCardsError,
    HandSizeError,
    DuplicateCardError,
    can_beat,
    compare_hands,
    ensure_disjoint,
    hands_from_pairs,
    make_hand_from_string,
)


def compare(first: str, second: str) -> Outcome:
    return compare_hands(make_hand_from_string(first), make_hand_from_string(second))


class TestOutcome:
    """Test the Outcome enum."""

    def test_outcome_codes(self):
        assert Outcome.TIE == 0
        assert Outcome.SELF_WINS == 1
        assert Outcome.OTHER_WINS == 2

    def test_flipped(self):
        assert Outcome.SELF_WINS.flipped is Outcome.OTHER_WINS
        assert Outcome.OTHER_WINS.flipped is Outcome.SELF_WINS
        assert Outcome.TIE.flipped is Outcome.TIE


class TestDifferentCategories:
    """Test that the higher category always wins."""

    @pytest.mark.parametrize(
        "stronger, weaker",
        [
            ("9H 8H 7H 6H 5H", "AS AC AD AH KS"),  # straight flush > four of a kind
            ("2S 2C 2D 2H 3S", "AH AC AD KH KS"),  # four of a kind > full house
            ("3S 3C 3D 2H 2S", "AH KH QH JH 9H"),  # full house > flush
            ("7H 5H 4H 3H 2H", "AS KD QC JH XS"),  # flush > straight
            ("5S 4D 3C 2H AC", "AH AD AS KC QD"),  # wheel > three of a kind
            ("2S 2C 2D 4H 5S", "AH AD KS KC QD"),  # three of a kind > two pair
            ("3S 3C 4D 4H 5S", "AH AD KS QC JD"),  # two pair > one pair
            ("2S 2C 4D 5H 7S", "AH KD QS JC 9D"),  # one pair > high card
        ],
    )
    def test_higher_category_wins(self, stronger, weaker):
        assert compare(stronger, weaker) is Outcome.SELF_WINS
        assert compare(weaker, stronger) is Outcome.OTHER_WINS

    def test_can_beat(self):
        pair = make_hand_from_string("2S 2C 4D 5H 7S")
        high = make_hand_from_string("AH KD QS JC 9D")
        assert can_beat(pair, high)
        assert not can_beat(high, pair)


class TestStraights:
    """Test that straights compare by their top card."""

    def test_six_high_beats_wheel(self):
        assert compare("5S 4D 3C 2H AC", "6S 5D 4C 3H 2D") is Outcome.OTHER_WINS

    def test_broadway_beats_king_high(self):
        assert compare("AS KD QC JH XS", "KH QD JC XD 9S") is Outcome.SELF_WINS

    def test_wheel_is_lowest_straight(self):
        wheel = make_hand_from_string("5S 4D 3C 2H AC")
        assert wheel.category == Category.STRAIGHT
        assert wheel.top_rank < make_hand_from_string("6H 5D 4C 3S 2D").top_rank

    def test_equal_straights_tie(self):
        assert compare("9S 8D 7C 6H 5S", "9H 8C 7D 6S 5D") is Outcome.TIE

    def test_equal_wheels_tie(self):
        assert compare("5S 4D 3C 2H AC", "AS 2D 3H 4C 5D") is Outcome.TIE

    def test_straight_flush_by_top_card(self):
        assert compare("AD 2D 3D 4D 5D", "6S 5S 4S 3S 2S") is Outcome.OTHER_WINS
        assert compare("AS KS QS JS XS", "KH QH JH XH 9H") is Outcome.SELF_WINS


class TestSignatureTieBreak:
    """Test that the first differing signature rank decides."""

    def test_one_pair_kicker_decides(self):
        assert compare("8C 8D 6S 4D 5S", "8S 7D 8H 4S 5D") is Outcome.OTHER_WINS

    def test_higher_pair_wins(self):
        assert compare("9C 9D 2S 3D 4S", "8S 8H AD KS QD") is Outcome.SELF_WINS

    def test_two_pair_top_pair_decides(self):
        assert compare("KS KD 4C 4H 9S", "QS QD JC JH AD") is Outcome.SELF_WINS

    def test_two_pair_kicker_decides(self):
        assert compare("KS KD 4C 4H 9S", "KH KC 4S 4D 8C") is Outcome.SELF_WINS

    def test_full_house_trips_decide(self):
        assert compare("3S 3D 3C KH KS", "2S 2D 2C AH AS") is Outcome.SELF_WINS

    def test_four_of_a_kind_kicker_decides(self):
        assert compare("9S 9D 9C 9H 2S", "AS AD AC AH 3S") is Outcome.OTHER_WINS

    def test_flush_last_card_decides(self):
        assert compare("AH JH 9H 6H 2H", "AS JS 9S 6S 3S") is Outcome.OTHER_WINS

    def test_high_card_second_card_decides(self):
        assert compare("AS QD 9C 7H 3S", "AH KC 4D 3D 2C") is Outcome.OTHER_WINS


class TestTies:
    """Test that identical rank multisets tie, suits never break ties."""

    def test_high_card_different_suits_tie(self):
        assert compare("AS KD 9C 7H 3S", "AH KC 9D 7S 3D") is Outcome.TIE

    def test_flush_of_different_suits_tie(self):
        assert compare("KH JH 9H 6H 3H", "KC JC 9C 6C 3C") is Outcome.TIE

    def test_two_pair_different_suits_tie(self):
        assert compare("KS KD 4C 4H 9S", "KH KC 4S 4D 9D") is Outcome.TIE

    def test_hand_against_itself_ties(self):
        hand = make_hand_from_string("QS QD 9C 9H 3S")
        assert hand.compare(hand) is Outcome.TIE
        assert hand.compare(make_hand_from_string("3S 9H 9C QD QS")) is Outcome.TIE

    @pytest.mark.parametrize(
        "first, second",
        [
            ("QS QD 9C 9H 3S", "QD QS 9H 9C 3S"),
            ("7H 7S 7C KD 2S", "2S KD 7C 7H 7S"),
            ("4D 4C 4S JH JC", "JC 4S JH 4C 4D"),
        ],
    )
    def test_same_cards_in_another_order_tie(self, first, second):
        assert compare(first, second) is Outcome.TIE
        assert compare(second, first) is Outcome.TIE


class TestOverlappingCards:
    """Test that hands sharing a card cannot be compared."""

    def test_shared_card_rejected(self):
        with pytest.raises(OverlappingCardsError):
            compare("2S 3S 4S 5S 6S", "2S 7D 8H 9C XS")

    def test_message_lists_shared_cards(self):
        with pytest.raises(OverlappingCardsError, match="3S 2S"):
            compare("2S 3S 4S 5S 6S", "3S 2S 8H 9C XS")

    def test_ensure_disjoint_accepts_disjoint_hands(self):
        ensure_disjoint(make_hand_from_string("2S 3S 4S 5S 6S"), make_hand_from_string("2D 3D 4D 5D 6D"))

    def test_hands_from_ten_pairs_rejects_overlap(self):
        pairs = [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (0, 0), (5, 2), (6, 3), (7, 1), (8, 0)]
        with pytest.raises(OverlappingCardsError):
            hands_from_pairs(pairs)


class TestHandsFromPairs:
    """Test the 5 or 10 pair constructor contract."""

    def test_five_pairs_make_one_hand(self):
        hands = hands_from_pairs([(12, 0), (12, 1), (12, 2), (12, 3), (0, 0)])
        assert len(hands) == 1
        assert hands[0].category == Category.FOUR_OF_A_KIND

    def test_ten_pairs_make_two_hands(self):
        pairs = [(6, 1), (6, 2), (4, 0), (2, 2), (3, 0), (6, 0), (5, 2), (6, 3), (2, 0), (3, 2)]
        first, second = hands_from_pairs(pairs)
        assert first.category == second.category == Category.ONE_PAIR
        assert first.compare(second) is Outcome.OTHER_WINS

    @pytest.mark.parametrize("count", [0, 4, 6, 9, 11])
    def test_other_lengths_rejected(self, count):
        pairs = [(rank, 0) for rank in range(count)]
        with pytest.raises(HandSizeError):
            hands_from_pairs(pairs)

    def test_duplicate_inside_hand_rejected(self):
        with pytest.raises(DuplicateCardError):
            hands_from_pairs([(0, 0), (0, 0), (1, 2), (2, 1), (3, 3)])


class TestAntisymmetry:
    """Compare randomly dealt hands both ways."""

    @pytest.mark.parametrize("seed", range(200))
    def test_compare_is_antisymmetric(self, seed):
        dealer = RandomDealer(seed=seed)
        first = dealer.deal_hand()
        second = dealer.deal_hand(exclude=first.cards)

        forward = first.compare(second)
        backward = second.compare(first)

        assert backward is forward.flipped
        assert (forward is Outcome.TIE) == (backward is Outcome.TIE)
