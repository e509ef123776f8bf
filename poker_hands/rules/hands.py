"""Hand classification, signatures, and comparison.

Hand categories (low to high):
- High card, One pair, Two pair, Three of a kind, Straight,
  Flush, Full house, Four of a kind, Straight flush

Every hand is summarised by its signature: the count of each distinct rank,
paired with that rank, ordered by count then rank (both descending):

    Straight flush   11111        Three of a kind  311
    Four of a kind   41           Two pair         221
    Full house       32           One pair         2111
    Flush            11111        High card        11111
    Straight         11111

The signature picks the category (the 11111 hands are told apart by suit and
rank adjacency) and also breaks ties inside a category: the first position
where the signature ranks differ decides the winner, e.g.

    8C 8D 6S 4D 5S -> 2-8 1-6 1-5 1-4
    8S 7D 8H 4S 5D -> 2-8 1-7 1-5 1-4    (second hand wins on 7 vs 6)

Straights compare by their top card; the wheel (5-4-3-2-A) is stored with the
ace last so its top card is the five. Hands whose rank multisets are identical
tie: suits never break ties.
"""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .ranks import (
    Card,
    PokerRulesError,
    Rank,
    Suit,
    RANK_SYMBOLS,
    are_consecutive,
    compare_ranks,
    get_rank_counts,
    sort_cards,
)

logger = logging.getLogger(__name__)

# Number of cards in a hand
HAND_SIZE = 5

# Wheel ranks before and after normalisation
ACE_HIGH_WHEEL = (Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO)
WHEEL = (Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE)


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

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Full House'."""
        return CATEGORY_LABELS[self]

    def __str__(self) -> str:
        return self.label


CATEGORY_LABELS = {
    Category.HIGH_CARD: "High Card",
    Category.ONE_PAIR: "One Pair",
    Category.TWO_PAIR: "Two Pair",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.STRAIGHT: "Straight",
    Category.FLUSH: "Flush",
    Category.FULL_HOUSE: "Full House",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.STRAIGHT_FLUSH: "Straight Flush",
}

# Categories decided by the top card instead of the signature
STRAIGHT_CATEGORIES = frozenset([Category.STRAIGHT, Category.STRAIGHT_FLUSH])


class Outcome(IntEnum):
    """Result of comparing a hand against another one."""

    TIE = 0
    SELF_WINS = 1
    OTHER_WINS = 2

    @property
    def flipped(self) -> "Outcome":
        """The same result seen from the other hand."""
        if self is Outcome.SELF_WINS:
            return Outcome.OTHER_WINS
        if self is Outcome.OTHER_WINS:
            return Outcome.SELF_WINS
        return Outcome.TIE


class SignatureEntry(NamedTuple):
    """One distinct rank of a hand and how many cards carry it."""

    frequency: int
    rank: Rank

    def __str__(self) -> str:
        return f"{self.frequency}-{RANK_SYMBOLS[self.rank]}"


class HandSizeError(PokerRulesError):
    """Raised when a hand is not made of exactly five cards."""

    pass


class DuplicateCardError(PokerRulesError):
    """Raised when the same card appears twice in one hand."""

    pass


class OverlappingCardsError(PokerRulesError):
    """Raised when two compared hands share a card."""

    pass


def order_cards(cards: Iterable[Card]) -> Tuple[Card, ...]:
    """Sort cards high to low, moving the ace of a wheel to the end.

    Args:
        cards: Five cards in any order

    Returns:
        Tuple of cards ordered by rank descending, or [5, 4, 3, 2, A] for
        the wheel
    """
    ordered = sort_cards(cards)
    if tuple(card.rank for card in ordered) == ACE_HIGH_WHEEL:
        ordered = ordered[1:] + ordered[:1]
    return tuple(ordered)


def compute_signature(cards: Iterable[Card]) -> Tuple[SignatureEntry, ...]:
    """Build the (count, rank) signature of a set of cards.

    Args:
        cards: Card objects

    Returns:
        One entry per distinct rank, ordered by count descending and, for
        equal counts, by rank descending
    """
    rank_counts = get_rank_counts(cards)
    entries = [SignatureEntry(frequency=count, rank=rank) for rank, count in rank_counts.items()]
    entries.sort(key=lambda entry: (entry.frequency, entry.rank), reverse=True)
    return tuple(entries)


def signature_shape(signature: Sequence[SignatureEntry]) -> Tuple[int, ...]:
    """Return only the counts of a signature, e.g. (2, 1, 1, 1)."""
    return tuple(entry.frequency for entry in signature)


def is_wheel(cards: Sequence[Card]) -> bool:
    """Check if ordered cards are the canonical wheel 5-4-3-2-A."""
    return tuple(card.rank for card in cards) == WHEEL


def is_flush(cards: Sequence[Card]) -> bool:
    """Check if all cards share one suit."""
    return all(card.same_suit(cards[0]) for card in cards)


def is_straight(cards: Sequence[Card]) -> bool:
    """Check if ordered cards form a straight.

    Each card must be exactly one rank above the next, or the cards must be
    the canonical wheel.

    Args:
        cards: Cards as returned by order_cards

    Returns:
        True for a straight
    """
    if is_wheel(cards):
        return True
    return are_consecutive([card.rank for card in cards])


def is_straight_flush(cards: Sequence[Card]) -> bool:
    """Check if ordered cards are both a straight and a flush."""
    return is_straight(cards) and is_flush(cards)


def classify(cards: Sequence[Card], signature: Sequence[SignatureEntry]) -> Category:
    """Find the category of a hand.

    Higher categories are tested first so that the shared 11111 signature
    resolves to straight flush, flush or straight before high card.

    Args:
        cards: Cards as returned by order_cards
        signature: Signature as returned by compute_signature

    Returns:
        The hand category
    """
    shape = signature_shape(signature)

    if is_straight_flush(cards):
        return Category.STRAIGHT_FLUSH
    if shape == (4, 1):
        return Category.FOUR_OF_A_KIND
    if shape == (3, 2):
        return Category.FULL_HOUSE
    if is_flush(cards):
        return Category.FLUSH
    if is_straight(cards):
        return Category.STRAIGHT
    if shape == (3, 1, 1):
        return Category.THREE_OF_A_KIND
    if shape == (2, 2, 1):
        return Category.TWO_PAIR
    if shape == (2, 1, 1, 1):
        return Category.ONE_PAIR
    return Category.HIGH_CARD


def _find_duplicate(cards: Sequence[Card]) -> Optional[Card]:
    seen = set()
    for card in cards:
        if card in seen:
            return card
        seen.add(card)
    return None


@dataclass(frozen=True)
class Hand:
    """A classified five-card poker hand.

    The hand is validated, ordered and classified once, when it is built.

    Attributes:
        cards: The five cards, highest rank first (wheel stored as 5-4-3-2-A)
        signature: (count, rank) entries, count then rank descending
        category: The hand category

    Raises:
        HandSizeError: If not given exactly five cards
        DuplicateCardError: If a card appears twice
    """

    cards: Tuple[Card, ...]
    signature: Tuple[SignatureEntry, ...] = field(init=False)
    category: Category = field(init=False)

    def __post_init__(self) -> None:
        cards = tuple(self.cards)
        if len(cards) != HAND_SIZE:
            raise HandSizeError(f"A hand needs exactly {HAND_SIZE} cards, got {len(cards)}")
        duplicate = _find_duplicate(cards)
        if duplicate is not None:
            raise DuplicateCardError(f"Duplicate card in hand: {duplicate}")

        ordered = order_cards(cards)
        signature = compute_signature(ordered)
        category = classify(ordered, signature)

        object.__setattr__(self, "cards", ordered)
        object.__setattr__(self, "signature", signature)
        object.__setattr__(self, "category", category)
        logger.debug("Classified %s as %s (%s)", self.cards_str, category.name, self.signature_str)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return f"{self.cards_str} : {self.category}"

    @property
    def cards_str(self) -> str:
        """Cards in text form, e.g. '8C 8D 6S 5S 4D'."""
        return " ".join(str(card) for card in self.cards)

    @property
    def signature_str(self) -> str:
        """Signature in text form, e.g. '2-8 1-6 1-5 1-4'."""
        return " ".join(str(entry) for entry in self.signature)

    @property
    def top_rank(self) -> Rank:
        """Rank of the first card; the five for a wheel."""
        return self.cards[0].rank

    def shares_cards_with(self, other: "Hand") -> List[Card]:
        """Cards present in both hands, in this hand's order."""
        theirs = set(other.cards)
        return [card for card in self.cards if card in theirs]

    def compare(self, other: "Hand") -> Outcome:
        """Decide the winner between this hand and another one.

        A hand compared with itself (the same five cards) ties; any other
        pair of hands must be disjoint.

        Args:
            other: The opposing hand

        Returns:
            SELF_WINS, OTHER_WINS or TIE

        Raises:
            OverlappingCardsError: If both hands hold the same card
        """
        if self == other:
            return Outcome.TIE
        ensure_disjoint(self, other)

        if self.category != other.category:
            outcome = Outcome.SELF_WINS if self.category > other.category else Outcome.OTHER_WINS
        elif self.category in STRAIGHT_CATEGORIES:
            outcome = _outcome_from_difference(compare_ranks(self.top_rank, other.top_rank))
        else:
            outcome = Outcome.TIE
            for mine, theirs in zip(self.signature, other.signature):
                difference = compare_ranks(mine.rank, theirs.rank)
                if difference:
                    outcome = _outcome_from_difference(difference)
                    break

        logger.debug("Compared [%s] with [%s]: %s", self, other, outcome.name)
        return outcome


def ensure_disjoint(hand1: Hand, hand2: Hand) -> None:
    """Raise OverlappingCardsError if the two hands share any card."""
    shared = hand1.shares_cards_with(hand2)
    if shared:
        shared_str = " ".join(str(card) for card in shared)
        raise OverlappingCardsError(f"Cards present in both hands: {shared_str}")


def _outcome_from_difference(difference: int) -> Outcome:
    if difference > 0:
        return Outcome.SELF_WINS
    if difference < 0:
        return Outcome.OTHER_WINS
    return Outcome.TIE


def compare_hands(hand1: Hand, hand2: Hand) -> Outcome:
    """Compare two hands.

    Args:
        hand1: First hand
        hand2: Second hand

    Returns:
        SELF_WINS if hand1 wins, OTHER_WINS if hand2 wins, TIE otherwise

    Raises:
        OverlappingCardsError: If the hands share a card
    """
    return hand1.compare(hand2)


def can_beat(hand1: Hand, hand2: Hand) -> bool:
    """Check if hand1 strictly beats hand2."""
    return hand1.compare(hand2) is Outcome.SELF_WINS


def get_categories() -> List[Category]:
    """Get all categories, weakest first."""
    return list(Category)


def describe_category_requirements() -> Dict[Category, str]:
    """Get a description of requirements for each category.

    Returns:
        Dict mapping Category to description string
    """
    return {
        Category.HIGH_CARD: "Five distinct ranks, not a straight, mixed suits",
        Category.ONE_PAIR: "Two cards of one rank + three unmatched cards",
        Category.TWO_PAIR: "Two cards of one rank + two of another + one unmatched card",
        Category.THREE_OF_A_KIND: "Three cards of one rank + two unmatched cards",
        Category.STRAIGHT: "Five consecutive ranks, mixed suits (A-2-3-4-5 counts)",
        Category.FLUSH: "Five cards of one suit, not consecutive",
        Category.FULL_HOUSE: "Three cards of one rank + two of another",
        Category.FOUR_OF_A_KIND: "Four cards of one rank + one unmatched card",
        Category.STRAIGHT_FLUSH: "Five consecutive ranks of one suit",
    }


# Helper functions for building cards and hands


def make_cards_from_pairs(pairs: Iterable[Tuple[int, int]]) -> List[Card]:
    """Create cards from (rank, suit) pairs.

    Args:
        pairs: Iterable of (Rank, Suit) pairs; plain ints are accepted

    Returns:
        List of Card objects

    Raises:
        InvalidDomainError: If a rank or suit is out of range
    """
    return [Card(rank=rank, suit=suit) for rank, suit in pairs]


def make_cards_from_ranks(ranks: List[Rank], suits: Optional[List[Suit]] = None) -> List[Card]:
    """Create cards from a list of ranks and optional suits.

    If suits not provided, cycles through suits for variety, so five ranks
    never form a flush.

    Args:
        ranks: List of Rank values
        suits: Optional list of Suit values (must match length of ranks if provided)

    Returns:
        List of Card objects
    """
    if suits is None:
        suits = [Suit(i % 4) for i in range(len(ranks))]

    if len(ranks) != len(suits):
        raise ValueError("ranks and suits must have same length")

    return [Card(rank=r, suit=s) for r, s in zip(ranks, suits)]


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "8C 8D 6S 4D 5S".

    Args:
        s: Whitespace-separated card strings

    Returns:
        List of Card objects
    """
    return [Card.from_string(cs) for cs in s.split()]


def make_hand_from_string(s: str) -> Hand:
    """Build a hand from a string like "8C 8D 6S 4D 5S"."""
    return Hand(make_cards_from_string(s))


def hands_from_pairs(pairs: Sequence[Tuple[int, int]]) -> List[Hand]:
    """Build one or two hands from 5 or 10 (rank, suit) pairs.

    Args:
        pairs: Five pairs for one hand, or ten pairs for two hands

    Returns:
        List with one or two Hand objects

    Raises:
        HandSizeError: If not given 5 or 10 pairs
        OverlappingCardsError: If two hands share a card
    """
    cards = make_cards_from_pairs(pairs)
    if len(cards) not in (HAND_SIZE, 2 * HAND_SIZE):
        raise HandSizeError(f"Expected {HAND_SIZE} or {2 * HAND_SIZE} cards, got {len(cards)}")

    hands = [Hand(cards[i : i + HAND_SIZE]) for i in range(0, len(cards), HAND_SIZE)]
    if len(hands) == 2:
        ensure_disjoint(hands[0], hands[1])
    return hands
