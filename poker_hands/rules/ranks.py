"""Card rank definitions and utilities.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

The ace only plays low inside the wheel straight (5-4-3-2-A); that case is
handled by hand classification, not by a second ace value.

This module provides:
- Rank and Suit enumerations
- Card representation and text parsing
- Deck and rank-counting helpers
"""

import operator
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterable, List, Type, TypeVar


class PokerRulesError(ValueError):
    """Base class for contract violations detected by the rules engine."""

    pass


class InvalidDomainError(PokerRulesError):
    """Raised when a rank or suit lies outside its enumeration."""

    pass


class Rank(IntEnum):
    """Card ranks ordered by strength (higher value = stronger rank).

    Order: A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2
    """

    TWO = 0  # Lowest rank
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
    ACE = 12  # Highest rank (low only in the wheel)


class Suit(IntEnum):
    """Card suits. Values only identify the suit; suits never rank hands."""

    SPADE = 0
    CLUB = 1
    DIAMOND = 2
    HEART = 3


# Rank characters for text form (X = ten)
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "X",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit characters for text form
SUIT_SYMBOLS = {
    Suit.SPADE: "S",
    Suit.CLUB: "C",
    Suit.DIAMOND: "D",
    Suit.HEART: "H",
}

# Suit glyphs for terminal display
SUIT_GLYPHS = {
    Suit.SPADE: "♠",
    Suit.CLUB: "♣",
    Suit.DIAMOND: "♦",
    Suit.HEART: "♥",
}

# Symbol to rank/suit mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK["10"] = Rank.TEN
SYMBOL_TO_RANK["T"] = Rank.TEN
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({v: k for k, v in SUIT_GLYPHS.items()})

_E = TypeVar("_E", bound=IntEnum)


def _coerce(enum_cls: Type[_E], value: object, what: str) -> _E:
    """Return ``value`` as a member of ``enum_cls`` or raise InvalidDomainError.

    Integers inside the enumeration are accepted, including NumPy integer
    scalars. Bools, members of other enums and non-integers are rejected.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, (bool, Enum)):
        raise InvalidDomainError(f"Invalid {what}: {value!r}")
    try:
        return enum_cls(operator.index(value))
    except (TypeError, ValueError):
        raise InvalidDomainError(f"Invalid {what}: {value!r}") from None


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit.

    Two cards are equal iff both rank and suit match. Cards expose no
    ordering; hands sort them by rank explicitly. Immutable and hashable for
    use in sets.
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        object.__setattr__(self, "rank", _coerce(Rank, self.rank, "rank"))
        object.__setattr__(self, "suit", _coerce(Suit, self.suit, "suit"))

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    def same_rank(self, other: "Card") -> bool:
        """Whether both cards carry the same rank."""
        return self.rank == other.rank

    def same_suit(self, other: "Card") -> bool:
        """Whether both cards carry the same suit."""
        return self.suit == other.suit

    def equals(self, other: "Card") -> bool:
        """Whether both cards are the same physical card."""
        return self.same_rank(other) and self.same_suit(other)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from string like 'XC', '8d' or '10♠'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            InvalidDomainError: If string cannot be parsed
        """
        s = s.strip()
        if len(s) < 2:
            raise InvalidDomainError(f"Invalid card: {s!r}")

        suit_char = s[-1].upper()
        rank_str = s[:-1].upper()

        if suit_char not in SYMBOL_TO_SUIT:
            raise InvalidDomainError(f"Invalid suit character: {s[-1]!r} in {s!r}")
        if rank_str not in SYMBOL_TO_RANK:
            raise InvalidDomainError(f"Invalid rank: {s[:-1]!r} in {s!r}")

        return cls(rank=SYMBOL_TO_RANK[rank_str], suit=SYMBOL_TO_SUIT[suit_char])


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a list of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping Rank to count
    """
    counts: Dict[Rank, int] = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts


def are_consecutive(ranks: List[Rank]) -> bool:
    """Check if a list of ranks sorted high to low steps down by exactly one.

    Args:
        ranks: Ranks in descending order

    Returns:
        True if every rank is one above the next
    """
    for i in range(1, len(ranks)):
        if int(ranks[i - 1]) != int(ranks[i]) + 1:
            return False
    return True


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


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by rank, highest first.

    Cards of equal rank are ordered by suit (S C D H), so the same five
    cards always come out in the same order.

    Args:
        cards: Card objects

    Returns:
        New sorted list of cards
    """
    return sorted(cards, key=lambda card: (-card.rank, card.suit))


def compare_ranks(rank1: Rank, rank2: Rank) -> int:
    """Compare two ranks.

    Args:
        rank1: First rank
        rank2: Second rank

    Returns:
        Positive if rank1 > rank2, negative if rank1 < rank2, zero if equal
    """
    return int(rank1) - int(rank2)
