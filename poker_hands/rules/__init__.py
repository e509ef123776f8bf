"""Poker rules implementations.

This module provides:
- Card and rank definitions (ranks.py)
- Hand classification and comparison (hands.py)
"""

from .ranks import (
    PokerRulesError,
    InvalidDomainError,
    Rank,
    Suit,
    Card,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    SUIT_GLYPHS,
    are_consecutive,
    get_rank_counts,
    create_standard_deck,
    sort_cards,
    compare_ranks,
)

from .hands import (
    HAND_SIZE,
    WHEEL,
    Category,
    CATEGORY_LABELS,
    Outcome,
    SignatureEntry,
    Hand,
    HandSizeError,
    DuplicateCardError,
    OverlappingCardsError,
    order_cards,
    compute_signature,
    signature_shape,
    is_wheel,
    is_flush,
    is_straight,
    is_straight_flush,
    classify,
    ensure_disjoint,
    compare_hands,
    can_beat,
    get_categories,
    describe_category_requirements,
    make_cards_from_pairs,
    make_cards_from_ranks,
    make_cards_from_string,
    make_hand_from_string,
    hands_from_pairs,
)

__all__ = [
    # Errors
    "PokerRulesError",
    "InvalidDomainError",
    "HandSizeError",
    "DuplicateCardError",
    "OverlappingCardsError",
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "SUIT_GLYPHS",
    "are_consecutive",
    "get_rank_counts",
    "create_standard_deck",
    "sort_cards",
    "compare_ranks",
    # Hands
    "HAND_SIZE",
    "WHEEL",
    "Category",
    "CATEGORY_LABELS",
    "Outcome",
    "SignatureEntry",
    "Hand",
    "order_cards",
    "compute_signature",
    "signature_shape",
    "is_wheel",
    "is_flush",
    "is_straight",
    "is_straight_flush",
    "classify",
    "ensure_disjoint",
    "compare_hands",
    "can_beat",
    "get_categories",
    "describe_category_requirements",
    "make_cards_from_pairs",
    "make_cards_from_ranks",
    "make_cards_from_string",
    "make_hand_from_string",
    "hands_from_pairs",
]
