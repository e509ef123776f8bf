"""Random opponent dealer.

This module provides a dealer that draws a random five-card hand from
whatever is left of a standard deck. It supplies the opponent when a player
only brings one hand to the table.
"""

import logging
from typing import Iterable, List, Optional

import numpy as np

from poker_hands.rules import HAND_SIZE, Card, Hand, create_standard_deck

logger = logging.getLogger(__name__)


class RandomDealer:
    """Dealer that draws cards uniformly at random without replacement.

    Attributes:
        name: Dealer name for identification
        rng: Random number generator
    """

    def __init__(self, seed: Optional[int] = None, name: str = "RandomDealer"):
        """Initialize the dealer.

        Args:
            seed: Random seed for reproducibility
            name: Dealer name for identification
        """
        self.name = name
        self._seed = seed
        self.rng = np.random.default_rng(seed)

    def deal(
        self,
        exclude: Iterable[Card] = (),
        rng: Optional[np.random.Generator] = None,
    ) -> List[Card]:
        """Draw five distinct cards that are not in ``exclude``.

        Args:
            exclude: Cards already on the table
            rng: Optional random generator (uses internal rng if not provided)

        Returns:
            Five cards in draw order

        Raises:
            ValueError: If fewer than five cards remain in the deck
        """
        if rng is None:
            rng = self.rng

        taken = set(exclude)
        remaining = [card for card in create_standard_deck() if card not in taken]

        if len(remaining) < HAND_SIZE:
            raise ValueError(f"Only {len(remaining)} cards left in the deck, need {HAND_SIZE}")

        picks = rng.choice(len(remaining), size=HAND_SIZE, replace=False)
        cards = [remaining[int(i)] for i in picks]
        logger.debug("%s dealt %s", self.name, " ".join(str(card) for card in cards))
        return cards

    def deal_hand(
        self,
        exclude: Iterable[Card] = (),
        rng: Optional[np.random.Generator] = None,
    ) -> Hand:
        """Draw a random hand that shares no card with ``exclude``."""
        return Hand(self.deal(exclude=exclude, rng=rng))

    def set_seed(self, seed: int) -> None:
        """Set a new random seed.

        Args:
            seed: New random seed
        """
        self._seed = seed
        self.rng = np.random.default_rng(seed)

    def __repr__(self) -> str:
        return f"RandomDealer(seed={self._seed}, name={self.name!r})"


def create_random_dealer(seed: Optional[int] = None) -> RandomDealer:
    """Factory function to create a random dealer.

    Args:
        seed: Random seed for reproducibility

    Returns:
        Configured RandomDealer instance
    """
    return RandomDealer(seed=seed)
