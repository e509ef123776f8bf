"""Table-side helpers for poker hands.

This module provides:
- RandomDealer: Deals a random opponent hand from the remaining deck
"""

from .random_agent import (
    RandomDealer,
    create_random_dealer,
)

__all__ = [
    "RandomDealer",
    "create_random_dealer",
]
