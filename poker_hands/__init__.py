"""Poker Hands - five-card poker hand classification and comparison.

A small rules engine that classifies five-card hands into the nine standard
categories and decides the winner between two hands.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.utils.seeding import set_seed

__all__ = ["__version__", "set_seed"]
