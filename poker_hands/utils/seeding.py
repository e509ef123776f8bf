"""Seeding for replayable random deals.

A showdown against a dealt opponent is only worth reporting if it can be
dealt again. ``set_seed`` settles on a seed (drawing one when none is given),
seeds the global generators with it and hands it back so the caller can pass
it to a ``RandomDealer`` and log it.
"""

import random
from typing import Optional

import numpy as np

MAX_SEED = 2**32 - 1


def set_seed(seed: Optional[int] = None) -> int:
    """Pick the seed for a deal and seed Python's and NumPy's global RNGs.

    Args:
        seed: The seed to use. If None, one is drawn from Python's random
              module.

    Returns:
        The seed that was used, for ``RandomDealer(seed=...)`` and for the log.

    Example:
        >>> from poker_hands import set_seed
        >>> set_seed(42)
        42
        >>> dealer = RandomDealer(seed=set_seed())
    """
    if seed is None:
        seed = random.randint(0, MAX_SEED)

    random.seed(seed)
    np.random.seed(seed)

    return seed
