"""Random-source helpers shared by the genetic operators.

Every operator takes an explicit :class:`random.Random` so a run can be made
reproducible by seeding a single generator.
"""

import random


def make_rng(seed: int | None = None) -> random.Random:
    """Return a fresh generator, seeded when *seed* is given."""
    return random.Random(seed)


def coin_toss(rng: random.Random, probability: float = 0.5) -> bool:
    """Return True with the given probability.

    ``probability`` of 0 never succeeds and 1 always does, because
    ``rng.random()`` lies in ``[0, 1)``.
    """
    return rng.random() < probability
