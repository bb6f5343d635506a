"""Random source construction for shuffling."""

import random


def create_random_source(seed: int | float | str | None = None) -> random.Random:
    """Create the random source used by the default shuffle.

    A seeded source is deterministic and independent of wall clock and of any
    previous calls. Without a seed the operating system's entropy pool is used.

    Args:
        seed: Optional seed value

    Returns:
        A random.Random instance
    """
    if seed is None:
        return random.SystemRandom()
    return random.Random(seed)
