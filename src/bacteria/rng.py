"""
Random number source shared by every stochastic model.

All draws go through a ``numpy.random.Generator`` that is passed explicitly
into each model function, so a seeded generator replays a run exactly.
"""

import numpy as np


def make_rng(seed=None):
    """
    Build a random generator.

    Args:
        seed (int | np.random.Generator | None): Seed, existing generator,
            or None for an OS-seeded generator

    Returns:
        np.random.Generator: Generator to thread through the models
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def spawn_rngs(rng, n):
    """
    Derive independent child generators from a parent generator.

    Args:
        rng (np.random.Generator): Parent generator
        n (int): Number of child streams

    Returns:
        list: Independent np.random.Generator instances
    """
    return rng.spawn(n)


def new_identifier(rng, prefix="bacterium"):
    """
    Draw a unique-enough identifier from the generator.

    Args:
        rng (np.random.Generator): Random source
        prefix (str): Identifier prefix

    Returns:
        str: Identifier such as ``bacterium_3f9a...``
    """
    return f"{prefix}_{rng.bytes(8).hex()}"
