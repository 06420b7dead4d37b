"""
Mutation model for bacteria traits.

A single gate decides whether a bacterium mutates this generation. A
mutation event then rolls three independent sub-effects: a rare
resistance flip, a common fitness drift and a size drift.
"""

import numpy as np

from .bacterium import color_for
from .config import (
    RESISTANCE_FLIP_PROBABILITY, RESISTANCE_FITNESS_COST,
    FITNESS_DRIFT_PROBABILITY, FITNESS_DRIFT,
    SIZE_DRIFT_PROBABILITY, SIZE_DRIFT,
    FITNESS_BOUNDS, SIZE_BOUNDS
)


def flip_resistance(bacterium):
    """
    Toggle resistance, recolor, and apply the fitness trade-off.

    Gaining resistance costs RESISTANCE_FITNESS_COST fitness; losing it
    gives the same amount back.

    Args:
        bacterium (Bacterium): Bacterium to flip

    Returns:
        Bacterium: Flipped bacterium
    """
    is_resistant = not bacterium.is_resistant
    if is_resistant:
        fitness = bacterium.fitness - RESISTANCE_FITNESS_COST
    else:
        fitness = bacterium.fitness + RESISTANCE_FITNESS_COST
    return bacterium.replace(
        is_resistant=is_resistant,
        color=color_for(is_resistant),
        fitness=float(np.clip(fitness, *FITNESS_BOUNDS)),
    )


def process_mutations(bacterium, mutation_rate, rng):
    """
    Possibly mutate a bacterium.

    Args:
        bacterium (Bacterium): Bacterium to mutate
        mutation_rate (float): Per-bacterium mutation probability
        rng (np.random.Generator): Random source

    Returns:
        tuple: (bacterium, mutated) where ``mutated`` is True when at least
            one sub-effect fired. The input is returned unchanged otherwise.
    """
    if rng.random() > mutation_rate:
        return bacterium, False

    mutated = bacterium
    has_mutated = False

    if rng.random() < RESISTANCE_FLIP_PROBABILITY:
        mutated = flip_resistance(mutated)
        has_mutated = True

    if rng.random() < FITNESS_DRIFT_PROBABILITY:
        fitness = mutated.fitness + rng.uniform(-FITNESS_DRIFT, FITNESS_DRIFT)
        mutated = mutated.replace(fitness=float(np.clip(fitness, *FITNESS_BOUNDS)))
        has_mutated = True

    if rng.random() < SIZE_DRIFT_PROBABILITY:
        size = mutated.size + rng.uniform(-SIZE_DRIFT, SIZE_DRIFT)
        mutated = mutated.replace(size=float(np.clip(size, *SIZE_BOUNDS)))
        has_mutated = True

    return mutated, has_mutated
