"""
Antibiotic survival and natural mortality models.
"""

import math

from .config import (
    KILL_CONSTANT, RESISTANT_FACTOR, SENSITIVE_FACTOR,
    AGE_DEATH_RATE_PER_GENERATION, MAX_AGE_DEATH_RATE, FITNESS_DEATH_RATE
)


def antibiotic_survival_probability(bacterium, concentration):
    """
    Probability that a bacterium survives antibiotic exposure.

    Exponential dose-response: S = exp(-k * C * (1 - resistance_factor)).
    Resistance scales down the effective dose, so resistant cells still
    carry some risk at high concentration.

    Args:
        bacterium (Bacterium): Bacterium exposed to the antibiotic
        concentration (float): Antibiotic concentration (0.0 to 1.0)

    Returns:
        float: Survival probability
    """
    if concentration == 0:
        return 1.0
    resistance_factor = RESISTANT_FACTOR if bacterium.is_resistant else SENSITIVE_FACTOR
    effective_concentration = concentration * (1 - resistance_factor)
    return math.exp(-KILL_CONSTANT * effective_concentration)


def survives_antibiotic(bacterium, concentration, rng):
    """
    Determine if a bacterium survives antibiotic exposure.

    No random draw is consumed when the concentration is zero.

    Args:
        bacterium (Bacterium): Bacterium exposed to the antibiotic
        concentration (float): Antibiotic concentration (0.0 to 1.0)
        rng (np.random.Generator): Random source

    Returns:
        bool: True if the bacterium survives
    """
    if concentration == 0:
        return True
    return rng.random() < antibiotic_survival_probability(bacterium, concentration)


def natural_death_rate(bacterium):
    """
    Per-generation probability of natural death.

    Args:
        bacterium (Bacterium): Bacterium to evaluate

    Returns:
        float: Death probability from age and fitness
    """
    age_death_rate = min(MAX_AGE_DEATH_RATE, bacterium.age * AGE_DEATH_RATE_PER_GENERATION)
    fitness_death_rate = (1 - bacterium.fitness) * FITNESS_DEATH_RATE
    return age_death_rate + fitness_death_rate


def survives_natural_death(bacterium, rng):
    """Determine if a bacterium survives natural death this generation."""
    return rng.random() > natural_death_rate(bacterium)
