"""
Density-limited reproduction model.
"""

import math

import numpy as np

from .config import (
    DENSITY_FACTOR, YOUNG_AGE_LIMIT, OLD_AGE_LIMIT, YOUNG_AGE_MULTIPLIER,
    OLD_AGE_MULTIPLIER, OFFSPRING_FITNESS_VARIATION, OFFSPRING_SIZE_VARIATION,
    FITNESS_BOUNDS, SIZE_BOUNDS
)
from .rng import new_identifier
from .spatial import find_offspring_position


def calculate_carrying_capacity(petri_dish_size):
    """
    Maximum population the dish can sustain.

    Args:
        petri_dish_size (float): Dish diameter

    Returns:
        int: Carrying capacity, proportional to dish area
    """
    area = math.pi * (petri_dish_size / 2) ** 2
    return math.floor(area * DENSITY_FACTOR)


def age_multiplier(age):
    """Young and old bacteria reproduce less."""
    if age < YOUNG_AGE_LIMIT:
        return YOUNG_AGE_MULTIPLIER
    if age > OLD_AGE_LIMIT:
        return OLD_AGE_MULTIPLIER
    return 1.0


def reproduction_probability(bacterium, growth_rate, current_population, carrying_capacity):
    """
    Probability that a bacterium divides this generation.

    Args:
        bacterium (Bacterium): Candidate parent
        growth_rate (float): Base growth rate (0.0 to 1.0)
        current_population (int): Living population before reproduction
        carrying_capacity (int): Maximum sustainable population

    Returns:
        float: Reproduction probability
    """
    if carrying_capacity <= 0:
        return 0.0
    population_pressure = current_population / carrying_capacity
    base_probability = growth_rate * (1 - population_pressure)
    return base_probability * bacterium.fitness * age_multiplier(bacterium.age)


def should_reproduce(bacterium, growth_rate, current_population, carrying_capacity, rng):
    """
    Determine if a bacterium reproduces this generation.

    Args:
        bacterium (Bacterium): Candidate parent
        growth_rate (float): Base growth rate
        current_population (int): Living population before reproduction
        carrying_capacity (int): Maximum sustainable population
        rng (np.random.Generator): Random source

    Returns:
        bool: True if the bacterium reproduces
    """
    probability = reproduction_probability(bacterium, growth_rate, current_population, carrying_capacity)
    return rng.random() < probability


def reproduce(parent, parameters, rng):
    """
    Create an offspring near its parent.

    The offspring inherits resistance and color exactly; fitness and size
    vary slightly around the parent's values.

    Args:
        parent (Bacterium): Parent bacterium
        parameters (SimulationParameters): Run parameters (dish geometry)
        rng (np.random.Generator): Random source

    Returns:
        Bacterium: New offspring with age 0
    """
    x, y = find_offspring_position(parent, parameters.center, parameters.radius, rng)

    fitness = np.clip(
        parent.fitness + rng.uniform(-OFFSPRING_FITNESS_VARIATION, OFFSPRING_FITNESS_VARIATION),
        *FITNESS_BOUNDS
    )
    size = np.clip(
        parent.size + rng.uniform(-OFFSPRING_SIZE_VARIATION, OFFSPRING_SIZE_VARIATION),
        *SIZE_BOUNDS
    )

    return parent.replace(
        id=new_identifier(rng),
        x=x,
        y=y,
        fitness=float(fitness),
        size=float(size),
        age=0,
        generation=parent.generation + 1,
        parent_id=parent.id,
    )
