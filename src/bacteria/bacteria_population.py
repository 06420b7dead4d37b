"""
Population initialization and the generation transition.
"""

import logging
from typing import NamedTuple, Tuple

import numpy as np

from .bacterium import Bacterium, color_for
from .config import (
    INITIAL_RESISTANCE_PROBABILITY, RESISTANT_BASE_FITNESS, SENSITIVE_BASE_FITNESS,
    INITIAL_FITNESS_NOISE, INITIAL_FITNESS_MIN, INITIAL_FITNESS_MAX, INITIAL_SIZE_RANGE
)
from .evolution import process_mutations
from .reproduction import calculate_carrying_capacity, should_reproduce, reproduce
from .rng import new_identifier
from .spatial import random_position_in_dish
from .statistics import StepStatistics, calculate_statistics
from .survival import survives_antibiotic, survives_natural_death

logger = logging.getLogger(__name__)


class StepResult(NamedTuple):
    """Outcome of one generation: the new population and its statistics."""

    population: Tuple[Bacterium, ...]
    statistics: StepStatistics


def initial_fitness(is_resistant, rng):
    """
    Sample founder fitness around a resistance-dependent base.

    Args:
        is_resistant (bool): Whether the founder is resistant
        rng (np.random.Generator): Random source

    Returns:
        float: Fitness in [INITIAL_FITNESS_MIN, INITIAL_FITNESS_MAX]
    """
    base = RESISTANT_BASE_FITNESS if is_resistant else SENSITIVE_BASE_FITNESS
    noise = rng.uniform(-INITIAL_FITNESS_NOISE, INITIAL_FITNESS_NOISE)
    return float(np.clip(base + noise, INITIAL_FITNESS_MIN, INITIAL_FITNESS_MAX))


def initialize_population(parameters, rng):
    """
    Create the founder population, placed uniformly inside the dish.

    Args:
        parameters (SimulationParameters): Run parameters
        rng (np.random.Generator): Random source

    Returns:
        tuple: Founder bacteria
    """
    population = []
    for _ in range(parameters.initial_population):
        x, y = random_position_in_dish(parameters.center, parameters.radius, rng)
        is_resistant = rng.random() < INITIAL_RESISTANCE_PROBABILITY
        population.append(Bacterium(
            id=new_identifier(rng),
            x=x,
            y=y,
            is_resistant=is_resistant,
            fitness=initial_fitness(is_resistant, rng),
            age=0,
            generation=0,
            parent_id=None,
            color=color_for(is_resistant),
            size=float(rng.uniform(*INITIAL_SIZE_RANGE)),
        ))
    return tuple(population)


def advance_generation(population, parameters, rng):
    """
    Advance a population by one generation.

    Stages run in order over the whole population: aging, antibiotic
    survival, natural death, reproduction, mutation, statistics. Each stage
    builds a new sequence from the previous one; the input is never modified.

    Args:
        population (Sequence[Bacterium]): Current population
        parameters (SimulationParameters): Run parameters
        rng (np.random.Generator): Random source

    Returns:
        StepResult: New population and its statistics
    """
    aged = [bacterium.aged() for bacterium in population]

    survivors = [b for b in aged if survives_antibiotic(b, parameters.antibiotic_concentration, rng)]
    antibiotic_deaths = len(aged) - len(survivors)

    living = [b for b in survivors if survives_natural_death(b, rng)]
    natural_deaths = len(survivors) - len(living)

    offspring = _reproduce_population(living, parameters, rng)

    mutated = []
    mutation_events = 0
    for bacterium in living + offspring:
        bacterium, has_mutated = process_mutations(bacterium, parameters.mutation_rate, rng)
        mutated.append(bacterium)
        if has_mutated:
            mutation_events += 1

    statistics = calculate_statistics(
        mutated,
        mutation_events=mutation_events,
        antibiotic_deaths=antibiotic_deaths,
        natural_deaths=natural_deaths,
        reproductions=len(offspring),
    )
    logger.debug(
        "generation step: %d -> %d (antibiotic deaths=%d, natural deaths=%d, births=%d, mutations=%d)",
        len(aged), statistics.total_population, antibiotic_deaths,
        natural_deaths, len(offspring), mutation_events,
    )
    return StepResult(tuple(mutated), statistics)


def _reproduce_population(living, parameters, rng):
    """
    Run the reproduction pass over the living population.

    The population size used for density pressure is captured once before the
    pass, so offspring born this generation do not lower the odds of later
    parents. The pass stops once parents plus offspring reach capacity.

    Returns:
        list: Offspring, in parent order
    """
    carrying_capacity = calculate_carrying_capacity(parameters.petri_dish_size)
    current_population = len(living)

    offspring = []
    if current_population >= carrying_capacity:
        return offspring

    for bacterium in living:
        if current_population + len(offspring) >= carrying_capacity:
            break
        if should_reproduce(bacterium, parameters.growth_rate, current_population, carrying_capacity, rng):
            offspring.append(reproduce(bacterium, parameters, rng))
    return offspring
