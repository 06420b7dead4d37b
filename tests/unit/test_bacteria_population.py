"""
Unit tests for population initialization and the generation step.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import pytest
from bacteria.bacteria_population import initialize_population, advance_generation
from bacteria.config import RESISTANT_COLOR, SENSITIVE_COLOR
from bacteria.reproduction import calculate_carrying_capacity
from bacteria.rng import make_rng
from bacteria.spatial import is_inside_dish
from bacteria.statistics import StepStatistics, calculate_statistics


def test_population_initialization(make_parameters):
    """Test founders are placed in the dish with fresh lineage."""
    parameters = make_parameters(initial_population=200)

    population = initialize_population(parameters, make_rng(0))

    assert len(population) == 200
    assert len({b.id for b in population}) == 200
    for bacterium in population:
        assert is_inside_dish(bacterium.position, parameters.center, parameters.radius)
        assert bacterium.age == 0
        assert bacterium.generation == 0
        assert bacterium.parent_id is None
        assert 2.0 <= bacterium.size <= 5.0
        if bacterium.is_resistant:
            assert 0.3 <= bacterium.fitness <= 0.5
            assert bacterium.color == RESISTANT_COLOR
        else:
            assert 0.5 <= bacterium.fitness <= 0.7
            assert bacterium.color == SENSITIVE_COLOR


def test_initial_resistance_fraction(make_parameters):
    """Test roughly one founder in ten starts resistant."""
    population = initialize_population(make_parameters(initial_population=1000), make_rng(1))

    resistant = sum(b.is_resistant for b in population)

    assert 60 < resistant < 140


def test_initialization_is_seeded(make_parameters):
    """Test the same seed gives the same founders."""
    parameters = make_parameters()

    first = initialize_population(parameters, make_rng(42))
    second = initialize_population(parameters, make_rng(42))
    other = initialize_population(parameters, make_rng(43))

    assert first == second
    assert first != other


def test_empty_population(make_parameters):
    """Test an empty population steps to an empty population."""
    parameters = make_parameters(initial_population=0)
    population = initialize_population(parameters, make_rng(0))

    result = advance_generation(population, parameters, make_rng(0))

    assert population == ()
    assert result.population == ()
    assert result.statistics == StepStatistics()


@pytest.mark.parametrize("seed", range(5))
def test_step_conserves_bacteria(make_parameters, seed):
    """Test deaths, survivors and offspring account for every bacterium."""
    parameters = make_parameters(antibiotic_concentration=0.5, growth_rate=0.8)
    rng = make_rng(seed)
    population = initialize_population(parameters, rng)

    for _ in range(10):
        result = advance_generation(population, parameters, rng)
        stats = result.statistics
        survivors = stats.total_population - stats.reproductions

        assert len(result.population) == stats.total_population
        assert stats.antibiotic_deaths + stats.natural_deaths + survivors == len(population)
        population = result.population


def test_no_antibiotic_no_antibiotic_deaths(make_parameters):
    """Test a zero concentration never kills through the antibiotic."""
    parameters = make_parameters(antibiotic_concentration=0.0)
    rng = make_rng(3)
    population = initialize_population(parameters, rng)

    for _ in range(10):
        result = advance_generation(population, parameters, rng)
        assert result.statistics.antibiotic_deaths == 0
        population = result.population


def test_step_ages_survivors_and_leaves_input_untouched(make_parameters):
    """Test survivors age by one and the input population is not modified."""
    parameters = make_parameters(antibiotic_concentration=0.0, growth_rate=0.0, mutation_rate=0.0)
    rng = make_rng(5)
    population = initialize_population(parameters, rng)
    ages_before = {b.id: b.age for b in population}

    result = advance_generation(population, parameters, rng)

    assert all(b.age == 0 for b in population)
    for bacterium in result.population:
        assert bacterium.age == ages_before[bacterium.id] + 1


def test_offspring_follow_parents(make_parameters, make_bacterium):
    """Test offspring are appended after all parents with lineage set."""
    parameters = make_parameters(antibiotic_concentration=0.0, growth_rate=1.0,
                                 mutation_rate=0.0, petri_dish_size=400)
    population = tuple(make_bacterium(fitness=1.0, age=10, x=200.0, y=200.0) for _ in range(20))
    parent_ids = {b.id for b in population}

    result = advance_generation(population, parameters, make_rng(8))
    stats = result.statistics
    parents = result.population[:stats.total_population - stats.reproductions]
    offspring = result.population[stats.total_population - stats.reproductions:]

    assert stats.reproductions > 0
    assert all(b.id in parent_ids for b in parents)
    for child in offspring:
        assert child.parent_id in parent_ids
        assert child.age == 0
        assert child.generation == 1


def test_mutation_covers_parents_and_offspring(make_parameters, make_bacterium):
    """Test mutation runs over parents and offspring, one event per mutated bacterium."""
    population = tuple(make_bacterium(fitness=0.8, age=10, x=200.0, y=200.0) for _ in range(20))
    frozen = make_parameters(antibiotic_concentration=0.0, growth_rate=1.0, mutation_rate=0.0)
    mutating = make_parameters(antibiotic_concentration=0.0, growth_rate=1.0, mutation_rate=1.0)

    # Mutation is the last stage, so both runs agree position by position before it
    before = advance_generation(population, frozen, make_rng(8))
    after = advance_generation(population, mutating, make_rng(8))
    parent_count = before.statistics.total_population - before.statistics.reproductions
    changed = [index for index, (old, new) in enumerate(zip(before.population, after.population))
               if old != new]

    assert len(after.population) == len(before.population)
    assert after.statistics.reproductions == before.statistics.reproductions > 0
    assert after.statistics.mutation_events == len(changed)
    assert any(index < parent_count for index in changed)
    assert any(index >= parent_count for index in changed)
    assert before.statistics.mutation_events == 0


def test_statistics_follow_mutation(make_parameters, make_bacterium):
    """Test statistics describe the population after mutation."""
    parameters = make_parameters(antibiotic_concentration=0.0, growth_rate=1.0, mutation_rate=1.0)
    population = tuple(make_bacterium(fitness=0.8, age=10, x=200.0, y=200.0) for _ in range(20))

    result = advance_generation(population, parameters, make_rng(8))
    stats = result.statistics

    assert stats == calculate_statistics(
        result.population,
        mutation_events=stats.mutation_events,
        antibiotic_deaths=stats.antibiotic_deaths,
        natural_deaths=stats.natural_deaths,
        reproductions=stats.reproductions,
    )


def test_resistance_flip_counted_in_step(make_parameters, make_bacterium, scripted_rng):
    """Test a resistance flip during mutation shows up in the step counts."""
    parameters = make_parameters(antibiotic_concentration=0.0, growth_rate=0.0, mutation_rate=1.0)
    population = (make_bacterium(is_resistant=False, fitness=0.6, age=10),)
    # natural death (survives), reproduction (declines), gate, flip, fitness drift (skips),
    # size drift (skips)
    rng = scripted_rng([0.99, 0.5, 0.0, 0.0, 0.9, 0.9])

    result = advance_generation(population, parameters, rng)
    stats = result.statistics

    assert rng.draws == []
    assert result.population[0].is_resistant is True
    assert result.population[0].color == RESISTANT_COLOR
    assert stats.resistant_count == 1
    assert stats.sensitive_count == 0
    assert stats.mutation_events == 1
    assert stats.average_fitness == pytest.approx(0.5)


def test_reproduction_respects_carrying_capacity(make_parameters, make_bacterium):
    """Test reproduction never pushes the population above capacity."""
    parameters = make_parameters(antibiotic_concentration=0.0, growth_rate=1.0,
                                 mutation_rate=0.0, petri_dish_size=200)
    capacity = calculate_carrying_capacity(parameters.petri_dish_size)
    rng = make_rng(9)

    for _ in range(20):
        population = tuple(make_bacterium(fitness=1.0, age=10, x=100.0, y=100.0)
                           for _ in range(capacity - 2))
        result = advance_generation(population, parameters, rng)
        assert result.statistics.total_population <= capacity


def test_no_reproduction_at_capacity(make_parameters, make_bacterium):
    """Test the reproduction pass is skipped at or above capacity."""
    parameters = make_parameters(antibiotic_concentration=0.0, growth_rate=1.0,
                                 mutation_rate=0.0, petri_dish_size=200)
    population = tuple(make_bacterium(fitness=1.0, age=10, x=100.0, y=100.0) for _ in range(40))

    result = advance_generation(population, parameters, make_rng(10))

    assert result.statistics.reproductions == 0


def test_step_is_deterministic(make_parameters):
    """Test identical seeds and inputs give identical outputs."""
    parameters = make_parameters(antibiotic_concentration=0.3, mutation_rate=0.5, growth_rate=0.6)
    population = initialize_population(parameters, make_rng(11))

    first = advance_generation(population, parameters, make_rng(12))
    second = advance_generation(population, parameters, make_rng(12))

    assert first == second
    assert [b.to_dict() for b in first.population] == [b.to_dict() for b in second.population]


def test_bounds_hold_over_many_generations(make_parameters):
    """Test trait bounds hold after many stochastic generations."""
    parameters = make_parameters(antibiotic_concentration=0.1, mutation_rate=1.0, growth_rate=0.5)
    rng = make_rng(13)
    population = initialize_population(parameters, rng)

    for _ in range(30):
        population = advance_generation(population, parameters, rng).population
        ids = [b.id for b in population]
        assert len(ids) == len(set(ids))
        for bacterium in population:
            assert 0.0 <= bacterium.fitness <= 1.0
            assert 1.0 <= bacterium.size <= 10.0
            assert bacterium.age >= 0
            assert bacterium.generation >= 0


def test_single_founder_without_growth(make_parameters):
    """Test a lone founder with no growth never multiplies."""
    parameters = make_parameters(initial_population=1, growth_rate=0.0, antibiotic_concentration=0.0,
                                 mutation_rate=0.0, duration=5, petri_dish_size=200)
    rng = make_rng(14)
    population = initialize_population(parameters, rng)
    sizes = [len(population)]

    for _ in range(parameters.duration):
        result = advance_generation(population, parameters, rng)
        assert result.statistics.reproductions == 0
        population = result.population
        sizes.append(len(population))

    assert all(later <= earlier for earlier, later in zip(sizes, sizes[1:]))
    assert sizes[-1] in (0, 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
