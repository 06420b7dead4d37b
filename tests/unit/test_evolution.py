"""
Unit tests for the mutation model.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import pytest
from bacteria.bacterium import Bacterium
from bacteria.config import RESISTANT_COLOR, SENSITIVE_COLOR
from bacteria.evolution import flip_resistance, process_mutations
from bacteria.rng import make_rng


def test_zero_rate_never_mutates(make_bacterium):
    """Test a mutation rate of 0 leaves every bacterium untouched."""
    rng = make_rng(0)
    bacterium = make_bacterium()

    for _ in range(500):
        result, mutated = process_mutations(bacterium, 0.0, rng)
        assert result is bacterium
        assert mutated is False


def test_gate_blocks_mutation(make_bacterium, scripted_rng):
    """Test a draw above the rate skips every sub-effect."""
    bacterium = make_bacterium()

    result, mutated = process_mutations(bacterium, 0.1, scripted_rng([0.2]))

    assert result is bacterium
    assert mutated is False


def test_draw_equal_to_rate_passes_gate(make_bacterium, scripted_rng):
    """Test a draw equal to the rate still mutates."""
    bacterium = make_bacterium(is_resistant=False)
    # gate (equal to rate), flip (fires), fitness drift (skips), size drift (skips)
    rng = scripted_rng([0.5, 0.0, 0.9, 0.9])

    result, mutated = process_mutations(bacterium, 0.5, rng)

    assert mutated is True
    assert result.is_resistant is True


def test_resistance_flip_costs_fitness(make_bacterium, scripted_rng):
    """Test gaining resistance recolors and costs fitness."""
    bacterium = make_bacterium(is_resistant=False, fitness=0.6)
    # gate, flip (fires), fitness drift (skips), size drift (skips)
    rng = scripted_rng([0.0, 0.05, 0.9, 0.9])

    result, mutated = process_mutations(bacterium, 1.0, rng)

    assert mutated is True
    assert result.is_resistant is True
    assert result.color == RESISTANT_COLOR
    assert result.fitness == pytest.approx(0.5)
    assert result.size == bacterium.size


def test_losing_resistance_restores_fitness():
    """Test losing resistance gains fitness, clamped to 1."""
    resistant = Bacterium(id="r", x=0.0, y=0.0, is_resistant=True, fitness=0.95, age=0,
                          generation=0, parent_id=None, color=RESISTANT_COLOR, size=3.0)

    flipped = flip_resistance(resistant)

    assert flipped.is_resistant is False
    assert flipped.color == SENSITIVE_COLOR
    assert flipped.fitness == 1.0


def test_fitness_and_size_drift(make_bacterium, scripted_rng):
    """Test drift sub-effects move fitness and size."""
    bacterium = make_bacterium(fitness=0.5, size=3.0)
    # gate, flip (skips), fitness drift (fires, u=0.75 -> +0.05),
    # size drift (fires, u=0.0 -> -0.25)
    rng = scripted_rng([0.0, 0.5, 0.1, 0.75, 0.2, 0.0])

    result, mutated = process_mutations(bacterium, 0.5, rng)

    assert mutated is True
    assert result.is_resistant is False
    assert result.fitness == pytest.approx(0.55)
    assert result.size == pytest.approx(2.75)


def test_event_without_sub_effect_not_counted(make_bacterium, scripted_rng):
    """Test a passed gate with no sub-effect is not a mutation."""
    bacterium = make_bacterium()
    rng = scripted_rng([0.0, 0.5, 0.9, 0.9])

    result, mutated = process_mutations(bacterium, 1.0, rng)

    assert mutated is False
    assert result == bacterium


def test_mutations_respect_bounds(make_bacterium):
    """Test repeated mutation keeps fitness and size in range."""
    rng = make_rng(7)
    bacterium = make_bacterium(fitness=0.99, size=9.9)

    for _ in range(1000):
        bacterium, _ = process_mutations(bacterium, 1.0, rng)
        assert 0.0 <= bacterium.fitness <= 1.0
        assert 1.0 <= bacterium.size <= 10.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
