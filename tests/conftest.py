"""
Shared fixtures for the test suite.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bacteria.bacterium import Bacterium, color_for
from bacteria.parameters import SimulationParameters


class ScriptedRng:
    """
    Stand-in for np.random.Generator that returns scripted draws.

    ``uniform(low, high)`` consumes one scripted value u and returns
    ``low + u * (high - low)``.
    """

    def __init__(self, draws):
        self.draws = list(draws)

    def random(self):
        if not self.draws:
            raise AssertionError("unexpected random draw")
        return self.draws.pop(0)

    def uniform(self, low, high):
        return low + self.random() * (high - low)

    def bytes(self, n):
        return b"\x00" * n


@pytest.fixture
def scripted_rng():
    """Factory for generators with scripted draws."""
    return ScriptedRng


@pytest.fixture
def make_bacterium():
    """Factory for bacteria with sensible defaults."""
    counter = iter(range(1_000_000))

    def factory(**overrides):
        is_resistant = overrides.get('is_resistant', False)
        values = {
            'id': f"test_{next(counter)}",
            'x': 100.0,
            'y': 100.0,
            'is_resistant': is_resistant,
            'fitness': 0.6,
            'age': 10,
            'generation': 0,
            'parent_id': None,
            'color': color_for(is_resistant),
            'size': 3.0,
        }
        values.update(overrides)
        return Bacterium(**values)

    return factory


@pytest.fixture
def make_parameters():
    """Factory for parameter sets with sensible defaults."""

    def factory(**overrides):
        values = {
            'initial_population': 50,
            'growth_rate': 0.3,
            'antibiotic_concentration': 0.2,
            'mutation_rate': 0.05,
            'duration': 20,
            'petri_dish_size': 400,
        }
        values.update(overrides)
        return SimulationParameters(**values)

    return factory
