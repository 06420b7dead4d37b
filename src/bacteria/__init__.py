"""
Bacteria module for the petri dish simulation.

This module contains the population-transition engine: survival, mortality,
reproduction and mutation models driven by an explicit random generator.
"""

from .bacterium import Bacterium
from .parameters import SimulationParameters
from .statistics import StepStatistics, calculate_statistics
from .bacteria_population import StepResult, initialize_population, advance_generation
from .rng import make_rng

__all__ = [
    "Bacterium",
    "SimulationParameters",
    "StepStatistics",
    "StepResult",
    "calculate_statistics",
    "initialize_population",
    "advance_generation",
    "make_rng",
]
