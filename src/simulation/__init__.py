"""
Simulation run layer: parameter validation and run lifecycle around the engine.
"""

from .errors import (
    SimulationError, ParameterValidationError, SimulationStateError, SimulationCompletedError
)
from .validation import validate_parameters
from .run import RunState, SimulationRun

__all__ = [
    "SimulationError",
    "ParameterValidationError",
    "SimulationStateError",
    "SimulationCompletedError",
    "validate_parameters",
    "RunState",
    "SimulationRun",
]
