"""
Errors raised by the simulation run layer.
"""


class SimulationError(Exception):
    """Base class for simulation run errors."""


class ParameterValidationError(SimulationError, ValueError):
    """
    Raised when a parameter set falls outside its documented bounds.

    Attributes:
        errors (list): One message per invalid field
    """

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("Invalid simulation parameters: " + "; ".join(self.errors))


class SimulationStateError(SimulationError, RuntimeError):
    """Raised when an operation is not allowed in the run's current state."""


class SimulationCompletedError(SimulationStateError):
    """Raised when stepping a run that has reached its duration."""
