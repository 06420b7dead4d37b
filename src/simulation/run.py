"""
SimulationRun: lifecycle of one simulation around the generation engine.
"""

import logging
from enum import Enum

from bacteria.bacteria_population import initialize_population, advance_generation
from bacteria.rng import make_rng
from bacteria.statistics import calculate_statistics
from utils.metrics import MetricsTracker

from .errors import SimulationCompletedError, SimulationStateError
from .validation import validate_parameters

logger = logging.getLogger(__name__)


HISTORY_KEYS = (
    'totalPopulation', 'resistantCount', 'sensitiveCount', 'averageFitness',
    'mutationEvents', 'generations', 'antibioticDeaths', 'naturalDeaths',
    'reproductions',
)


class RunState(Enum):
    """Lifecycle state of a simulation run."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


class SimulationRun:
    """
    Holds the evolving state of one simulation.

    The run owns the current population, the generation counter and the
    statistics time series. Each ``step`` hands the population to the engine
    and replaces it with the result.

    Attributes:
        parameters (SimulationParameters): Validated run parameters
        population (tuple): Current population
        generation (int): Generations completed
        state (RunState): Lifecycle state
        history (dict): Statistics time series, one list per counter
        metrics (MetricsTracker): Summary metrics over the run
    """

    def __init__(self, parameters, seed=None, name=None, run_logger=None):
        """
        Initialize a run and its founder population.

        Args:
            parameters (dict | SimulationParameters): Raw or parsed parameters
            seed (int): Seed for a reproducible run
            name (str): Display name
            run_logger (utils.logger.Logger): Optional run logger

        Raises:
            ParameterValidationError: If the parameters are invalid
        """
        self.parameters = validate_parameters(parameters)
        self.seed = seed
        self.name = name or "simulation"
        self.run_logger = run_logger
        self.metrics = MetricsTracker()
        self._initialize()

        if self.run_logger is not None:
            self.run_logger.log_config(self.parameters.to_dict())

    def _initialize(self):
        self.rng = make_rng(self.seed)
        self.population = initialize_population(self.parameters, self.rng)
        self.generation = 0
        self.state = RunState.NOT_STARTED
        self.history = {key: [] for key in HISTORY_KEYS}
        self.metrics.reset()

    @property
    def is_completed(self):
        return self.generation >= self.parameters.duration

    def start(self):
        """
        Start the run.

        Raises:
            SimulationCompletedError: If the run already reached its duration
            SimulationStateError: If the run is not waiting to start
        """
        if self.state is RunState.COMPLETED:
            raise SimulationCompletedError(f"{self.name} has already reached its maximum duration")
        if self.state is not RunState.NOT_STARTED:
            raise SimulationStateError(f"cannot start {self.name} while {self.state.value}")
        self.state = RunState.RUNNING
        self._log_info(f"{self.name} started")

    def pause(self):
        """Pause a running simulation."""
        if self.state is not RunState.RUNNING:
            raise SimulationStateError(f"cannot pause {self.name} while {self.state.value}")
        self.state = RunState.PAUSED
        self._log_info(f"{self.name} paused at generation {self.generation}")

    def resume(self):
        """Resume a paused simulation."""
        if self.state is not RunState.PAUSED:
            raise SimulationStateError(f"cannot resume {self.name} while {self.state.value}")
        self.state = RunState.RUNNING
        self._log_info(f"{self.name} resumed at generation {self.generation}")

    def step(self):
        """
        Advance the run by one generation.

        Returns:
            StepStatistics: Statistics of the new generation

        Raises:
            SimulationCompletedError: If the run already reached its duration
        """
        if self.is_completed:
            message = f"rejected step for {self.name}: duration reached"
            logger.warning(message)
            if self.run_logger is not None:
                self.run_logger.warning(message)
            raise SimulationCompletedError(f"{self.name} has reached its maximum duration")

        result = advance_generation(self.population, self.parameters, self.rng)
        self.population = result.population
        self.generation += 1
        self._record(result.statistics)

        if self.is_completed:
            self.state = RunState.COMPLETED
            self._log_info(f"{self.name} completed after {self.generation} generations")

        return result.statistics

    def run(self, max_steps=None):
        """
        Step the simulation until it completes.

        Args:
            max_steps (int): Optional limit on the number of steps taken

        Returns:
            list: StepStatistics of every step taken
        """
        if self.state is RunState.NOT_STARTED:
            self.start()
        elif self.state is RunState.PAUSED:
            self.resume()

        results = []
        while not self.is_completed:
            if max_steps is not None and len(results) >= max_steps:
                break
            results.append(self.step())
        return results

    def reset(self):
        """Discard all progress and re-create the founder population."""
        self._initialize()
        self._log_info(f"{self.name} reset")

    def current_statistics(self):
        """Statistics of the current population without event counters."""
        return calculate_statistics(self.population)

    def summary(self):
        """
        Summarize the run.

        Returns:
            dict: Run state, progress and aggregate metrics
        """
        return {
            'name': self.name,
            'state': self.state.value,
            'generation': self.generation,
            'duration': self.parameters.duration,
            'population': len(self.population),
            'peak': self.metrics.get_peak_population(),
            'extinction_generation': self.metrics.extinction_generation(),
            **self.metrics.get_statistics(),
        }

    def _log_info(self, message):
        logger.info(message)
        if self.run_logger is not None:
            self.run_logger.info(message)

    def _record(self, statistics):
        record = statistics.to_dict()
        for key in HISTORY_KEYS:
            if key == 'generations':
                self.history[key].append(self.generation)
            else:
                self.history[key].append(record[key])

        self.metrics.record_step(self.generation, statistics)
        if self.run_logger is not None:
            self.run_logger.log_step(self.generation, statistics)

    def __repr__(self):
        return (f"SimulationRun(name={self.name!r}, state={self.state.value}, "
                f"generation={self.generation}/{self.parameters.duration}, population={len(self.population)})")
