"""
Summary statistics for a population after one generation.
"""

from dataclasses import dataclass, asdict


_RECORD_FIELDS = {
    'total_population': 'totalPopulation',
    'resistant_count': 'resistantCount',
    'sensitive_count': 'sensitiveCount',
    'average_fitness': 'averageFitness',
    'mutation_events': 'mutationEvents',
    'antibiotic_deaths': 'antibioticDeaths',
    'natural_deaths': 'naturalDeaths',
    'reproductions': 'reproductions',
}


@dataclass(frozen=True)
class StepStatistics:
    """
    Counters derived from one generation transition.

    Population counts and average fitness describe the resulting population;
    event counters are carried over from the step that produced it.
    """

    total_population: int = 0
    resistant_count: int = 0
    sensitive_count: int = 0
    average_fitness: float = 0.0
    mutation_events: int = 0
    antibiotic_deaths: int = 0
    natural_deaths: int = 0
    reproductions: int = 0

    @property
    def resistant_fraction(self):
        """Share of the population that is resistant, 0 for an empty population."""
        if self.total_population == 0:
            return 0.0
        return self.resistant_count / self.total_population

    @property
    def total_deaths(self):
        return self.antibiotic_deaths + self.natural_deaths

    def as_dict(self):
        return asdict(self)

    def to_dict(self):
        """Return the statistics keyed by camelCase record names."""
        return {_RECORD_FIELDS[key]: value for key, value in asdict(self).items()}


def calculate_statistics(population, mutation_events=0, antibiotic_deaths=0,
                         natural_deaths=0, reproductions=0):
    """
    Reduce a population into summary statistics.

    Args:
        population (Sequence[Bacterium]): Population to summarize
        mutation_events (int): Mutation events during the step
        antibiotic_deaths (int): Deaths from the antibiotic during the step
        natural_deaths (int): Natural deaths during the step
        reproductions (int): Offspring produced during the step

    Returns:
        StepStatistics: Summary of the population
    """
    total = len(population)
    resistant = sum(1 for bacterium in population if bacterium.is_resistant)
    if total:
        average_fitness = sum(bacterium.fitness for bacterium in population) / total
    else:
        average_fitness = 0.0

    return StepStatistics(
        total_population=total,
        resistant_count=resistant,
        sensitive_count=total - resistant,
        average_fitness=average_fitness,
        mutation_events=mutation_events,
        antibiotic_deaths=antibiotic_deaths,
        natural_deaths=natural_deaths,
        reproductions=reproductions,
    )
