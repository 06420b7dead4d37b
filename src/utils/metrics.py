"""
Metrics tracking for simulation runs.
"""

import numpy as np


class MetricsTracker:
    """
    Track per-generation statistics of a simulation run and summarize them.
    """

    def __init__(self):
        """Initialize metrics tracker."""
        self.reset()

    def reset(self):
        """Reset all metrics."""
        self.generations = []
        self.population_sizes = []
        self.resistant_fractions = []
        self.average_fitness = []
        self.antibiotic_deaths = []
        self.natural_deaths = []
        self.reproductions = []
        self.mutation_events = []

    def record_step(self, generation, statistics):
        """
        Record statistics for a completed generation.

        Args:
            generation (int): Generation reached by the step
            statistics (StepStatistics): Statistics produced by the step
        """
        self.generations.append(generation)
        self.population_sizes.append(statistics.total_population)
        self.resistant_fractions.append(statistics.resistant_fraction)
        self.average_fitness.append(statistics.average_fitness)
        self.antibiotic_deaths.append(statistics.antibiotic_deaths)
        self.natural_deaths.append(statistics.natural_deaths)
        self.reproductions.append(statistics.reproductions)
        self.mutation_events.append(statistics.mutation_events)

    def get_statistics(self, window=100):
        """
        Get statistical summary of recent generations.

        Args:
            window (int): Window size for the mean values

        Returns:
            dict: Statistics dictionary
        """
        recent_population = self.population_sizes[-window:]
        recent_resistance = self.resistant_fractions[-window:]
        recent_fitness = self.average_fitness[-window:]

        stats = {
            'mean_population': float(np.mean(recent_population)) if recent_population else 0.0,
            'std_population': float(np.std(recent_population)) if recent_population else 0.0,
            'mean_resistant_fraction': float(np.mean(recent_resistance)) if recent_resistance else 0.0,
            'mean_fitness': float(np.mean(recent_fitness)) if recent_fitness else 0.0,
            'final_resistant_fraction': self.resistant_fractions[-1] if self.resistant_fractions else 0.0,
            'total_antibiotic_deaths': int(sum(self.antibiotic_deaths)),
            'total_natural_deaths': int(sum(self.natural_deaths)),
            'total_reproductions': int(sum(self.reproductions)),
            'total_mutation_events': int(sum(self.mutation_events)),
            'total_generations': len(self.generations)
        }

        return stats

    def print_statistics(self, window=100):
        """
        Print formatted statistics.

        Args:
            window (int): Window size for recent statistics
        """
        stats = self.get_statistics(window)
        print(f"\n{'='*60}")
        print(f"Statistics (last {window} generations):")
        print(f"{'='*60}")
        print(f"Generations:         {stats['total_generations']}")
        print(f"Mean Population:     {stats['mean_population']:.2f} ± {stats['std_population']:.2f}")
        print(f"Mean Resistant:      {stats['mean_resistant_fraction']:.4f}")
        print(f"Mean Fitness:        {stats['mean_fitness']:.4f}")
        print(f"Antibiotic Deaths:   {stats['total_antibiotic_deaths']}")
        print(f"Natural Deaths:      {stats['total_natural_deaths']}")
        print(f"Reproductions:       {stats['total_reproductions']}")
        print(f"Mutation Events:     {stats['total_mutation_events']}")
        print(f"{'='*60}\n")

    def get_peak_population(self):
        """
        Get the largest population and the generation it was reached.

        Returns:
            dict: Peak information, or None if nothing was recorded
        """
        if not self.population_sizes:
            return None

        peak_idx = int(np.argmax(self.population_sizes))

        return {
            'generation': self.generations[peak_idx],
            'population': self.population_sizes[peak_idx],
            'resistant_fraction': self.resistant_fractions[peak_idx]
        }

    def extinction_generation(self):
        """
        Get the first generation at which the population died out.

        Returns:
            int: Generation of extinction, or None if the population survived
        """
        for generation, size in zip(self.generations, self.population_sizes):
            if size == 0:
                return generation
        return None
