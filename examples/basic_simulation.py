"""
Basic example of a petri dish simulation under constant antibiotic pressure.

This demonstrates how resistance spreads when sensitive bacteria are killed.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from simulation import SimulationRun
from utils.logger import Logger
from utils.visualizer import Visualizer


def main():
    """Run basic petri dish simulation."""
    print("Starting petri dish simulation...")

    parameters = {
        'initialPopulation': 100,
        'growthRate': 0.3,
        'antibioticConcentration': 0.4,
        'mutationRate': 0.02,
        'duration': 200,
        'petriDishSize': 600,
    }

    logger = Logger(log_dir='logs', experiment_name='basic_simulation')
    run = SimulationRun(parameters, seed=42, name='basic_simulation', run_logger=logger)
    visualizer = Visualizer(output_dir='results/basic_simulation')

    print(f"\nRunning {parameters['duration']} generations...")
    run.start()
    while not run.is_completed:
        stats = run.step()

        if run.generation % 20 == 0:
            print(f"Generation {run.generation:3d}: Population={stats.total_population:5d}, "
                  f"Resistant={stats.resistant_fraction:.3f}, Fitness={stats.average_fitness:.3f}")

        if stats.total_population == 0:
            print(f"\nPopulation went extinct at generation {run.generation}")
            break

    run.metrics.print_statistics()
    logger.save_metrics()

    print("\nGenerating visualizations...")
    visualizer.plot_combined_metrics(run.history)
    visualizer.plot_resistance_composition(run.history)
    visualizer.plot_dish(run.population, run.parameters.petri_dish_size)
    print("Plots saved to results/basic_simulation/")

    print("\nSimulation complete!")


if __name__ == "__main__":
    main()
