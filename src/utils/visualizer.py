"""
Visualization utilities for petri dish simulation runs.
"""

import matplotlib.pyplot as plt
import os


class Visualizer:
    """
    Visualization tools for simulation history and population snapshots.
    """

    def __init__(self, output_dir='results'):
        """
        Initialize visualizer.

        Args:
            output_dir (str): Directory to save plots
        """
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

    def _save(self, save_path, default_name):
        if save_path is None:
            save_path = os.path.join(self.output_dir, default_name)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close()
        return save_path

    def plot_population_dynamics(self, history, save_path=None):
        """
        Plot population size over generations.

        Args:
            history (dict): Run history with 'generations' and 'totalPopulation'
            save_path (str): Path to save figure

        Returns:
            str: Path of the saved figure
        """
        plt.figure(figsize=(10, 6))
        plt.plot(history['generations'], history['totalPopulation'], linewidth=2)
        plt.xlabel('Generation', fontsize=12)
        plt.ylabel('Population Size', fontsize=12)
        plt.title('Bacterial Population Dynamics', fontsize=14, fontweight='bold')
        plt.grid(True, alpha=0.3)

        return self._save(save_path, 'population_dynamics.png')

    def plot_resistance_composition(self, history, save_path=None):
        """
        Plot resistant and sensitive counts as stacked areas.

        Args:
            history (dict): Run history with 'resistantCount' and 'sensitiveCount'
            save_path (str): Path to save figure

        Returns:
            str: Path of the saved figure
        """
        plt.figure(figsize=(10, 6))
        plt.stackplot(
            history['generations'],
            history['resistantCount'],
            history['sensitiveCount'],
            labels=['Resistant', 'Sensitive'],
            colors=['#ff4444', '#44ff44'],
            alpha=0.8
        )
        plt.xlabel('Generation', fontsize=12)
        plt.ylabel('Bacteria', fontsize=12)
        plt.title('Antibiotic Resistance Composition', fontsize=14, fontweight='bold')
        plt.legend(loc='upper left')
        plt.grid(True, alpha=0.3)

        return self._save(save_path, 'resistance_composition.png')

    def plot_event_counts(self, history, save_path=None):
        """
        Plot deaths, reproductions and mutations per generation.

        Args:
            history (dict): Run history
            save_path (str): Path to save figure

        Returns:
            str: Path of the saved figure
        """
        plt.figure(figsize=(10, 6))
        generations = history['generations']
        plt.plot(generations, history['antibioticDeaths'], label='Antibiotic deaths', color='red')
        plt.plot(generations, history['naturalDeaths'], label='Natural deaths', color='gray')
        plt.plot(generations, history['reproductions'], label='Reproductions', color='green')
        plt.plot(generations, history['mutationEvents'], label='Mutations', color='purple')
        plt.xlabel('Generation', fontsize=12)
        plt.ylabel('Events', fontsize=12)
        plt.title('Events per Generation', fontsize=14, fontweight='bold')
        plt.legend()
        plt.grid(True, alpha=0.3)

        return self._save(save_path, 'event_counts.png')

    def plot_dish(self, population, petri_dish_size, save_path=None):
        """
        Scatter a population snapshot inside the dish outline.

        Args:
            population (Sequence[Bacterium]): Population snapshot
            petri_dish_size (float): Dish diameter
            save_path (str): Path to save figure

        Returns:
            str: Path of the saved figure
        """
        radius = petri_dish_size / 2
        fig, ax = plt.subplots(figsize=(8, 8))
        ax.add_patch(plt.Circle((radius, radius), radius, fill=False, linewidth=2))

        if population:
            ax.scatter(
                [b.x for b in population],
                [b.y for b in population],
                s=[b.size * 10 for b in population],
                c=[b.color for b in population],
                edgecolors='black',
                linewidths=0.3
            )

        ax.set_xlim(0, petri_dish_size)
        ax.set_ylim(0, petri_dish_size)
        ax.set_aspect('equal')
        ax.set_title(f'Petri Dish ({len(population)} bacteria)', fontsize=14, fontweight='bold')

        return self._save(save_path, 'petri_dish.png')

    def plot_combined_metrics(self, history, save_path=None):
        """
        Plot multiple metrics in subplots.

        Args:
            history (dict): Run history
            save_path (str): Path to save figure

        Returns:
            str: Path of the saved figure
        """
        fig, axes = plt.subplots(2, 2, figsize=(14, 10))
        generations = history['generations']

        # Population
        axes[0, 0].plot(generations, history['totalPopulation'], linewidth=2)
        axes[0, 0].set_xlabel('Generation')
        axes[0, 0].set_ylabel('Population Size')
        axes[0, 0].set_title('Population Dynamics')
        axes[0, 0].grid(True, alpha=0.3)

        # Resistance
        axes[0, 1].plot(generations, history['resistantCount'], linewidth=2, color='red', label='Resistant')
        axes[0, 1].plot(generations, history['sensitiveCount'], linewidth=2, color='green', label='Sensitive')
        axes[0, 1].set_xlabel('Generation')
        axes[0, 1].set_ylabel('Bacteria')
        axes[0, 1].set_title('Resistance')
        axes[0, 1].legend()
        axes[0, 1].grid(True, alpha=0.3)

        # Fitness
        axes[1, 0].plot(generations, history['averageFitness'], linewidth=2, color='blue')
        axes[1, 0].set_xlabel('Generation')
        axes[1, 0].set_ylabel('Average Fitness')
        axes[1, 0].set_title('Fitness')
        axes[1, 0].set_ylim(0, 1)
        axes[1, 0].grid(True, alpha=0.3)

        # Deaths
        axes[1, 1].plot(generations, history['antibioticDeaths'], linewidth=2, color='red', label='Antibiotic')
        axes[1, 1].plot(generations, history['naturalDeaths'], linewidth=2, color='gray', label='Natural')
        axes[1, 1].set_xlabel('Generation')
        axes[1, 1].set_ylabel('Deaths')
        axes[1, 1].set_title('Deaths')
        axes[1, 1].legend()
        axes[1, 1].grid(True, alpha=0.3)

        plt.tight_layout()

        return self._save(save_path, 'combined_metrics.png')
