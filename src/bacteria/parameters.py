"""
Immutable parameter set for one simulation run.
"""

from dataclasses import dataclass, fields


RECORD_FIELDS = {
    'initial_population': 'initialPopulation',
    'growth_rate': 'growthRate',
    'antibiotic_concentration': 'antibioticConcentration',
    'mutation_rate': 'mutationRate',
    'duration': 'duration',
    'petri_dish_size': 'petriDishSize',
}


@dataclass(frozen=True)
class SimulationParameters:
    """
    Configuration of a simulation run.

    Bounds are checked by ``simulation.validation`` before the engine sees a
    parameter set; the engine itself does not clamp or reject these values.

    Attributes:
        initial_population (int): Number of founders
        growth_rate (float): Base reproduction probability (0.0 to 1.0)
        antibiotic_concentration (float): Antibiotic dose (0.0 to 1.0)
        mutation_rate (float): Per-bacterium mutation probability per step
        duration (int): Number of generations in the run
        petri_dish_size (float): Dish diameter
    """

    initial_population: int
    growth_rate: float
    antibiotic_concentration: float
    mutation_rate: float
    duration: int
    petri_dish_size: float

    @property
    def radius(self):
        return self.petri_dish_size / 2

    @property
    def center(self):
        """Dish center in dish-relative coordinates."""
        return (self.radius, self.radius)

    def to_dict(self):
        """Return the parameters keyed by camelCase record names."""
        return {RECORD_FIELDS[f.name]: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, record):
        """
        Build parameters from a mapping with camelCase or snake_case keys.

        Args:
            record (dict): Parameter mapping

        Returns:
            SimulationParameters: Parsed parameters

        Raises:
            KeyError: If a parameter is missing
        """
        values = {}
        for attribute, field_name in RECORD_FIELDS.items():
            if field_name in record:
                values[attribute] = record[field_name]
            elif attribute in record:
                values[attribute] = record[attribute]
            else:
                raise KeyError(field_name)
        return cls(**values)
