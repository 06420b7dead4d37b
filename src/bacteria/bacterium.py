"""
Bacterium value type representing one cell in the petri dish.
"""

from dataclasses import dataclass, replace, asdict
from typing import Optional

from .config import FITNESS_BOUNDS, SIZE_BOUNDS, RESISTANT_COLOR, SENSITIVE_COLOR


# snake_case attribute -> camelCase record field used by the persistence layer
_RECORD_FIELDS = {
    'id': 'id',
    'x': 'x',
    'y': 'y',
    'is_resistant': 'isResistant',
    'fitness': 'fitness',
    'age': 'age',
    'generation': 'generation',
    'parent_id': 'parentId',
    'color': 'color',
    'size': 'size',
}


def color_for(is_resistant):
    """Return the display color for a resistance state."""
    return RESISTANT_COLOR if is_resistant else SENSITIVE_COLOR


@dataclass(frozen=True)
class Bacterium:
    """
    Immutable snapshot of a single bacterium.

    Every stage of a generation produces new instances through ``replace``;
    nothing mutates a bacterium in place.

    Attributes:
        id (str): Identifier, unique within a population
        x (float): Dish-relative x coordinate
        y (float): Dish-relative y coordinate
        is_resistant (bool): Whether the cell carries antibiotic resistance
        fitness (float): Fitness in [0, 1]
        age (int): Generations survived
        generation (int): Lineage depth from the founders
        parent_id (str): Parent identifier, None for founders. Only used for
            lineage queries.
        color (str): Display color
        size (float): Display size in [1, 10]
    """

    id: str
    x: float
    y: float
    is_resistant: bool
    fitness: float
    age: int
    generation: int
    parent_id: Optional[str]
    color: str
    size: float

    def __post_init__(self):
        low, high = FITNESS_BOUNDS
        if not low <= self.fitness <= high:
            raise ValueError(f"fitness must be in [{low}, {high}], got {self.fitness}")
        if self.age < 0:
            raise ValueError(f"age must be non-negative, got {self.age}")
        if self.generation < 0:
            raise ValueError(f"generation must be non-negative, got {self.generation}")
        low, high = SIZE_BOUNDS
        if not low <= self.size <= high:
            raise ValueError(f"size must be in [{low}, {high}], got {self.size}")
        if not self.id:
            raise ValueError("id must be a non-empty string")

    def replace(self, **changes):
        """
        Create a copy with some fields changed.

        Args:
            **changes: Field values to override

        Returns:
            Bacterium: New bacterium
        """
        return replace(self, **changes)

    def aged(self):
        """Return a copy that has survived one more generation."""
        return replace(self, age=self.age + 1)

    @property
    def position(self):
        return (self.x, self.y)

    def to_dict(self):
        """
        Convert to the persisted record shape.

        Returns:
            dict: Record keyed by camelCase field names
        """
        return {_RECORD_FIELDS[key]: value for key, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, record):
        """
        Build a bacterium from a persisted record.

        Accepts either camelCase record keys or snake_case attribute names.
        Every field must be present; ``parentId`` may be None.

        Args:
            record (dict): Bacterium record

        Returns:
            Bacterium: Parsed bacterium

        Raises:
            KeyError: If a field is missing from the record
        """
        values = {}
        for attribute, field_name in _RECORD_FIELDS.items():
            if field_name in record:
                values[attribute] = record[field_name]
            elif attribute in record:
                values[attribute] = record[attribute]
            else:
                raise KeyError(f"bacterium record is missing {field_name!r}")

        return cls(**values)

    def __repr__(self):
        return (f"Bacterium(id={self.id!r}, resistant={self.is_resistant}, "
                f"fitness={self.fitness:.3f}, age={self.age}, generation={self.generation})")
