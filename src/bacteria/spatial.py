"""
Position sampling inside a circular petri dish.
"""

import math

from .config import (
    FULL_TURN, OFFSPRING_MIN_DISTANCE, OFFSPRING_MAX_DISTANCE,
    OFFSPRING_PLACEMENT_ATTEMPTS
)


def random_position_in_dish(center, radius, rng):
    """
    Sample a point uniformly over the area of a disk.

    The radial distance is ``radius * sqrt(u)`` so points are not bunched
    near the center.

    Args:
        center (tuple): Dish center (x, y)
        radius (float): Dish radius
        rng (np.random.Generator): Random source

    Returns:
        tuple: (x, y) position
    """
    angle = rng.random() * FULL_TURN
    distance = math.sqrt(rng.random()) * radius
    return (center[0] + distance * math.cos(angle),
            center[1] + distance * math.sin(angle))


def is_inside_dish(position, center, radius):
    """Check whether a position lies on or inside the dish boundary."""
    return math.hypot(position[0] - center[0], position[1] - center[1]) <= radius


def find_offspring_position(parent, center, radius, rng,
                            max_attempts=OFFSPRING_PLACEMENT_ATTEMPTS):
    """
    Find a position for an offspring near its parent.

    Tries points at a random angle and a distance between
    OFFSPRING_MIN_DISTANCE and OFFSPRING_MAX_DISTANCE from the parent. When
    every attempt lands outside the dish, falls back to a uniform sample over
    the whole dish.

    Args:
        parent (Bacterium): Parent bacterium
        center (tuple): Dish center (x, y)
        radius (float): Dish radius
        rng (np.random.Generator): Random source
        max_attempts (int): Placement attempts near the parent

    Returns:
        tuple: (x, y) position inside the dish
    """
    for _ in range(max_attempts):
        angle = rng.random() * FULL_TURN
        distance = OFFSPRING_MIN_DISTANCE + rng.random() * (OFFSPRING_MAX_DISTANCE - OFFSPRING_MIN_DISTANCE)
        position = (parent.x + distance * math.cos(angle),
                    parent.y + distance * math.sin(angle))
        if is_inside_dish(position, center, radius):
            return position

    return random_position_in_dish(center, radius, rng)
