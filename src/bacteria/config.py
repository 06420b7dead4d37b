"""
Model constants for the petri dish simulation.
Contains survival, mortality, reproduction, mutation and display parameters.
"""

import math

# -----------------------
# Initialization
# -----------------------
INITIAL_RESISTANCE_PROBABILITY = 0.1    # fraction of founders that start resistant
RESISTANT_BASE_FITNESS = 0.4            # fitness cost of resistance
SENSITIVE_BASE_FITNESS = 0.6
INITIAL_FITNESS_NOISE = 0.1             # uniform(-noise, +noise) around the base
INITIAL_FITNESS_MIN = 0.1
INITIAL_FITNESS_MAX = 1.0
INITIAL_SIZE_RANGE = (2.0, 5.0)

# -----------------------
# Antibiotic Survival
# -----------------------
KILL_CONSTANT = 3.0                     # k in S = exp(-k * C * (1 - resistance_factor))
RESISTANT_FACTOR = 0.9
SENSITIVE_FACTOR = 0.1

# -----------------------
# Natural Mortality
# -----------------------
AGE_DEATH_RATE_PER_GENERATION = 0.001
MAX_AGE_DEATH_RATE = 0.1                # saturates for very old cells
FITNESS_DEATH_RATE = 0.02               # scaled by (1 - fitness)

# -----------------------
# Reproduction
# -----------------------
DENSITY_FACTOR = 0.001                  # bacteria per unit of dish area
YOUNG_AGE_LIMIT = 5                     # age < limit reproduces at half rate
OLD_AGE_LIMIT = 30                      # age > limit reproduces at reduced rate
YOUNG_AGE_MULTIPLIER = 0.5
OLD_AGE_MULTIPLIER = 0.8
OFFSPRING_MIN_DISTANCE = 5.0
OFFSPRING_MAX_DISTANCE = 25.0
OFFSPRING_PLACEMENT_ATTEMPTS = 10
OFFSPRING_FITNESS_VARIATION = 0.05
OFFSPRING_SIZE_VARIATION = 0.25

# -----------------------
# Mutation
# -----------------------
RESISTANCE_FLIP_PROBABILITY = 0.1       # share of mutation events that flip resistance
RESISTANCE_FITNESS_COST = 0.1           # gained resistance costs fitness, lost resistance restores it
FITNESS_DRIFT_PROBABILITY = 0.7
FITNESS_DRIFT = 0.1
SIZE_DRIFT_PROBABILITY = 0.5
SIZE_DRIFT = 0.25

# -----------------------
# Bounds
# -----------------------
FITNESS_BOUNDS = (0.0, 1.0)
SIZE_BOUNDS = (1.0, 10.0)
FULL_TURN = 2 * math.pi

# -----------------------
# Display
# -----------------------
SENSITIVE_COLOR = "#44ff44"
RESISTANT_COLOR = "#ff4444"
