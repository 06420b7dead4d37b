"""
Pydantic schema for simulation parameters.

The engine assumes valid parameters; this module is where they are checked.
"""

import numbers

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bacteria.parameters import SimulationParameters, RECORD_FIELDS

from .errors import ParameterValidationError


class SimulationParametersSchema(BaseModel):
    """Request model for the parameters of a new simulation."""

    model_config = ConfigDict(populate_by_name=True)

    initial_population: int = Field(
        alias='initialPopulation',
        ge=1,
        le=1000,
        description="Number of founders (1-1,000)"
    )
    growth_rate: float = Field(
        alias='growthRate',
        ge=0.0,
        le=1.0,
        allow_inf_nan=False,
        description="Base reproduction probability (0.0-1.0)"
    )
    antibiotic_concentration: float = Field(
        alias='antibioticConcentration',
        ge=0.0,
        le=1.0,
        allow_inf_nan=False,
        description="Antibiotic concentration (0.0-1.0)"
    )
    mutation_rate: float = Field(
        alias='mutationRate',
        ge=0.0,
        le=1.0,
        allow_inf_nan=False,
        description="Mutation probability per bacterium per generation (0.0-1.0)"
    )
    duration: int = Field(
        ge=1,
        le=1000,
        description="Number of generations to simulate (1-1,000)"
    )
    petri_dish_size: int = Field(
        alias='petriDishSize',
        ge=100,
        le=800,
        description="Dish diameter (100-800)"
    )

    @field_validator('*', mode='before')
    @classmethod
    def require_number(cls, v):
        # Integral floats such as 10.0 still pass on to the int fields
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise ValueError("must be a number")
        return v


def _format_error(error):
    name = error['loc'][0] if error['loc'] else 'parameters'
    name = RECORD_FIELDS.get(name, name)
    return f"{name}: {error['msg']}"


def validate_parameters(record):
    """
    Validate a parameter mapping and build the parameter set.

    Accepts camelCase or snake_case keys, or an existing
    ``SimulationParameters``. Every problem is collected before raising.

    Args:
        record (dict | SimulationParameters): Raw parameters

    Returns:
        SimulationParameters: Validated parameters

    Raises:
        ParameterValidationError: If any field is missing or out of range
    """
    if isinstance(record, SimulationParameters):
        record = record.to_dict()

    try:
        schema = SimulationParametersSchema.model_validate(record)
    except ValidationError as exc:
        raise ParameterValidationError([_format_error(error) for error in exc.errors()]) from exc

    return SimulationParameters(**schema.model_dump())
