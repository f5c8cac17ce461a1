"""
Schemas for plants.

Reference: https://fastapi.tiangolo.com/tutorial/body/
"""

from typing import List, Optional

from pydantic import Field, model_validator

from nursery.api.schemas.common import CamelModel, ResponseModel, UpdateModel, UtcDatetime

TEMPERATURE_LIMIT_MIN = -50
TEMPERATURE_LIMIT_MAX = 60


def check_temperature_range(temperature_min: Optional[int], temperature_max: Optional[int]) -> None:
    """Raise ValueError when both bounds are set and min exceeds max."""
    if temperature_min is not None and temperature_max is not None:
        if temperature_min > temperature_max:
            raise ValueError(
                "Minimum temperature must be less than or equal to maximum temperature"
            )


class PlantBase(CamelModel):
    """Base schema with common plant fields."""

    name: str = Field(..., min_length=1, max_length=100, description="Plant name (e.g. 'Monstera Deliciosa')")
    scientific_name: Optional[str] = Field(None, max_length=200, description="Botanical name")
    description: Optional[str] = Field(None, description="Plant description")
    is_active: bool = Field(default=True, description="Whether the plant is listed")
    is_featured: bool = Field(default=False, description="Whether the plant is featured")
    plant_class: Optional[str] = Field(None, max_length=100)
    series: Optional[str] = Field(None, max_length=100)
    place_of_origin: Optional[str] = Field(None, max_length=200)
    aura_type: Optional[str] = Field(None, max_length=100)
    biodiversity_booster: bool = Field(default=False)
    carbon_absorber: bool = Field(default=False)
    temperature_min: Optional[int] = Field(
        None, ge=TEMPERATURE_LIMIT_MIN, le=TEMPERATURE_LIMIT_MAX, description="Minimum tolerated temperature (°C)"
    )
    temperature_max: Optional[int] = Field(
        None, ge=TEMPERATURE_LIMIT_MIN, le=TEMPERATURE_LIMIT_MAX, description="Maximum tolerated temperature (°C)"
    )
    category_id: Optional[str] = Field(None, description="Category ID")
    soil: List[str] = Field(default_factory=list)
    repotting: List[str] = Field(default_factory=list)
    maintenance: List[str] = Field(default_factory=list)
    inside_box: List[str] = Field(default_factory=list, description="What ships in the box")
    benefits: List[str] = Field(default_factory=list)
    spiritual_use_case: List[str] = Field(default_factory=list)
    best_for_emotion: List[str] = Field(default_factory=list)
    best_gift_for: List[str] = Field(default_factory=list)
    fun_facts: List[str] = Field(default_factory=list)
    associated_deity: Optional[str] = Field(None, max_length=100)
    god_aligned: Optional[str] = Field(None, max_length=100)


class PlantCreate(PlantBase):
    """
    Schema for creating a new plant.

    Only name is required. Booleans default to is_active=True and the
    other flags to False; list fields default to empty lists.
    """

    @model_validator(mode="after")
    def validate_temperature_range(self) -> "PlantCreate":
        """Ensure temperature_min <= temperature_max when both are provided."""
        check_temperature_range(self.temperature_min, self.temperature_max)
        return self


class PlantUpdate(UpdateModel):
    """
    Schema for updating a plant.

    All fields are optional for partial updates. When only one temperature
    bound is sent, PlantService checks it against the stored other bound.
    """

    not_nullable = (
        "name",
        "is_active",
        "is_featured",
        "biodiversity_booster",
        "carbon_absorber",
        "soil",
        "repotting",
        "maintenance",
        "inside_box",
        "benefits",
        "spiritual_use_case",
        "best_for_emotion",
        "best_gift_for",
        "fun_facts",
    )

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    scientific_name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    plant_class: Optional[str] = Field(None, max_length=100)
    series: Optional[str] = Field(None, max_length=100)
    place_of_origin: Optional[str] = Field(None, max_length=200)
    aura_type: Optional[str] = Field(None, max_length=100)
    biodiversity_booster: Optional[bool] = None
    carbon_absorber: Optional[bool] = None
    temperature_min: Optional[int] = Field(None, ge=TEMPERATURE_LIMIT_MIN, le=TEMPERATURE_LIMIT_MAX)
    temperature_max: Optional[int] = Field(None, ge=TEMPERATURE_LIMIT_MIN, le=TEMPERATURE_LIMIT_MAX)
    category_id: Optional[str] = None
    soil: Optional[List[str]] = None
    repotting: Optional[List[str]] = None
    maintenance: Optional[List[str]] = None
    inside_box: Optional[List[str]] = None
    benefits: Optional[List[str]] = None
    spiritual_use_case: Optional[List[str]] = None
    best_for_emotion: Optional[List[str]] = None
    best_gift_for: Optional[List[str]] = None
    fun_facts: Optional[List[str]] = None
    associated_deity: Optional[str] = Field(None, max_length=100)
    god_aligned: Optional[str] = Field(None, max_length=100)

    @model_validator(mode="after")
    def validate_temperature_range(self) -> "PlantUpdate":
        """Ensure temperature_min <= temperature_max if both are provided."""
        check_temperature_range(self.temperature_min, self.temperature_max)
        return self


class PlantResponse(ResponseModel, PlantBase):
    """
    Schema for plant response.

    Includes all fields from PlantBase plus database-generated fields.
    """

    created_at: UtcDatetime = Field(..., description="Timestamp when plant was created")
