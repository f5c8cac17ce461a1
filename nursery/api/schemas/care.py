"""
Schemas for the per-plant records: size profiles, seasonal care guidelines
and fertilizer schedules.

The same classes validate request bodies on the server and build payloads
in nursery.client.

Reference: https://fastapi.tiangolo.com/tutorial/body/
"""

from typing import Optional

from pydantic import Field, field_validator

from nursery.api.schemas.common import CamelModel, ResponseModel, UpdateModel, match_choice
from nursery.models.plant import PlantSize, Season


# Size profiles
class SizeProfileCreate(CamelModel):
    """Schema for creating a plant size profile"""

    plant_id: str = Field(..., description="Plant ID")
    size: PlantSize = Field(..., description="Size class (Small, Medium, Large, XL)")
    height: Optional[int] = Field(None, gt=0, description="Height in cm")
    weight: Optional[float] = Field(None, gt=0, description="Weight in kg")

    @field_validator("size", mode="before")
    @classmethod
    def normalize_size(cls, value):
        return match_choice(value, PlantSize)


class SizeProfileUpdate(UpdateModel):
    not_nullable = ("plant_id", "size")

    plant_id: Optional[str] = None
    size: Optional[PlantSize] = None
    height: Optional[int] = Field(None, gt=0)
    weight: Optional[float] = Field(None, gt=0)

    @field_validator("size", mode="before")
    @classmethod
    def normalize_size(cls, value):
        return match_choice(value, PlantSize)


class SizeProfileResponse(ResponseModel, SizeProfileCreate):
    pass


# Care guidelines
class CareGuidelineCreate(CamelModel):
    """Schema for creating a seasonal care guideline"""

    plant_id: str = Field(..., description="Plant ID")
    season: Season = Field(..., description="Season (Summer, Winter, Monsoon)")
    watering_frequency: Optional[str] = Field(None, max_length=100, description="e.g. 'Twice a week'")
    water_amount: Optional[int] = Field(None, ge=1, description="Water per watering in ml")
    sunlight_type: Optional[str] = Field(None, max_length=100)
    humidity_level: Optional[str] = Field(None, max_length=100)
    care_notes: Optional[str] = None

    @field_validator("season", mode="before")
    @classmethod
    def normalize_season(cls, value):
        return match_choice(value, Season)


class CareGuidelineUpdate(UpdateModel):
    not_nullable = ("plant_id", "season")

    plant_id: Optional[str] = None
    season: Optional[Season] = None
    watering_frequency: Optional[str] = Field(None, max_length=100)
    water_amount: Optional[int] = Field(None, ge=1)
    sunlight_type: Optional[str] = Field(None, max_length=100)
    humidity_level: Optional[str] = Field(None, max_length=100)
    care_notes: Optional[str] = None

    @field_validator("season", mode="before")
    @classmethod
    def normalize_season(cls, value):
        return match_choice(value, Season)


class CareGuidelineResponse(ResponseModel, CareGuidelineCreate):
    pass


# Fertilizer schedules
class FertilizerScheduleCreate(CamelModel):
    """Schema for creating a plant fertilizer schedule"""

    plant_id: str = Field(..., description="Plant ID")
    fertilizer_id: str = Field(..., description="Fertilizer ID")
    application_frequency: Optional[str] = Field(None, max_length=100, description="e.g. 'Every 2 weeks'")
    application_method: Optional[str] = Field(None, max_length=100, description="e.g. 'Soil drench'")
    season: Optional[str] = Field(None, max_length=50)
    application_time: Optional[str] = Field(None, max_length=100, description="e.g. 'Morning'")
    dosage: Optional[str] = Field(None, max_length=100, description="e.g. '5 ml per litre'")
    safety_notes: Optional[str] = None


class FertilizerScheduleUpdate(UpdateModel):
    not_nullable = ("plant_id", "fertilizer_id")

    plant_id: Optional[str] = None
    fertilizer_id: Optional[str] = None
    application_frequency: Optional[str] = Field(None, max_length=100)
    application_method: Optional[str] = Field(None, max_length=100)
    season: Optional[str] = Field(None, max_length=50)
    application_time: Optional[str] = Field(None, max_length=100)
    dosage: Optional[str] = Field(None, max_length=100)
    safety_notes: Optional[str] = None


class FertilizerScheduleResponse(ResponseModel, FertilizerScheduleCreate):
    pass
