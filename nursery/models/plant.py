"""
Plant model and the per-plant records it owns: size profiles,
seasonal care guidelines and fertilizer schedules.

Foreign keys are stored as plain indexed ID columns. References are
validated by the service layer when written; deletes never cascade, so
child records outlive their plant.

Reference: https://docs.sqlalchemy.org/en/20/orm/declarative_tables.html
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nursery.core.database import Base, new_id, utcnow


class PlantSize(str, Enum):
    """Size classes a plant is sold in."""

    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    XL = "XL"


class Season(str, Enum):
    """Seasons a care guideline applies to."""

    SUMMER = "Summer"
    WINTER = "Winter"
    MONSOON = "Monsoon"


class Plant(Base):
    """
    Plant (product) model, the root of the catalog.

    Attributes:
        id: Primary key (UUID string)
        name: Common name (e.g. "Monstera Deliciosa")
        scientific_name: Botanical name
        is_active / is_featured: Storefront flags
        temperature_min / temperature_max: Tolerated range in degrees Celsius
        category_id: Optional category ID
        soil ... fun_facts: Ordered lists of short texts shown on the product page
        created_at: Timestamp when plant was created
    """

    __tablename__ = "plants"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    scientific_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    plant_class: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    series: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    place_of_origin: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    aura_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    biodiversity_booster: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    carbon_absorber: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    temperature_min: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, comment="Minimum tolerated temperature (°C)"
    )
    temperature_max: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, comment="Maximum tolerated temperature (°C)"
    )

    category_id: Mapped[Optional[str]] = mapped_column(
        String(36), nullable=True, index=True, comment="Category ID"
    )

    soil: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    repotting: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    maintenance: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    inside_box: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    benefits: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    spiritual_use_case: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    best_for_emotion: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    best_gift_for: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    fun_facts: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    associated_deity: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    god_aligned: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        comment="Timestamp when plant was created",
    )

    def __repr__(self) -> str:
        return f"<Plant(id={self.id}, name='{self.name}')>"


class PlantSizeProfile(Base):
    """Physical dimensions of a plant at a given size class."""

    __tablename__ = "plant_size_profiles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    plant_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    size: Mapped[str] = mapped_column(
        String(10), nullable=False, comment="Small, Medium, Large or XL"
    )
    height: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, comment="Height in cm")
    weight: Mapped[Optional[float]] = mapped_column(
        Numeric(5, 2, asdecimal=False), nullable=True, comment="Weight in kg"
    )


class PlantCareGuideline(Base):
    """Seasonal watering, light and humidity guidance for a plant."""

    __tablename__ = "plant_care_guidelines"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    plant_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    season: Mapped[str] = mapped_column(
        String(10), nullable=False, comment="Summer, Winter or Monsoon"
    )
    watering_frequency: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    water_amount: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, comment="Water per watering in ml"
    )
    sunlight_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    humidity_level: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    care_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class PlantFertilizerSchedule(Base):
    """When, how and how much of a fertilizer to apply to a plant."""

    __tablename__ = "plant_fertilizer_schedules"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    plant_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    fertilizer_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    application_frequency: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    application_method: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    season: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    application_time: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    dosage: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    safety_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
