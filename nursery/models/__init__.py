"""
Database models
All SQLAlchemy models should be defined here or imported here
"""

# Import Base for models to inherit from
from nursery.core.database import Base
from nursery.models.catalog import Category, Color, Fertilizer, Tag, TagGroup
from nursery.models.plant import (
    Plant,
    PlantCareGuideline,
    PlantFertilizerSchedule,
    PlantSize,
    PlantSizeProfile,
    Season,
)
from nursery.models.variant import PlantVariant, PlantVariantTag

# Export all models for easy imports
__all__ = [
    "Base",
    "Category",
    "Color",
    "Fertilizer",
    "Plant",
    "PlantCareGuideline",
    "PlantFertilizerSchedule",
    "PlantSize",
    "PlantSizeProfile",
    "PlantVariant",
    "PlantVariantTag",
    "Season",
    "Tag",
    "TagGroup",
]
