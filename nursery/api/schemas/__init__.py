"""
Pydantic schemas for API request/response models
"""

from nursery.api.schemas.plant import PlantCreate, PlantResponse, PlantUpdate

__all__ = ["PlantCreate", "PlantUpdate", "PlantResponse"]
