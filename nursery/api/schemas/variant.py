"""
Schemas for plant variants and variant tags.

Reference: https://fastapi.tiangolo.com/tutorial/body/
"""

from typing import Annotated, List, Optional

from pydantic import AfterValidator, Field

from nursery.api.schemas.common import CamelModel, ResponseModel, UpdateModel, UtcDatetime


def check_money_scale(value: float) -> float:
    """Prices are stored with two decimal places; reject anything finer."""
    if round(value, 2) != value:
        raise ValueError("must have at most 2 decimal places")
    return value


Money = Annotated[float, AfterValidator(check_money_scale)]


class VariantBase(CamelModel):
    """Base schema with common plant variant fields."""

    plant_id: str = Field(..., description="Plant ID")
    color_id: str = Field(..., description="Color ID")
    size_id: Optional[str] = Field(None, description="Size profile ID")
    sku: str = Field(..., min_length=1, max_length=100, description="Stock keeping unit, unique across variants")
    price: Money = Field(..., gt=0, description="Selling price (e.g. 12.99)")
    cost_price: Optional[Money] = Field(None, ge=0, description="Purchase price")
    is_active: bool = Field(default=True)
    notes: Optional[str] = None
    primary_image: Optional[str] = Field(None, max_length=500, description="URL of the main image")
    additional_images: List[str] = Field(default_factory=list, description="URLs of further images")


class VariantCreate(VariantBase):
    """Schema for creating a plant variant"""

    pass


class VariantUpdate(UpdateModel):
    """
    Schema for updating a plant variant.

    All fields are optional for partial updates.
    """

    not_nullable = ("plant_id", "color_id", "sku", "price", "is_active", "additional_images")

    plant_id: Optional[str] = None
    color_id: Optional[str] = None
    size_id: Optional[str] = None
    sku: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[Money] = Field(None, gt=0)
    cost_price: Optional[Money] = Field(None, ge=0)
    is_active: Optional[bool] = None
    notes: Optional[str] = None
    primary_image: Optional[str] = Field(None, max_length=500)
    additional_images: Optional[List[str]] = None


class VariantResponse(ResponseModel, VariantBase):
    created_at: UtcDatetime = Field(..., description="Timestamp when variant was created")


class VariantTagCreate(CamelModel):
    """Schema for linking a tag to a variant"""

    variant_id: str = Field(..., description="Plant variant ID")
    tag_id: str = Field(..., description="Tag ID")


class VariantTagUpdate(UpdateModel):
    not_nullable = ("variant_id", "tag_id")

    variant_id: Optional[str] = None
    tag_id: Optional[str] = None


class VariantTagResponse(ResponseModel, VariantTagCreate):
    pass
