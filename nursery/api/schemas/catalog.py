"""
Schemas for catalog reference data: categories, colors, tag groups, tags and fertilizers.

Reference: https://fastapi.tiangolo.com/tutorial/body/
"""

from typing import Optional

from pydantic import Field

from nursery.api.schemas.common import CamelModel, ResponseModel, UpdateModel, UtcDatetime

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}){1,2}$"
NPK_RATIO_PATTERN = r"^\d{1,2}-\d{1,2}-\d{1,2}$"


# Categories
class CategoryCreate(CamelModel):
    """Schema for creating a category"""

    name: str = Field(..., min_length=1, max_length=200, description="Category name")
    description: Optional[str] = Field(None, description="Category description")
    is_active: bool = Field(default=True, description="Whether the category is offered")


class CategoryUpdate(UpdateModel):
    not_nullable = ("name", "is_active")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class CategoryResponse(ResponseModel, CategoryCreate):
    created_at: UtcDatetime = Field(..., description="Timestamp when category was created")


# Colors
class ColorCreate(CamelModel):
    """Schema for creating a color"""

    name: str = Field(..., min_length=1, max_length=100, description="Color name (e.g. 'Variegated')")
    hex_code: str = Field(..., pattern=HEX_COLOR_PATTERN, description="CSS hex code (e.g. '#81C784')")
    is_active: bool = Field(default=True)


class ColorUpdate(UpdateModel):
    not_nullable = ("name", "hex_code", "is_active")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    hex_code: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    is_active: Optional[bool] = None


class ColorResponse(ResponseModel, ColorCreate):
    pass


# Tag groups
class TagGroupCreate(CamelModel):
    """Schema for creating a tag group"""

    name: str = Field(..., min_length=1, max_length=100, description="Tag group name")
    description: Optional[str] = None
    is_active: bool = Field(default=True)


class TagGroupUpdate(UpdateModel):
    not_nullable = ("name", "is_active")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class TagGroupResponse(ResponseModel, TagGroupCreate):
    pass


# Tags
class TagCreate(CamelModel):
    """Schema for creating a tag"""

    name: str = Field(..., min_length=1, max_length=100, description="Tag name (e.g. 'Pet Friendly')")
    tag_group_id: Optional[str] = Field(None, description="Owning tag group ID")
    is_active: bool = Field(default=True)


class TagUpdate(UpdateModel):
    not_nullable = ("name", "is_active")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    tag_group_id: Optional[str] = None
    is_active: Optional[bool] = None


class TagResponse(ResponseModel, TagCreate):
    pass


# Fertilizers
class FertilizerCreate(CamelModel):
    """Schema for creating a fertilizer"""

    name: str = Field(..., min_length=1, max_length=100, description="Fertilizer name")
    type: str = Field(..., min_length=1, max_length=50, description="Kind of fertilizer (e.g. 'NPK', 'Organic', 'Liquid')")
    npk_ratio: Optional[str] = Field(None, pattern=NPK_RATIO_PATTERN, description="N-P-K ratio (e.g. '10-10-10')")
    description: Optional[str] = None
    is_active: bool = Field(default=True)


class FertilizerUpdate(UpdateModel):
    not_nullable = ("name", "type", "is_active")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    npk_ratio: Optional[str] = Field(None, pattern=NPK_RATIO_PATTERN)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class FertilizerResponse(ResponseModel, FertilizerCreate):
    pass
