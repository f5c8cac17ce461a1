"""
Routes for catalog reference data: categories, colors, tag groups, tags and fertilizers.
"""

from fastapi import APIRouter

from nursery.api.routes.crud import build_crud_router
from nursery.api.schemas.catalog import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    ColorCreate,
    ColorResponse,
    ColorUpdate,
    FertilizerCreate,
    FertilizerResponse,
    FertilizerUpdate,
    TagCreate,
    TagGroupCreate,
    TagGroupResponse,
    TagGroupUpdate,
    TagResponse,
    TagUpdate,
)
from nursery.services.catalog import (
    CategoryService,
    ColorService,
    FertilizerService,
    TagGroupService,
    TagService,
)

router = APIRouter()

router.include_router(
    build_crud_router(
        prefix="/categories",
        label="category",
        plural="categories",
        service=CategoryService(),
        create_schema=CategoryCreate,
        update_schema=CategoryUpdate,
        response_schema=CategoryResponse,
    )
)

router.include_router(
    build_crud_router(
        prefix="/colors",
        label="color",
        plural="colors",
        service=ColorService(),
        create_schema=ColorCreate,
        update_schema=ColorUpdate,
        response_schema=ColorResponse,
    )
)

router.include_router(
    build_crud_router(
        prefix="/tag-groups",
        label="tag group",
        plural="tag groups",
        service=TagGroupService(),
        create_schema=TagGroupCreate,
        update_schema=TagGroupUpdate,
        response_schema=TagGroupResponse,
    )
)

router.include_router(
    build_crud_router(
        prefix="/tags",
        label="tag",
        plural="tags",
        service=TagService(),
        create_schema=TagCreate,
        update_schema=TagUpdate,
        response_schema=TagResponse,
        filter_field="tag_group_id",
    )
)

router.include_router(
    build_crud_router(
        prefix="/fertilizers",
        label="fertilizer",
        plural="fertilizers",
        service=FertilizerService(),
        create_schema=FertilizerCreate,
        update_schema=FertilizerUpdate,
        response_schema=FertilizerResponse,
    )
)
