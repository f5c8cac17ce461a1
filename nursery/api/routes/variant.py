"""
Routes for plant variants (?plantId=) and variant tags (?variantId=).
Creating or updating a variant with a SKU already in use answers 409.
"""

from fastapi import APIRouter

from nursery.api.routes.crud import build_crud_router
from nursery.api.schemas.variant import (
    VariantCreate,
    VariantResponse,
    VariantTagCreate,
    VariantTagResponse,
    VariantTagUpdate,
    VariantUpdate,
)
from nursery.services.variant import VariantService, VariantTagService

router = APIRouter()

router.include_router(
    build_crud_router(
        prefix="/variants",
        label="variant",
        plural="variants",
        service=VariantService(),
        create_schema=VariantCreate,
        update_schema=VariantUpdate,
        response_schema=VariantResponse,
        filter_field="plant_id",
    )
)

router.include_router(
    build_crud_router(
        prefix="/variant-tags",
        label="variant tag",
        plural="variant tags",
        service=VariantTagService(),
        create_schema=VariantTagCreate,
        update_schema=VariantTagUpdate,
        response_schema=VariantTagResponse,
        filter_field="variant_id",
    )
)
