"""
Routes for per-plant records: size profiles, care guidelines and fertilizer schedules.
All three lists accept ?plantId= to return the records of one plant.
"""

from fastapi import APIRouter

from nursery.api.routes.crud import build_crud_router
from nursery.api.schemas.care import (
    CareGuidelineCreate,
    CareGuidelineResponse,
    CareGuidelineUpdate,
    FertilizerScheduleCreate,
    FertilizerScheduleResponse,
    FertilizerScheduleUpdate,
    SizeProfileCreate,
    SizeProfileResponse,
    SizeProfileUpdate,
)
from nursery.services.plant import (
    CareGuidelineService,
    FertilizerScheduleService,
    SizeProfileService,
)

router = APIRouter()

router.include_router(
    build_crud_router(
        prefix="/size-profiles",
        label="size profile",
        plural="size profiles",
        service=SizeProfileService(),
        create_schema=SizeProfileCreate,
        update_schema=SizeProfileUpdate,
        response_schema=SizeProfileResponse,
        filter_field="plant_id",
    )
)

router.include_router(
    build_crud_router(
        prefix="/care-guidelines",
        label="care guideline",
        plural="care guidelines",
        service=CareGuidelineService(),
        create_schema=CareGuidelineCreate,
        update_schema=CareGuidelineUpdate,
        response_schema=CareGuidelineResponse,
        filter_field="plant_id",
    )
)

router.include_router(
    build_crud_router(
        prefix="/fertilizer-schedules",
        label="fertilizer schedule",
        plural="fertilizer schedules",
        service=FertilizerScheduleService(),
        create_schema=FertilizerScheduleCreate,
        update_schema=FertilizerScheduleUpdate,
        response_schema=FertilizerScheduleResponse,
        filter_field="plant_id",
    )
)
