"""
Plant API routes
CRUD endpoints for plants
Reference: https://fastapi.tiangolo.com/tutorial/bigger-applications/
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from nursery.api.schemas.common import MessageResponse
from nursery.api.schemas.plant import PlantCreate, PlantResponse, PlantUpdate
from nursery.core.database import get_db
from nursery.services.plant import PlantService

logger = logging.getLogger(__name__)

# Create router for plant endpoints
router = APIRouter(
    prefix="/plants",
    tags=["plants"],  # Groups endpoints in API documentation
)


@router.get(
    "",
    response_model=List[PlantResponse],
    summary="List plants",
    description="Get all plants, optionally only those in one category.",
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Plants retrieved successfully"},
        500: {"description": "Internal server error"},
    },
)
async def get_plants(
    category_id: Optional[str] = Query(
        None, alias="categoryId", description="Filter by category ID"
    ),
    db: AsyncSession = Depends(get_db),
) -> List[PlantResponse]:
    """
    Get plants for the admin list view.

    **Filtering:**
    - Filter by category with ?categoryId=
    """
    plant_service = PlantService()
    try:
        plants = await plant_service.list_all(db, category_id=category_id)
        logger.info(f"Retrieved {len(plants)} plants")
        return plants
    except Exception as e:
        logger.error(f"Unexpected error getting plants: {type(e).__name__}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch plants",
        ) from e


@router.get(
    "/{plant_id}",
    response_model=PlantResponse,
    summary="Get plant",
    description="Get a specific plant by ID.",
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Plant retrieved successfully"},
        404: {"description": "Plant not found"},
        500: {"description": "Internal server error"},
    },
)
async def get_plant(
    plant_id: str,
    db: AsyncSession = Depends(get_db),
) -> PlantResponse:
    """Get a single plant by ID."""
    plant_service = PlantService()
    try:
        plant = await plant_service.get(db, plant_id)
        if not plant:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Plant not found"
            )
        return plant
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            f"Unexpected error getting plant {plant_id}: {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch plant",
        ) from e


@router.post(
    "",
    response_model=PlantResponse,
    summary="Create plant",
    description="Create a new plant.",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Plant created successfully"},
        400: {"description": "Invalid request data or validation error"},
        500: {"description": "Internal server error"},
    },
)
async def create_plant(
    plant_data: PlantCreate,
    db: AsyncSession = Depends(get_db),
) -> PlantResponse:
    """
    Create a new plant.

    **Defaults:**
    - isActive defaults to true; isFeatured, biodiversityBooster and carbonAbsorber to false
    - list fields (soil, benefits, funFacts, ...) default to empty lists

    **Validation:**
    - temperatureMin must not exceed temperatureMax
    - categoryId, when given, must reference an existing category
    """
    plant_service = PlantService()
    try:
        plant = await plant_service.create(db, plant_data)
        logger.info(f"Created plant '{plant.name}' ({plant.id})")
        return plant
    except ValueError as e:
        logger.warning(f"Plant creation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Invalid plant data", "error": str(e)},
        ) from e
    except Exception as e:
        logger.error(f"Unexpected error creating plant: {type(e).__name__}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create plant",
        ) from e


@router.put(
    "/{plant_id}",
    response_model=PlantResponse,
    summary="Update plant",
    description="Update a plant. Only the fields sent are changed.",
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Plant updated successfully"},
        400: {"description": "Invalid request data or validation error"},
        404: {"description": "Plant not found"},
        500: {"description": "Internal server error"},
    },
)
async def update_plant(
    plant_id: str,
    plant_data: PlantUpdate,
    db: AsyncSession = Depends(get_db),
) -> PlantResponse:
    """
    Update a plant.

    **Partial Updates:**
    - Only provided fields will be updated
    - Omitted fields remain unchanged
    """
    plant_service = PlantService()
    try:
        plant = await plant_service.update(db, plant_id, plant_data)
        if not plant:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Plant not found"
            )
        return plant
    except HTTPException:
        raise
    except ValueError as e:
        logger.warning(f"Plant update failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Invalid plant data", "error": str(e)},
        ) from e
    except Exception as e:
        logger.error(
            f"Unexpected error updating plant {plant_id}: {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update plant",
        ) from e


@router.delete(
    "/{plant_id}",
    response_model=MessageResponse,
    summary="Delete plant",
    description="Delete a plant. Its variants, size profiles, care guidelines and fertilizer schedules are kept.",
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Plant deleted successfully"},
        404: {"description": "Plant not found"},
        500: {"description": "Internal server error"},
    },
)
async def delete_plant(
    plant_id: str,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Delete a plant."""
    plant_service = PlantService()
    try:
        deleted = await plant_service.delete(db, plant_id)
        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Plant not found"
            )
        return MessageResponse(message="Plant deleted successfully")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            f"Unexpected error deleting plant {plant_id}: {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete plant",
        ) from e
