"""
Router factory for the standard CRUD surface of an entity.

build_crud_router() produces the same five endpoints as the plant routes
(list, get, create, update, delete) for a service and its schemas:

    GET    /<prefix>?<filter>=   -> 200 list
    GET    /<prefix>/{id}        -> 200 record | 404
    POST   /<prefix>             -> 201 record | 400
    PUT    /<prefix>/{id}        -> 200 record | 400 | 404
    DELETE /<prefix>/{id}        -> 200 {"message"} | 404

Reference: https://fastapi.tiangolo.com/tutorial/bigger-applications/
"""

import logging
from typing import List, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

from nursery.api.schemas.common import MessageResponse
from nursery.core.database import get_db
from nursery.core.exceptions import DuplicateSkuError
from nursery.services.base import CrudService

logger = logging.getLogger(__name__)


def build_crud_router(
    *,
    prefix: str,
    label: str,
    plural: str,
    service: CrudService,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
    filter_field: Optional[str] = None,
) -> APIRouter:
    """
    Build a router exposing list/get/create/update/delete for one entity.

    Args:
        prefix: URL prefix (e.g. "/care-guidelines")
        label: Singular name used in messages (e.g. "care guideline")
        plural: Plural name used in messages (e.g. "care guidelines")
        service: Service instance doing the database work
        create_schema / update_schema / response_schema: Pydantic models
        filter_field: Parent ID column that the list endpoint can filter by
            (exposed as a camelCase query parameter, e.g. plant_id -> ?plantId=)

    Returns:
        APIRouter to include in the API router
    """
    title = label[0].upper() + label[1:]
    router = APIRouter(prefix=prefix, tags=[plural])

    async def _list(db: AsyncSession, parent_id: Optional[str]):
        try:
            filters = {filter_field: parent_id} if filter_field else {}
            records = await service.list_all(db, **filters)
            logger.info(f"Retrieved {len(records)} {plural}")
            return records
        except Exception as e:
            logger.error(f"Unexpected error getting {plural}: {type(e).__name__}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to fetch {plural}",
            ) from e

    if filter_field:
        filter_alias = to_camel(filter_field)

        async def list_records(
            parent_id: Optional[str] = Query(
                None, alias=filter_alias, description=f"Filter by {filter_alias}"
            ),
            db: AsyncSession = Depends(get_db),
        ):
            return await _list(db, parent_id)
    else:
        async def list_records(db: AsyncSession = Depends(get_db)):
            return await _list(db, None)

    router.add_api_route(
        "",
        list_records,
        methods=["GET"],
        response_model=List[response_schema],
        summary=f"List {plural}",
        status_code=status.HTTP_200_OK,
        responses={500: {"description": "Internal server error"}},
    )

    @router.get(
        "/{record_id}",
        response_model=response_schema,
        summary=f"Get {label}",
        status_code=status.HTTP_200_OK,
        responses={
            404: {"description": f"{title} not found"},
            500: {"description": "Internal server error"},
        },
    )
    async def get_record(record_id: str, db: AsyncSession = Depends(get_db)):
        try:
            record = await service.get(db, record_id)
            if not record:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND, detail=f"{title} not found"
                )
            return record
        except HTTPException:
            raise
        except Exception as e:
            logger.error(
                f"Unexpected error getting {label} {record_id}: {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to fetch {label}",
            ) from e

    @router.post(
        "",
        response_model=response_schema,
        summary=f"Create {label}",
        status_code=status.HTTP_201_CREATED,
        responses={
            400: {"description": "Invalid request data or validation error"},
            500: {"description": "Internal server error"},
        },
    )
    async def create_record(data: create_schema, db: AsyncSession = Depends(get_db)):
        try:
            return await service.create(db, data)
        except DuplicateSkuError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
        except ValueError as e:
            logger.warning(f"{title} creation failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": f"Invalid {label} data", "error": str(e)},
            ) from e
        except Exception as e:
            logger.error(f"Unexpected error creating {label}: {type(e).__name__}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to create {label}",
            ) from e

    @router.put(
        "/{record_id}",
        response_model=response_schema,
        summary=f"Update {label}",
        description="Only the fields sent are changed.",
        status_code=status.HTTP_200_OK,
        responses={
            400: {"description": "Invalid request data or validation error"},
            404: {"description": f"{title} not found"},
            500: {"description": "Internal server error"},
        },
    )
    async def update_record(
        record_id: str, data: update_schema, db: AsyncSession = Depends(get_db)
    ):
        try:
            record = await service.update(db, record_id, data)
            if not record:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND, detail=f"{title} not found"
                )
            return record
        except HTTPException:
            raise
        except DuplicateSkuError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
        except ValueError as e:
            logger.warning(f"{title} update failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": f"Invalid {label} data", "error": str(e)},
            ) from e
        except Exception as e:
            logger.error(
                f"Unexpected error updating {label} {record_id}: {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to update {label}",
            ) from e

    @router.delete(
        "/{record_id}",
        response_model=MessageResponse,
        summary=f"Delete {label}",
        status_code=status.HTTP_200_OK,
        responses={
            404: {"description": f"{title} not found"},
            500: {"description": "Internal server error"},
        },
    )
    async def delete_record(record_id: str, db: AsyncSession = Depends(get_db)):
        try:
            deleted = await service.delete(db, record_id)
            if not deleted:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND, detail=f"{title} not found"
                )
            return MessageResponse(message=f"{title} deleted successfully")
        except HTTPException:
            raise
        except Exception as e:
            logger.error(
                f"Unexpected error deleting {label} {record_id}: {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to delete {label}",
            ) from e

    return router
