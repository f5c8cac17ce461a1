"""
API router aggregation
Combines all route handlers into a single router
Reference: https://fastapi.tiangolo.com/tutorial/bigger-applications/
"""
from fastapi import APIRouter

from nursery.api.routes import care, catalog, health, plant, variant


def build_api_router(prefix: str) -> APIRouter:
    """
    Create the API router mounted under prefix (e.g. "/api")
    Each route module is added as a sub-router
    """
    api_router = APIRouter(prefix=prefix)
    api_router.include_router(plant.router)
    api_router.include_router(catalog.router)
    api_router.include_router(variant.router)
    api_router.include_router(care.router)
    api_router.include_router(health.router)
    return api_router
