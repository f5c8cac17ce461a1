"""
Services for plant variants and variant tags.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nursery.core.exceptions import DuplicateSkuError
from nursery.models.catalog import Color, Tag
from nursery.models.plant import Plant, PlantSizeProfile
from nursery.models.variant import PlantVariant, PlantVariantTag
from nursery.services.base import CrudService

logger = logging.getLogger(__name__)


class VariantService(CrudService[PlantVariant]):
    """Service for plant variants"""

    model = PlantVariant
    filter_fields = ("plant_id",)
    references = {"plant_id": Plant, "color_id": Color, "size_id": PlantSizeProfile}

    async def get_by_sku(self, db: AsyncSession, sku: str) -> Optional[PlantVariant]:
        """Get the variant that owns a SKU, if any."""
        result = await db.execute(select(PlantVariant).where(PlantVariant.sku == sku))
        return result.scalar_one_or_none()

    async def _before_write(
        self, db: AsyncSession, values: Dict[str, Any], record: Optional[PlantVariant]
    ) -> None:
        """
        Enforce SKU uniqueness.

        Raises:
            DuplicateSkuError: If another variant already uses the SKU
        """
        sku = values.get("sku")
        if sku is None:
            return

        owner = await self.get_by_sku(db, sku)
        if owner is not None and (record is None or owner.id != record.id):
            logger.warning(f"Rejected duplicate SKU '{sku}' (owned by variant {owner.id})")
            raise DuplicateSkuError(sku)


class VariantTagService(CrudService[PlantVariantTag]):
    """Service for variant/tag links"""

    model = PlantVariantTag
    filter_fields = ("variant_id",)
    references = {"variant_id": PlantVariant, "tag_id": Tag}
