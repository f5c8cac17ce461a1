"""
Plant service and services for the records each plant owns:
size profiles, care guidelines and fertilizer schedules.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from nursery.api.schemas.plant import check_temperature_range
from nursery.models.catalog import Category, Fertilizer
from nursery.models.plant import (
    Plant,
    PlantCareGuideline,
    PlantFertilizerSchedule,
    PlantSizeProfile,
)
from nursery.services.base import CrudService

logger = logging.getLogger(__name__)


class PlantService(CrudService[Plant]):
    """Service for plants"""

    model = Plant
    filter_fields = ("category_id",)
    references = {"category_id": Category}

    async def _before_write(
        self, db: AsyncSession, values: Dict[str, Any], record: Optional[Plant]
    ) -> None:
        """
        Check the temperature range of the record as it will be stored.

        A partial update may send a single bound; it is compared with the
        bound already stored on the plant.
        """
        if record is None:
            check_temperature_range(values.get("temperature_min"), values.get("temperature_max"))
            return

        temperature_min = values.get("temperature_min", record.temperature_min)
        temperature_max = values.get("temperature_max", record.temperature_max)
        try:
            check_temperature_range(temperature_min, temperature_max)
        except ValueError:
            logger.warning(
                f"Rejected update of plant {record.id}: temperature range "
                f"{temperature_min}..{temperature_max}"
            )
            raise


class SizeProfileService(CrudService[PlantSizeProfile]):
    """Service for plant size profiles"""

    model = PlantSizeProfile
    filter_fields = ("plant_id",)
    references = {"plant_id": Plant}


class CareGuidelineService(CrudService[PlantCareGuideline]):
    """Service for seasonal plant care guidelines"""

    model = PlantCareGuideline
    filter_fields = ("plant_id",)
    references = {"plant_id": Plant}


class FertilizerScheduleService(CrudService[PlantFertilizerSchedule]):
    """Service for plant fertilizer schedules"""

    model = PlantFertilizerSchedule
    filter_fields = ("plant_id",)
    references = {"plant_id": Plant, "fertilizer_id": Fertilizer}
