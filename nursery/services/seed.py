"""
Starter catalog inserted into an empty database on startup (SEED_DATA=true).
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from nursery.models.catalog import Category, Color, Fertilizer, Tag, TagGroup
from nursery.models.plant import Plant

logger = logging.getLogger(__name__)

SEED_COLORS = [
    ("Classic Green", "#4CAF50"),
    ("Variegated", "#81C784"),
    ("Dark Green", "#2E7D32"),
    ("Light Green", "#C8E6C9"),
]

SEED_FERTILIZERS = [
    ("NPK 10-10-10", "NPK", "10-10-10", "Balanced fertilizer for general use"),
    ("Organic Compost", "Organic", None, "Natural organic fertilizer"),
    ("Liquid Fertilizer", "Liquid", "5-5-5", "Quick absorption liquid fertilizer"),
]

SEED_TAGS = ["Air Purifying", "Low Maintenance", "Pet Friendly", "Beginner Friendly"]


async def seed_database(db: AsyncSession) -> bool:
    """
    Insert the starter catalog unless categories already exist.

    The caller commits. Returns True when data was inserted.
    """
    existing = await db.scalar(select(func.count()).select_from(Category))
    if existing:
        logger.info(f"Skipping seed data: {existing} categories already present")
        return False

    indoor = Category(
        name="Indoor Plants",
        description="Plants suitable for indoor environments",
    )
    outdoor = Category(
        name="Outdoor Plants",
        description="Plants suitable for outdoor environments",
    )
    db.add_all([indoor, outdoor])

    db.add_all(Color(name=name, hex_code=hex_code) for name, hex_code in SEED_COLORS)
    db.add_all(
        Fertilizer(name=name, type=kind, npk_ratio=npk_ratio, description=description)
        for name, kind, npk_ratio, description in SEED_FERTILIZERS
    )

    indoor_tags = TagGroup(name="Indoor Collection", description="Tags for indoor plants")
    db.add(indoor_tags)
    # Flush so the generated IDs can be referenced below
    await db.flush()

    db.add_all(Tag(name=name, tag_group_id=indoor_tags.id) for name in SEED_TAGS)
    db.add_all([
        Plant(
            name="Monstera Deliciosa",
            scientific_name="Monstera deliciosa",
            description="A popular indoor plant with distinctive split leaves",
            category_id=indoor.id,
            is_featured=True,
        ),
        Plant(
            name="Snake Plant",
            scientific_name="Sansevieria trifasciata",
            description="Low-maintenance air purifying plant perfect for beginners",
            category_id=indoor.id,
        ),
    ])
    await db.flush()

    logger.info("Inserted seed catalog (2 categories, 4 colors, 3 fertilizers, 4 tags, 2 plants)")
    return True
