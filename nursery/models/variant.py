"""
Plant variant models: sellable color/size combinations of a plant
and their tag links.

Reference: https://docs.sqlalchemy.org/en/20/orm/declarative_tables.html
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nursery.core.database import Base, new_id, utcnow


class PlantVariant(Base):
    """
    Sellable variant of a plant.

    Attributes:
        id: Primary key (UUID string)
        plant_id: Plant this variant belongs to
        color_id: Color of the variant
        size_id: Optional size profile of the same plant
        sku: Stock keeping unit, unique across all variants
        price: Selling price (2 decimal places)
        cost_price: Optional purchase price
        primary_image / additional_images: Image URLs
        created_at: Timestamp when variant was created
    """

    __tablename__ = "plant_variants"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    plant_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    color_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    size_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)

    # Unique constraint backs up the check done in VariantService
    sku: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    cost_price: Mapped[Optional[float]] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    primary_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    additional_images: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        comment="Timestamp when variant was created",
    )

    def __repr__(self) -> str:
        return f"<PlantVariant(id={self.id}, sku='{self.sku}', price={self.price})>"


class PlantVariantTag(Base):
    """Link between a plant variant and a tag."""

    __tablename__ = "plant_variant_tags"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    variant_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    tag_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
