"""
Catalog reference models shared by plants and variants:
categories, colors, tag groups, tags and fertilizers.

Reference: https://docs.sqlalchemy.org/en/20/orm/declarative_tables.html
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nursery.core.database import Base, new_id, utcnow


class Category(Base):
    """
    Plant category (e.g. "Indoor Plants").

    Attributes:
        id: Primary key (UUID string)
        name: Category name
        description: Optional description
        is_active: Whether the category is offered
        created_at: Timestamp when the category was created
    """

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        comment="Timestamp when category was created",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"


class Color(Base):
    """Color a plant variant is sold in (e.g. "Variegated", #81C784)."""

    __tablename__ = "colors"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    hex_code: Mapped[str] = mapped_column(
        String(7), nullable=False, comment="CSS hex code, e.g. '#4CAF50'"
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Color(id={self.id}, name='{self.name}', hex_code='{self.hex_code}')>"


class TagGroup(Base):
    """Named group of tags (e.g. "Indoor Collection")."""

    __tablename__ = "tag_groups"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class Tag(Base):
    """
    Tag attached to plant variants (e.g. "Pet Friendly").

    tag_group_id is a plain indexed column: the reference is checked when
    written, and removing a tag group leaves its tags in place.
    """

    __tablename__ = "tags"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    tag_group_id: Mapped[Optional[str]] = mapped_column(
        String(36), nullable=True, index=True, comment="Owning tag group ID"
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class Fertilizer(Base):
    """
    Fertilizer product used in plant fertilizer schedules.

    Attributes:
        type: Fertilizer kind (e.g. "NPK", "Organic", "Liquid")
        npk_ratio: Optional nitrogen-phosphorus-potassium ratio (e.g. "10-10-10")
    """

    __tablename__ = "fertilizers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    npk_ratio: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Fertilizer(id={self.id}, name='{self.name}', type='{self.type}')>"
