"""
Services for catalog reference data: categories, colors, tag groups,
tags and fertilizers.
"""

from nursery.models.catalog import Category, Color, Fertilizer, Tag, TagGroup
from nursery.services.base import CrudService


class CategoryService(CrudService[Category]):
    """Service for plant categories"""

    model = Category


class ColorService(CrudService[Color]):
    """Service for variant colors"""

    model = Color


class TagGroupService(CrudService[TagGroup]):
    """Service for tag groups"""

    model = TagGroup


class TagService(CrudService[Tag]):
    """Service for tags; tags can be listed per tag group"""

    model = Tag
    filter_fields = ("tag_group_id",)
    references = {"tag_group_id": TagGroup}


class FertilizerService(CrudService[Fertilizer]):
    """Service for fertilizer products"""

    model = Fertilizer
