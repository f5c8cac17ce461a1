"""create_nursery_catalog_tables

Revision ID: 3f9c2a7d1b04
Revises:
Create Date: 2026-10-19 10:12:41.208315

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a7d1b04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'categories',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  comment='Timestamp when category was created'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'colors',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('hex_code', sa.String(length=7), nullable=False, comment="CSS hex code, e.g. '#4CAF50'"),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'tag_groups',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'tags',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('tag_group_id', sa.String(length=36), nullable=True, comment='Owning tag group ID'),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tags_tag_group_id', 'tags', ['tag_group_id'])
    op.create_table(
        'fertilizers',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('npk_ratio', sa.String(length=20), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'plants',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('scientific_name', sa.String(length=200), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_featured', sa.Boolean(), nullable=False),
        sa.Column('plant_class', sa.String(length=100), nullable=True),
        sa.Column('series', sa.String(length=100), nullable=True),
        sa.Column('place_of_origin', sa.String(length=200), nullable=True),
        sa.Column('aura_type', sa.String(length=100), nullable=True),
        sa.Column('biodiversity_booster', sa.Boolean(), nullable=False),
        sa.Column('carbon_absorber', sa.Boolean(), nullable=False),
        sa.Column('temperature_min', sa.Integer(), nullable=True, comment='Minimum tolerated temperature (°C)'),
        sa.Column('temperature_max', sa.Integer(), nullable=True, comment='Maximum tolerated temperature (°C)'),
        sa.Column('category_id', sa.String(length=36), nullable=True, comment='Category ID'),
        sa.Column('soil', sa.JSON(), nullable=False),
        sa.Column('repotting', sa.JSON(), nullable=False),
        sa.Column('maintenance', sa.JSON(), nullable=False),
        sa.Column('inside_box', sa.JSON(), nullable=False),
        sa.Column('benefits', sa.JSON(), nullable=False),
        sa.Column('spiritual_use_case', sa.JSON(), nullable=False),
        sa.Column('best_for_emotion', sa.JSON(), nullable=False),
        sa.Column('best_gift_for', sa.JSON(), nullable=False),
        sa.Column('fun_facts', sa.JSON(), nullable=False),
        sa.Column('associated_deity', sa.String(length=100), nullable=True),
        sa.Column('god_aligned', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  comment='Timestamp when plant was created'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_plants_category_id', 'plants', ['category_id'])
    op.create_table(
        'plant_size_profiles',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('plant_id', sa.String(length=36), nullable=False),
        sa.Column('size', sa.String(length=10), nullable=False, comment='Small, Medium, Large or XL'),
        sa.Column('height', sa.Integer(), nullable=True, comment='Height in cm'),
        sa.Column('weight', sa.Numeric(precision=5, scale=2), nullable=True, comment='Weight in kg'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_plant_size_profiles_plant_id', 'plant_size_profiles', ['plant_id'])
    op.create_table(
        'plant_care_guidelines',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('plant_id', sa.String(length=36), nullable=False),
        sa.Column('season', sa.String(length=10), nullable=False, comment='Summer, Winter or Monsoon'),
        sa.Column('watering_frequency', sa.String(length=100), nullable=True),
        sa.Column('water_amount', sa.Integer(), nullable=True, comment='Water per watering in ml'),
        sa.Column('sunlight_type', sa.String(length=100), nullable=True),
        sa.Column('humidity_level', sa.String(length=100), nullable=True),
        sa.Column('care_notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_plant_care_guidelines_plant_id', 'plant_care_guidelines', ['plant_id'])
    op.create_table(
        'plant_fertilizer_schedules',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('plant_id', sa.String(length=36), nullable=False),
        sa.Column('fertilizer_id', sa.String(length=36), nullable=False),
        sa.Column('application_frequency', sa.String(length=100), nullable=True),
        sa.Column('application_method', sa.String(length=100), nullable=True),
        sa.Column('season', sa.String(length=50), nullable=True),
        sa.Column('application_time', sa.String(length=100), nullable=True),
        sa.Column('dosage', sa.String(length=100), nullable=True),
        sa.Column('safety_notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_plant_fertilizer_schedules_plant_id', 'plant_fertilizer_schedules', ['plant_id'])
    op.create_index('ix_plant_fertilizer_schedules_fertilizer_id', 'plant_fertilizer_schedules', ['fertilizer_id'])
    op.create_table(
        'plant_variants',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('plant_id', sa.String(length=36), nullable=False),
        sa.Column('color_id', sa.String(length=36), nullable=False),
        sa.Column('size_id', sa.String(length=36), nullable=True),
        sa.Column('sku', sa.String(length=100), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('cost_price', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('primary_image', sa.String(length=500), nullable=True),
        sa.Column('additional_images', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  comment='Timestamp when variant was created'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('sku'),
    )
    op.create_index('ix_plant_variants_plant_id', 'plant_variants', ['plant_id'])
    op.create_index('ix_plant_variants_color_id', 'plant_variants', ['color_id'])
    op.create_table(
        'plant_variant_tags',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('variant_id', sa.String(length=36), nullable=False),
        sa.Column('tag_id', sa.String(length=36), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_plant_variant_tags_variant_id', 'plant_variant_tags', ['variant_id'])
    op.create_index('ix_plant_variant_tags_tag_id', 'plant_variant_tags', ['tag_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('plant_variant_tags')
    op.drop_table('plant_variants')
    op.drop_table('plant_fertilizer_schedules')
    op.drop_table('plant_care_guidelines')
    op.drop_table('plant_size_profiles')
    op.drop_table('plants')
    op.drop_table('fertilizers')
    op.drop_table('tags')
    op.drop_table('tag_groups')
    op.drop_table('colors')
    op.drop_table('categories')
