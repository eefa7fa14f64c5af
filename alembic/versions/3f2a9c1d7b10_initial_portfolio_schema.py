"""Initial portfolio schema

Revision ID: 3f2a9c1d7b10
Revises:
Create Date: 2026-10-19 10:12:31.518204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID, JSONB


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    ]


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=True),
        sa.Column('role', sa.String(50), nullable=False, server_default='user'),
        *_timestamps(),
    )
    op.create_index('ix_users_email', 'users', ['email'])

    # Create categories table
    op.create_table(
        'categories',
        sa.Column('id', UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False, unique=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_categories_slug', 'categories', ['slug'])

    # Create projects table
    op.create_table(
        'projects',
        sa.Column('id', UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False, unique=True),
        sa.Column('category', sa.String(255), nullable=False),
        sa.Column('category_id', UUID(as_uuid=True), sa.ForeignKey('categories.id', ondelete='SET NULL'), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('short_description', sa.String(500), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('cover_image', sa.Text(), nullable=True),
        sa.Column('client', sa.String(255), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('completion_date', sa.Date(), nullable=True),
        sa.Column('area_sqm', sa.Float(), nullable=True),
        sa.Column('bedrooms', sa.Integer(), nullable=True),
        sa.Column('bathrooms', sa.Integer(), nullable=True),
        sa.Column('budget_range', sa.String(100), nullable=True),
        sa.Column('construction_type', sa.String(100), nullable=True),
        sa.Column('materials', JSONB(), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column('features', JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column('keywords', JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column('meta_title', sa.String(255), nullable=True),
        sa.Column('meta_description', sa.String(500), nullable=True),
        sa.Column('published', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        *_timestamps(),
    )
    op.create_index('ix_projects_slug', 'projects', ['slug'])
    op.create_index('ix_projects_category_id', 'projects', ['category_id'])
    op.create_index('ix_projects_published', 'projects', ['published'])
    op.create_index('ix_projects_created_at', 'projects', ['created_at'])

    # Create project_images table (order_index is per image_type, not constrained)
    op.create_table(
        'project_images',
        sa.Column('id', UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('project_id', UUID(as_uuid=True), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('image_type', sa.String(20), nullable=False, server_default='gallery'),
        sa.Column('caption', sa.String(500), nullable=True),
        sa.Column('alt_text', sa.String(500), nullable=True),
        sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        sa.CheckConstraint("image_type IN ('gallery', 'before', 'after')", name='ck_project_images_image_type'),
    )
    op.create_index('ix_project_images_project_id', 'project_images', ['project_id'])
    op.create_index('ix_project_images_project_type_order', 'project_images', ['project_id', 'image_type', 'order_index'])

    # Create project_videos table
    op.create_table(
        'project_videos',
        sa.Column('id', UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('project_id', UUID(as_uuid=True), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False),
        sa.Column('video_url', sa.Text(), nullable=False),
        sa.Column('video_type', sa.String(20), nullable=False),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('thumbnail_url', sa.Text(), nullable=True),
        sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        sa.CheckConstraint("video_type IN ('youtube', 'vimeo', 'upload')", name='ck_project_videos_video_type'),
    )
    op.create_index('ix_project_videos_project_id', 'project_videos', ['project_id'])

    # Create project_content_blocks table (content schema is enforced by the application)
    op.create_table(
        'project_content_blocks',
        sa.Column('id', UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('project_id', UUID(as_uuid=True), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False),
        sa.Column('block_type', sa.String(50), nullable=False),
        sa.Column('content', JSONB(), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )
    op.create_index('ix_project_content_blocks_project_id', 'project_content_blocks', ['project_id'])

    # Create site_settings table (single row, fixed id)
    op.create_table(
        'site_settings',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('company_description', sa.Text(), nullable=True),
        sa.Column('address', sa.String(500), nullable=True),
        sa.Column('phone_number', sa.String(50), nullable=True),
        sa.Column('whatsapp_number', sa.String(50), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('working_hours_weekdays', sa.String(255), nullable=True),
        sa.Column('working_hours_saturday', sa.String(255), nullable=True),
        sa.Column('facebook_url', sa.Text(), nullable=True),
        sa.Column('instagram_url', sa.Text(), nullable=True),
        sa.Column('linkedin_url', sa.Text(), nullable=True),
        sa.Column('privacy_policy_url', sa.Text(), nullable=True),
        sa.Column('terms_of_service_url', sa.Text(), nullable=True),
        sa.Column('services_list', JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column('quick_links_list', JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table('site_settings')
    op.drop_index('ix_project_content_blocks_project_id', table_name='project_content_blocks')
    op.drop_table('project_content_blocks')
    op.drop_index('ix_project_videos_project_id', table_name='project_videos')
    op.drop_table('project_videos')
    op.drop_index('ix_project_images_project_type_order', table_name='project_images')
    op.drop_index('ix_project_images_project_id', table_name='project_images')
    op.drop_table('project_images')
    op.drop_index('ix_projects_created_at', table_name='projects')
    op.drop_index('ix_projects_published', table_name='projects')
    op.drop_index('ix_projects_category_id', table_name='projects')
    op.drop_index('ix_projects_slug', table_name='projects')
    op.drop_table('projects')
    op.drop_index('ix_categories_slug', table_name='categories')
    op.drop_table('categories')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
