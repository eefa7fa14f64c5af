"""Category service for database operations"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.models import Category, Project
from portfolio_cms.schemas.category import CategoryCreate, CategoryUpdate
from portfolio_cms.services.exceptions import DomainValidationError, NotFoundError, SlugConflictError
from portfolio_cms.services.slug_service import generate_slug, is_slug_taken, is_valid_slug

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for managing project categories"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_categories(self) -> List[Category]:
        result = await self.db.execute(select(Category).order_by(Category.name))
        return list(result.scalars().all())

    async def get(self, category_id: UUID) -> Category:
        category = await self.db.get(Category, category_id)
        if not category:
            raise NotFoundError("Category", category_id)
        return category

    async def _checked_slug(self, slug: str, exclude_id: UUID = None) -> str:
        if not is_valid_slug(slug):
            raise DomainValidationError(
                "Invalid slug",
                errors=[{"field": "slug", "message": "Use lowercase letters, numbers and hyphens only"}],
            )
        if await is_slug_taken(self.db, slug, exclude_id=exclude_id, model=Category):
            raise SlugConflictError(slug, entity="category")
        return slug

    async def create(self, data: CategoryCreate) -> Category:
        """
        Create a category. The slug is derived from the name when not given.

        Raises:
            DomainValidationError: If the slug is malformed
            SlugConflictError: If another category already uses the slug
        """
        slug = await self._checked_slug(data.slug or generate_slug(data.name))

        category = Category(name=data.name.strip(), slug=slug, description=data.description)
        self.db.add(category)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise SlugConflictError(slug, entity="category")
        await self.db.refresh(category)

        logger.info(f"Created category {category.id} ({category.slug})")
        return category

    async def update(self, category_id: UUID, data: CategoryUpdate) -> Category:
        """
        Update a category.

        A new name is copied onto every project of the category in the same
        commit, so the denormalized project.category never lags behind.
        """
        category = await self.get(category_id)
        fields = data.model_dump(exclude_unset=True)

        if fields.get("slug") is not None and fields["slug"] != category.slug:
            category.slug = await self._checked_slug(fields["slug"], exclude_id=category.id)

        if fields.get("name") is not None and fields["name"].strip() != category.name:
            category.name = fields["name"].strip()
            await self.db.execute(
                update(Project)
                .where(Project.category_id == category.id)
                .values(category=category.name)
            )

        if "description" in fields:
            category.description = fields["description"]

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise SlugConflictError(data.slug, entity="category")
        await self.db.refresh(category)

        logger.info(f"Updated category {category.id}")
        return category

    async def delete(self, category_id: UUID) -> None:
        """
        Delete a category. Its projects keep their denormalized name and lose
        the reference (category_id becomes NULL).
        """
        category = await self.get(category_id)

        await self.db.execute(
            update(Project).where(Project.category_id == category.id).values(category_id=None)
        )
        await self.db.delete(category)
        await self.db.commit()

        logger.info(f"Deleted category {category_id}")
