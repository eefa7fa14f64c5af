"""Project service: CRUD, category denormalization, cascade delete and cover image"""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.models import Category, ContentBlock, Project, ProjectImage, ProjectVideo, VideoType
from portfolio_cms.schemas.project import ProjectCreate, ProjectUpdate
from portfolio_cms.services.aggregation import AssembledProject, assemble_project
from portfolio_cms.services.exceptions import DomainValidationError, NotFoundError, SlugConflictError
from portfolio_cms.services.slug_service import generate_slug, is_slug_taken, is_valid_slug
from portfolio_cms.services.storage_service import StorageService

logger = logging.getLogger(__name__)


class ProjectService:
    """Service for managing portfolio projects"""

    def __init__(self, db: AsyncSession, storage: Optional[StorageService] = None):
        self.db = db
        self.storage = storage

    # Queries

    async def list_published(
        self,
        category: Optional[str] = None,
        page: int = 1,
        page_size: int = 12,
    ) -> Tuple[List[Project], int]:
        """
        Published projects, newest first.

        Args:
            category: Optional category slug or name
            page: 1-based page number
            page_size: Items per page

        Returns:
            (projects on the page, total matching projects)
        """
        filters = [Project.published.is_(True)]
        if category:
            category_ids = select(Category.id).where(Category.slug == category)
            filters.append(or_(Project.category_id.in_(category_ids), Project.category == category))
        return await self._paginate(filters, page, page_size)

    async def list_all(
        self,
        page: int = 1,
        page_size: int = 50,
        search: Optional[str] = None,
        published: Optional[bool] = None,
    ) -> Tuple[List[Project], int]:
        """All projects for the admin list, drafts included"""
        filters = []
        if search:
            pattern = f"%{search}%"
            filters.append(or_(Project.title.ilike(pattern), Project.slug.ilike(pattern)))
        if published is not None:
            filters.append(Project.published.is_(published))
        return await self._paginate(filters, page, page_size)

    async def _paginate(self, filters, page: int, page_size: int) -> Tuple[List[Project], int]:
        count_query = select(func.count(Project.id))
        query = select(Project)
        if filters:
            count_query = count_query.where(*filters)
            query = query.where(*filters)

        total = (await self.db.execute(count_query)).scalar() or 0

        offset = (page - 1) * page_size
        query = query.order_by(Project.created_at.desc(), Project.id).offset(offset).limit(page_size)
        result = await self.db.execute(query)
        return list(result.scalars().all()), total

    async def get(self, project_id: UUID) -> Project:
        project = await self.db.get(Project, project_id)
        if not project:
            raise NotFoundError("Project", project_id)
        return project

    async def get_published_by_slug(self, slug: str) -> Project:
        """Drafts are reported as not found on the public site"""
        result = await self.db.execute(
            select(Project).where(Project.slug == slug, Project.published.is_(True))
        )
        project = result.scalar_one_or_none()
        if not project:
            raise NotFoundError("Project", slug)
        return project

    async def assemble(self, project: Project) -> AssembledProject:
        """Load the project's images, videos and content blocks and assemble them"""
        images = await self.db.execute(select(ProjectImage).where(ProjectImage.project_id == project.id))
        videos = await self.db.execute(select(ProjectVideo).where(ProjectVideo.project_id == project.id))
        blocks = await self.db.execute(select(ContentBlock).where(ContentBlock.project_id == project.id))

        return assemble_project(
            project,
            images.scalars().all(),
            videos.scalars().all(),
            blocks.scalars().all(),
        )

    async def is_slug_available(self, slug: str, exclude_id: Optional[UUID] = None) -> bool:
        return not await is_slug_taken(self.db, slug, exclude_id=exclude_id)

    # Writes

    async def _checked_slug(self, slug: str, exclude_id: Optional[UUID] = None) -> str:
        if not is_valid_slug(slug):
            raise DomainValidationError(
                "Invalid slug",
                errors=[{"field": "slug", "message": "Use lowercase letters, numbers and hyphens only"}],
            )
        if await is_slug_taken(self.db, slug, exclude_id=exclude_id):
            raise SlugConflictError(slug)
        return slug

    async def _resolve_category(
        self, category_id: Optional[UUID], category_name: Optional[str]
    ) -> Tuple[Optional[UUID], str]:
        """
        category_id is the source of truth; the name is read from the category
        row whenever an id is given.
        """
        if category_id is not None:
            category = await self.db.get(Category, category_id)
            if not category:
                raise DomainValidationError(
                    f"Category {category_id} does not exist",
                    errors=[{"field": "category_id", "message": "Unknown category"}],
                )
            return category.id, category.name

        if not category_name or not category_name.strip():
            raise DomainValidationError(
                "Category is required",
                errors=[{"field": "category", "message": "Category is required"}],
            )
        return None, category_name.strip()

    async def _commit_with_slug(self, slug: str) -> None:
        # The unique constraint catches writers that raced past is_slug_taken
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise SlugConflictError(slug)

    async def create(self, data: ProjectCreate) -> Project:
        """
        Create a project.

        The slug is checked before anything is written; duplicates are
        rejected with SlugConflictError.
        """
        slug = await self._checked_slug(data.slug or generate_slug(data.title))
        category_id, category_name = await self._resolve_category(data.category_id, data.category)

        fields = data.model_dump(exclude={"slug", "category_id", "category"})
        project = Project(**fields, slug=slug, category_id=category_id, category=category_name)
        self.db.add(project)
        await self._commit_with_slug(slug)
        await self.db.refresh(project)

        logger.info(f"Created project {project.id} ({project.slug})")
        return project

    async def update(self, project_id: UUID, data: ProjectUpdate) -> Project:
        """Update the fields that were set; category id and name are written together"""
        project = await self.get(project_id)
        fields = data.model_dump(exclude_unset=True)

        slug = fields.pop("slug", None)
        if slug is not None and slug != project.slug:
            project.slug = await self._checked_slug(slug, exclude_id=project.id)

        if "category_id" in fields or "category" in fields:
            category_id = fields.pop("category_id", project.category_id)
            category_name = fields.pop("category", None) or project.category
            if "category_id" in data.model_fields_set and category_id is None:
                # Explicitly detached: keep the given (or current) label
                project.category_id, project.category = None, category_name
            else:
                project.category_id, project.category = await self._resolve_category(
                    category_id, category_name
                )

        for field, value in fields.items():
            if field in ("title", "published", "materials", "features", "keywords") and value is None:
                continue
            setattr(project, field, value)

        await self._commit_with_slug(project.slug)
        await self.db.refresh(project)

        logger.info(f"Updated project {project.id}")
        return project

    async def set_cover_image(self, project_id: UUID, cover_image: Optional[str]) -> Project:
        """Point the cover at an image URL (often one of the gallery images), or clear it"""
        project = await self.get(project_id)
        project.cover_image = cover_image or None
        await self.db.commit()
        await self.db.refresh(project)
        logger.info(f"Set cover image of project {project.id}")
        return project

    async def upload_cover_image(
        self, project_id: UUID, file_name: str, content_type: str, data: bytes
    ) -> Project:
        """
        Upload a dedicated cover file under {project_id}/cover/ and use it as cover.

        Raises:
            StorageError: If validation or the upload fails; the project is unchanged
        """
        project = await self.get(project_id)
        self.storage.validate_file(len(data), content_type, kind="image")

        path = self.storage.build_path(str(project.id), "cover", file_name, content_type)
        uploaded = self.storage.upload(path, data, content_type)

        project.cover_image = uploaded["public_url"]
        await self.db.commit()
        await self.db.refresh(project)
        logger.info(f"Uploaded cover image for project {project.id}")
        return project

    async def delete(self, project_id: UUID) -> dict:
        """
        Delete a project with all its images, videos and content blocks.

        Child rows go one at a time. Removing the backing storage objects is
        best-effort: a failed object removal is logged and the remaining
        deletions, including the project row, still happen.

        Returns:
            Counts of deleted child rows
        """
        project = await self.get(project_id)

        images = (await self.db.execute(
            select(ProjectImage).where(ProjectImage.project_id == project.id)
        )).scalars().all()
        videos = (await self.db.execute(
            select(ProjectVideo).where(ProjectVideo.project_id == project.id)
        )).scalars().all()
        blocks = (await self.db.execute(
            select(ContentBlock).where(ContentBlock.project_id == project.id)
        )).scalars().all()

        storage_urls = [image.image_url for image in images]
        storage_urls += [
            video.video_url for video in videos if video.video_type == VideoType.UPLOAD
        ]
        if project.cover_image:
            storage_urls.append(project.cover_image)

        for model, rows in ((ProjectImage, images), (ProjectVideo, videos), (ContentBlock, blocks)):
            for row in rows:
                await self.db.execute(delete(model).where(model.id == row.id))
                await self.db.commit()

        removed = 0
        if self.storage is not None:
            # Cover may be one of the gallery images; remove each object once
            for url in dict.fromkeys(storage_urls):
                if self.storage.remove_quietly(url):
                    removed += 1

        await self.db.execute(delete(Project).where(Project.id == project.id))
        await self.db.commit()

        logger.info(
            f"Deleted project {project_id}: {len(images)} images, {len(videos)} videos, "
            f"{len(blocks)} content blocks, {removed} storage objects"
        )
        return {
            "images": len(images),
            "videos": len(videos),
            "content_blocks": len(blocks),
            "storage_objects": removed,
        }
