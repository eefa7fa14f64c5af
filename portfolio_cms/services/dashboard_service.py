"""Admin dashboard statistics"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.models import Category, Project, ProjectImage, ProjectVideo
from portfolio_cms.schemas.dashboard import DashboardStats, RecentProject

RECENT_PROJECTS_LIMIT = 5


class DashboardService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _count(self, column, *filters) -> int:
        query = select(func.count(column))
        if filters:
            query = query.where(*filters)
        return (await self.db.execute(query)).scalar() or 0

    async def get_stats(self) -> DashboardStats:
        total = await self._count(Project.id)
        published = await self._count(Project.id, Project.published.is_(True))

        recent = await self.db.execute(
            select(Project).order_by(Project.updated_at.desc()).limit(RECENT_PROJECTS_LIMIT)
        )

        return DashboardStats(
            total_projects=total,
            published_projects=published,
            draft_projects=total - published,
            total_categories=await self._count(Category.id),
            total_images=await self._count(ProjectImage.id),
            total_videos=await self._count(ProjectVideo.id),
            recent_projects=[RecentProject.model_validate(p) for p in recent.scalars().all()],
        )
