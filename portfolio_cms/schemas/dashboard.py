"""Admin dashboard schemas"""

from typing import List
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, ConfigDict


class RecentProject(BaseModel):
    id: UUID
    title: str
    slug: str
    category: str
    published: bool
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DashboardStats(BaseModel):
    total_projects: int
    published_projects: int
    draft_projects: int
    total_categories: int
    total_images: int
    total_videos: int
    recent_projects: List[RecentProject]
