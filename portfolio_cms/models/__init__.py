"""Database models package"""

from portfolio_cms.models.base import BaseModel
from portfolio_cms.models.user import User
from portfolio_cms.models.category import Category
from portfolio_cms.models.project import Project
from portfolio_cms.models.project_image import ProjectImage, ImageType
from portfolio_cms.models.project_video import ProjectVideo, VideoType
from portfolio_cms.models.content_block import ContentBlock
from portfolio_cms.models.site_settings import SiteSettings, SITE_SETTINGS_ID

# Export all models
__all__ = [
    "BaseModel",
    "User",
    "Category",
    "Project",
    "ProjectImage",
    "ImageType",
    "ProjectVideo",
    "VideoType",
    "ContentBlock",
    "SiteSettings",
    "SITE_SETTINGS_ID",
]
