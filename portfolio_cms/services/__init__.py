"""Services package"""

from .storage_service import StorageService
from .project_service import ProjectService
from .media_service import MediaService
from .content_block_service import ContentBlockService
from .category_service import CategoryService
from .site_settings_service import SiteSettingsService
from .sitemap_service import SitemapService
from .dashboard_service import DashboardService

__all__ = [
    "StorageService",
    "ProjectService",
    "MediaService",
    "ContentBlockService",
    "CategoryService",
    "SiteSettingsService",
    "SitemapService",
    "DashboardService",
]
