"""API schemas package"""

from .project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectDetailResponse,
    ProjectListResponse,
    CoverImageUpdate,
    SlugCheckResponse,
)
from .media import (
    ImageResponse,
    ImageUpdate,
    VideoCreate,
    VideoUpdate,
    VideoResponse,
    ReorderRequest,
    ImageReorderRequest,
    NudgeRequest,
    OrderUpdateRequest,
    OrderUpdateResponse,
)
from .content_block import (
    ContentBlockCreate,
    ContentBlockUpdate,
    ContentBlockResponse,
    RenderedBlock,
)
from .category import CategoryCreate, CategoryUpdate, CategoryResponse
from .site_settings import SiteSettingsUpdate, SiteSettingsResponse

__all__ = [
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "ProjectDetailResponse",
    "ProjectListResponse",
    "CoverImageUpdate",
    "SlugCheckResponse",
    "ImageResponse",
    "ImageUpdate",
    "VideoCreate",
    "VideoUpdate",
    "VideoResponse",
    "ReorderRequest",
    "ImageReorderRequest",
    "NudgeRequest",
    "OrderUpdateRequest",
    "OrderUpdateResponse",
    "ContentBlockCreate",
    "ContentBlockUpdate",
    "ContentBlockResponse",
    "RenderedBlock",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "SiteSettingsUpdate",
    "SiteSettingsResponse",
]
