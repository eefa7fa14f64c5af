"""Project schemas"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from uuid import UUID

from portfolio_cms.schemas.content_block import RenderedBlock
from portfolio_cms.schemas.media import ImageResponse, VideoResponse


class ProjectBase(BaseModel):
    """Fields shared by project create, update and responses"""
    location: Optional[str] = Field(None, max_length=255, description="City or neighbourhood")
    short_description: Optional[str] = Field(None, max_length=500, description="Card summary")
    description: Optional[str] = Field(None, description="Long description (HTML from the editor)")
    client: Optional[str] = Field(None, max_length=255)
    start_date: Optional[date] = None
    completion_date: Optional[date] = None
    area_sqm: Optional[float] = Field(None, ge=0, description="Built area in square metres")
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    budget_range: Optional[str] = Field(None, max_length=100)
    construction_type: Optional[str] = Field(None, max_length=100)
    meta_title: Optional[str] = Field(None, max_length=255)
    meta_description: Optional[str] = Field(None, max_length=500)


class ProjectCreate(ProjectBase):
    """
    Project creation schema.

    Either category_id or a category name must be given; when category_id is
    set the stored name is taken from the category row. The slug is derived
    from the title when omitted.
    """
    title: str = Field(..., min_length=1, max_length=255, description="Project title")
    slug: Optional[str] = Field(None, max_length=255, description="URL slug")
    category_id: Optional[UUID] = Field(None, description="Category UUID")
    category: Optional[str] = Field(None, max_length=255, description="Category name")
    cover_image: Optional[str] = Field(None, description="Cover image URL")
    materials: Dict[str, Any] = Field(default_factory=dict)
    features: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    published: bool = False


class ProjectUpdate(ProjectBase):
    """Project update schema - only fields that are set are written"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, max_length=255)
    category_id: Optional[UUID] = None
    category: Optional[str] = Field(None, max_length=255)
    materials: Optional[Dict[str, Any]] = None
    features: Optional[List[str]] = None
    keywords: Optional[List[str]] = None
    published: Optional[bool] = None


class ProjectResponse(ProjectBase):
    """Project response schema"""
    id: UUID
    title: str
    slug: str
    category: str
    category_id: Optional[UUID] = None
    cover_image: Optional[str] = None
    materials: Dict[str, Any] = Field(default_factory=dict)
    features: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    published: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ComparisonPair(BaseModel):
    index: int
    before: ImageResponse
    after: ImageResponse


class ComparisonResponse(BaseModel):
    """Before/after comparison; unavailable when either side has no images"""
    available: bool
    pair_count: int
    pairs: List[ComparisonPair] = Field(default_factory=list)


class ProjectDetailResponse(ProjectResponse):
    """Project with its ordered media collections"""
    images: List[ImageResponse] = Field(default_factory=list)
    gallery_images: List[ImageResponse] = Field(default_factory=list)
    before_images: List[ImageResponse] = Field(default_factory=list)
    after_images: List[ImageResponse] = Field(default_factory=list)
    videos: List[VideoResponse] = Field(default_factory=list)
    content_blocks: List[RenderedBlock] = Field(default_factory=list)
    comparison: ComparisonResponse


class ProjectListResponse(BaseModel):
    """List of projects response"""
    projects: List[ProjectResponse]
    total: int = Field(..., description="Total number of projects")
    page: int = Field(default=1, description="Current page number")
    page_size: int = Field(default=12, description="Number of items per page")


class CoverImageUpdate(BaseModel):
    """Set the cover to an existing image URL, or clear it with null"""
    cover_image: Optional[str] = None


class SlugCheckResponse(BaseModel):
    slug: str
    valid: bool
    available: bool
