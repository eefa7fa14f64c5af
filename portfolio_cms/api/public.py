"""Public (unauthenticated) endpoints backing the marketing site"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.api.presenters import project_detail_response
from portfolio_cms.database import get_db
from portfolio_cms.schemas.category import CategoryResponse
from portfolio_cms.schemas.project import ProjectDetailResponse, ProjectListResponse, ProjectResponse
from portfolio_cms.schemas.site_settings import SiteSettingsResponse
from portfolio_cms.services.category_service import CategoryService
from portfolio_cms.services.project_service import ProjectService
from portfolio_cms.services.site_settings_service import SiteSettingsService
from portfolio_cms.services.sitemap_service import SitemapService

router = APIRouter(prefix="/api/v1", tags=["Public"])
seo_router = APIRouter(tags=["SEO"])


@router.get("/projects", response_model=ProjectListResponse)
async def list_projects(
    category: Optional[str] = Query(None, description="Category slug or name"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(12, ge=1, le=100, description="Items per page"),
    db: AsyncSession = Depends(get_db),
):
    """
    List published projects, newest first

    - **category**: Optional filter by category slug or name
    - **page**: Page number (default: 1)
    - **page_size**: Items per page (default: 12, max: 100)
    """
    projects, total = await ProjectService(db).list_published(category, page, page_size)
    return ProjectListResponse(
        projects=[ProjectResponse.model_validate(p) for p in projects],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/projects/{slug}", response_model=ProjectDetailResponse)
async def get_project(slug: str, db: AsyncSession = Depends(get_db)):
    """
    Published project detail with ordered images (all, gallery, before,
    after), videos, rendered content blocks and the before/after comparison
    """
    service = ProjectService(db)
    project = await service.get_published_by_slug(slug)
    return project_detail_response(await service.assemble(project))


@router.get("/categories", response_model=List[CategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    return await CategoryService(db).list_categories()


@router.get("/site-settings", response_model=SiteSettingsResponse)
async def get_site_settings(db: AsyncSession = Depends(get_db)):
    """Contact details, social links and footer lists"""
    return await SiteSettingsService(db).get()


@seo_router.get("/sitemap.xml")
async def sitemap(db: AsyncSession = Depends(get_db)):
    xml = await SitemapService(db).generate_sitemap()
    return Response(content=xml, media_type="application/xml")


@seo_router.get("/robots.txt", response_class=PlainTextResponse)
async def robots(db: AsyncSession = Depends(get_db)):
    return SitemapService(db).generate_robots_txt()
