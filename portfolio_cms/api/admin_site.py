"""Admin dashboard, site settings and SEO endpoints"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.database import get_db
from portfolio_cms.schemas.dashboard import DashboardStats
from portfolio_cms.schemas.site_settings import SiteSettingsResponse, SiteSettingsUpdate
from portfolio_cms.services.dashboard_service import DashboardService
from portfolio_cms.services.site_settings_service import SiteSettingsService
from portfolio_cms.services.sitemap_service import SitemapService

router = APIRouter(
    prefix="/api/v1/admin",
    tags=["Admin: Site"],
    dependencies=[Depends(require_admin)],
)


@router.get("/dashboard", response_model=DashboardStats)
async def dashboard(db: AsyncSession = Depends(get_db)):
    """Project, category and media counts plus the latest edited projects"""
    return await DashboardService(db).get_stats()


@router.get("/settings", response_model=SiteSettingsResponse)
async def get_settings(db: AsyncSession = Depends(get_db)):
    return await SiteSettingsService(db).get()


@router.put("/settings", response_model=SiteSettingsResponse)
async def update_settings(data: SiteSettingsUpdate, db: AsyncSession = Depends(get_db)):
    """Save the site settings; the public cache is evicted immediately"""
    return await SiteSettingsService(db).update(data)


@router.get("/seo/sitemap.xml")
async def download_sitemap(db: AsyncSession = Depends(get_db)):
    """Generated sitemap as a file download"""
    xml = await SitemapService(db).generate_sitemap()
    return Response(
        content=xml,
        media_type="application/xml",
        headers={"Content-Disposition": 'attachment; filename="sitemap.xml"'},
    )
