"""sitemap.xml and robots.txt generation"""

import logging
from datetime import datetime
from typing import List, NamedTuple, Optional
from xml.sax.saxutils import escape

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.config import settings
from portfolio_cms.models import Project

logger = logging.getLogger(__name__)

PROJECT_PATH = "/proyecto/{slug}"

STATIC_PAGES = (
    ("/", "weekly", 1.0),
    ("/politica-de-privacidad", "yearly", 0.3),
    ("/terminos-de-servicio", "yearly", 0.3),
)

DISALLOWED_PATHS = ("/admin/", "/auth/")


class SitemapUrl(NamedTuple):
    loc: str
    lastmod: str
    changefreq: str
    priority: float


class SitemapService:
    """Builds crawler files from the published projects"""

    def __init__(self, db: AsyncSession, base_url: Optional[str] = None):
        self.db = db
        self.base_url = (base_url or settings.site_base_url).rstrip("/")

    async def collect_urls(self) -> List[SitemapUrl]:
        """Static pages followed by every published project, most recently updated first"""
        today = datetime.utcnow().date().isoformat()
        urls = [
            SitemapUrl(f"{self.base_url}{path}", today, changefreq, priority)
            for path, changefreq, priority in STATIC_PAGES
        ]

        result = await self.db.execute(
            select(Project.slug, Project.updated_at)
            .where(Project.published.is_(True))
            .order_by(Project.updated_at.desc())
        )
        for slug, updated_at in result.all():
            urls.append(SitemapUrl(
                f"{self.base_url}{PROJECT_PATH.format(slug=slug)}",
                updated_at.date().isoformat(),
                "monthly",
                0.8,
            ))
        return urls

    async def generate_sitemap(self) -> str:
        urls = await self.collect_urls()
        entries = "\n".join(
            "  <url>\n"
            f"    <loc>{escape(url.loc)}</loc>\n"
            f"    <lastmod>{url.lastmod}</lastmod>\n"
            f"    <changefreq>{url.changefreq}</changefreq>\n"
            f"    <priority>{url.priority:.1f}</priority>\n"
            "  </url>"
            for url in urls
        )
        logger.info(f"Generated sitemap with {len(urls)} URLs")
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
            f"{entries}\n"
            "</urlset>\n"
        )

    def generate_robots_txt(self) -> str:
        lines = [
            "User-agent: *",
            "Allow: /",
            "",
            f"Sitemap: {self.base_url}/sitemap.xml",
            "",
        ]
        lines += [f"Disallow: {path}" for path in DISALLOWED_PATHS]
        lines += ["", "Allow: /proyecto/"]
        lines += [f"Allow: {path}" for path, _, _ in STATIC_PAGES if path != "/"]
        lines += ["", "Crawl-delay: 1", ""]
        return "\n".join(lines)
