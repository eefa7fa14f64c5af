"""Site settings service: the singleton settings row behind a Redis cache"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.config import settings
from portfolio_cms.models import SITE_SETTINGS_ID, SiteSettings
from portfolio_cms.schemas.site_settings import SiteSettingsResponse, SiteSettingsUpdate
from portfolio_cms.services.redis_service import RedisService

logger = logging.getLogger(__name__)

CACHE_KEY = "site_settings"

# Shown until an admin saves the settings for the first time
DEFAULT_SITE_SETTINGS = {
    "company_description": "Construção e reformas residenciais e comerciais com acabamento de qualidade.",
    "email": "contato@galreforms.com",
    "working_hours_weekdays": "Seg - Sex: 8h às 18h",
    "working_hours_saturday": "Sáb: 8h às 12h",
    "services_list": [
        "Construção Residencial",
        "Reformas Completas",
        "Cozinhas e Banheiros",
        "Fachadas e Exteriores",
        "Projetos Comerciais",
        "Consultoria Técnica",
    ],
    "quick_links_list": [
        {"name": "Início", "href": "#home"},
        {"name": "Sobre", "href": "#about"},
        {"name": "Projetos", "href": "#projects"},
        {"name": "Contato", "href": "#contact"},
    ],
}


class SiteSettingsService:
    """
    Reads and writes the well-known site settings record.

    Reads are served from Redis for site_settings_cache_ttl_seconds; writes
    evict the cached copy. Redis problems never fail a request: they are
    logged and the database is used directly.
    """

    def __init__(self, db: AsyncSession, redis_service: Optional[RedisService] = None):
        self.db = db
        self.redis = redis_service or RedisService()

    async def _read_cache(self) -> Optional[SiteSettingsResponse]:
        try:
            cached = await self.redis.get_cache(CACHE_KEY)
            if not cached:
                return None
            return SiteSettingsResponse.model_validate_json(cached)
        except Exception as e:
            logger.warning(f"Site settings cache read failed: {e}")
            return None

    async def _write_cache(self, value: SiteSettingsResponse) -> None:
        try:
            await self.redis.set_cache(
                CACHE_KEY,
                value.model_dump_json(),
                expiration=settings.site_settings_cache_ttl_seconds,
            )
        except Exception as e:
            logger.warning(f"Site settings cache write failed: {e}")

    async def invalidate(self) -> None:
        try:
            await self.redis.delete_cache(CACHE_KEY)
        except Exception as e:
            logger.warning(f"Site settings cache eviction failed: {e}")

    @staticmethod
    def defaults() -> SiteSettingsResponse:
        return SiteSettingsResponse(id=SITE_SETTINGS_ID, **DEFAULT_SITE_SETTINGS)

    async def get(self) -> SiteSettingsResponse:
        """Current settings; defaults when the row has never been saved"""
        cached = await self._read_cache()
        if cached is not None:
            return cached

        row = await self.db.get(SiteSettings, SITE_SETTINGS_ID)
        value = SiteSettingsResponse.model_validate(row) if row else self.defaults()

        await self._write_cache(value)
        return value

    async def update(self, data: SiteSettingsUpdate) -> SiteSettingsResponse:
        """Upsert the singleton row with the fields that were set, then evict the cache"""
        row = await self.db.get(SiteSettings, SITE_SETTINGS_ID)
        if row is None:
            row = SiteSettings(id=SITE_SETTINGS_ID, **DEFAULT_SITE_SETTINGS)
            self.db.add(row)

        fields = data.model_dump(exclude_unset=True)
        for field, value in fields.items():
            if field in ("services_list", "quick_links_list") and value is None:
                continue
            setattr(row, field, value)

        await self.db.commit()
        await self.db.refresh(row)
        await self.invalidate()

        logger.info(f"Updated site settings: {sorted(fields)}")
        return SiteSettingsResponse.model_validate(row)
