"""Tests for the cached site settings service"""

import json
from unittest.mock import AsyncMock, Mock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from portfolio_cms.models import SITE_SETTINGS_ID, SiteSettings
from portfolio_cms.schemas.site_settings import QuickLink, SiteSettingsUpdate
from portfolio_cms.services.site_settings_service import CACHE_KEY, DEFAULT_SITE_SETTINGS, SiteSettingsService


def broken_redis():
    redis_service = Mock()
    redis_service.get_cache = AsyncMock(side_effect=RedisConnectionError("refused"))
    redis_service.set_cache = AsyncMock(side_effect=RedisConnectionError("refused"))
    redis_service.delete_cache = AsyncMock(side_effect=RedisConnectionError("refused"))
    return redis_service


@pytest.mark.asyncio
class TestSiteSettingsRead:

    async def test_defaults_when_never_saved(self, db_session):
        value = await SiteSettingsService(db_session).get()

        assert value.id == SITE_SETTINGS_ID
        assert value.email == DEFAULT_SITE_SETTINGS["email"]
        assert len(value.services_list) == 6
        assert value.quick_links_list[0] == QuickLink(name="Início", href="#home")

    async def test_reads_stored_row_and_caches_it(self, db_session, fake_redis):
        db_session.add(SiteSettings(id=SITE_SETTINGS_ID, phone_number="+34 600 000 000", services_list=["Reformas"]))
        await db_session.commit()

        value = await SiteSettingsService(db_session).get()

        assert value.phone_number == "+34 600 000 000"
        assert value.services_list == ["Reformas"]
        assert json.loads(fake_redis.store[CACHE_KEY])["phone_number"] == "+34 600 000 000"
        assert fake_redis.expirations[CACHE_KEY] == 300

    async def test_cached_copy_is_served(self, db_session, fake_redis):
        cached = SiteSettingsService.defaults().model_copy(update={"address": "Calle Mayor 1"})
        fake_redis.store[CACHE_KEY] = cached.model_dump_json()

        value = await SiteSettingsService(db_session).get()

        assert value.address == "Calle Mayor 1"

    async def test_corrupt_cache_entry_is_a_miss(self, db_session, fake_redis):
        fake_redis.store[CACHE_KEY] = "{not json"

        value = await SiteSettingsService(db_session).get()

        assert value.email == DEFAULT_SITE_SETTINGS["email"]

    async def test_redis_outage_falls_back_to_database(self, db_session):
        db_session.add(SiteSettings(id=SITE_SETTINGS_ID, email="obras@galreforms.com"))
        await db_session.commit()

        value = await SiteSettingsService(db_session, broken_redis()).get()

        assert value.email == "obras@galreforms.com"


@pytest.mark.asyncio
class TestSiteSettingsUpdate:

    async def test_first_update_starts_from_defaults(self, db_session):
        value = await SiteSettingsService(db_session).update(SiteSettingsUpdate(address="Calle Colón 10"))

        assert value.address == "Calle Colón 10"
        assert value.email == DEFAULT_SITE_SETTINGS["email"]
        assert await db_session.get(SiteSettings, SITE_SETTINGS_ID) is not None

    async def test_update_evicts_cache(self, db_session, fake_redis):
        service = SiteSettingsService(db_session)
        await service.get()
        assert CACHE_KEY in fake_redis.store

        await service.update(SiteSettingsUpdate(
            whatsapp_number="+34 611 111 111",
            quick_links_list=[QuickLink(name="Projetos", href="#projects")],
        ))

        assert CACHE_KEY not in fake_redis.store
        value = await service.get()
        assert value.whatsapp_number == "+34 611 111 111"
        assert value.quick_links_list == [QuickLink(name="Projetos", href="#projects")]

    async def test_null_lists_keep_stored_values(self, db_session):
        service = SiteSettingsService(db_session)
        await service.update(SiteSettingsUpdate(services_list=["Pintura"]))

        value = await service.update(SiteSettingsUpdate(services_list=None, address="Rua 1"))

        assert value.services_list == ["Pintura"]

    async def test_update_succeeds_when_redis_is_down(self, db_session):
        value = await SiteSettingsService(db_session, broken_redis()).update(
            SiteSettingsUpdate(email="novo@galreforms.com")
        )

        assert value.email == "novo@galreforms.com"
