"""Tests for the content block service"""

import uuid

import pytest
from sqlalchemy import select

from portfolio_cms.models import ContentBlock
from portfolio_cms.schemas.media import OrderItem
from portfolio_cms.services.content_block_service import ContentBlockService
from portfolio_cms.services.exceptions import DomainValidationError, NotFoundError, OrderingError


async def stored_order(db_session, ids):
    result = await db_session.execute(select(ContentBlock.id, ContentBlock.order_index))
    stored = dict(result.all())
    return [stored[i] for i in ids]


@pytest.mark.asyncio
class TestContentBlockCrud:

    async def test_create_with_default_content(self, db_session, sample_project):
        block = await ContentBlockService(db_session).create(sample_project.id, "quote")

        assert block.block_type == "quote"
        assert block.content == {"quote": "", "author": "", "role": ""}
        assert block.order_index == 0

    async def test_create_appends_after_last_block(self, db_session, sample_project, make_blocks):
        await make_blocks(sample_project, 3)

        block = await ContentBlockService(db_session).create(
            sample_project.id, "image", {"url": "https://cdn.example.com/a.jpg", "caption": "Antes"}
        )

        assert block.order_index == 3
        assert block.content == {"url": "https://cdn.example.com/a.jpg", "caption": "Antes"}

    async def test_create_rejects_mismatched_content(self, db_session, sample_project):
        with pytest.raises(DomainValidationError):
            await ContentBlockService(db_session).create(sample_project.id, "video", {"title": "sem url"})

    async def test_create_unknown_type(self, db_session, sample_project):
        with pytest.raises(DomainValidationError):
            await ContentBlockService(db_session).create(sample_project.id, "carousel")

    async def test_create_for_missing_project(self, db_session):
        with pytest.raises(NotFoundError):
            await ContentBlockService(db_session).create(uuid.uuid4(), "text")

    async def test_update_content(self, db_session, sample_project, make_blocks):
        blocks = await make_blocks(sample_project, 1)

        block = await ContentBlockService(db_session).update_content(blocks[0].id, {"text": "<p>Novo</p>"})

        assert block.content == {"text": "<p>Novo</p>"}

    async def test_update_content_validates_against_stored_type(self, db_session, sample_project, make_blocks):
        blocks = await make_blocks(sample_project, 1)

        with pytest.raises(DomainValidationError):
            await ContentBlockService(db_session).update_content(blocks[0].id, {"text": 42})

    async def test_delete_keeps_gap(self, db_session, sample_project, make_blocks):
        blocks = await make_blocks(sample_project, 3)
        service = ContentBlockService(db_session)

        await service.delete(blocks[1].id)

        remaining = await service.list_blocks(sample_project.id)
        assert [b.order_index for b in remaining] == [0, 2]


@pytest.mark.asyncio
class TestContentBlockOrdering:

    async def test_move_fourth_block_to_front(self, db_session, sample_project, make_blocks):
        blocks = await make_blocks(sample_project, 5)
        ids = [b.id for b in blocks]

        assignments = await ContentBlockService(db_session).reorder(sample_project.id, 3, 0)

        assert [a.order_index for a in assignments] == [0, 1, 2, 3, 4]
        assert assignments[0].id == ids[3]
        assert await stored_order(db_session, ids) == [1, 2, 3, 0, 4]

    async def test_reorder_closes_gaps(self, db_session, sample_project, make_blocks):
        blocks = await make_blocks(sample_project, 3)
        ids = [b.id for b in blocks]
        service = ContentBlockService(db_session)
        await service.delete(ids[0])

        await service.reorder(sample_project.id, 1, 0)

        assert await stored_order(db_session, ids[1:]) == [1, 0]

    async def test_nudge_changes_two_rows(self, db_session, sample_project, make_blocks):
        blocks = await make_blocks(sample_project, 4)
        ids = [b.id for b in blocks]

        assignments = await ContentBlockService(db_session).nudge(ids[2], "previous")

        assert {a.id for a in assignments} == {ids[1], ids[2]}
        assert await stored_order(db_session, ids) == [0, 2, 1, 3]

    async def test_nudge_last_block_down(self, db_session, sample_project, make_blocks):
        blocks = await make_blocks(sample_project, 2)

        assert await ContentBlockService(db_session).nudge(blocks[1].id, "next") == []

    async def test_reorder_missing_project(self, db_session):
        with pytest.raises(NotFoundError):
            await ContentBlockService(db_session).reorder(uuid.uuid4(), 0, 1)

    async def test_set_order(self, db_session, sample_project, make_blocks):
        blocks = await make_blocks(sample_project, 2)
        ids = [b.id for b in blocks]

        await ContentBlockService(db_session).set_order(
            sample_project.id, [OrderItem(id=ids[0], order_index=5)]
        )

        assert await stored_order(db_session, ids) == [5, 1]

    async def test_set_order_rejects_shared_index(self, db_session, sample_project, make_blocks):
        blocks = await make_blocks(sample_project, 3)
        ids = [b.id for b in blocks]

        with pytest.raises(OrderingError):
            await ContentBlockService(db_session).set_order(
                sample_project.id, [OrderItem(id=ids[2], order_index=0)]
            )

        assert await stored_order(db_session, ids) == [0, 1, 2]

    async def test_set_order_unknown_block(self, db_session, sample_project, make_blocks):
        await make_blocks(sample_project, 1)

        with pytest.raises(OrderingError):
            await ContentBlockService(db_session).set_order(
                sample_project.id, [OrderItem(id=uuid.uuid4(), order_index=0)]
            )
