"""Content block service for database operations"""

import logging
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.models import ContentBlock, Project
from portfolio_cms.schemas.media import OrderItem
from portfolio_cms.services.aggregation import sort_by_order
from portfolio_cms.services.content_blocks import default_content, normalize_content
from portfolio_cms.services.exceptions import NotFoundError
from portfolio_cms.services.media_service import check_order_items, next_order_index
from portfolio_cms.services.ordering import (
    OrderAssignment,
    apply_order_assignments,
    index_of,
    resequence,
    swap_with_neighbor,
)

logger = logging.getLogger(__name__)


class ContentBlockService:
    """Service for a project's ordered content blocks"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_blocks(self, project_id: UUID) -> List[ContentBlock]:
        result = await self.db.execute(select(ContentBlock).where(ContentBlock.project_id == project_id))
        return sort_by_order(result.scalars().all())

    async def get(self, block_id: UUID) -> ContentBlock:
        block = await self.db.get(ContentBlock, block_id)
        if not block:
            raise NotFoundError("Content block", block_id)
        return block

    async def create(
        self, project_id: UUID, block_type: str, content: Optional[Dict[str, Any]] = None
    ) -> ContentBlock:
        """
        Append a block at the end of the project's sequence.

        Without content the block starts with the empty payload of its type.

        Raises:
            NotFoundError: If the project does not exist
            DomainValidationError: If content does not match block_type
        """
        if not await self.db.get(Project, project_id):
            raise NotFoundError("Project", project_id)

        payload = default_content(block_type) if content is None else normalize_content(block_type, content)

        block = ContentBlock(
            project_id=project_id,
            block_type=block_type,
            content=payload,
            order_index=await next_order_index(
                self.db, ContentBlock, ContentBlock.project_id == project_id
            ),
        )
        self.db.add(block)
        await self.db.commit()
        await self.db.refresh(block)

        logger.info(f"Created {block_type} block {block.id} for project {project_id}")
        return block

    async def update_content(self, block_id: UUID, content: Dict[str, Any]) -> ContentBlock:
        """Replace a block's payload after validating it against the block's type"""
        block = await self.get(block_id)
        block.content = normalize_content(block.block_type, content)

        await self.db.commit()
        await self.db.refresh(block)
        logger.info(f"Updated content block {block.id}")
        return block

    async def delete(self, block_id: UUID) -> None:
        """Remaining blocks keep their order_index; the gap stays until the next reorder"""
        block = await self.get(block_id)
        await self.db.execute(delete(ContentBlock).where(ContentBlock.id == block.id))
        await self.db.commit()
        logger.info(f"Deleted content block {block_id}")

    async def reorder(self, project_id: UUID, from_index: int, to_index: int) -> List[OrderAssignment]:
        """Drag-and-drop move; every block of the project is renumbered 0..N-1"""
        if not await self.db.get(Project, project_id):
            raise NotFoundError("Project", project_id)
        blocks = await self.list_blocks(project_id)
        assignments = resequence(blocks, from_index, to_index)
        await apply_order_assignments(self.db, ContentBlock, assignments)
        return assignments

    async def nudge(self, block_id: UUID, direction: str) -> List[OrderAssignment]:
        """Swap a block with its neighbor; only those two rows change"""
        block = await self.get(block_id)
        blocks = await self.list_blocks(block.project_id)
        assignments = swap_with_neighbor(blocks, index_of(blocks, block.id), direction)
        await apply_order_assignments(self.db, ContentBlock, assignments)
        return assignments

    async def set_order(self, project_id: UUID, items: Sequence[OrderItem]) -> List[OrderAssignment]:
        if not await self.db.get(Project, project_id):
            raise NotFoundError("Project", project_id)
        assignments = check_order_items(await self.list_blocks(project_id), items)
        await apply_order_assignments(self.db, ContentBlock, assignments)
        return assignments
