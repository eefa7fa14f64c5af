"""Admin content block endpoints"""

from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.api.admin_media import order_response
from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.database import get_db
from portfolio_cms.schemas.content_block import (
    ContentBlockCreate,
    ContentBlockResponse,
    ContentBlockUpdate,
)
from portfolio_cms.schemas.media import (
    NudgeRequest,
    OrderUpdateRequest,
    OrderUpdateResponse,
    ReorderRequest,
)
from portfolio_cms.services.content_block_service import ContentBlockService

router = APIRouter(
    prefix="/api/v1/admin",
    tags=["Admin: Content Blocks"],
    dependencies=[Depends(require_admin)],
)


@router.get("/projects/{project_id}/content-blocks", response_model=List[ContentBlockResponse])
async def list_blocks(project_id: UUID, db: AsyncSession = Depends(get_db)):
    return await ContentBlockService(db).list_blocks(project_id)


@router.post(
    "/projects/{project_id}/content-blocks",
    response_model=ContentBlockResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_block(project_id: UUID, data: ContentBlockCreate, db: AsyncSession = Depends(get_db)):
    """
    Append a block to the project

    - **block_type**: text, image, gallery, video, quote or two_columns
    - **content**: Optional payload; the empty payload of the type is used when omitted
    """
    return await ContentBlockService(db).create(project_id, data.block_type, data.content)


@router.patch("/content-blocks/{block_id}", response_model=ContentBlockResponse)
async def update_block(block_id: UUID, data: ContentBlockUpdate, db: AsyncSession = Depends(get_db)):
    """Replace the payload; it must match the block's type"""
    return await ContentBlockService(db).update_content(block_id, data.content)


@router.delete("/content-blocks/{block_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_block(block_id: UUID, db: AsyncSession = Depends(get_db)):
    await ContentBlockService(db).delete(block_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/projects/{project_id}/content-blocks/reorder", response_model=OrderUpdateResponse)
async def reorder_blocks(project_id: UUID, data: ReorderRequest, db: AsyncSession = Depends(get_db)):
    """Drag-and-drop move; all blocks get contiguous positions"""
    assignments = await ContentBlockService(db).reorder(project_id, data.from_index, data.to_index)
    return order_response(assignments)


@router.post("/content-blocks/{block_id}/nudge", response_model=OrderUpdateResponse)
async def nudge_block(block_id: UUID, data: NudgeRequest, db: AsyncSession = Depends(get_db)):
    """Move up/down by swapping with the neighbor"""
    return order_response(await ContentBlockService(db).nudge(block_id, data.direction))


@router.put("/projects/{project_id}/content-blocks/order", response_model=OrderUpdateResponse)
async def set_block_order(project_id: UUID, data: OrderUpdateRequest, db: AsyncSession = Depends(get_db)):
    return order_response(await ContentBlockService(db).set_order(project_id, data.items))
