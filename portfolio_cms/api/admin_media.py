"""Admin image and video endpoints"""

from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.database import get_db
from portfolio_cms.schemas.media import (
    ImageReorderRequest,
    ImageResponse,
    ImageTypeName,
    ImageUpdate,
    NudgeRequest,
    OrderItem,
    OrderUpdateRequest,
    OrderUpdateResponse,
    ReorderRequest,
    VideoCreate,
    VideoResponse,
    VideoUpdate,
)
from portfolio_cms.services.media_service import MediaService
from portfolio_cms.services.storage_service import StorageService, get_storage_service

router = APIRouter(
    prefix="/api/v1/admin",
    tags=["Admin: Media"],
    dependencies=[Depends(require_admin)],
)


def order_response(assignments) -> OrderUpdateResponse:
    return OrderUpdateResponse(
        updated=len(assignments),
        items=[OrderItem(id=a.id, order_index=a.order_index) for a in assignments],
    )


# Images

@router.get("/projects/{project_id}/images", response_model=List[ImageResponse])
async def list_images(
    project_id: UUID,
    image_type: Optional[ImageTypeName] = Query(None, description="Only this partition"),
    db: AsyncSession = Depends(get_db),
):
    return await MediaService(db).list_images(project_id, image_type)


@router.post(
    "/projects/{project_id}/images",
    response_model=ImageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_image(
    project_id: UUID,
    file: UploadFile = File(...),
    image_type: ImageTypeName = Form("gallery"),
    caption: Optional[str] = Form(None),
    alt_text: Optional[str] = Form(None),
    db: AsyncSession = Depends(get_db),
    storage: StorageService = Depends(get_storage_service),
):
    """
    Upload an image into the gallery, before or after partition

    The image is appended at the end of its partition.
    """
    data = await file.read()
    return await MediaService(db, storage).upload_image(
        project_id,
        file.filename or "",
        file.content_type or "",
        data,
        image_type=image_type,
        caption=caption,
        alt_text=alt_text,
    )


@router.patch("/images/{image_id}", response_model=ImageResponse)
async def update_image(image_id: UUID, data: ImageUpdate, db: AsyncSession = Depends(get_db)):
    return await MediaService(db).update_image(image_id, data)


@router.delete("/images/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_image(
    image_id: UUID,
    db: AsyncSession = Depends(get_db),
    storage: StorageService = Depends(get_storage_service),
):
    await MediaService(db, storage).delete_image(image_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/projects/{project_id}/images/reorder", response_model=OrderUpdateResponse)
async def reorder_images(project_id: UUID, data: ImageReorderRequest, db: AsyncSession = Depends(get_db)):
    """Move one image within its partition; the whole partition is renumbered"""
    assignments = await MediaService(db).reorder_images(
        project_id, data.image_type, data.from_index, data.to_index
    )
    return order_response(assignments)


@router.post("/images/{image_id}/nudge", response_model=OrderUpdateResponse)
async def nudge_image(image_id: UUID, data: NudgeRequest, db: AsyncSession = Depends(get_db)):
    """Swap with the previous or next image; at either end nothing changes"""
    return order_response(await MediaService(db).nudge_image(image_id, data.direction))


@router.put("/projects/{project_id}/images/order", response_model=OrderUpdateResponse)
async def set_image_order(project_id: UUID, data: OrderUpdateRequest, db: AsyncSession = Depends(get_db)):
    return order_response(await MediaService(db).set_image_order(project_id, data.items))


# Videos

@router.get("/projects/{project_id}/videos", response_model=List[VideoResponse])
async def list_videos(project_id: UUID, db: AsyncSession = Depends(get_db)):
    return await MediaService(db).list_videos(project_id)


@router.post(
    "/projects/{project_id}/videos",
    response_model=VideoResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_video(project_id: UUID, data: VideoCreate, db: AsyncSession = Depends(get_db)):
    """Attach a YouTube or Vimeo link; stored as the embeddable player URL"""
    return await MediaService(db).add_video(project_id, data)


@router.post(
    "/projects/{project_id}/videos/upload",
    response_model=VideoResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_video(
    project_id: UUID,
    file: UploadFile = File(...),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    db: AsyncSession = Depends(get_db),
    storage: StorageService = Depends(get_storage_service),
):
    data = await file.read()
    return await MediaService(db, storage).upload_video(
        project_id, file.filename or "", file.content_type or "", data,
        title=title, description=description,
    )


@router.patch("/videos/{video_id}", response_model=VideoResponse)
async def update_video(video_id: UUID, data: VideoUpdate, db: AsyncSession = Depends(get_db)):
    return await MediaService(db).update_video(video_id, data)


@router.delete("/videos/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_video(
    video_id: UUID,
    db: AsyncSession = Depends(get_db),
    storage: StorageService = Depends(get_storage_service),
):
    await MediaService(db, storage).delete_video(video_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/projects/{project_id}/videos/reorder", response_model=OrderUpdateResponse)
async def reorder_videos(project_id: UUID, data: ReorderRequest, db: AsyncSession = Depends(get_db)):
    assignments = await MediaService(db).reorder_videos(project_id, data.from_index, data.to_index)
    return order_response(assignments)


@router.post("/videos/{video_id}/nudge", response_model=OrderUpdateResponse)
async def nudge_video(video_id: UUID, data: NudgeRequest, db: AsyncSession = Depends(get_db)):
    return order_response(await MediaService(db).nudge_video(video_id, data.direction))
