"""Admin project endpoints"""

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.presenters import project_detail_response
from portfolio_cms.database import get_db
from portfolio_cms.schemas.project import (
    CoverImageUpdate,
    ProjectCreate,
    ProjectDetailResponse,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdate,
    SlugCheckResponse,
)
from portfolio_cms.services.project_service import ProjectService
from portfolio_cms.services.slug_service import is_valid_slug
from portfolio_cms.services.storage_service import StorageService, get_storage_service

router = APIRouter(
    prefix="/api/v1/admin",
    tags=["Admin: Projects"],
    dependencies=[Depends(require_admin)],
)


@router.get("/projects", response_model=ProjectListResponse)
async def list_projects(
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(50, ge=1, le=100, description="Items per page"),
    search: Optional[str] = Query(None, description="Match against title or slug"),
    published: Optional[bool] = Query(None, description="Filter by published state"),
    db: AsyncSession = Depends(get_db),
):
    """List all projects, drafts included, newest first"""
    projects, total = await ProjectService(db).list_all(page, page_size, search, published)
    return ProjectListResponse(
        projects=[ProjectResponse.model_validate(p) for p in projects],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/projects/slug-check", response_model=SlugCheckResponse)
async def check_slug(
    slug: str = Query(..., min_length=1, max_length=255),
    exclude_id: Optional[UUID] = Query(None, description="Project being edited"),
    db: AsyncSession = Depends(get_db),
):
    """
    Check a slug while the editor types it

    The project being edited may keep its own slug (pass its id as exclude_id).
    """
    valid = is_valid_slug(slug)
    available = valid and await ProjectService(db).is_slug_available(slug, exclude_id)
    return SlugCheckResponse(slug=slug, valid=valid, available=available)


@router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(data: ProjectCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a project

    Rejected with 409 when the slug is already used, before anything is written.
    """
    return await ProjectService(db).create(data)


@router.get("/projects/{project_id}", response_model=ProjectDetailResponse)
async def get_project(project_id: UUID, db: AsyncSession = Depends(get_db)):
    """Project with all media, published or not"""
    service = ProjectService(db)
    project = await service.get(project_id)
    return project_detail_response(await service.assemble(project))


@router.patch("/projects/{project_id}", response_model=ProjectResponse)
async def update_project(project_id: UUID, data: ProjectUpdate, db: AsyncSession = Depends(get_db)):
    return await ProjectService(db).update(project_id, data)


@router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: UUID,
    db: AsyncSession = Depends(get_db),
    storage: StorageService = Depends(get_storage_service),
):
    """Delete a project with its images, videos, content blocks and stored files"""
    await ProjectService(db, storage).delete(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/projects/{project_id}/cover", response_model=ProjectResponse)
async def set_cover_image(project_id: UUID, data: CoverImageUpdate, db: AsyncSession = Depends(get_db)):
    """Use an existing image URL as cover, or clear the cover with null"""
    return await ProjectService(db).set_cover_image(project_id, data.cover_image)


@router.post("/projects/{project_id}/cover/upload", response_model=ProjectResponse)
async def upload_cover_image(
    project_id: UUID,
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    storage: StorageService = Depends(get_storage_service),
):
    data = await file.read()
    return await ProjectService(db, storage).upload_cover_image(
        project_id, file.filename or "", file.content_type or "", data
    )
