"""Admin category endpoints"""

from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.database import get_db
from portfolio_cms.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from portfolio_cms.services.category_service import CategoryService

router = APIRouter(
    prefix="/api/v1/admin",
    tags=["Admin: Categories"],
    dependencies=[Depends(require_admin)],
)


@router.get("/categories", response_model=List[CategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    return await CategoryService(db).list_categories()


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(data: CategoryCreate, db: AsyncSession = Depends(get_db)):
    return await CategoryService(db).create(data)


@router.get("/categories/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: UUID, db: AsyncSession = Depends(get_db)):
    return await CategoryService(db).get(category_id)


@router.patch("/categories/{category_id}", response_model=CategoryResponse)
async def update_category(category_id: UUID, data: CategoryUpdate, db: AsyncSession = Depends(get_db)):
    """Renaming a category also renames it on all of its projects"""
    return await CategoryService(db).update(category_id, data)


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: UUID, db: AsyncSession = Depends(get_db)):
    await CategoryService(db).delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
