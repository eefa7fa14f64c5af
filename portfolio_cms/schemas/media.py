"""Project image and video schemas"""

from typing import List, Literal, Optional
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, field_validator

ImageTypeName = Literal["gallery", "before", "after"]
Direction = Literal["previous", "next"]


class ImageResponse(BaseModel):
    id: UUID
    project_id: UUID
    image_url: str
    image_type: str
    caption: Optional[str] = None
    alt_text: Optional[str] = None
    order_index: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("image_type", mode="before")
    @classmethod
    def enum_value(cls, v):
        return getattr(v, "value", v)


class ImageUpdate(BaseModel):
    """
    Image detail update. Changing image_type moves the image to the end of
    the target partition.
    """
    caption: Optional[str] = Field(None, max_length=500)
    alt_text: Optional[str] = Field(None, max_length=500)
    image_type: Optional[ImageTypeName] = None
    order_index: Optional[int] = Field(None, ge=0)


class VideoCreate(BaseModel):
    """External video link; the page URL is converted to an embed URL"""
    video_url: str = Field(..., min_length=1)
    video_type: Literal["youtube", "vimeo"]
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None


class VideoUpdate(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    order_index: Optional[int] = Field(None, ge=0)


class VideoResponse(BaseModel):
    id: UUID
    project_id: UUID
    video_url: str
    video_type: str
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    order_index: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("video_type", mode="before")
    @classmethod
    def enum_value(cls, v):
        return getattr(v, "value", v)


class ReorderRequest(BaseModel):
    """Drag-and-drop move: relocate one item and renumber the whole sequence"""
    from_index: int = Field(..., ge=0)
    to_index: int = Field(..., ge=0)


class ImageReorderRequest(ReorderRequest):
    image_type: ImageTypeName = "gallery"


class NudgeRequest(BaseModel):
    """Swap an item with its immediate neighbor"""
    direction: Direction


class OrderItem(BaseModel):
    id: UUID
    order_index: int = Field(..., ge=0)


class OrderUpdateRequest(BaseModel):
    """Explicit order_index values for a set of rows"""
    items: List[OrderItem] = Field(..., min_length=1)


class OrderUpdateResponse(BaseModel):
    updated: int
    items: List[OrderItem]
