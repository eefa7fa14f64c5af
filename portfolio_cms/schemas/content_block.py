"""Content block schemas

The ``content`` payload of a block is a JSON document whose shape depends on
``block_type``. Each block type has one payload model below; storage keeps the
payload opaque.
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

BlockType = Literal["text", "image", "gallery", "video", "quote", "two_columns"]
BLOCK_TYPES = ("text", "image", "gallery", "video", "quote", "two_columns")


class TextContent(BaseModel):
    text: str = ""


class ImageContent(BaseModel):
    url: str = Field(..., description="Public image URL")
    caption: Optional[str] = None
    alt: Optional[str] = None


class GalleryContent(BaseModel):
    images: List[ImageContent] = Field(default_factory=list)


class VideoContent(BaseModel):
    url: str = Field(..., description="Embed URL or uploaded file URL")
    type: Literal["youtube", "vimeo", "upload"] = "youtube"
    title: Optional[str] = None
    description: Optional[str] = None


class QuoteContent(BaseModel):
    quote: str = ""
    author: Optional[str] = None
    role: Optional[str] = None


class TwoColumnsContent(BaseModel):
    """Two side-by-side columns, each holding a text or image payload"""

    model_config = ConfigDict(populate_by_name=True)

    left_type: Literal["text", "image"] = Field("text", alias="leftType")
    right_type: Literal["text", "image"] = Field("text", alias="rightType")
    left_content: Union[TextContent, ImageContent] = Field(alias="leftContent")
    right_content: Union[TextContent, ImageContent] = Field(alias="rightContent")

    @model_validator(mode="before")
    @classmethod
    def parse_sides_by_type(cls, data: Any) -> Any:
        """Each side's payload is parsed with the model its declared type names"""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for side in ("left", "right"):
            type_key = f"{side}Type" if f"{side}Type" in data else f"{side}_type"
            content_key = f"{side}Content" if f"{side}Content" in data else f"{side}_content"
            declared = data.get(type_key, "text")
            raw = data.get(content_key)
            if isinstance(raw, dict):
                side_model = ImageContent if declared == "image" else TextContent
                data[content_key] = side_model.model_validate(raw)
        return data


BlockContent = Union[
    TextContent, ImageContent, GalleryContent, VideoContent, QuoteContent, TwoColumnsContent
]

CONTENT_MODELS: Dict[str, type] = {
    "text": TextContent,
    "image": ImageContent,
    "gallery": GalleryContent,
    "video": VideoContent,
    "quote": QuoteContent,
    "two_columns": TwoColumnsContent,
}


class ContentBlockCreate(BaseModel):
    """Request schema for adding a block; content defaults per type when omitted"""
    block_type: BlockType
    content: Optional[Dict[str, Any]] = None


class ContentBlockUpdate(BaseModel):
    content: Dict[str, Any]


class ContentBlockResponse(BaseModel):
    """Stored block as seen by the admin editor"""
    id: UUID
    project_id: UUID
    block_type: str
    content: Dict[str, Any]
    order_index: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RenderedBlock(BaseModel):
    """Block prepared for public display; unsupported types become placeholders"""
    id: UUID
    block_type: str
    order_index: int
    content: Dict[str, Any] = Field(default_factory=dict)
    original_type: Optional[str] = None
    message: Optional[str] = None
