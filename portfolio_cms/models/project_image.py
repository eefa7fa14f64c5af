"""Project image model"""

import enum
from sqlalchemy import Column, Enum, ForeignKey, Integer, String, Text, Uuid
from portfolio_cms.models.base import BaseModel


class ImageType(str, enum.Enum):
    """Partition an image belongs to"""
    GALLERY = "gallery"
    BEFORE = "before"
    AFTER = "after"


class ProjectImage(BaseModel):
    """
    Image attached to a project.

    ``order_index`` orders images within their (project, image_type)
    partition only; gallery, before and after are independent sequences.
    """

    __tablename__ = "project_images"

    project_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    image_url = Column(Text, nullable=False)
    image_type = Column(
        Enum(ImageType, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
        default=ImageType.GALLERY,
    )
    caption = Column(String(500), nullable=True)
    alt_text = Column(String(500), nullable=True)
    order_index = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<ProjectImage(id={self.id}, type={self.image_type}, order={self.order_index})>"
