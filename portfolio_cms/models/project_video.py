"""Project video model"""

import enum
from sqlalchemy import Column, Enum, ForeignKey, Integer, String, Text, Uuid
from portfolio_cms.models.base import BaseModel


class VideoType(str, enum.Enum):
    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    UPLOAD = "upload"


class ProjectVideo(BaseModel):
    """Video attached to a project, ordered within the project's video list"""

    __tablename__ = "project_videos"

    project_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    video_url = Column(Text, nullable=False)
    video_type = Column(
        Enum(VideoType, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
    )
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    thumbnail_url = Column(Text, nullable=True)
    order_index = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<ProjectVideo(id={self.id}, type={self.video_type}, order={self.order_index})>"
