"""Project content block model"""

from sqlalchemy import Column, ForeignKey, Integer, String, Uuid
from portfolio_cms.models.base import BaseModel, JSONType


class ContentBlock(BaseModel):
    """
    One unit of a project's long-form description.

    ``block_type`` is stored as a plain string so rows written by newer
    releases with unknown types still load; ``content`` is validated per type
    in the application layer only.
    """

    __tablename__ = "project_content_blocks"

    project_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    block_type = Column(String(50), nullable=False)
    content = Column(JSONType, nullable=False, default=dict)
    order_index = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<ContentBlock(id={self.id}, type={self.block_type}, order={self.order_index})>"
