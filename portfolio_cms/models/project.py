"""Project model"""

from sqlalchemy import Boolean, Column, Date, Float, ForeignKey, Integer, String, Text, Uuid
from portfolio_cms.models.base import BaseModel, JSONType


class Project(BaseModel):
    """
    Project model representing a finished construction or renovation job
    shown in the public portfolio.

    ``category`` is a denormalized copy of the referenced category's name,
    written together with ``category_id`` by the project service.
    """

    __tablename__ = "projects"

    title = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    category = Column(String(255), nullable=False)
    category_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    location = Column(String(255), nullable=True)
    short_description = Column(String(500), nullable=True)
    description = Column(Text, nullable=True)
    cover_image = Column(Text, nullable=True)
    client = Column(String(255), nullable=True)
    start_date = Column(Date, nullable=True)
    completion_date = Column(Date, nullable=True)
    area_sqm = Column(Float, nullable=True)
    bedrooms = Column(Integer, nullable=True)
    bathrooms = Column(Integer, nullable=True)
    budget_range = Column(String(100), nullable=True)
    construction_type = Column(String(100), nullable=True)
    materials = Column(JSONType, nullable=False, default=dict)  # {"Piso": "Porcelanato", ...}
    features = Column(JSONType, nullable=False, default=list)
    keywords = Column(JSONType, nullable=False, default=list)
    meta_title = Column(String(255), nullable=True)
    meta_description = Column(String(500), nullable=True)
    published = Column(Boolean, nullable=False, default=False, index=True)

    def __repr__(self):
        return f"<Project(id={self.id}, slug={self.slug}, published={self.published})>"
