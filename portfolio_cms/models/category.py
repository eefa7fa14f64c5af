"""Category model"""

from sqlalchemy import Column, String, Text
from portfolio_cms.models.base import BaseModel


class Category(BaseModel):
    """
    Category used to group portfolio projects (e.g. residential renovation).
    Projects reference it by id and keep a denormalized copy of its name.
    """

    __tablename__ = "categories"

    name = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Category(id={self.id}, slug={self.slug})>"
