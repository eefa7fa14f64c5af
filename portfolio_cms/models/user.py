"""User model"""

from sqlalchemy import Column, String
from portfolio_cms.models.base import BaseModel


class User(BaseModel):
    """
    Account allowed to sign in to the admin area.
    Only users with role ``admin`` may use admin endpoints.
    """

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=True)
    role = Column(String(50), default="user", nullable=False)  # admin, user

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
