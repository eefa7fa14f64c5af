"""Site settings singleton model"""

import uuid
from sqlalchemy import Column, String, Text
from portfolio_cms.models.base import BaseModel, JSONType

SITE_SETTINGS_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")


class SiteSettings(BaseModel):
    """
    Single well-known row holding contact details, social links and the
    footer lists. Always stored under ``SITE_SETTINGS_ID``.
    """

    __tablename__ = "site_settings"

    company_description = Column(Text, nullable=True)
    address = Column(String(500), nullable=True)
    phone_number = Column(String(50), nullable=True)
    whatsapp_number = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    working_hours_weekdays = Column(String(255), nullable=True)
    working_hours_saturday = Column(String(255), nullable=True)
    facebook_url = Column(Text, nullable=True)
    instagram_url = Column(Text, nullable=True)
    linkedin_url = Column(Text, nullable=True)
    privacy_policy_url = Column(Text, nullable=True)
    terms_of_service_url = Column(Text, nullable=True)
    services_list = Column(JSONType, nullable=False, default=list)
    quick_links_list = Column(JSONType, nullable=False, default=list)  # [{"name": ..., "href": ...}]
