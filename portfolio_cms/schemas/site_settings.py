"""Site settings schemas"""

from typing import List, Optional
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field


class QuickLink(BaseModel):
    name: str
    href: str


class SiteSettingsBase(BaseModel):
    company_description: Optional[str] = None
    address: Optional[str] = Field(None, max_length=500)
    phone_number: Optional[str] = Field(None, max_length=50)
    whatsapp_number: Optional[str] = Field(None, max_length=50)
    email: Optional[str] = Field(None, max_length=255)
    working_hours_weekdays: Optional[str] = Field(None, max_length=255)
    working_hours_saturday: Optional[str] = Field(None, max_length=255)
    facebook_url: Optional[str] = None
    instagram_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    privacy_policy_url: Optional[str] = None
    terms_of_service_url: Optional[str] = None


class SiteSettingsUpdate(SiteSettingsBase):
    """Partial update; unset fields keep their stored value"""
    services_list: Optional[List[str]] = None
    quick_links_list: Optional[List[QuickLink]] = None


class SiteSettingsResponse(SiteSettingsBase):
    id: UUID
    services_list: List[str] = Field(default_factory=list)
    quick_links_list: List[QuickLink] = Field(default_factory=list)
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
