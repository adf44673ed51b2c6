"""
Business unit Pydantic schemas for request/response validation.
Length and format rules live in the business validator, not here.
"""

from pydantic import BaseModel, Field
from typing import Optional, List


class BusinessUnitBase(BaseModel):
    """Base business unit schema with common fields."""
    name: str
    address: str
    phone_number: str
    email: str
    information: str


class BusinessUnitCreate(BusinessUnitBase):
    """Schema for creating a business unit."""
    business_unit_category_id: int
    town_id: int


class BusinessUnitUpdate(BaseModel):
    """Schema for updating a business unit (all fields optional)."""
    name: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    information: Optional[str] = None
    picture: Optional[str] = Field(None, max_length=255)


class ModeratorResponse(BaseModel):
    """Moderator summary embedded in a business unit response."""
    id: str
    user_name: str
    email: Optional[str] = None
    
    class Config:
        from_attributes = True


class BusinessUnitResponse(BusinessUnitBase):
    """Schema for business unit response."""
    id: int
    picture: Optional[str] = None
    business_unit_category_id: int
    business_unit_category_name: Optional[str] = None
    town_id: int
    town_name: Optional[str] = None
    moderators: List[ModeratorResponse] = []


class BusinessUnitListResponse(BaseModel):
    """Schema for business unit list response."""
    items: List[BusinessUnitResponse]
    total: int
