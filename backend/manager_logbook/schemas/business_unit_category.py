"""
Business unit category Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field


class BusinessUnitCategoryBase(BaseModel):
    """Base category schema."""
    name: str = Field(..., min_length=1, max_length=50)


class BusinessUnitCategoryCreate(BusinessUnitCategoryBase):
    """Schema for creating a category."""
    pass


class BusinessUnitCategoryUpdate(BusinessUnitCategoryBase):
    """Schema for renaming a category."""
    pass


class BusinessUnitCategoryResponse(BusinessUnitCategoryBase):
    """Schema for category response."""
    id: int
    
    class Config:
        from_attributes = True
