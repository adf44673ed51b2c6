"""
Review Pydantic schemas for request/response validation.
"""

from datetime import datetime
from pydantic import BaseModel
from typing import List


class ReviewCreate(BaseModel):
    """Schema for creating a review."""
    original_description: str
    business_unit_id: int
    rating: int


class ReviewUpdate(BaseModel):
    """Schema for a moderator edit of the review text."""
    edited_description: str


class ReviewResponse(BaseModel):
    """Schema for review response."""
    id: int
    original_description: str
    edited_description: str
    rating: int
    created_on: datetime
    is_visible: bool
    business_unit_id: int
    
    class Config:
        from_attributes = True


class ReviewListResponse(BaseModel):
    """Schema for review list response."""
    items: List[ReviewResponse]
    total: int
