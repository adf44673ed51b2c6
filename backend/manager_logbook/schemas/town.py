"""
Town Pydantic schemas.
"""

from pydantic import BaseModel
from typing import List


class TownResponse(BaseModel):
    """Schema for town response."""
    id: int
    name: str
    
    class Config:
        from_attributes = True


class TownListResponse(BaseModel):
    """Schema for town list response."""
    items: List[TownResponse]
    total: int
