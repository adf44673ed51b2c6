"""
Logbook and note Pydantic schemas.
"""

from datetime import datetime
from pydantic import BaseModel
from typing import Optional, List


class NoteResponse(BaseModel):
    """Schema for note response."""
    id: int
    description: str
    created_on: datetime
    logbook_id: int
    
    class Config:
        from_attributes = True


class LogbookResponse(BaseModel):
    """Schema for logbook response with its notes."""
    id: int
    name: str
    picture: Optional[str] = None
    business_unit_id: int
    business_unit_name: Optional[str] = None
    town_name: Optional[str] = None
    notes: List[NoteResponse] = []


class LogbookListResponse(BaseModel):
    """Schema for logbook list response."""
    items: List[LogbookResponse]
    total: int
