"""
Customer review model.
"""

from sqlalchemy import Column, Integer, Text, Boolean, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from manager_logbook.db.base import Base


class Review(Base):
    """Review left for a business unit. Keeps the original and the moderated text."""
    
    __tablename__ = "reviews"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    original_description = Column(Text, nullable=False)
    edited_description = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)
    created_on = Column(DateTime, nullable=False, server_default=func.now(), index=True)
    is_visible = Column(Boolean, nullable=False, default=True)
    business_unit_id = Column(Integer, ForeignKey("business_units.id"), nullable=False, index=True)
    
    # Relationships
    business_unit = relationship("BusinessUnit", back_populates="reviews")
