"""
User model. Only the fields the directory needs for moderator assignment.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
import uuid

from manager_logbook.db.base import Base


class User(Base):
    """Application user; moderators point at the business unit they manage."""
    
    __tablename__ = "users"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    user_name = Column(String(100), nullable=False, unique=True, index=True)
    email = Column(String(100), nullable=True)
    business_unit_id = Column(Integer, ForeignKey("business_units.id"), nullable=True, index=True)
    
    # Relationships
    business_unit = relationship("BusinessUnit", back_populates="moderators")
