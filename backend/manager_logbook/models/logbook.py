"""
Logbook and note models.
"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from manager_logbook.db.base import Base


class Logbook(Base):
    """Logbook kept by the managers of a business unit."""
    
    __tablename__ = "logbooks"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(50), nullable=False)
    picture = Column(String(255), nullable=True)
    business_unit_id = Column(Integer, ForeignKey("business_units.id"), nullable=False, index=True)
    
    # Relationships
    business_unit = relationship("BusinessUnit", back_populates="logbooks")
    notes = relationship("Note", back_populates="logbook", cascade="all, delete-orphan")


class Note(Base):
    """Single entry in a logbook."""
    
    __tablename__ = "notes"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    description = Column(Text, nullable=False)
    created_on = Column(DateTime, nullable=False, server_default=func.now())
    logbook_id = Column(Integer, ForeignKey("logbooks.id", ondelete="CASCADE"), nullable=False, index=True)
    
    # Relationships
    logbook = relationship("Logbook", back_populates="notes")
