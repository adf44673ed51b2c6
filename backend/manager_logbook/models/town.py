"""
Town model.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from manager_logbook.db.base import Base


class Town(Base):
    """Town a business unit is located in."""
    
    __tablename__ = "towns"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    
    # Relationships
    business_units = relationship("BusinessUnit", back_populates="town")
