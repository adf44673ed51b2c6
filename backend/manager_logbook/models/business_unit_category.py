"""
Business unit category model (hotel, restaurant, bar...).
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from manager_logbook.db.base import Base


class BusinessUnitCategory(Base):
    """Category grouping business units."""
    
    __tablename__ = "business_unit_categories"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(50), nullable=False, index=True)
    
    # Relationships
    business_units = relationship("BusinessUnit", back_populates="business_unit_category")
