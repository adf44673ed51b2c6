"""
Business unit model for venues listed in the directory.
"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from manager_logbook.db.base import Base


class BusinessUnit(Base):
    """Business unit model. Belongs to one category and one town."""
    
    __tablename__ = "business_units"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(50), nullable=False, index=True)
    address = Column(String(100), nullable=False)
    phone_number = Column(String(50), nullable=False)
    email = Column(String(100), nullable=False)
    information = Column(Text, nullable=False)
    picture = Column(String(255), nullable=True)
    business_unit_category_id = Column(
        Integer, ForeignKey("business_unit_categories.id"), nullable=False, index=True
    )
    town_id = Column(Integer, ForeignKey("towns.id"), nullable=False, index=True)
    
    # Relationships
    business_unit_category = relationship("BusinessUnitCategory", back_populates="business_units")
    town = relationship("Town", back_populates="business_units")
    logbooks = relationship("Logbook", back_populates="business_unit")
    moderators = relationship("User", back_populates="business_unit")
    reviews = relationship("Review", back_populates="business_unit")
