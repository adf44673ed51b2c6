"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from manager_logbook.models.town import Town
from manager_logbook.models.business_unit_category import BusinessUnitCategory
from manager_logbook.models.business_unit import BusinessUnit
from manager_logbook.models.user import User
from manager_logbook.models.logbook import Logbook, Note
from manager_logbook.models.review import Review

__all__ = [
    "Town",
    "BusinessUnitCategory",
    "BusinessUnit",
    "User",
    "Logbook",
    "Note",
    "Review",
]
