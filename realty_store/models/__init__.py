"""Domain models for listings and accounts."""

from realty_store.models.account import User
from realty_store.models.base import Contact, Event
from realty_store.models.enums import Operation, PropertyType, UserRole
from realty_store.models.listing import CONTENT_FIELDS, SYSTEM_FIELDS, Property

__all__ = [
    "CONTENT_FIELDS",
    "Contact",
    "Event",
    "Operation",
    "Property",
    "PropertyType",
    "SYSTEM_FIELDS",
    "User",
    "UserRole",
]
