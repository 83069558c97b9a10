"""Local real-estate listing and account stores."""

from realty_store.config import RealtyConfig
from realty_store.exceptions import (
    AccountNotFoundError,
    CorruptStateError,
    DuplicateAccountError,
    InvalidCredentialError,
    ListingNotFoundError,
    RealtyStoreError,
    ValidationError,
)
from realty_store.models import Contact, Operation, Property, PropertyType, User, UserRole
from realty_store.store import AccountStore, ListingStore, SearchCriteria, open_stores

__version__ = "0.1.0"

__all__ = [
    "AccountNotFoundError",
    "AccountStore",
    "Contact",
    "CorruptStateError",
    "DuplicateAccountError",
    "InvalidCredentialError",
    "ListingNotFoundError",
    "ListingStore",
    "Operation",
    "Property",
    "PropertyType",
    "RealtyConfig",
    "RealtyStoreError",
    "SearchCriteria",
    "User",
    "UserRole",
    "ValidationError",
    "open_stores",
]
