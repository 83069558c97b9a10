"""Enumeration types for listing and account entities."""

from enum import Enum


class PropertyType(str, Enum):
    HOUSE = "house"
    APARTMENT = "apartment"
    RESIDENCE = "residence"


class Operation(str, Enum):
    SALE = "sale"
    RENTAL = "rental"


class UserRole(str, Enum):
    ADMIN = "admin"
    REGULAR = "regular"
