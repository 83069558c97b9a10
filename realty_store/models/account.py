"""User account model."""

from dataclasses import dataclass
from datetime import datetime

from realty_store.models.enums import UserRole


@dataclass
class User:
    """Registered account. The password is kept apart, keyed by ``id``."""

    id: str
    email: str
    name: str
    role: UserRole
    created_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
