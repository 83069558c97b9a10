"""Credential storage kept apart from account records."""

import hmac
import logging
from abc import ABC, abstractmethod

from realty_store.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

PASSWORD_KEY_PREFIX = "password_"


class CredentialStore(ABC):
    """Stores and verifies one secret per account id.

    Account code only talks to this interface, so a hashing implementation
    can replace the plaintext one without touching its callers.
    """

    @abstractmethod
    def set_secret(self, user_id: str, secret: str) -> None:
        """Store ``secret`` for ``user_id``, replacing any previous one."""

    @abstractmethod
    def verify(self, user_id: str, secret: str) -> bool:
        """Return ``True`` if ``secret`` matches the stored one exactly."""

    @abstractmethod
    def remove(self, user_id: str) -> None:
        """Forget the secret for ``user_id``."""


class PlaintextCredentialStore(CredentialStore):
    """Keeps passwords as plain text under ``password_<user id>``.

    Compatible with the layout written by the browser demo. Not secure.
    """

    def __init__(self, storage: KeyValueStorage) -> None:
        self.storage = storage

    @staticmethod
    def key_for(user_id: str) -> str:
        return f"{PASSWORD_KEY_PREFIX}{user_id}"

    def set_secret(self, user_id: str, secret: str) -> None:
        self.storage.set_item(self.key_for(user_id), secret)

    def verify(self, user_id: str, secret: str) -> bool:
        stored = self.storage.get_item(self.key_for(user_id))
        if stored is None:
            logger.debug("No credential stored for %s", user_id)
            return False
        return hmac.compare_digest(stored.encode("utf-8"), secret.encode("utf-8"))

    def remove(self, user_id: str) -> None:
        self.storage.remove_item(self.key_for(user_id))
