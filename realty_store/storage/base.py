"""Key-value substrate interface."""

from abc import ABC, abstractmethod
from typing import Iterator


class KeyValueStorage(ABC):
    """String-keyed, string-valued, synchronous persistent storage.

    Mirrors the browser local storage contract: a missing key reads as
    ``None``, writes are visible to every reader as soon as they return.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the value stored under ``key``, or ``None``."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove ``key``; removing an absent key is a no-op."""

    @abstractmethod
    def keys(self) -> Iterator[str]:
        """Iterate over stored keys."""

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get_item(key) is not None
