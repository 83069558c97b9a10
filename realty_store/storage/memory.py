"""In-memory substrate for tests and ephemeral sessions."""

from typing import Iterator

from realty_store.storage.base import KeyValueStorage


class MemoryStorage(KeyValueStorage):
    """Dict-backed storage.

    Parameters
    ----------
    data : dict[str, str] | None
        Backing dict. Pass the same dict to two instances to simulate two
        views sharing one substrate.
    """

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self._data = data if data is not None else {}

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Storage values must be str, got {type(value).__name__}")
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> Iterator[str]:
        return iter(list(self._data))

    def clear(self) -> None:
        self._data.clear()
