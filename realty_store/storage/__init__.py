"""Key-value substrates backing the stores."""

from realty_store.config import StorageConfig
from realty_store.storage.base import KeyValueStorage
from realty_store.storage.file import FileStorage
from realty_store.storage.memory import MemoryStorage


def create_storage(config: StorageConfig) -> KeyValueStorage:
    """Build the substrate selected by ``config.backend``."""
    config.validate()
    if config.backend == "file":
        return FileStorage(config.data_dir)
    return MemoryStorage()


__all__ = ["FileStorage", "KeyValueStorage", "MemoryStorage", "create_storage"]
