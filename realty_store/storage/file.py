"""File-backed substrate durable across processes."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterator
from urllib.parse import quote, unquote

from realty_store.exceptions import StorageError
from realty_store.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

_SUFFIX = ".txt"


class FileStorage(KeyValueStorage):
    """Store each key as one UTF-8 text file in a directory."""

    def __init__(self, data_dir: str | Path) -> None:
        """Initialize file storage.

        Parameters
        ----------
        data_dir : str | Path
            Directory holding one file per key. Created if missing.
        """
        self.data_dir = Path(data_dir)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create storage directory {self.data_dir}: {exc}") from exc

    def _path(self, key: str) -> Path:
        return self.data_dir / (quote(key, safe="") + _SUFFIX)

    def get_item(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageError(f"Cannot read {key!r}: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        """Write ``value`` atomically: readers see the old or the new text."""
        if not isinstance(value, str):
            raise TypeError(f"Storage values must be str, got {type(value).__name__}")
        path = self._path(key)
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=".tmp-")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except OSError as exc:
            raise StorageError(f"Cannot write {key!r}: {exc}") from exc
        logger.debug("Wrote %s (%d chars)", key, len(value))

    def remove_item(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot remove {key!r}: {exc}") from exc

    def keys(self) -> Iterator[str]:
        for path in sorted(self.data_dir.glob(f"*{_SUFFIX}")):
            yield unquote(path.name[: -len(_SUFFIX)])
