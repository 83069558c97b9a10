"""Shared persistence helpers for the stores."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, TypeVar

from realty_store.exceptions import CorruptStateError
from realty_store.storage.base import KeyValueStorage
from realty_store.storage.serialization import (
    decode_record,
    decode_records,
    encode_record,
    encode_records,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Fresh opaque identifier."""
    return uuid.uuid4().hex


class KeyValueRepository:
    """Read-modify-write access to whole collections in a substrate.

    Every read parses the stored text anew; there is no cache. Corrupted
    text is handled by ``on_corrupt``: ``"reset"`` logs a warning and reads
    as empty, ``"raise"`` raises ``CorruptStateError``.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        on_corrupt: str = "reset",
        clock: Clock = utc_now,
        id_factory: IdFactory = new_id,
    ) -> None:
        self.storage = storage
        self.on_corrupt = on_corrupt
        self._clock = clock
        self._id_factory = id_factory

    def _read_collection(
        self, key: str, decoder: Callable[[Mapping[str, Any]], T]
    ) -> list[T]:
        text = self.storage.get_item(key)
        if text is None:
            return []
        try:
            return decode_records(text, decoder)
        except CorruptStateError:
            if self.on_corrupt == "raise":
                raise
            logger.warning("Stored value under %r is corrupt, reading it as empty", key)
            return []

    def _write_collection(self, key: str, records: list[Any]) -> None:
        self.storage.set_item(key, encode_records(records))

    def _read_record(self, key: str, decoder: Callable[[Mapping[str, Any]], T]) -> T | None:
        text = self.storage.get_item(key)
        if text is None:
            return None
        try:
            return decode_record(text, decoder)
        except CorruptStateError:
            if self.on_corrupt == "raise":
                raise
            logger.warning("Stored value under %r is corrupt, reading it as absent", key)
            return None

    def _write_record(self, key: str, record: Any) -> None:
        self.storage.set_item(key, encode_record(record))
