"""Pytest configuration and fixtures."""

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

import pytest

from realty_store.models import Contact, Operation, PropertyType
from realty_store.storage import MemoryStorage
from realty_store.store import AccountStore, ListingChannel, ListingStore


class TickingClock:
    """Clock that advances by ``step`` on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now


class SequentialIds:
    """Id factory returning ``<prefix>-001``, ``<prefix>-002``, ..."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count:03d}"


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def storage() -> MemoryStorage:
    """Fresh in-memory substrate for each test."""
    return MemoryStorage()


@pytest.fixture
def channel(clock: TickingClock) -> ListingChannel:
    return ListingChannel(clock=clock)


@pytest.fixture
def account_store(storage: MemoryStorage, clock: TickingClock) -> AccountStore:
    return AccountStore(storage, clock=clock, id_factory=SequentialIds("user"))


@pytest.fixture
def listing_store(
    storage: MemoryStorage, channel: ListingChannel, clock: TickingClock
) -> ListingStore:
    return ListingStore(storage, channel, clock=clock, id_factory=SequentialIds("prop"))


def make_listing_data(**overrides: Any) -> dict[str, Any]:
    """Complete listing content, with ``overrides`` applied."""
    data: dict[str, Any] = {
        "title": "Bright Apartment",
        "description": "Two bedrooms close to the park.",
        "price": Decimal("800"),
        "property_type": PropertyType.APARTMENT,
        "operation": Operation.RENTAL,
        "bedrooms": 2,
        "bathrooms": 1,
        "area": 75.0,
        "location": "Downtown, City",
        "images": ["https://img.example/cover.jpg", "https://img.example/2.jpg"],
        "features": ["Balcony", "Elevator"],
        "contact": Contact(whatsapp="+1234567890", telegram="@agent"),
    }
    data.update(overrides)
    return data


@pytest.fixture
def listing_data() -> dict[str, Any]:
    """Sample listing content."""
    return make_listing_data()


@pytest.fixture
def make_listing():
    """Factory for listing content with field overrides."""
    return make_listing_data


@pytest.fixture
def restore_logging():
    """Restore root and package logger state after a test."""
    root = logging.getLogger()
    package = logging.getLogger("realty_store")
    handlers, level, package_level = root.handlers[:], root.level, package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
