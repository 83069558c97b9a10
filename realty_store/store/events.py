"""In-process publish/subscribe for listing changes."""

import logging
import uuid
from typing import Any, Callable

from realty_store.models import Event
from realty_store.store.base import Clock, utc_now

logger = logging.getLogger(__name__)

Subscriber = Callable[[Event], None]

LISTING_CREATED = "listing.created"
LISTING_UPDATED = "listing.updated"
LISTING_DELETED = "listing.deleted"
LISTING_REPLACED = "listing.replaced"
LISTING_SEEDED = "listing.seeded"


class ListingChannel:
    """Deliver listing events to every subscriber, synchronously, in order.

    A subscriber that raises is logged and skipped; the remaining
    subscribers still receive the event.
    """

    def __init__(self, source: str = "listing-store", clock: Clock = utc_now) -> None:
        self.source = source
        self._clock = clock
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` and return a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def publish(self, event_type: str, subject: str = "", data: dict[str, Any] | None = None) -> Event:
        """Build an event and deliver it."""
        event = Event(
            event_id=uuid.uuid4().hex,
            event_type=event_type,
            event_time=self._clock(),
            source=self.source,
            subject=subject,
            data=data or {},
        )
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception:
                logger.exception("Subscriber %r failed on %s", callback, event_type)
        return event
