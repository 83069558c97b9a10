"""Base models shared across entities."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Contact:
    """Contact handles shown on a listing.

    Both are free-text identifiers; their format is not validated.
    """

    whatsapp: str = ""
    telegram: str = ""


@dataclass
class Event:
    """Standard event envelope for change notifications."""

    event_id: str
    event_type: str  # entity.action (e.g., listing.created)
    event_time: datetime
    source: str  # Store that emitted the event
    subject: str  # Entity ID affected, empty for collection-wide events
    data: dict
    metadata: dict = field(default_factory=dict)
