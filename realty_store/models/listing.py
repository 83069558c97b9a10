"""Property listing model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from realty_store.models.base import Contact
from realty_store.models.enums import Operation, PropertyType

# Fields a caller may supply; id and timestamps belong to the store.
CONTENT_FIELDS = (
    "title",
    "description",
    "price",
    "property_type",
    "operation",
    "bedrooms",
    "bathrooms",
    "area",
    "location",
    "images",
    "features",
    "contact",
)
SYSTEM_FIELDS = ("id", "created_at", "updated_at")


@dataclass
class Property:
    """Real estate listing offered for sale or rental."""

    id: str
    title: str
    description: str
    price: Decimal
    property_type: PropertyType
    operation: Operation
    bedrooms: int
    bathrooms: int
    area: float  # Square meters
    location: str
    created_at: datetime
    updated_at: datetime
    images: list[str] = field(default_factory=list)  # First image is the cover
    features: list[str] = field(default_factory=list)
    contact: Contact = field(default_factory=Contact)

    @property
    def cover_image(self) -> str | None:
        """First image URL, if any."""
        return self.images[0] if self.images else None
