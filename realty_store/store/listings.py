"""Listing store: property records, filtered search and sample seeding."""

import dataclasses
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

from realty_store.exceptions import ListingNotFoundError, ValidationError
from realty_store.generators.samples import sample_listings
from realty_store.models import CONTENT_FIELDS, SYSTEM_FIELDS, Operation, Property, PropertyType
from realty_store.storage.base import KeyValueStorage
from realty_store.storage.serialization import (
    coerce_property_fields,
    property_from_dict,
    to_decimal,
    to_dict,
)
from realty_store.store.base import Clock, IdFactory, KeyValueRepository, new_id, utc_now
from realty_store.store.events import (
    LISTING_CREATED,
    LISTING_DELETED,
    LISTING_REPLACED,
    LISTING_SEEDED,
    LISTING_UPDATED,
    ListingChannel,
)

logger = logging.getLogger(__name__)

PROPERTIES_KEY = "real_estate_properties"

_REQUIRED_FIELDS = tuple(
    f.name
    for f in dataclasses.fields(Property)
    if f.name in CONTENT_FIELDS
    and f.default is dataclasses.MISSING
    and f.default_factory is dataclasses.MISSING
)


@dataclass
class SearchCriteria:
    """Optional listing filters, combined with AND.

    ``None`` imposes no constraint; so does an empty string for the text
    criteria. A price bound of ``0`` is a real bound.
    """

    property_type: PropertyType | str | None = None
    operation: Operation | str | None = None
    min_price: Decimal | float | int | None = None
    max_price: Decimal | float | int | None = None
    location: str | None = None
    query: str | None = None  # Matched against title and description

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SearchCriteria":
        """Build criteria from a dict of filter values."""
        names = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - names)
        if unknown:
            raise ValidationError(f"Unknown search criteria: {', '.join(unknown)}")
        return cls(**data)


def _bound(value: Decimal | float | int | None, name: str) -> Decimal | None:
    if value is None:
        return None
    return to_decimal(value, name)


class ListingStore(KeyValueRepository):
    """Manage the listing collection in a key-value substrate.

    Every call re-reads the stored collection and every mutation writes the
    whole collection back before returning. Mutations are announced on
    ``channel`` after they are persisted.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        channel: ListingChannel | None = None,
        *,
        on_corrupt: str = "reset",
        clock: Clock = utc_now,
        id_factory: IdFactory = new_id,
    ) -> None:
        super().__init__(storage, on_corrupt=on_corrupt, clock=clock, id_factory=id_factory)
        self.channel = channel or ListingChannel(clock=clock)

    def list_properties(self) -> list[Property]:
        """Get all listings in insertion order."""
        return self._read_collection(PROPERTIES_KEY, property_from_dict)

    def replace_properties(self, properties: list[Property]) -> None:
        """Overwrite the whole listing collection."""
        self._write_collection(PROPERTIES_KEY, list(properties))
        self.channel.publish(LISTING_REPLACED, data={"count": len(properties)})

    def get_property_by_id(self, property_id: str) -> Property | None:
        """Get a listing by id."""
        return next((p for p in self.list_properties() if p.id == property_id), None)

    def _build(self, data: Mapping[str, Any]) -> Property:
        content = coerce_property_fields(
            {k: v for k, v in data.items() if k not in SYSTEM_FIELDS}
        )
        missing = [name for name in _REQUIRED_FIELDS if name not in content]
        if missing:
            raise ValidationError(f"Missing listing fields: {', '.join(missing)}")
        now = self._clock()
        return Property(id=self._id_factory(), created_at=now, updated_at=now, **content)

    def create_property(self, data: Mapping[str, Any]) -> Property:
        """Add a listing.

        Parameters
        ----------
        data : Mapping[str, Any]
            Listing content. ``id`` and timestamps are assigned here; any
            such keys in ``data`` are ignored.

        Returns
        -------
        Property
            The stored listing, with ``created_at == updated_at``.
        """
        prop = self._build(data)
        properties = self.list_properties()
        properties.append(prop)
        self._write_collection(PROPERTIES_KEY, properties)

        logger.info("Created listing %s (%s)", prop.id, prop.title)
        self.channel.publish(LISTING_CREATED, subject=prop.id, data=to_dict(prop))
        return prop

    def update_property(self, property_id: str, changes: Mapping[str, Any]) -> Property:
        """Merge ``changes`` into a listing and refresh ``updated_at``.

        Fields absent from ``changes`` keep their values. ``id`` and the
        timestamps cannot be changed this way and are ignored.

        Raises
        ------
        ListingNotFoundError
            If no listing has ``property_id``. Checked before ``changes``.
        ValidationError
            If ``changes`` names an unknown field or holds a bad value.
        """
        properties = self.list_properties()
        index = next((i for i, p in enumerate(properties) if p.id == property_id), None)
        if index is None:
            raise ListingNotFoundError(f"Listing {property_id} not found")
        coerced = coerce_property_fields(
            {k: v for k, v in changes.items() if k not in SYSTEM_FIELDS}
        )

        current = properties[index]
        updated = dataclasses.replace(
            current,
            **coerced,
            updated_at=max(self._clock(), current.updated_at),
        )
        properties[index] = updated
        self._write_collection(PROPERTIES_KEY, properties)

        logger.info("Updated listing %s: %s", property_id, ", ".join(sorted(coerced)) or "touch")
        self.channel.publish(LISTING_UPDATED, subject=property_id, data=to_dict(updated))
        return updated

    def delete_property(self, property_id: str) -> None:
        """Remove a listing; an unknown id is ignored."""
        properties = self.list_properties()
        remaining = [p for p in properties if p.id != property_id]
        if len(remaining) == len(properties):
            logger.debug("Delete of unknown listing %s ignored", property_id)
            return
        self._write_collection(PROPERTIES_KEY, remaining)

        logger.info("Deleted listing %s", property_id)
        self.channel.publish(LISTING_DELETED, subject=property_id)

    def search_properties(
        self, criteria: SearchCriteria | Mapping[str, Any] | None = None
    ) -> list[Property]:
        """Filter listings, keeping their stored order.

        Filters run in this order: type, operation, minimum price,
        maximum price (both inclusive), location substring, free-text
        query. Text matching ignores case.
        """
        if criteria is None:
            criteria = SearchCriteria()
        elif not isinstance(criteria, SearchCriteria):
            criteria = SearchCriteria.from_mapping(criteria)

        min_price = _bound(criteria.min_price, "min_price")
        max_price = _bound(criteria.max_price, "max_price")
        location = criteria.location.casefold() if criteria.location else None
        query = criteria.query.casefold() if criteria.query else None

        results = self.list_properties()
        if criteria.property_type:
            results = [p for p in results if p.property_type == criteria.property_type]
        if criteria.operation:
            results = [p for p in results if p.operation == criteria.operation]
        if min_price is not None:
            results = [p for p in results if p.price >= min_price]
        if max_price is not None:
            results = [p for p in results if p.price <= max_price]
        if location:
            results = [p for p in results if location in p.location.casefold()]
        if query:
            results = [
                p for p in results
                if query in p.title.casefold() or query in p.description.casefold()
            ]
        return results

    def initialize_sample_data(self) -> int:
        """Seed the sample listings into an empty collection.

        Returns
        -------
        int
            Number of listings inserted; ``0`` when listings already exist.
        """
        if self.list_properties():
            return 0

        properties = [self._build(item) for item in sample_listings()]
        self._write_collection(PROPERTIES_KEY, properties)

        logger.info("Seeded %d sample listings", len(properties))
        self.channel.publish(LISTING_SEEDED, data={"count": len(properties)})
        return len(properties)

    def summary(self) -> dict[str, Any]:
        """Return dashboard counts and the total asking price of sales."""
        properties = self.list_properties()
        for_sale = [p for p in properties if p.operation == Operation.SALE]
        return {
            "total": len(properties),
            "for_sale": len(for_sale),
            "for_rent": sum(1 for p in properties if p.operation == Operation.RENTAL),
            "houses": sum(1 for p in properties if p.property_type == PropertyType.HOUSE),
            "apartments": sum(1 for p in properties if p.property_type == PropertyType.APARTMENT),
            "residences": sum(1 for p in properties if p.property_type == PropertyType.RESIDENCE),
            "total_sale_value": sum((p.price for p in for_sale), Decimal("0")),
        }
