"""Listing generator for demo catalogues and load tests."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterator

from realty_store.generators.base import BaseGenerator
from realty_store.models import Contact, Operation, PropertyType


class ListingGenerator(BaseGenerator):
    """Generate synthetic listing data ready for ``ListingStore.create_property``."""

    PROPERTY_TYPES = list(PropertyType)
    TYPE_WEIGHTS = [0.40, 0.45, 0.15]

    OPERATIONS = list(Operation)
    OPERATION_WEIGHTS = [0.55, 0.45]

    # Asking price ranges by (type, operation); rentals are monthly
    PRICE_RANGES = {
        (PropertyType.HOUSE, Operation.SALE): (90_000, 600_000),
        (PropertyType.HOUSE, Operation.RENTAL): (600, 3_500),
        (PropertyType.APARTMENT, Operation.SALE): (60_000, 400_000),
        (PropertyType.APARTMENT, Operation.RENTAL): (400, 2_500),
        (PropertyType.RESIDENCE, Operation.SALE): (300_000, 2_000_000),
        (PropertyType.RESIDENCE, Operation.RENTAL): (2_000, 12_000),
    }

    # Square meters by type
    AREA_RANGES = {
        PropertyType.HOUSE: (70, 400),
        PropertyType.APARTMENT: (35, 180),
        PropertyType.RESIDENCE: (200, 900),
    }

    FEATURES = [
        "Garden", "Garage", "Pool", "Balcony", "Terrace", "Elevator",
        "Furnished", "Air conditioning", "Modern kitchen", "Sea view",
        "24h security", "Storage room", "Pet friendly", "Gym",
    ]

    TITLE_NOUNS = {
        PropertyType.HOUSE: "House",
        PropertyType.APARTMENT: "Apartment",
        PropertyType.RESIDENCE: "Residence",
    }
    TITLE_ADJECTIVES = ["Bright", "Spacious", "Modern", "Cozy", "Renovated", "Quiet", "Elegant"]

    def generate(self) -> dict[str, Any]:
        """Generate data for a single listing.

        Returns
        -------
        dict[str, Any]
            Listing content without id or timestamps.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[dict[str, Any]]:
        """Generate data for multiple listings.

        Parameters
        ----------
        count : int
            Number of listings to generate.

        Yields
        ------
        dict[str, Any]
            Listing content without id or timestamps.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> dict[str, Any]:
        """Generate a single listing."""
        property_type = self.rng.choices(self.PROPERTY_TYPES, weights=self.TYPE_WEIGHTS, k=1)[0]
        operation = self.rng.choices(self.OPERATIONS, weights=self.OPERATION_WEIGHTS, k=1)[0]

        low, high = self.PRICE_RANGES[(property_type, operation)]
        step = 1_000 if operation == Operation.SALE else 50
        price = Decimal(self.rng.randrange(low, high + 1, step))

        area_low, area_high = self.AREA_RANGES[property_type]
        area = float(self.rng.randint(area_low, area_high))
        bedrooms = max(1, min(8, round(area / 45)))
        bathrooms = max(1, min(bedrooms, self.rng.randint(1, 4)))

        city = self.fake.city()
        adjective = self.rng.choice(self.TITLE_ADJECTIVES)
        title = f"{adjective} {self.TITLE_NOUNS[property_type]} in {city}"

        return {
            "title": title,
            "description": self.fake.paragraph(nb_sentences=3),
            "price": price,
            "property_type": property_type,
            "operation": operation,
            "bedrooms": bedrooms,
            "bathrooms": bathrooms,
            "area": area,
            "location": f"{self.fake.street_name()}, {city}",
            "images": [self.fake.image_url() for _ in range(self.rng.randint(1, 4))],
            "features": self.rng.sample(self.FEATURES, k=self.rng.randint(2, 6)),
            "contact": Contact(
                whatsapp=self.fake.phone_number(),
                telegram=f"@{self.fake.user_name()}",
            ),
        }
