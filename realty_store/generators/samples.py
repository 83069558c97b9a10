"""Fixed example listings seeded into an empty catalogue."""

from decimal import Decimal
from typing import Any

from realty_store.models import Contact, Operation, PropertyType

_CONTACT = {"whatsapp": "+1234567890", "telegram": "@realestate"}

SAMPLE_LISTINGS: tuple[dict[str, Any], ...] = (
    {
        "title": "Modern House in a Residential Area",
        "description": (
            "Beautiful two-storey house with luxury finishes, a large garden "
            "and a garage for two vehicles."
        ),
        "price": Decimal("250000"),
        "property_type": PropertyType.HOUSE,
        "operation": Operation.SALE,
        "bedrooms": 4,
        "bathrooms": 3,
        "area": 200.0,
        "location": "North Zone, City",
        "images": ["https://images.unsplash.com/photo-1721322800607-8c38375eef04?w=400&h=300&fit=crop"],
        "features": ["Garden", "Garage", "Pool", "Balcony", "Modern kitchen"],
        "contact": _CONTACT,
    },
    {
        "title": "Furnished Downtown Apartment",
        "description": (
            "Modern, fully furnished apartment in the city centre, close to "
            "public transport."
        ),
        "price": Decimal("800"),
        "property_type": PropertyType.APARTMENT,
        "operation": Operation.RENTAL,
        "bedrooms": 2,
        "bathrooms": 2,
        "area": 80.0,
        "location": "Downtown, City",
        "images": ["https://images.unsplash.com/photo-1487958449943-2429e8be8625?w=400&h=300&fit=crop"],
        "features": ["Furnished", "Air conditioning", "Balcony", "Elevator"],
        "contact": _CONTACT,
    },
    {
        "title": "Luxury Residence with Sea View",
        "description": (
            "Exclusive residence with a panoramic ocean view, first-class "
            "finishes and generous spaces."
        ),
        "price": Decimal("500000"),
        "property_type": PropertyType.RESIDENCE,
        "operation": Operation.SALE,
        "bedrooms": 5,
        "bathrooms": 4,
        "area": 350.0,
        "location": "Blue Coast, City",
        "images": ["https://images.unsplash.com/photo-1492321936769-b49830bc1d1e?w=400&h=300&fit=crop"],
        "features": ["Sea view", "Pool", "Garden", "Terrace", "Garage", "24h security"],
        "contact": _CONTACT,
    },
)


def sample_listings() -> list[dict[str, Any]]:
    """Fresh copies of the sample listing data."""
    return [
        {**item, "images": list(item["images"]), "features": list(item["features"]),
         "contact": Contact(**item["contact"])}
        for item in SAMPLE_LISTINGS
    ]
