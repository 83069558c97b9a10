"""Tests for listing generators and sample data."""

from decimal import Decimal

from realty_store.generators import SAMPLE_LISTINGS, ListingGenerator, sample_listings
from realty_store.models import Contact, Operation, PropertyType
from realty_store.storage import MemoryStorage
from realty_store.store import ListingStore


class TestListingGenerator:
    """Tests for ListingGenerator."""

    def test_generate_produces_store_ready_data(self, seed: int) -> None:
        data = ListingGenerator(seed=seed).generate()

        assert isinstance(data["price"], Decimal)
        assert data["property_type"] in list(PropertyType)
        assert data["operation"] in list(Operation)
        assert isinstance(data["contact"], Contact)
        assert 1 <= len(data["images"]) <= 4
        assert len(set(data["features"])) == len(data["features"])

    def test_price_within_range(self, seed: int) -> None:
        gen = ListingGenerator(seed=seed)
        for data in gen.generate_batch(50):
            low, high = ListingGenerator.PRICE_RANGES[(data["property_type"], data["operation"])]
            assert low <= data["price"] <= high

    def test_area_and_rooms(self, seed: int) -> None:
        for data in ListingGenerator(seed=seed).generate_batch(50):
            low, high = ListingGenerator.AREA_RANGES[data["property_type"]]
            assert low <= data["area"] <= high
            assert 1 <= data["bathrooms"] <= data["bedrooms"]

    def test_seed_reproducibility(self, seed: int) -> None:
        first = list(ListingGenerator(seed=seed).generate_batch(5))
        second = list(ListingGenerator(seed=seed).generate_batch(5))
        assert first == second

    def test_batch_count(self, seed: int) -> None:
        assert len(list(ListingGenerator(seed=seed).generate_batch(7))) == 7

    def test_generated_data_is_accepted_by_store(self, seed: int) -> None:
        store = ListingStore(MemoryStorage())
        for data in ListingGenerator(seed=seed, locale="en_US").generate_batch(10):
            store.create_property(data)
        assert len(store.list_properties()) == 10


class TestSampleListings:
    """Tests for the fixed sample set."""

    def test_three_samples_one_per_type(self) -> None:
        assert len(SAMPLE_LISTINGS) == 3
        assert {s["property_type"] for s in SAMPLE_LISTINGS} == set(PropertyType)

    def test_copies_are_independent(self) -> None:
        first = sample_listings()
        first[0]["features"].append("Extra")

        assert "Extra" not in sample_listings()[0]["features"]
        assert "Extra" not in SAMPLE_LISTINGS[0]["features"]
