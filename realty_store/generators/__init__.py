"""Synthetic and sample listing data."""

from realty_store.generators.listing import ListingGenerator
from realty_store.generators.samples import SAMPLE_LISTINGS, sample_listings

__all__ = ["ListingGenerator", "SAMPLE_LISTINGS", "sample_listings"]
