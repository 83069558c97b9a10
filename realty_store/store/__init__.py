"""Stores persisting accounts and listings in a key-value substrate."""

from dataclasses import dataclass
from typing import Callable

from realty_store.config import RealtyConfig
from realty_store.models import Property
from realty_store.storage import KeyValueStorage, create_storage
from realty_store.store.accounts import AccountStore
from realty_store.store.events import ListingChannel
from realty_store.store.listings import ListingStore, SearchCriteria
from realty_store.store.watcher import ListingWatcher


@dataclass
class Stores:
    """Account and listing stores sharing one substrate."""

    storage: KeyValueStorage
    accounts: AccountStore
    listings: ListingStore
    poll_interval: float = 1.0

    def watch(self, callback: Callable[[list[Property]], None]) -> ListingWatcher:
        """Create a watcher for listing writes made by other processes."""
        return ListingWatcher(self.listings, callback, self.poll_interval)


def open_stores(config: RealtyConfig | None = None, storage: KeyValueStorage | None = None) -> Stores:
    """Build both stores from configuration.

    Parameters
    ----------
    config : RealtyConfig | None
        Settings; defaults to ``RealtyConfig()``.
    storage : KeyValueStorage | None
        Substrate to use instead of the one ``config.storage`` describes.
    """
    config = config or RealtyConfig()
    config.storage.validate()
    storage = storage or create_storage(config.storage)
    on_corrupt = config.storage.on_corrupt
    return Stores(
        storage=storage,
        accounts=AccountStore(storage, config.accounts, on_corrupt=on_corrupt),
        listings=ListingStore(storage, ListingChannel(), on_corrupt=on_corrupt),
        poll_interval=config.watch.poll_interval_seconds,
    )


__all__ = [
    "AccountStore",
    "ListingChannel",
    "ListingStore",
    "ListingWatcher",
    "SearchCriteria",
    "Stores",
    "open_stores",
]
