"""Bounded polling for listing writes made by other processes.

The in-process ``ListingChannel`` only sees mutations made through the
same ``ListingStore``. When several processes share one file substrate
there is no push notification, so the watcher re-reads the stored text
on a fixed interval and reports when it changes.
"""

import logging
import threading
from typing import Callable

from realty_store.models import Property
from realty_store.store.listings import PROPERTIES_KEY, ListingStore

logger = logging.getLogger(__name__)


class ListingWatcher:
    """Call ``callback`` with the fresh collection whenever it changes.

    Parameters
    ----------
    store : ListingStore
        Store whose substrate is watched.
    callback : Callable[[list[Property]], None]
        Receives the full listing collection after each observed change.
    interval : float
        Seconds between polls.
    """

    def __init__(
        self,
        store: ListingStore,
        callback: Callable[[list[Property]], None],
        interval: float = 1.0,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.store = store
        self.callback = callback
        self.interval = interval
        self._last_seen = store.storage.get_item(PROPERTIES_KEY)
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def poll_once(self) -> bool:
        """Check for a change once; return ``True`` if one was reported."""
        text = self.store.storage.get_item(PROPERTIES_KEY)
        if text == self._last_seen:
            return False
        self._last_seen = text
        logger.debug("Listing collection changed, notifying watcher callback")
        self.callback(self.store.list_properties())
        return True

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.poll_once()
            except Exception:
                logger.exception("Listing watcher poll failed")

    def start(self) -> None:
        """Start polling in a daemon thread."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="listing-watcher", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Stop polling and wait for the thread to exit."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def __enter__(self) -> "ListingWatcher":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
