"""In-process caches for the current dataset and its lifecycle status.

DatasetStore and StatusTracker each own their own lock. They are deliberately
not locked together: during a refresh a reader can briefly see the new status
next to the old dataset (or the reverse). Critical sections never await, do
I/O, or aggregate, so a plain threading.Lock is safe from the event loop and
from worker threads alike.
"""

import threading
from datetime import UTC, datetime

from brainapi.domain.dataset.model.record import Dataset
from brainapi.domain.dataset.model.status import DataStatus


class DatasetStore:
    """Single slot holding either nothing or one immutable Dataset."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._dataset: Dataset | None = None

    def replace(self, dataset: Dataset) -> None:
        """Swap in a new dataset; later snapshots see all of it."""
        with self._lock:
            self._dataset = dataset

    def snapshot(self) -> Dataset | None:
        """Current dataset, or None if nothing has been loaded.

        Datasets are immutable, so the reference itself is the snapshot.
        """
        with self._lock:
            return self._dataset


class StatusTracker:
    """Single slot holding the DataStatus."""

    def __init__(self, started_at: datetime | None = None) -> None:
        self._lock = threading.Lock()
        self._status = DataStatus(last_updated=started_at or datetime.now(UTC))

    def update(
        self,
        *,
        fetched: bool | None = None,
        ready: bool | None = None,
        in_use: bool | None = None,
    ) -> DataStatus:
        """Merge the supplied flags, restamp last_updated, and return the new status."""
        changes: dict[str, bool | datetime] = {}
        if fetched is not None:
            changes["fetched"] = fetched
        if ready is not None:
            changes["ready"] = ready
        if in_use is not None:
            changes["in_use"] = in_use

        with self._lock:
            # Never step backwards if the wall clock does
            changes["last_updated"] = max(self._status.last_updated, datetime.now(UTC))
            self._status = self._status.model_copy(update=changes)
            return self._status

    def read(self) -> DataStatus:
        with self._lock:
            return self._status
