from dataclasses import dataclass, field

from brainapi.domain.dataset.service.store import DatasetStore, StatusTracker


@dataclass(frozen=True)
class ServiceContext:
    """Process-wide state shared by every request handler.

    Built once per application by the DI container. The two stores are
    independent objects with independent locks.
    """

    dataset: DatasetStore = field(default_factory=DatasetStore)
    status: StatusTracker = field(default_factory=StatusTracker)
