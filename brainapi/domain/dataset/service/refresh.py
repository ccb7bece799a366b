"""RefreshService - re-ingests upstream data and publishes it."""

import logging
from datetime import UTC, datetime

import logfire

from brainapi.domain.dataset.model.record import Dataset
from brainapi.domain.dataset.service.context import ServiceContext
from brainapi.domain.dataset.service.ingest import IngestService
from brainapi.domain.shared.error import InfrastructureError
from brainapi.domain.shared.model.value import ValueObject
from brainapi.domain.shared.service import Service

logger = logging.getLogger(__name__)


class RefreshSucceeded(ValueObject):
    total: int
    last_updated: datetime


class RefreshFailed(ValueObject):
    error: str


RefreshOutcome = RefreshSucceeded | RefreshFailed


class RefreshService(Service):
    """Runs ingestion, then swaps the dataset, then updates the status.

    Concurrent refreshes are not serialized; whichever replace() runs last wins.
    A failed refresh leaves both the dataset and the status exactly as they were.
    """

    ingest: IngestService
    context: ServiceContext

    async def refresh(self) -> RefreshOutcome:
        with logfire.span("RefreshDataset"):
            try:
                records = await self.ingest.load_records()
            except InfrastructureError as e:
                logger.warning("Refresh failed (%s): %s", e.code, e.message)
                return RefreshFailed(error=e.message)

            dataset = Dataset(records=tuple(records), loaded_at=datetime.now(UTC))
            self.context.dataset.replace(dataset)
            status = self.context.status.update(fetched=True, ready=True, in_use=False)

            logfire.info("Dataset refreshed", total=len(dataset))
            return RefreshSucceeded(total=len(dataset), last_updated=status.last_updated)
