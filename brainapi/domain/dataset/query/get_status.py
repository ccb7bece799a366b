from datetime import datetime

from brainapi.domain.dataset.service.context import ServiceContext
from brainapi.domain.shared.query import Query, QueryHandler, Result


class GetStatus(Query):
    pass


class StatusSummary(Result):
    data_loaded: bool
    total: int
    last_updated: datetime


class GetStatusHandler(QueryHandler[GetStatus, StatusSummary]):
    context: ServiceContext

    async def run(self, cmd: GetStatus) -> StatusSummary:
        # Two separate reads: the row count and the timestamp may come from
        # either side of a concurrent refresh.
        status = self.context.status.read()
        dataset = self.context.dataset.snapshot()
        return StatusSummary(
            data_loaded=dataset is not None,
            total=len(dataset) if dataset is not None else 0,
            last_updated=status.last_updated,
        )
