from brainapi.domain.dataset.service.context import ServiceContext
from brainapi.domain.dataset.util.aggregate import raw_rows
from brainapi.domain.shared.error import NotLoadedError
from brainapi.domain.shared.query import Query, QueryHandler, Result


class GetRawRows(Query):
    pass


class RawRows(Result):
    rows: list[dict[str, str | None]]


class GetRawRowsHandler(QueryHandler[GetRawRows, RawRows]):
    context: ServiceContext

    async def run(self, cmd: GetRawRows) -> RawRows:
        dataset = self.context.dataset.snapshot()
        if dataset is None:
            raise NotLoadedError()
        return RawRows(rows=raw_rows(dataset))
