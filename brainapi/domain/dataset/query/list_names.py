from brainapi.domain.dataset.service.context import ServiceContext
from brainapi.domain.dataset.util.aggregate import unique_names_where_category
from brainapi.domain.shared.error import NotLoadedError
from brainapi.domain.shared.query import Query, QueryHandler, Result

IMPORTS = "Imports"
EXPORTS = "Exports"


class ListNames(Query):
    category: str


class NameList(Result):
    category: str
    names: list[str]


class ListNamesHandler(QueryHandler[ListNames, NameList]):
    context: ServiceContext

    async def run(self, cmd: ListNames) -> NameList:
        dataset = self.context.dataset.snapshot()
        if dataset is None:
            raise NotLoadedError()
        return NameList(
            category=cmd.category,
            names=unique_names_where_category(dataset, cmd.category),
        )
