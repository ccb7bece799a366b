from brainapi.domain.dataset.model.aggregate import GroupCount
from brainapi.domain.dataset.model.record import RecordField
from brainapi.domain.dataset.service.context import ServiceContext
from brainapi.domain.dataset.util.aggregate import group_by_field
from brainapi.domain.shared.error import NotLoadedError
from brainapi.domain.shared.query import Query, QueryHandler, Result


class GetGroupCounts(Query):
    field: RecordField = "category"
    category: str | None = None  # Restrict to rows of this category first


class GroupCounts(Result):
    field: RecordField
    category: str | None = None
    items: list[GroupCount]


class GetGroupCountsHandler(QueryHandler[GetGroupCounts, GroupCounts]):
    """Row counts per distinct value of one field. Null values are not counted."""

    context: ServiceContext

    async def run(self, cmd: GetGroupCounts) -> GroupCounts:
        dataset = self.context.dataset.snapshot()
        if dataset is None:
            raise NotLoadedError()
        return GroupCounts(
            field=cmd.field,
            category=cmd.category,
            items=group_by_field(dataset, cmd.field, category=cmd.category),
        )
