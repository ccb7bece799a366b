"""Read-only views over the cached dataset."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from brainapi.domain.dataset.model.aggregate import GroupCount
from brainapi.domain.dataset.query.get_group_counts import (
    GetGroupCounts,
    GetGroupCountsHandler,
)
from brainapi.domain.dataset.query.get_raw_rows import GetRawRows, GetRawRowsHandler
from brainapi.domain.dataset.query.list_names import (
    EXPORTS,
    IMPORTS,
    ListNames,
    ListNamesHandler,
)

router = APIRouter(tags=["Dataset"], route_class=DishkaRoute)


@router.get("/raw", response_model=list[dict[str, str | None]])
async def get_raw(handler: FromDishka[GetRawRowsHandler]) -> list[dict[str, str | None]]:
    """Every cached row with its five fields."""
    result = await handler.run(GetRawRows())
    return result.rows


@router.get("/pie", response_model=list[GroupCount])
async def get_pie(handler: FromDishka[GetGroupCountsHandler]) -> list[GroupCount]:
    """Row counts per category, for the dashboard pie chart."""
    result = await handler.run(GetGroupCounts(field="category"))
    return result.items


@router.get("/search", response_model=list[GroupCount])
async def get_search(handler: FromDishka[GetGroupCountsHandler]) -> list[GroupCount]:
    """Row counts per country."""
    result = await handler.run(GetGroupCounts(field="country"))
    return result.items


@router.get("/imports/by-country", response_model=list[GroupCount])
async def get_imports_by_country(
    handler: FromDishka[GetGroupCountsHandler],
) -> list[GroupCount]:
    result = await handler.run(GetGroupCounts(field="country", category=IMPORTS))
    return result.items


@router.get("/import-names", response_model=list[str])
async def get_import_names(handler: FromDishka[ListNamesHandler]) -> list[str]:
    result = await handler.run(ListNames(category=IMPORTS))
    return result.names


@router.get("/export-names", response_model=list[str])
async def get_export_names(handler: FromDishka[ListNamesHandler]) -> list[str]:
    result = await handler.run(ListNames(category=EXPORTS))
    return result.names
