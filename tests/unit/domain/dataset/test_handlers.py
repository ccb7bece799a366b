"""Unit tests for dataset query and command handlers."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from brainapi.domain.dataset.command.mark_in_use import MarkInUse, MarkInUseHandler
from brainapi.domain.dataset.command.refresh import RefreshDataset, RefreshDatasetHandler
from brainapi.domain.dataset.model.aggregate import GroupCount
from brainapi.domain.dataset.model.record import Dataset, Record
from brainapi.domain.dataset.query.get_group_counts import GetGroupCounts, GetGroupCountsHandler
from brainapi.domain.dataset.query.get_raw_rows import GetRawRows, GetRawRowsHandler
from brainapi.domain.dataset.query.get_status import GetStatus, GetStatusHandler
from brainapi.domain.dataset.query.list_names import (
    EXPORTS,
    IMPORTS,
    ListNames,
    ListNamesHandler,
)
from brainapi.domain.dataset.service.context import ServiceContext
from brainapi.domain.dataset.service.refresh import (
    RefreshFailed,
    RefreshService,
    RefreshSucceeded,
)
from brainapi.domain.shared.error import NotLoadedError


@pytest.fixture
def loaded_context() -> ServiceContext:
    context = ServiceContext()
    context.dataset.replace(
        Dataset(
            records=(
                Record(country="Ukraine", category="Imports", name="A"),
                Record(country="Ukraine", category="Imports", name="A"),
                Record(country="Poland", category="Exports", name="B"),
                Record(country=None, category=None, name="C"),
            ),
            loaded_at=datetime.now(UTC),
        )
    )
    return context


class TestNotLoaded:
    @pytest.mark.asyncio
    async def test_raw_rows(self):
        with pytest.raises(NotLoadedError, match="Data not loaded yet"):
            await GetRawRowsHandler(context=ServiceContext()).run(GetRawRows())

    @pytest.mark.asyncio
    async def test_group_counts(self):
        with pytest.raises(NotLoadedError):
            await GetGroupCountsHandler(context=ServiceContext()).run(GetGroupCounts())

    @pytest.mark.asyncio
    async def test_group_counts_within_category(self):
        with pytest.raises(NotLoadedError):
            await GetGroupCountsHandler(context=ServiceContext()).run(
                GetGroupCounts(field="country", category=IMPORTS)
            )

    @pytest.mark.asyncio
    async def test_list_names(self):
        with pytest.raises(NotLoadedError):
            await ListNamesHandler(context=ServiceContext()).run(ListNames(category=IMPORTS))


class TestQueries:
    @pytest.mark.asyncio
    async def test_raw_rows(self, loaded_context: ServiceContext):
        result = await GetRawRowsHandler(context=loaded_context).run(GetRawRows())
        assert len(result.rows) == 4
        assert result.rows[3]["category"] is None

    @pytest.mark.asyncio
    async def test_group_counts_default_field_is_category(self, loaded_context: ServiceContext):
        result = await GetGroupCountsHandler(context=loaded_context).run(GetGroupCounts())
        assert result.field == "category"
        assert result.items == [
            GroupCount(label="Imports", count=2),
            GroupCount(label="Exports", count=1),
        ]

    @pytest.mark.asyncio
    async def test_group_counts_by_country(self, loaded_context: ServiceContext):
        result = await GetGroupCountsHandler(context=loaded_context).run(
            GetGroupCounts(field="country")
        )
        assert [(g.label, g.count) for g in result.items] == [("Ukraine", 2), ("Poland", 1)]

    @pytest.mark.asyncio
    async def test_group_counts_within_category(self, loaded_context: ServiceContext):
        result = await GetGroupCountsHandler(context=loaded_context).run(
            GetGroupCounts(field="country", category=IMPORTS)
        )
        assert result.category == IMPORTS
        assert result.items == [GroupCount(label="Ukraine", count=2)]

    @pytest.mark.asyncio
    async def test_import_and_export_names(self, loaded_context: ServiceContext):
        handler = ListNamesHandler(context=loaded_context)
        assert (await handler.run(ListNames(category=IMPORTS))).names == ["A"]
        assert (await handler.run(ListNames(category=EXPORTS))).names == ["B"]


class TestGetStatus:
    @pytest.mark.asyncio
    async def test_before_load(self):
        context = ServiceContext()
        result = await GetStatusHandler(context=context).run(GetStatus())
        assert result.data_loaded is False
        assert result.total == 0
        assert result.last_updated == context.status.read().last_updated

    @pytest.mark.asyncio
    async def test_after_load(self, loaded_context: ServiceContext):
        result = await GetStatusHandler(context=loaded_context).run(GetStatus())
        assert result.data_loaded is True
        assert result.total == 4


class TestMarkInUse:
    @pytest.mark.asyncio
    async def test_sets_flag_and_keeps_others(self):
        context = ServiceContext()
        context.status.update(fetched=True, ready=True)

        result = await MarkInUseHandler(context=context).run(MarkInUse())

        assert result.status.in_use is True
        assert result.status.fetched is True
        assert result.status.ready is True

    @pytest.mark.asyncio
    async def test_can_clear_flag(self):
        context = ServiceContext()
        context.status.update(in_use=True)
        result = await MarkInUseHandler(context=context).run(MarkInUse(in_use=False))
        assert result.status.in_use is False


class TestRefreshDatasetHandler:
    @pytest.mark.asyncio
    async def test_success(self):
        stamp = datetime.now(UTC)
        service = AsyncMock(spec=RefreshService)
        service.refresh.return_value = RefreshSucceeded(total=3, last_updated=stamp)

        result = await RefreshDatasetHandler(refresh_service=service).run(RefreshDataset())

        assert result.ok is True
        assert result.total == 3
        assert result.last_updated == stamp
        assert result.error is None

    @pytest.mark.asyncio
    async def test_failure(self):
        service = AsyncMock(spec=RefreshService)
        service.refresh.return_value = RefreshFailed(error="Request error: timed out")

        result = await RefreshDatasetHandler(refresh_service=service).run(RefreshDataset())

        assert result.ok is False
        assert result.error == "Request error: timed out"
        assert result.total is None
