from dishka import Provider, Scope, provide

from brainapi.config import Config
from brainapi.domain.dataset.command.mark_in_use import MarkInUseHandler
from brainapi.domain.dataset.command.refresh import RefreshDatasetHandler
from brainapi.domain.dataset.port.hits_fetcher import HitsFetcher
from brainapi.domain.dataset.query.get_group_counts import GetGroupCountsHandler
from brainapi.domain.dataset.query.get_raw_rows import GetRawRowsHandler
from brainapi.domain.dataset.query.get_status import GetStatusHandler
from brainapi.domain.dataset.query.list_names import ListNamesHandler
from brainapi.domain.dataset.service.context import ServiceContext
from brainapi.domain.dataset.service.ingest import IngestService
from brainapi.domain.dataset.service.refresh import RefreshService


class DatasetProvider(Provider):
    @provide(scope=Scope.APP)
    def get_service_context(self) -> ServiceContext:
        """One context per container; its stores live as long as the app."""
        return ServiceContext()

    # Services
    @provide(scope=Scope.APP)
    def get_ingest_service(self, fetcher: HitsFetcher, config: Config) -> IngestService:
        return IngestService(fetcher=fetcher, upstream=config.upstream)

    @provide(scope=Scope.APP)
    def get_refresh_service(
        self, ingest: IngestService, context: ServiceContext
    ) -> RefreshService:
        return RefreshService(ingest=ingest, context=context)

    # Command Handlers
    refresh_dataset_handler = provide(RefreshDatasetHandler, scope=Scope.REQUEST)
    mark_in_use_handler = provide(MarkInUseHandler, scope=Scope.REQUEST)

    # Query Handlers
    get_status_handler = provide(GetStatusHandler, scope=Scope.REQUEST)
    get_raw_rows_handler = provide(GetRawRowsHandler, scope=Scope.REQUEST)
    get_group_counts_handler = provide(GetGroupCountsHandler, scope=Scope.REQUEST)
    list_names_handler = provide(ListNamesHandler, scope=Scope.REQUEST)
