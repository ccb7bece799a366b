from datetime import datetime

from brainapi.domain.dataset.service.refresh import RefreshFailed, RefreshService
from brainapi.domain.shared.command import Command, CommandHandler, Result


class RefreshDataset(Command):
    pass


class RefreshResult(Result):
    ok: bool
    total: int | None = None
    last_updated: datetime | None = None
    error: str | None = None


class RefreshDatasetHandler(CommandHandler[RefreshDataset, RefreshResult]):
    refresh_service: RefreshService

    async def run(self, cmd: RefreshDataset) -> RefreshResult:
        outcome = await self.refresh_service.refresh()
        if isinstance(outcome, RefreshFailed):
            return RefreshResult(ok=False, error=outcome.error)
        return RefreshResult(ok=True, total=outcome.total, last_updated=outcome.last_updated)
