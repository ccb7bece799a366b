import logging

from brainapi.domain.dataset.model.status import DataStatus
from brainapi.domain.dataset.service.context import ServiceContext
from brainapi.domain.shared.command import Command, CommandHandler, Result

logger = logging.getLogger(__name__)


class MarkInUse(Command):
    in_use: bool = True


class StatusDetail(Result):
    status: DataStatus


class MarkInUseHandler(CommandHandler[MarkInUse, StatusDetail]):
    context: ServiceContext

    async def run(self, cmd: MarkInUse) -> StatusDetail:
        status = self.context.status.update(in_use=cmd.in_use)
        logger.info("Dataset in_use set to %s", cmd.in_use)
        return StatusDetail(status=status)
