"""Dataset lifecycle routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from brainapi.domain.dataset.command.mark_in_use import (
    MarkInUse,
    MarkInUseHandler,
    StatusDetail,
)
from brainapi.domain.dataset.query.get_status import (
    GetStatus,
    GetStatusHandler,
    StatusSummary,
)

router = APIRouter(tags=["Status"], route_class=DishkaRoute)


@router.get("/status", response_model=StatusSummary)
async def get_status(handler: FromDishka[GetStatusHandler]) -> StatusSummary:
    return await handler.run(GetStatus())


@router.post("/in-use", response_model=StatusDetail)
async def mark_in_use(
    handler: FromDishka[MarkInUseHandler],
    body: MarkInUse | None = None,
) -> StatusDetail:
    """Flag the cached dataset as being in use (or not, with ``{"in_use": false}``)."""
    return await handler.run(body or MarkInUse())
