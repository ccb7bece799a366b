"""On-demand re-ingestion."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from brainapi.domain.dataset.command.refresh import (
    RefreshDataset,
    RefreshDatasetHandler,
    RefreshResult,
)

router = APIRouter(tags=["Refresh"], route_class=DishkaRoute)


@router.get("/refresh", response_model=RefreshResult, response_model_exclude_none=True)
async def refresh(handler: FromDishka[RefreshDatasetHandler]) -> RefreshResult:
    """Re-fetch upstream and replace the cached dataset.

    Failures come back as ``{"ok": false, "error": ...}`` and leave the
    previous dataset in place.
    """
    return await handler.run(RefreshDataset())
