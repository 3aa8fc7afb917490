"""Stats: dashboard totals."""

from fastapi import APIRouter, Depends

from inventory.api.dependencies import get_stats_reporter
from inventory.core.repository_protocols import StatsSource
from inventory.schemas.common import StatsOut

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsOut)
async def get_stats(reporter: StatsSource = Depends(get_stats_reporter)):
    """Counts of computers, users and maintenance logs, each read independently."""
    return await reporter.collect()
