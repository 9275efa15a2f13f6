"""Reading endpoints — record readings and read the episode log back.

``POST /episodes/{id}/readings`` runs the full update: validation,
classification, optional prediction, phase guidance and alert delivery.
Writes to one episode are serialised with the store's per-episode lock.

The read-side endpoints (trend, day detail, latest) are recomputed from
the episode log on every call.
"""

from fastapi import APIRouter, Depends, Path
from pydantic import Field

from fever_engine.errors import NotFoundError
from fever_engine.models.snapshot import SymptomReading, SymptomSnapshot
from fever_engine.models.status import EpisodeStatus, TrendPoint
from fever_engine.tracker import EpisodeTracker

from fever_server.dependencies import get_episode_store, get_tracker, get_user_id
from fever_server.store import EpisodeStore

router = APIRouter(tags=["readings"])


# ------------------------------------------------------------------
# Request models
# ------------------------------------------------------------------

class LogReadingRequest(SymptomReading):
    """Body for POST /episodes/{id}/readings.

    The symptom reading plus an optional platelet count forwarded to the
    prediction service.
    """
    platelet_count: float | None = Field(None, gt=0)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.post("/episodes/{episode_id}/readings")
async def log_reading(
    episode_id: str,
    body: LogReadingRequest,
    user_id: str = Depends(get_user_id),
    tracker: EpisodeTracker = Depends(get_tracker),
    store: EpisodeStore = Depends(get_episode_store),
) -> EpisodeStatus:
    """Record one reading and return the composed episode status.

    Raises 422 if the reading is rejected, 409 if the episode is resolved
    and 502 if the prediction service fails.  In every error case the
    reading is not recorded.
    """
    episode = await store.get(user_id, episode_id)
    reading = SymptomReading(**body.model_dump(exclude={"platelet_count"}))
    async with store.lock(episode_id):
        return await tracker.log_reading(
            episode, reading, platelet_count=body.platelet_count,
        )


@router.get("/episodes/{episode_id}/trend")
async def get_trend(
    episode_id: str,
    user_id: str = Depends(get_user_id),
    store: EpisodeStore = Depends(get_episode_store),
) -> list[TrendPoint]:
    """Mean temperature per day of illness, ascending by day."""
    episode = await store.get(user_id, episode_id)
    return episode.log.daily_trend()


@router.get("/episodes/{episode_id}/days/{day}")
async def get_day_detail(
    episode_id: str,
    day: int = Path(..., ge=1),
    user_id: str = Depends(get_user_id),
    store: EpisodeStore = Depends(get_episode_store),
) -> list[SymptomSnapshot]:
    """All readings of one day, ordered morning to night.  Empty if none."""
    episode = await store.get(user_id, episode_id)
    return episode.log.day_detail(day)


@router.get("/episodes/{episode_id}/latest")
async def get_latest(
    episode_id: str,
    user_id: str = Depends(get_user_id),
    store: EpisodeStore = Depends(get_episode_store),
) -> SymptomSnapshot:
    """The most recent reading.  Raises 404 if the episode has none."""
    episode = await store.get(user_id, episode_id)
    snapshot = episode.log.latest()
    if snapshot is None:
        raise NotFoundError(f"No readings for episode_id={episode_id}")
    return snapshot
