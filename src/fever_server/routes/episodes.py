"""Episode lifecycle endpoints — open, get, list and resolve episodes.

All endpoints require the ``X-User-ID`` header; it names the patient that
owns the episode.  An episode belonging to another patient is reported as
not found.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from fever_engine.models.history import EpisodeHistory
from fever_engine.models.status import EpisodeInfo
from fever_engine.tracker import EpisodeTracker

from fever_server.config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from fever_server.dependencies import get_episode_store, get_tracker, get_user_id
from fever_server.store import EpisodeStore

router = APIRouter(tags=["episodes"])


# ------------------------------------------------------------------
# Request models
# ------------------------------------------------------------------

class StartEpisodeRequest(BaseModel):
    """Body for POST /episodes."""
    episode_id: str | None = None
    started_at: datetime | None = None
    history: EpisodeHistory | None = None


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.post("/episodes", status_code=201)
async def start_episode(
    body: StartEpisodeRequest,
    user_id: str = Depends(get_user_id),
    tracker: EpisodeTracker = Depends(get_tracker),
    store: EpisodeStore = Depends(get_episode_store),
) -> EpisodeInfo:
    """Open a new ``active`` fever episode.

    Returns 201 on success.  Raises 409 if ``episode_id`` is already taken.
    """
    episode = tracker.start_episode(
        user_id,
        history=body.history,
        started_at=body.started_at,
        episode_id=body.episode_id,
    )
    await store.add(episode)
    return tracker.describe(episode)


@router.get("/episodes/{episode_id}")
async def get_episode(
    episode_id: str,
    user_id: str = Depends(get_user_id),
    tracker: EpisodeTracker = Depends(get_tracker),
    store: EpisodeStore = Depends(get_episode_store),
) -> EpisodeInfo:
    """Get episode info.  Raises 404 if the episode does not exist for this patient."""
    episode = await store.get(user_id, episode_id)
    return tracker.describe(episode)


@router.get("/episodes")
async def list_episodes(
    user_id: str = Depends(get_user_id),
    tracker: EpisodeTracker = Depends(get_tracker),
    store: EpisodeStore = Depends(get_episode_store),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    offset: int = Query(0, ge=0),
) -> list[EpisodeInfo]:
    """List episodes for the current patient, most recently started first."""
    episodes = await store.list_by_patient(user_id, limit=limit, offset=offset)
    return [tracker.describe(e) for e in episodes]


@router.post("/episodes/{episode_id}/resolve")
async def resolve_episode(
    episode_id: str,
    user_id: str = Depends(get_user_id),
    tracker: EpisodeTracker = Depends(get_tracker),
    store: EpisodeStore = Depends(get_episode_store),
) -> EpisodeInfo:
    """Close an episode.  Raises 409 if it is already resolved."""
    episode = await store.get(user_id, episode_id)
    async with store.lock(episode_id):
        tracker.resolve_episode(episode)
    return tracker.describe(episode)
