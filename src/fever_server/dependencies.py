"""FastAPI dependency injection — provides the tracker, episode store and caller identity.

The tracker and store are built once in the application lifespan and
stashed on ``app.state``.  Caller identity comes from request headers
injected by the API gateway; it is passed explicitly into every route
instead of living in any global state.
"""

import hmac

from fastapi import Header, HTTPException, Request

from fever_engine.tracker import EpisodeTracker

from fever_server.store import EpisodeStore


# ------------------------------------------------------------------
# Tracker & store — stashed on app.state during lifespan
# ------------------------------------------------------------------

def get_tracker(request: Request) -> EpisodeTracker:
    """Return the tracker singleton from ``app.state``."""
    return request.app.state.tracker


def get_episode_store(request: Request) -> EpisodeStore:
    """Return the episode store singleton from ``app.state``."""
    return request.app.state.episode_store


# ------------------------------------------------------------------
# User identity — extracted from the X-User-ID header
# ------------------------------------------------------------------

async def get_user_id(
    request: Request,
    x_user_id: str | None = Header(None, alias="X-User-ID"),
    x_proxy_secret: str | None = Header(None, alias="X-Proxy-Secret"),
) -> str:
    """Extract the patient identity from the ``X-User-ID`` header.

    Returns 401 if the header is missing; every episode endpoint
    requires a known caller.

    When ``TRUSTED_PROXY_SECRET`` is configured, the request must also
    carry a matching ``X-Proxy-Secret`` header.  This proves the
    ``X-User-ID`` was injected by a trusted API gateway and not forged
    by an external client.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="X-User-ID header is required")

    expected_secret: str | None = request.app.state.settings.trusted_proxy_secret
    if expected_secret:
        if not x_proxy_secret:
            raise HTTPException(
                status_code=403,
                detail="X-Proxy-Secret header is required",
            )
        # Constant-time comparison to prevent timing side-channels.
        if not hmac.compare_digest(x_proxy_secret, expected_secret):
            raise HTTPException(status_code=403, detail="Invalid proxy secret")

    return x_user_id
