"""Episode storage for the API boundary.

Durable storage of episodes is an external collaborator; this module
defines the interface the routes depend on and an in-memory implementation
for local runs and tests.

The store is also the serialisation point the engine relies on: every write
to an episode must happen while holding :meth:`EpisodeStore.lock` for that
episode, so at most one reading is appended to an episode at a time.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod

from fever_engine.episode import Episode
from fever_engine.errors import NotFoundError


class EpisodeStore(ABC):
    """Interface for episode lookup and registration."""

    @abstractmethod
    async def add(self, episode: Episode) -> None:
        """Register a new episode.  Raises ``ValueError`` on a duplicate id."""
        ...

    @abstractmethod
    async def get(self, patient_id: str, episode_id: str) -> Episode:
        """Return the patient's episode.  Raises ``NotFoundError`` if unknown."""
        ...

    @abstractmethod
    async def list_by_patient(
        self, patient_id: str, *, limit: int = 20, offset: int = 0,
    ) -> list[Episode]:
        """List a patient's episodes, most recently started first."""
        ...

    @abstractmethod
    def lock(self, episode_id: str) -> asyncio.Lock:
        """Return the write lock guarding one episode.  Raises ``NotFoundError`` if unknown."""
        ...


class InMemoryEpisodeStore(EpisodeStore):
    """Process-local store keyed by episode id."""

    def __init__(self) -> None:
        self._episodes: dict[str, Episode] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    async def add(self, episode: Episode) -> None:
        if episode.episode_id in self._episodes:
            raise ValueError(f"Episode already exists: episode_id={episode.episode_id}")
        self._episodes[episode.episode_id] = episode
        self._locks[episode.episode_id] = asyncio.Lock()

    async def get(self, patient_id: str, episode_id: str) -> Episode:
        episode = self._episodes.get(episode_id)
        # Other patients' episodes are reported as missing, not forbidden
        if episode is None or episode.patient_id != patient_id:
            raise NotFoundError(f"Episode not found: episode_id={episode_id}")
        return episode

    async def list_by_patient(
        self, patient_id: str, *, limit: int = 20, offset: int = 0,
    ) -> list[Episode]:
        owned = [e for e in self._episodes.values() if e.patient_id == patient_id]
        owned.sort(key=lambda e: e.started_at, reverse=True)
        return owned[offset:offset + limit]

    def lock(self, episode_id: str) -> asyncio.Lock:
        lock = self._locks.get(episode_id)
        if lock is None:
            raise NotFoundError(f"Episode not found: episode_id={episode_id}")
        return lock
