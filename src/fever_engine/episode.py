"""Episode — one tracked illness period for a patient.

An episode is created ``active`` and owns an :class:`EpisodeLog`.  Closing
it is an explicit action (:meth:`Episode.resolve`); once resolved it accepts
no further readings.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from fever_engine.aggregator import EpisodeLog
from fever_engine.errors import InvalidStateError
from fever_engine.models.enums import EpisodeState
from fever_engine.models.history import EpisodeHistory


class Episode:
    """A fever episode and its snapshot log.

    Args:
        patient_id: owning patient identifier
        started_at: episode start; defaults to now (UTC)
        episode_id: opaque id; a random hex id when omitted
        history: medical/exposure history captured at start
    """

    def __init__(
        self,
        patient_id: str,
        *,
        started_at: datetime | None = None,
        episode_id: str | None = None,
        history: EpisodeHistory | None = None,
    ) -> None:
        self.episode_id = episode_id or uuid.uuid4().hex
        self.patient_id = patient_id
        self._started_at = started_at or datetime.now(timezone.utc)
        self.history = history or EpisodeHistory()
        self.status = EpisodeState.ACTIVE
        self.resolved_at: datetime | None = None
        self.log = EpisodeLog()

    @property
    def started_at(self) -> datetime:
        return self._started_at

    @property
    def is_active(self) -> bool:
        return self.status == EpisodeState.ACTIVE

    def resolve(self, now: datetime | None = None) -> None:
        """Close the episode.

        Raises:
            InvalidStateError: if the episode is already resolved.
        """
        if not self.is_active:
            raise InvalidStateError(
                f"Episode {self.episode_id} is already '{self.status.value}'"
            )
        self.status = EpisodeState.RESOLVED
        self.resolved_at = now or datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return (
            f"<Episode(id={self.episode_id!r}, patient={self.patient_id!r}, "
            f"status={self.status.value!r}, snapshots={len(self.log)})>"
        )
