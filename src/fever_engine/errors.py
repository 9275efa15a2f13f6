"""Engine exception taxonomy.

Every error derives from ``ValueError`` (through :class:`EpisodeError`) so
that callers which only know about ``ValueError`` still see a failure.  The
engine raises these to its immediate caller and never catches them itself.
"""


class EpisodeError(ValueError):
    """Base class for all engine errors."""


class ValidationError(EpisodeError):
    """A reading is missing a required field or its vitals are out of bounds."""


class InvalidStateError(EpisodeError):
    """An operation was attempted on an episode that is not ``active``."""


class NotFoundError(EpisodeError):
    """An episode id is unknown to the store it was looked up in.

    A day-detail query for a day without readings is *not* an error; it
    returns an empty list.
    """


class PredictionError(EpisodeError):
    """The external prediction service failed or returned a malformed reply."""
