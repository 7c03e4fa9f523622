"""Errors raised while loading tracks and computing their metrics."""


class TrackStatsError(Exception):
    """Base class for every failure that aborts a run."""


class InputError(TrackStatsError):
    """The input path is missing, unreadable, or not a usable archive."""


class MalformedDocument(TrackStatsError):
    """A GPX document is missing a required element or holds an unparsable field."""


class EmptyTrack(TrackStatsError):
    """A track has no samples, so start time, duration and gain are undefined."""
