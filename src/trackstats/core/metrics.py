"""Duration, elevation gain and distance over an ordered sample sequence.

Each metric is a single pass over the samples in the order they were
extracted. Nothing is re-sorted, so unordered input gives order-dependent
results (a negative duration, for instance) that are reported as-is.
"""

from collections.abc import Sequence
from datetime import timedelta

from ..errors import EmptyTrack
from ..models import Sample, Track
from .geodesy import distance
from .models import TrackReport


def _require_samples(samples: Sequence[Sample]) -> None:
    if not samples:
        raise EmptyTrack("Track has no samples.")


def duration(samples: Sequence[Sample]) -> timedelta:
    """Last sample's timestamp minus the first sample's."""
    _require_samples(samples)
    return samples[-1].timestamp - samples[0].timestamp


def elevation_gain(samples: Sequence[Sample]) -> float:
    """Cumulative positive elevation change, baselined at the first sample.

    The accumulator starts at the first sample's raw elevation rather than
    zero, so a track starting at 50 m that only descends reports 50.
    """
    _require_samples(samples)
    gain = samples[0].elevation
    for prev, cur in zip(samples, samples[1:]):
        if cur.elevation > prev.elevation:
            gain += cur.elevation - prev.elevation
    return gain


def total_distance(samples: Sequence[Sample]) -> float:
    """Sum of great-circle distances between consecutive samples, in meters."""
    _require_samples(samples)
    total = 0.0
    for prev, cur in zip(samples, samples[1:]):
        total += distance(prev, cur)
    return total


def summarize(track: Track) -> TrackReport:
    samples = track.samples
    _require_samples(samples)
    return TrackReport(
        title=track.title,
        sample_count=len(samples),
        start_time=samples[0].timestamp,
        duration=duration(samples),
        elevation_gain=elevation_gain(samples),
        distance=total_distance(samples),
    )
