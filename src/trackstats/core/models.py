"""Pydantic return models for track summaries."""

import json
from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field


class TrackReport(BaseModel):
    """Metrics computed for one track."""
    model_config = ConfigDict(frozen=True)

    title: str
    sample_count: int = Field(gt=0)
    start_time: datetime
    duration: timedelta
    elevation_gain: float
    distance: float

    @property
    def duration_seconds(self) -> int:
        # Truncates toward zero, so an unordered track keeps its negative sign.
        return int(self.duration.total_seconds())

    def lines(self) -> list[str]:
        return [
            self.title,
            f"Number of samples: {self.sample_count}",
            f"Start time: {self.start_time.ctime()}",
            f"Total time: {self.duration_seconds} seconds",
            f"Total elevation: {self.elevation_gain} meters",
            f"Total distance: {self.distance} meters",
        ]

    def as_dict(self) -> dict:
        return {
            "title": self.title,
            "samples": self.sample_count,
            "start_time": self.start_time.isoformat(),
            "duration": self.duration_seconds,
            "elevation": self.elevation_gain,
            "distance": self.distance,
        }


class AggregateSummary(BaseModel):
    """Running totals across the tracks of an archive."""
    model_config = ConfigDict(validate_assignment=True)

    rides: int = Field(default=0, ge=0)
    duration: int = 0
    elevation: float = 0.0
    distance: float = 0.0

    def add(self, report: TrackReport) -> None:
        self.rides += 1
        self.duration += report.duration_seconds
        self.elevation += report.elevation_gain
        self.distance += report.distance

    def as_dict(self) -> dict:
        return {
            "rides": self.rides,
            "duration": self.duration,
            "elevation": self.elevation,
            "distance": self.distance,
        }

    def to_json(self) -> str:
        return json.dumps(self.as_dict())
