"""Pydantic domain models for GPX track samples."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Sample(BaseModel):
    model_config = ConfigDict(frozen=True)

    elevation: float
    timestamp: datetime
    latitude: float
    longitude: float


class Track(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    samples: list[Sample] = Field(min_length=1)
