"""Record types shared by the feed loader, aggregator and views."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Mapping

OBSERVATION_COLUMNS: List[str] = [
    "id",
    "place",
    "magnitude",
    "depth",
    "latitude",
    "longitude",
    "time",
]


def _as_float(value: Any) -> float:
    """Return ``value`` as a float, or NaN when it is missing or not numeric."""
    if value is None or isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


@dataclass(frozen=True)
class MagnitudeRange:
    """A half-open ``[min, max)`` magnitude bucket."""

    label: str
    min: float
    max: float

    def contains(self, magnitude: Any) -> bool:
        value = _as_float(magnitude)
        if math.isnan(value):
            return False
        return self.min <= value < self.max


@dataclass(frozen=True)
class Observation:
    """One earthquake event, flattened from a geoJSON feature."""

    id: str
    place: str
    magnitude: float
    depth: float
    latitude: float
    longitude: float
    time: int

    @classmethod
    def from_feature(cls, feature: Mapping[str, Any]) -> Observation:
        """
        Build an Observation from one feed feature.

        Coordinates arrive as ``[longitude, latitude, depth]``. ``KeyError``,
        ``IndexError`` and ``TypeError`` propagate for features that lack
        the expected structure.
        """
        props = feature["properties"]
        coords = feature["geometry"]["coordinates"]
        time = props["time"]
        return cls(
            id=str(feature["id"]),
            place=props.get("place") or "",
            magnitude=_as_float(props.get("mag")),
            depth=_as_float(coords[2]),
            latitude=_as_float(coords[1]),
            longitude=_as_float(coords[0]),
            time=int(time),
        )
