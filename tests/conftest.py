"""Shared fixtures for quakedash tests."""

from __future__ import annotations

from typing import Any

import pandas as pd
import pytest

from quakedash.feed import parse_features


def make_feature(
    id: str = "ev1",
    place: Any = "Test Location",
    mag: Any = 3.5,
    coordinates: Any = (-118.0, 34.0, 10),
    time: Any = 1700000000000,
) -> dict:
    """One geoJSON feature in the USGS summary-feed shape."""
    return {
        "type": "Feature",
        "id": id,
        "properties": {"place": place, "mag": mag, "time": time},
        "geometry": {"type": "Point", "coordinates": list(coordinates)},
    }


def make_payload(*features: dict) -> dict:
    return {"type": "FeatureCollection", "features": list(features)}


class FakeResponse:
    """Stand-in for ``requests.Response`` carrying a fixed JSON body."""

    def __init__(self, payload: Any = None, status_code: int = 200, json_error: Exception | None = None):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self) -> None:
        import requests

        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self) -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._payload


@pytest.fixture()
def single_payload() -> dict:
    """The single mag-3.5 feature used across end-to-end checks."""
    return make_payload(make_feature())


@pytest.fixture()
def mixed_observations() -> pd.DataFrame:
    """Six events covering bucket edges, an out-of-range and a missing magnitude."""
    return parse_features(
        make_payload(
            make_feature("a", "Alpha", 0.0, (10.0, 20.0, 5.0)),
            make_feature("b", "Bravo", 0.99, (11.0, 21.0, 6.0)),
            make_feature("c", "Charlie", 1.0, (12.0, 22.0, None)),
            make_feature("d", "Delta", 5.0, (13.0, 23.0, 8.0)),
            make_feature("e", "Echo", 10.2, (14.0, 24.0, 9.0)),
            make_feature("f", "Foxtrot", None, (15.0, 25.0, 10.0)),
        )
    )
