"""Tests for the magnitude histogram."""

from __future__ import annotations

import math

import pandas as pd
import pytest

from quakedash.aggregate import assign_bucket, bucket_counts
from quakedash.config import MAGNITUDE_RANGES
from quakedash.feed import parse_features

from conftest import make_feature, make_payload


class TestAssignBucket:
    @pytest.mark.parametrize(
        "magnitude, expected",
        [
            (0, 0),
            (0.99, 0),
            (1.0, 1),
            (2.5, 2),
            (3.5, 3),
            (4.999, 4),
            (5.0, 5),
            (9.99, 5),
        ],
    )
    def test_half_open_ranges(self, magnitude: float, expected: int) -> None:
        assert assign_bucket(magnitude) == expected
        rng = MAGNITUDE_RANGES[expected]
        assert rng.min <= magnitude < rng.max

    @pytest.mark.parametrize("magnitude", [10, 10.2, -0.5, math.nan, None, "3.5x", True])
    def test_outside_every_bucket(self, magnitude) -> None:
        assert assign_bucket(magnitude) is None

    def test_at_most_one_bucket(self) -> None:
        for tenth in range(-10, 120):
            m = tenth / 10
            hits = [r for r in MAGNITUDE_RANGES if r.contains(m)]
            assert len(hits) <= 1


class TestBucketCounts:
    def test_single_feature(self, single_payload: dict) -> None:
        counts = bucket_counts(parse_features(single_payload))
        assert list(counts["label"]) == ["0-1", "1-2", "2-3", "3-4", "4-5", "5+"]
        assert dict(zip(counts["label"], counts["count"])) == {
            "0-1": 0,
            "1-2": 0,
            "2-3": 0,
            "3-4": 1,
            "4-5": 0,
            "5+": 0,
        }

    def test_zero_features(self) -> None:
        counts = bucket_counts(parse_features(make_payload()))
        assert len(counts) == 6
        assert (counts["count"] == 0).all()

    def test_extreme_magnitude_excluded(self) -> None:
        counts = bucket_counts(parse_features(make_payload(make_feature(mag=10.2))))
        assert counts["count"].sum() == 0

    def test_sum_matches_in_range_count(self, mixed_observations: pd.DataFrame) -> None:
        counts = bucket_counts(mixed_observations)
        mags = mixed_observations["magnitude"]
        in_range = int(((mags >= 0) & (mags < 10)).sum())
        assert counts["count"].sum() == in_range == 4
        assert list(counts["count"]) == [2, 1, 0, 0, 0, 1]

    def test_agrees_with_assign_bucket(self, mixed_observations: pd.DataFrame) -> None:
        counts = bucket_counts(mixed_observations)
        expected = [0] * len(MAGNITUDE_RANGES)
        for m in mixed_observations["magnitude"]:
            index = assign_bucket(m)
            if index is not None:
                expected[index] += 1
        assert list(counts["count"]) == expected
