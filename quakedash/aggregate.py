"""Magnitude histogram: count observations per half-open magnitude range."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import pandas as pd

from .config import MAGNITUDE_RANGES
from .models import MagnitudeRange


def assign_bucket(
    magnitude: Any, ranges: Sequence[MagnitudeRange] = MAGNITUDE_RANGES
) -> Optional[int]:
    """Index of the range holding ``magnitude``, or None when no range does."""
    for i, rng in enumerate(ranges):
        if rng.contains(magnitude):
            return i
    return None


def bucket_counts(
    observations: pd.DataFrame,
    ranges: Sequence[MagnitudeRange] = MAGNITUDE_RANGES,
) -> pd.DataFrame:
    """
    Count observations per magnitude range.

    Parameters
    ----------
    observations : pd.DataFrame
        Record set with a ``magnitude`` column.
    ranges : sequence of MagnitudeRange
        Ordered, non-overlapping ``[min, max)`` ranges.

    Returns
    -------
    pd.DataFrame
        Columns ``label``, ``min``, ``max`` and ``count``, one row per range
        in the given order. Missing or non-numeric magnitudes, and values
        outside every range (including m >= 10 for the default ranges), are
        counted nowhere.
    """
    mags = pd.to_numeric(observations["magnitude"], errors="coerce")
    counts = [int(((mags >= r.min) & (mags < r.max)).sum()) for r in ranges]
    return pd.DataFrame(
        {
            "label": [r.label for r in ranges],
            "min": [r.min for r in ranges],
            "max": [r.max for r in ranges],
            "count": counts,
        }
    )
