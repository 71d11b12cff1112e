"""
Chart-ready projections of the record set: scatter points and table rows.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional

import numpy as np
import pandas as pd

from .config import AXIS_LABELS, TIMESTAMP_FORMAT

TABLE_COLUMNS = ["Place", "Magnitude", "Depth", "Time"]


def validate_axis(axis: str) -> str:
    if axis not in AXIS_LABELS:
        raise ValueError(
            f"Unknown axis {axis!r}; expected one of {sorted(AXIS_LABELS)}"
        )
    return axis


def scatter_points(
    observations: pd.DataFrame, x_axis: str, y_axis: str
) -> pd.DataFrame:
    """
    Project observations onto the selected X and Y fields.

    Rows where either field is not a finite number are dropped; the rest
    keep feed order. Returns columns ``x``, ``y`` and ``label`` (the place).
    """
    validate_axis(x_axis)
    validate_axis(y_axis)

    x = pd.to_numeric(observations[x_axis], errors="coerce").astype(float)
    y = pd.to_numeric(observations[y_axis], errors="coerce").astype(float)
    mask = np.isfinite(x) & np.isfinite(y)

    return pd.DataFrame(
        {
            "x": x[mask].to_numpy(),
            "y": y[mask].to_numpy(),
            "label": observations.loc[mask, "place"].astype(str).to_numpy(),
        }
    )


def format_timestamp(epoch_ms: int, tz: Optional[tzinfo] = None) -> str:
    """Render epoch milliseconds as a readable timestamp in ``tz`` (local when None)."""
    moment = datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)
    return moment.astimezone(tz).strftime(TIMESTAMP_FORMAT)


def table_rows(
    observations: pd.DataFrame, tz: Optional[tzinfo] = None
) -> pd.DataFrame:
    """One display row per observation, feed order, no filtering."""
    if observations.empty:
        return pd.DataFrame(columns=TABLE_COLUMNS)

    return pd.DataFrame(
        {
            "Place": observations["place"].to_numpy(),
            "Magnitude": observations["magnitude"].to_numpy(),
            "Depth": observations["depth"].to_numpy(),
            "Time": [format_timestamp(int(t), tz) for t in observations["time"]],
        }
    )
