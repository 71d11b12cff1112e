"""Immutable dashboard state and its transitions.

The whole view is derived from one :class:`DashboardState` value.  Every
transition returns a new state; the record set is only ever replaced as a
whole by :meth:`DashboardState.with_observations`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

import pandas as pd

from .config import DEFAULT_X_AXIS, DEFAULT_Y_AXIS, MAGNITUDE_RANGES
from .feed import empty_observations
from .models import MagnitudeRange
from .projection import validate_axis

STATUS_EMPTY = "empty"
STATUS_LOADED = "loaded"
STATUS_ERROR = "error"


# eq=False: DataFrames do not support truthy equality.
@dataclass(frozen=True, eq=False)
class DashboardState:
    observations: pd.DataFrame = field(default_factory=empty_observations)
    selected_range: Optional[MagnitudeRange] = None
    x_axis: str = DEFAULT_X_AXIS
    y_axis: str = DEFAULT_Y_AXIS
    error: Optional[str] = None

    @property
    def status(self) -> str:
        if self.error is not None:
            return STATUS_ERROR
        if self.observations.empty:
            return STATUS_EMPTY
        return STATUS_LOADED

    def with_observations(self, observations: pd.DataFrame) -> DashboardState:
        return replace(self, observations=observations, error=None)

    def with_error(self, message: str) -> DashboardState:
        return replace(self, observations=empty_observations(), error=message)

    def select_range(self, rng: Optional[MagnitudeRange]) -> DashboardState:
        return replace(self, selected_range=rng)

    def select_bucket(
        self,
        index: Optional[int],
        ranges: Sequence[MagnitudeRange] = MAGNITUDE_RANGES,
    ) -> DashboardState:
        """
        Apply a bar click: ``None`` (no bar hit) or the already selected
        bucket clears the selection, any other index selects that bucket.
        """
        if index is None:
            return self.clear_range()
        rng = ranges[index]
        if rng == self.selected_range:
            return self.clear_range()
        return self.select_range(rng)

    def clear_range(self) -> DashboardState:
        return replace(self, selected_range=None)

    def with_axes(
        self, x_axis: Optional[str] = None, y_axis: Optional[str] = None
    ) -> DashboardState:
        return replace(
            self,
            x_axis=validate_axis(x_axis) if x_axis is not None else self.x_axis,
            y_axis=validate_axis(y_axis) if y_axis is not None else self.y_axis,
        )
