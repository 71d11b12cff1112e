from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from .config import (
    AXIS_LABELS,
    BAR_COLOR,
    BAR_SELECTED_COLOR,
    SCATTER_COLOR,
)
from .models import MagnitudeRange


# ============================================================
# Configuration / constants
# ============================================================

BAR_TRACE_NAME = "Number of Earthquakes"

HOVER_TEMPLATE_BAR = "Magnitude %{x}<br>Earthquakes: %{y:,}<extra></extra>"

LAYOUT_DEFAULTS = dict(
    template="plotly_white",
    margin=dict(t=60, l=50, r=30, b=40),
    plot_bgcolor="#f5f7fb",
)


# ============================================================
# Helper functions
# ============================================================


def _bar_colors(labels: list, selected: Optional[MagnitudeRange]) -> list:
    """Highlight the selected bucket, leave the others in the base colour."""
    selected_label = selected.label if selected is not None else None
    return [
        BAR_SELECTED_COLOR if label == selected_label else BAR_COLOR
        for label in labels
    ]


def _scatter_hover(points: pd.DataFrame, x_axis: str, y_axis: str) -> list:
    return [
        f"{label} | {x_axis}: {x}, {y_axis}: {y}"
        for label, x, y in zip(points["label"], points["x"], points["y"])
    ]


# ============================================================
# Figures
# ============================================================


def create_magnitude_bar(
    counts: pd.DataFrame, selected: Optional[MagnitudeRange] = None
) -> go.Figure:
    """
    Bar chart with one bar per magnitude bucket.

    Parameters
    ----------
    counts : pd.DataFrame
        Output of :func:`quakedash.aggregate.bucket_counts`.
    selected : MagnitudeRange | None
        Bucket to highlight, if any.

    Returns
    -------
    go.Figure
        A single-trace bar figure; point ``i`` is bucket ``i``.
    """
    labels = list(counts["label"])
    fig = go.Figure(
        go.Bar(
            x=labels,
            y=list(counts["count"]),
            name=BAR_TRACE_NAME,
            marker=dict(color=_bar_colors(labels, selected)),
            hovertemplate=HOVER_TEMPLATE_BAR,
            showlegend=True,
        )
    )
    fig.update_layout(
        **LAYOUT_DEFAULTS,
        title="<b>Earthquakes by magnitude</b>",
        clickmode="event",
        legend=dict(orientation="h", x=0.5, y=1.02, xanchor="center", yanchor="bottom"),
    )
    fig.update_xaxes(title_text="Magnitude", type="category")
    fig.update_yaxes(title_text="Count", tickformat=",", rangemode="tozero")
    return fig


def create_scatter_plot(points: pd.DataFrame, x_axis: str, y_axis: str) -> go.Figure:
    """Scatter of the projected points; hover shows place and both values."""
    fig = go.Figure(
        go.Scatter(
            x=points["x"],
            y=points["y"],
            mode="markers",
            name=f"{y_axis} vs {x_axis}",
            marker=dict(size=8, color=SCATTER_COLOR),
            text=_scatter_hover(points, x_axis, y_axis),
            hovertemplate="%{text}<extra></extra>",
            showlegend=True,
        )
    )
    fig.update_layout(
        **LAYOUT_DEFAULTS,
        legend=dict(orientation="h", x=0.5, y=1.02, xanchor="center", yanchor="bottom"),
    )
    fig.update_xaxes(title_text=AXIS_LABELS[x_axis], showgrid=True)
    fig.update_yaxes(title_text=AXIS_LABELS[y_axis], showgrid=True)
    return fig
