from pathlib import Path

import plotly.graph_objects as go
from shiny import reactive, render
from shiny.express import input, ui
from shinywidgets import render_plotly

# Import organized modules
from quakedash.aggregate import bucket_counts
from quakedash.config import (
    AXIS_OPTIONS,
    DEFAULT_X_AXIS,
    DEFAULT_Y_AXIS,
    TABLE_HEIGHT,
    configure_logging,
)
from quakedash.data_manager import load_state
from quakedash.plotting import create_magnitude_bar, create_scatter_plot
from quakedash.projection import scatter_points, table_rows

configure_logging()

# Helpers for UI mapping
AXIS_CHOICES = {value: label for label, value in AXIS_OPTIONS}

# ======================================================
#  REACTIVE STATE
# ======================================================
# Loaded once per session; the record set is never mutated afterwards.
state_store = reactive.Value(load_state())


@reactive.calc
def magnitude_counts():
    return bucket_counts(state_store.get().observations)


@reactive.calc
def projected_points():
    state = state_store.get()
    return scatter_points(state.observations, state.x_axis, state.y_axis)


@reactive.effect
@reactive.event(input.x_axis, input.y_axis)
def _sync_axes():
    with reactive.isolate():
        state = state_store.get()
    state_store.set(state.with_axes(input.x_axis(), input.y_axis()))


@reactive.effect
@reactive.event(input.clear_range)
def _clear_range():
    with reactive.isolate():
        state = state_store.get()
    state_store.set(state.clear_range())


def _on_bar_click(trace, points, selector):
    index = points.point_inds[0] if points.point_inds else None
    with reactive.isolate():
        state = state_store.get()
    state_store.set(state.select_bucket(index))


# ======================================================
#  UI LAYOUT
# ======================================================
css_file = Path(__file__).parent / "css" / "theme.css"

ui.include_css(css_file)

ui.page_opts(
    title="Earthquake Data Dashboard",
    fillable=False,
    full_width=True,
    id="page",
    lang="en",
)


@render.ui
def feed_status():
    state = state_store.get()
    if state.error is not None:
        return ui.div(
            ui.tags.b("Could not load earthquake data. "),
            state.error,
            class_="alert alert-danger",
            role="alert",
        )
    return ui.p(
        f"{len(state.observations):,} earthquakes in the past week.",
        class_="text-muted",
    )


with ui.div(class_="bar-panel"):

    @render_plotly
    def magnitude_bar():
        state = state_store.get()
        fig = go.FigureWidget(
            create_magnitude_bar(magnitude_counts(), state.selected_range)
        )
        fig.data[0].on_click(_on_bar_click)
        return fig

    @render.ui
    def range_filter():
        selected = state_store.get().selected_range
        if selected is None:
            return None
        return ui.p(
            "Filtering by magnitude: ",
            ui.tags.b(f"{selected.min} - {selected.max}"),
            " ",
            ui.input_action_button("clear_range", "Clear", class_="btn-sm"),
        )


with ui.layout_columns(col_widths=(6, 6)):
    with ui.card():
        ui.card_header("Scatter Plot")
        with ui.layout_columns(col_widths=(6, 6)):
            ui.input_select("x_axis", "X-Axis", AXIS_CHOICES, selected=DEFAULT_X_AXIS)
            ui.input_select("y_axis", "Y-Axis", AXIS_CHOICES, selected=DEFAULT_Y_AXIS)

        @render_plotly
        def scatter_plot():
            state = state_store.get()
            return create_scatter_plot(projected_points(), state.x_axis, state.y_axis)

    with ui.card(class_="table-panel"):
        ui.card_header("Data Table")

        @render.data_frame
        def observation_table():
            return render.DataGrid(
                table_rows(state_store.get().observations),
                height=TABLE_HEIGHT,
                width="100%",
            )
