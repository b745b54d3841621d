from __future__ import annotations

from typing import TYPE_CHECKING

import dash
from dash import Input, Output

from table_studio.ui.helpers import dataset_buttons, dataset_header, error_alert, rows_table
from table_studio.ui.ids import IDs

if TYPE_CHECKING:
    from table_studio.ui.config import AppConfig

_HIDDEN = {"display": "none"}
_SHOWN: dict = {}

PREVIEW_NOTE = "Showing preview rows. Use the query box and Run to fetch filtered data."


def render_view(ctx: AppConfig):
    # Columns are derived from the state on every render, never stored
    state = ctx.store.state
    loaded = state.active_dataset is not None
    active_id = state.active_dataset.id if loaded else None

    return (
        _SHOWN if state.known_datasets else _HIDDEN,
        dataset_buttons(state.known_datasets, active_id),
        dataset_header(state),
        _HIDDEN if loaded else _SHOWN,
        _SHOWN if loaded else _HIDDEN,
        error_alert(state),
        rows_table(state) if loaded else None,
        PREVIEW_NOTE if loaded and state.showing_preview else None,
    )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # Busy indicators are driven by the action callbacks' running= outputs
    @app.callback(
        Output(IDs.Control.DATASETS_PANEL, "style"),
        Output(IDs.Control.DATASETS_LIST, "children"),
        Output(IDs.Control.DATASET_HEADER, "children"),
        Output(IDs.Control.GET_STARTED, "style"),
        Output(IDs.Control.QUERY_BAR, "style"),
        Output(IDs.Control.ERROR_ALERT, "children"),
        Output(IDs.Control.ROWS_TABLE, "children"),
        Output(IDs.Control.PREVIEW_NOTE, "children"),
        Input(IDs.Store.VIEW_REVISION, "data"),
    )
    def _render_view(_revision):
        return render_view(ctx)
