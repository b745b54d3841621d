from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc

from table_studio.core.exceptions import RowLimitError
from table_studio.core.view_state import input_rejected
from table_studio.ui.helpers import rows_frame
from table_studio.ui.ids import IDs

if TYPE_CHECKING:
    from table_studio.ui.config import AppConfig

logger = logging.getLogger(__name__)

# (output, value while the callback runs, value afterwards)
QUERY_RUNNING = [
    (Output(IDs.Control.RUN_QUERY_BTN, "disabled"), True, False),
    (Output(IDs.Control.ROWS_TABLE, "style"), {"display": "none"}, {}),
    (Output(IDs.Control.QUERY_STATUS, "children"), "Loading…", None),
]


def run_query(ctx: AppConfig, n_clicks, n_submit, query_text, row_limit) -> int:
    if not n_clicks and not n_submit:
        raise dash.exceptions.PreventUpdate

    try:
        ctx.queries.set_row_limit(row_limit)
    except RowLimitError as e:
        # The previous limit stays in place
        ctx.store.dispatch(input_rejected, str(e))
        return ctx.store.revision

    ctx.queries.set_query_text(query_text)
    ctx.queries.run_query()
    return ctx.store.revision


def download_rows(ctx: AppConfig, n_clicks):
    if not n_clicks:
        raise dash.exceptions.PreventUpdate

    state = ctx.store.state
    if state.active_dataset is None or not state.displayed_rows:
        raise dash.exceptions.PreventUpdate

    df = rows_frame(state.displayed_rows, state.columns)
    stem = Path(state.active_dataset.name).stem or state.active_dataset.id
    return dcc.send_data_frame(df.to_csv, f"{stem}_rows.csv", index=False)


def register_query_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Run query (button or Enter in the query box)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_REVISION, "data", allow_duplicate=True),
        Input(IDs.Control.RUN_QUERY_BTN, "n_clicks"),
        Input(IDs.Control.QUERY_INPUT, "n_submit"),
        State(IDs.Control.QUERY_INPUT, "value"),
        State(IDs.Control.ROW_LIMIT_INPUT, "value"),
        running=QUERY_RUNNING,
        prevent_initial_call=True,
    )
    def _run_query(n_clicks, n_submit, query_text, row_limit):
        return run_query(ctx, n_clicks, n_submit, query_text, row_limit)

    # ---------------------------------------------------------
    # Download displayed rows
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_ROWS, "data"),
        Input(IDs.Control.DOWNLOAD_ROWS_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def _download_rows(n_clicks):
        return download_rows(ctx, n_clicks)
