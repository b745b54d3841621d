from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import ALL, Input, Output

from table_studio.ui.ids import IDs

if TYPE_CHECKING:
    from table_studio.ui.config import AppConfig

logger = logging.getLogger(__name__)


def refresh_datasets(ctx: AppConfig) -> int:
    ctx.registry.refresh_list()
    return ctx.store.revision


def select_dataset(ctx: AppConfig, triggered_id: Any, n_clicks: Optional[int]):
    """
    Activate the dataset whose button fired.

    :return: (view revision, query box value)
    """
    if not isinstance(triggered_id, dict):
        raise dash.exceptions.PreventUpdate

    # Re-rendered buttons fire with n_clicks=None
    if not n_clicks:
        raise dash.exceptions.PreventUpdate

    dataset_id = triggered_id.get("index")
    if not dataset_id:
        raise dash.exceptions.PreventUpdate

    state = ctx.selector.select_existing(dataset_id)
    return ctx.store.revision, state.query_text


def register_dataset_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Registry refresh (page load + Refresh button)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_REVISION, "data"),
        Input(IDs.Control.DATASETS_REFRESH_BTN, "n_clicks"),
    )
    def _refresh_datasets(_n_clicks):
        return refresh_datasets(ctx)

    # ---------------------------------------------------------
    # Select an existing dataset from the list
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_REVISION, "data", allow_duplicate=True),
        Output(IDs.Control.QUERY_INPUT, "value", allow_duplicate=True),
        Input({"type": IDs.Pattern.DATASET_ITEM, "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def _select_dataset(_n_clicks_list):
        triggered = dash.ctx.triggered
        n_clicks = triggered[0].get("value") if triggered else None
        return select_dataset(ctx, dash.ctx.triggered_id, n_clicks)
