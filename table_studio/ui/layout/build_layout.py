from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from table_studio.ui.config import AppConfig
from table_studio.ui.ids import IDs
from table_studio.ui.layout.build_datasets_panel import build_datasets_panel
from table_studio.ui.layout.build_navbar import build_navbar
from table_studio.ui.layout.build_query_panel import build_get_started_card, build_query_panel
from table_studio.ui.layout.build_table_panel import build_table_panel


def build_layout(ctx: AppConfig):
    state = ctx.store.state

    return dbc.Container(
        fluid=True,
        className="ts-root",
        children=[
            build_navbar(ctx.settings),

            dcc.Store(id=IDs.Store.VIEW_REVISION, storage_type="memory"),

            html.Main(
                [
                    build_datasets_panel(),
                    html.Div(id=IDs.Control.DATASET_HEADER, className="mb-4"),
                    build_get_started_card(),
                    build_query_panel(state.row_limit),
                    build_table_panel(),
                ],
                className="container py-4",
            ),

            html.Footer(
                "Built for quick data exploration.",
                className="py-4 text-center small text-muted",
            ),
        ],
    )
