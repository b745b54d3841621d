from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from table_studio.ui.ids import IDs


def build_table_panel() -> html.Div:
    return html.Div(
        [
            html.Div(id=IDs.Control.ERROR_ALERT),
            dbc.Card(
                dbc.CardBody(
                    [
                        # Filled only while a query request is running
                        html.Div(id=IDs.Control.QUERY_STATUS, className="text-center text-muted"),
                        dcc.Loading(
                            id="rows-table-loading",
                            type="default",
                            children=html.Div(id=IDs.Control.ROWS_TABLE),
                        ),
                    ],
                    className="p-2",
                ),
                className="ts-maincard",
            ),
            html.P(id=IDs.Control.PREVIEW_NOTE, className="mt-3 small text-muted"),
        ]
    )
