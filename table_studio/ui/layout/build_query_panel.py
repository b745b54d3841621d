from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from table_studio.core.view_state import MAX_ROW_LIMIT, MIN_ROW_LIMIT
from table_studio.ui.ids import IDs


def build_get_started_card() -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                html.H5("Get started"),
                html.P(
                    "Upload a CSV to create an interactive table. "
                    "You can then filter with natural language like:",
                    className="small text-muted mb-1",
                ),
                html.Ul(
                    [
                        html.Li("price > 100"),
                        html.Li("country = US and status is true"),
                        html.Li("contains name John"),
                    ],
                    className="small text-muted mb-0",
                ),
            ]
        ),
        id=IDs.Control.GET_STARTED,
        className="mb-4 border-dashed",
    )


def build_query_panel(row_limit: int) -> html.Div:
    return html.Div(
        id=IDs.Control.QUERY_BAR,
        style={"display": "none"},
        className="mb-3",
        children=dbc.Row(
            [
                dbc.Col(
                    dbc.Input(
                        id=IDs.Control.QUERY_INPUT,
                        type="text",
                        value="",
                        placeholder="Ask something like: price > 100 and country = US "
                                    "or use 'contains name John'",
                    ),
                    md=8,
                ),
                dbc.Col(
                    html.Div(
                        [
                            # dbc.Input takes no title, the tooltip sits on a wrapper
                            html.Div(
                                dbc.Input(
                                    id=IDs.Control.ROW_LIMIT_INPUT,
                                    type="number",
                                    min=MIN_ROW_LIMIT,
                                    max=MAX_ROW_LIMIT,
                                    step=1,
                                    value=row_limit,
                                ),
                                title="Max rows",
                                style={"width": "7rem"},
                            ),
                            dbc.Button("Run", id=IDs.Control.RUN_QUERY_BTN, color="primary"),
                            dbc.Button(
                                "Download rows (CSV)",
                                id=IDs.Control.DOWNLOAD_ROWS_BTN,
                                color="secondary",
                                outline=True,
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_ROWS),
                        ],
                        className="d-flex gap-2",
                    ),
                    md=4,
                ),
            ],
            className="g-2",
        ),
    )
