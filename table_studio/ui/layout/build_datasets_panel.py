from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from table_studio.ui.ids import IDs


def build_datasets_panel() -> html.Div:
    """
    "Your datasets" strip. Hidden until the registry lists something.
    """
    return html.Div(
        id=IDs.Control.DATASETS_PANEL,
        style={"display": "none"},
        className="mb-4",
        children=[
            html.Div(
                [
                    html.Strong("Your datasets", className="small"),
                    dbc.Button(
                        "Refresh",
                        id=IDs.Control.DATASETS_REFRESH_BTN,
                        color="link",
                        size="sm",
                        className="p-0",
                    ),
                ],
                className="d-flex justify-content-between align-items-center mb-2",
            ),
            html.Div(id=IDs.Control.DATASETS_LIST, className="d-flex flex-wrap"),
        ],
    )
