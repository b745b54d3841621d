from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from table_studio.config import Settings
from table_studio.ui.ids import IDs


def build_navbar(settings: Settings) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title
                html.Div(
                    [
                        html.H2(settings.ui_title, className="mb-0"),
                        html.Small(
                            "Upload data • Ask in plain English • Explore",
                            className="text-muted",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                # Right: CSV picker
                dcc.Upload(
                    id=IDs.Control.UPLOAD,
                    accept=".csv",
                    multiple=False,
                    children=dbc.Button(
                        "Upload CSV",
                        id=IDs.Control.UPLOAD_LABEL,
                        color="primary",
                    ),
                    className="ms-auto",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm ts-navbar",
    )
