from __future__ import annotations

from typing import List, Sequence

import dash_bootstrap_components as dbc
import pandas as pd
from dash import dash_table, html

from table_studio.core.dataset import DatasetSummary, Row, format_cell
from table_studio.core.view_state import ViewState
from table_studio.ui.ids import dataset_item_id

_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def rows_frame(rows: Sequence[Row], columns: List[str]) -> pd.DataFrame:
    """
    Displayed rows as a text-only frame with exactly the resolved columns.
    Missing keys render as empty strings.
    """
    records = [{c: format_cell(r.get(c)) for c in columns} for r in rows]
    return pd.DataFrame.from_records(records, columns=columns)


def rows_table(state: ViewState):
    """
    Build the rows table for the active dataset.

    While a query is in flight the rows are hidden behind a loading line.
    With no rows the header row is still shown above an empty-table note.
    """
    columns = state.columns

    if state.query_in_flight:
        return html.Div("Loading…", className="text-center text-muted py-4")
    if not state.displayed_rows:
        empty = html.Div("No rows to display", className="text-center text-muted py-4")
        if not columns:
            return empty
        return html.Div([_data_table(rows_frame([], columns)), empty])

    return _data_table(rows_frame(state.displayed_rows, columns))


def _data_table(df: pd.DataFrame) -> dash_table.DataTable:
    columns = list(df.columns)
    return dash_table.DataTable(
        data=df.to_dict("records"),
        columns=[{"name": c, "id": c} for c in columns],

        # ---- FONT + LOOK & FEEL ----
        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": _FONT,
            "fontSize": "13px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "320px",
            "whiteSpace": "normal",
        },
        style_header={
            "fontFamily": _FONT,
            "fontSize": "13px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data_conditional=[
            {"if": {"row_index": "odd"}, "backgroundColor": "#f9fafb"},
        ],
        fixed_rows={"headers": True},
        page_action="none",
    )


def dataset_header(state: ViewState):
    ds = state.active_dataset
    if ds is None:
        return None

    badges = [
        html.H4(ds.name, className="mb-0 me-2"),
        dbc.Badge(f"{ds.row_count} rows", color="light", text_color="secondary", className="me-1"),
        dbc.Badge(f"{len(state.columns)} columns", color="light", text_color="secondary"),
    ]

    type_badges = [
        dbc.Badge(f"{col}: {col_type}", color="light", text_color="secondary", className="me-1 mb-1")
        for col, col_type in ds.column_types.items()
    ]

    children = [html.Div(badges, className="d-flex flex-wrap align-items-center")]
    if type_badges:
        children.append(html.Div(type_badges, className="mt-2 d-flex flex-wrap small"))
    return html.Div(children)


def dataset_buttons(known: Sequence[DatasetSummary], active_id: str | None):
    return [
        dbc.Button(
            d.name,
            id=dataset_item_id(d.id),
            size="sm",
            outline=d.id != active_id,
            color="primary" if d.id == active_id else "secondary",
            className="me-2 mb-2",
            title=f"{d.row_count or 0} rows",
        )
        for d in known
    ]


def error_alert(state: ViewState):
    if not state.last_error:
        return None
    return dbc.Alert(state.last_error, color="danger", className="small py-2 mb-3")
