from __future__ import annotations

from dash import dash_table

from table_studio.core.dataset import Dataset
from table_studio.core.view_state import ViewState
from table_studio.ui.helpers import dataset_buttons, dataset_header, error_alert, rows_frame, rows_table
from table_studio.core.dataset import DatasetSummary


def _state(**kwargs) -> ViewState:
    ds = Dataset(id="d1", name="sales.csv", columns=("date", "amount"), column_types={"amount": "integer"})
    return ViewState(active_dataset=ds, **kwargs)


def test_rows_frame_uses_resolved_columns_and_text_cells():
    df = rows_frame([{"amount": 10.0, "date": None, "extra": 1}, {"date": "2024-01-02"}], ["date", "amount"])

    assert list(df.columns) == ["date", "amount"]
    assert df.to_dict("records") == [
        {"date": "", "amount": "10"},
        {"date": "2024-01-02", "amount": ""},
    ]


def test_rows_table_states():
    rows = ({"date": "2024-01-01", "amount": 10},)

    table = rows_table(_state(displayed_rows=rows))
    assert isinstance(table, dash_table.DataTable)
    assert table.data == [{"date": "2024-01-01", "amount": "10"}]

    assert rows_table(ViewState(active_dataset=Dataset(id="d0", name="x.csv"))).children == "No rows to display"
    assert rows_table(_state(displayed_rows=rows, query_in_flight=True)).children == "Loading…"


def test_dataset_header_and_error_alert():
    assert dataset_header(ViewState()) is None
    assert dataset_header(_state()) is not None

    assert error_alert(ViewState()) is None
    assert error_alert(ViewState(last_error="Query failed")).children == "Query failed"


def test_dataset_buttons_highlight_active():
    buttons = dataset_buttons(
        [DatasetSummary(id="d1", name="a.csv", row_count=3), DatasetSummary(id="d2", name="b.csv")],
        active_id="d2",
    )

    assert [b.id["index"] for b in buttons] == ["d1", "d2"]
    assert buttons[0].outline is True
    assert buttons[1].outline is False
    assert buttons[0].title == "3 rows"


def test_empty_rows_still_show_the_header_row():
    header, note = rows_table(_state()).children

    assert isinstance(header, dash_table.DataTable)
    assert [c["name"] for c in header.columns] == ["date", "amount"]
    assert header.data == []
    assert note.children == "No rows to display"
