from __future__ import annotations

import pytest

from table_studio.core.dataset import (
    Dataset,
    DatasetSummary,
    UploadResult,
    format_cell,
    rows_from_payload,
)


def test_upload_result_from_payload():
    result = UploadResult.from_payload(
        {
            "dataset_id": "d1",
            "name": "sales.csv",
            "columns": ["date", "amount"],
            "column_types": {"amount": "integer"},
            "row_count": 42,
            "preview": [{"date": "2024-01-01", "amount": 10}],
        }
    )

    assert result.dataset == Dataset(
        id="d1",
        name="sales.csv",
        columns=("date", "amount"),
        column_types={"amount": "integer"},
        row_count=42,
    )
    assert result.preview == [{"date": "2024-01-01", "amount": 10}]


def test_upload_result_tolerates_missing_optional_fields():
    result = UploadResult.from_payload({"dataset_id": "d9"})

    assert result.dataset.id == "d9"
    assert result.dataset.columns == ()
    assert result.dataset.column_types == {}
    assert result.preview == []


def test_upload_result_requires_dataset_id():
    with pytest.raises(KeyError):
        UploadResult.from_payload({"name": "no-id.csv"})


def test_summary_from_listing_entry_and_degraded_dataset():
    summary = DatasetSummary.from_payload(
        {"_id": "d2", "name": "orders.csv", "columns": ["id", "total"], "row_count": 7}
    )
    ds = Dataset.from_summary(summary)

    assert summary.id == "d2"
    assert ds.id == "d2"
    assert ds.name == "orders.csv"
    assert ds.columns == ("id", "total")
    assert ds.column_types == {}
    assert ds.row_count == 7


def test_rows_from_payload_rejects_non_lists():
    assert rows_from_payload(None) == []
    with pytest.raises(TypeError):
        rows_from_payload({"a": 1})


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        (True, "true"),
        (False, "false"),
        (10, "10"),
        (10.0, "10"),
        (2.5, "2.5"),
        ("US", "US"),
    ],
)
def test_format_cell(value, expected):
    assert format_cell(value) == expected
