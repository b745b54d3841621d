from __future__ import annotations

__all__ = ["IDs", "dataset_item_id"]


class IDs:
    class Store:
        # Bumped by every action callback; the render callback listens to it
        VIEW_REVISION = "view-revision"

    class Control:
        # Navbar
        UPLOAD = "upload-csv"
        UPLOAD_LABEL = "upload-csv-label"

        # Registry
        DATASETS_PANEL = "datasets-panel"
        DATASETS_REFRESH_BTN = "datasets-refresh-btn"
        DATASETS_LIST = "datasets-list"

        # Active dataset
        DATASET_HEADER = "dataset-header"
        GET_STARTED = "get-started"

        # Query bar
        QUERY_BAR = "query-bar"
        QUERY_INPUT = "query-input"
        ROW_LIMIT_INPUT = "row-limit-input"
        RUN_QUERY_BTN = "run-query-btn"

        # Output
        ERROR_ALERT = "error-alert"
        ROWS_TABLE = "rows-table"
        QUERY_STATUS = "query-status"
        PREVIEW_NOTE = "preview-note"
        DOWNLOAD_ROWS = "download-rows"
        DOWNLOAD_ROWS_BTN = "download-rows-btn"

    class Pattern:
        # pattern-matching "type" strings
        DATASET_ITEM = "dataset-item"


def dataset_item_id(dataset_id: str) -> dict:
    return {"type": IDs.Pattern.DATASET_ITEM, "index": dataset_id}
