from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from table_studio.core.columns import resolve_columns
from table_studio.core.dataset import Dataset, DatasetSummary, Row, UploadResult
from table_studio.core.exceptions import RowLimitError

logger = logging.getLogger(__name__)

MIN_ROW_LIMIT = 1
MAX_ROW_LIMIT = 1000
DEFAULT_ROW_LIMIT = 100

UPLOAD_FAILED_MESSAGE = "Upload failed"
QUERY_FAILED_MESSAGE = "Query failed"

# Request kinds
UPLOAD = "upload"
QUERY = "query"

# list_status values
LIST_IDLE = "idle"
LIST_OK = "ok"
LIST_FAILED = "failed"


@dataclass(frozen=True)
class RequestTag:
    """
    Identity of an outgoing request, captured when it is issued.

    A response is applied only while the tag is still current: the active
    dataset has not been replaced since (same generation) and no newer
    request of the same kind has been issued.
    """
    kind: str
    request_id: int
    generation: int
    dataset_id: Optional[str]


@dataclass(frozen=True)
class ViewState:
    """
    Everything the table view renders from.

    Fields:

    - active_dataset: dataset targeted by queries, None before the first upload/selection
    - preview_rows: rows returned by the upload of the active dataset
    - displayed_rows: preview rows or the latest query result for the active dataset
    - query_text / row_limit: inputs sent with the next query
    - upload_in_flight / query_in_flight: advisory busy flags for the UI
    - last_error: single user-visible error slot
    - known_datasets: registry listing, replaced wholesale on refresh
    - list_status / list_error: outcome of the last registry refresh (never shown as last_error)

    Bookkeeping:

    - generation: bumped every time active_dataset is replaced
    - request_counter: source of request ids
    - latest_upload_request / latest_query_request: most recently issued id per kind
    """
    active_dataset: Optional[Dataset] = None
    preview_rows: Tuple[Row, ...] = ()
    displayed_rows: Tuple[Row, ...] = ()
    query_text: str = ""
    row_limit: int = DEFAULT_ROW_LIMIT
    upload_in_flight: bool = False
    query_in_flight: bool = False
    last_error: Optional[str] = None
    known_datasets: Tuple[DatasetSummary, ...] = ()

    list_status: str = LIST_IDLE
    list_error: Optional[str] = None

    generation: int = 0
    request_counter: int = 0
    latest_upload_request: Optional[int] = None
    latest_query_request: Optional[int] = None

    @property
    def is_loaded(self) -> bool:
        return self.active_dataset is not None

    @property
    def columns(self) -> List[str]:
        return resolve_columns(self.active_dataset, self.preview_rows)

    @property
    def showing_preview(self) -> bool:
        # Query results always arrive as a new tuple, even when equal to the preview
        return bool(self.preview_rows) and self.displayed_rows is self.preview_rows

    def find_known(self, dataset_id: str) -> Optional[DatasetSummary]:
        return next((d for d in self.known_datasets if d.id == dataset_id), None)


def validate_row_limit(value: Any) -> int:
    """
    Coerce a row limit coming from config or a number input.

    Accepts ints, integral floats and digit strings in [MIN_ROW_LIMIT, MAX_ROW_LIMIT].
    """
    limit: Optional[int] = None
    if isinstance(value, bool):
        limit = None
    elif isinstance(value, int):
        limit = value
    elif isinstance(value, float) and value.is_integer():
        limit = int(value)
    elif isinstance(value, str):
        try:
            limit = int(value.strip())
        except ValueError:
            limit = None

    if limit is None or not MIN_ROW_LIMIT <= limit <= MAX_ROW_LIMIT:
        raise RowLimitError(
            f"Row limit must be an integer between {MIN_ROW_LIMIT} and {MAX_ROW_LIMIT}, got {value!r}"
        )
    return limit


def is_current(state: ViewState, tag: RequestTag) -> bool:
    latest = state.latest_upload_request if tag.kind == UPLOAD else state.latest_query_request
    return tag.generation == state.generation and tag.request_id == latest


def _discard(state: ViewState, tag: RequestTag, outcome: str) -> ViewState:
    logger.warning(
        "Discarding stale response",
        extra={
            "kind": tag.kind,
            "outcome": outcome,
            "request_id": tag.request_id,
            "dataset_id": tag.dataset_id,
            "active_dataset_id": state.active_dataset.id if state.active_dataset else None,
        },
    )
    return state


def _issue(state: ViewState, kind: str) -> Tuple[ViewState, RequestTag]:
    request_id = state.request_counter + 1
    tag = RequestTag(
        kind=kind,
        request_id=request_id,
        generation=state.generation,
        dataset_id=state.active_dataset.id if state.active_dataset else None,
    )
    return replace(state, request_counter=request_id), tag


# ---------------------------------------------------------
# Upload
# ---------------------------------------------------------

def upload_started(state: ViewState) -> Tuple[ViewState, RequestTag]:
    state, tag = _issue(state, UPLOAD)
    return (
        replace(state, last_error=None, upload_in_flight=True, latest_upload_request=tag.request_id),
        tag,
    )


def upload_succeeded(state: ViewState, tag: RequestTag, result: UploadResult) -> ViewState:
    if not is_current(state, tag):
        return _discard(state, tag, "success")

    preview = tuple(result.preview)
    return replace(
        state,
        active_dataset=result.dataset,
        preview_rows=preview,
        displayed_rows=preview,
        query_text="",
        generation=state.generation + 1,
    )


def upload_failed(state: ViewState, tag: RequestTag, message: Optional[str]) -> ViewState:
    # A failure leaves the dataset and rows alone, so it is reported even when stale
    return replace(state, last_error=message or UPLOAD_FAILED_MESSAGE)


def upload_aborted(state: ViewState) -> ViewState:
    """Upload blew up outside the service call; show the generic message."""
    return replace(state, last_error=UPLOAD_FAILED_MESSAGE)


def upload_settled(state: ViewState, tag: RequestTag) -> ViewState:
    if tag.request_id != state.latest_upload_request:
        return state
    return replace(state, upload_in_flight=False)


# ---------------------------------------------------------
# Query
# ---------------------------------------------------------

def query_started(state: ViewState) -> Tuple[ViewState, Optional[RequestTag]]:
    if state.active_dataset is None:
        return state, None

    state, tag = _issue(state, QUERY)
    return (
        replace(state, last_error=None, query_in_flight=True, latest_query_request=tag.request_id),
        tag,
    )


def query_succeeded(state: ViewState, tag: RequestTag, rows: Sequence[Row]) -> ViewState:
    if not is_current(state, tag):
        return _discard(state, tag, "success")
    return replace(state, displayed_rows=tuple(rows))


def query_failed(state: ViewState, tag: RequestTag, message: str = QUERY_FAILED_MESSAGE) -> ViewState:
    if not is_current(state, tag):
        return _discard(state, tag, "failure")
    return replace(state, last_error=message)


def query_settled(state: ViewState, tag: RequestTag) -> ViewState:
    if tag.request_id != state.latest_query_request:
        return state
    return replace(state, query_in_flight=False)


# ---------------------------------------------------------
# Selection, registry and inputs
# ---------------------------------------------------------

def select_existing(state: ViewState, dataset_id: str) -> ViewState:
    summary = state.find_known(dataset_id)
    if summary is None:
        return state

    return replace(
        state,
        active_dataset=Dataset.from_summary(summary),
        preview_rows=(),
        displayed_rows=(),
        query_text="",
        generation=state.generation + 1,
    )


def list_refreshed(state: ViewState, datasets: Iterable[DatasetSummary]) -> ViewState:
    return replace(state, known_datasets=tuple(datasets), list_status=LIST_OK, list_error=None)


def list_refresh_failed(state: ViewState, message: str) -> ViewState:
    return replace(state, list_status=LIST_FAILED, list_error=message)


def set_query_text(state: ViewState, text: Optional[str]) -> ViewState:
    # No active dataset means no query text
    if state.active_dataset is None:
        return state
    return replace(state, query_text=text or "")


def set_row_limit(state: ViewState, value: Any) -> ViewState:
    return replace(state, row_limit=validate_row_limit(value))


def input_rejected(state: ViewState, message: str) -> ViewState:
    """Surface a rejected user input (e.g. an out-of-range row limit) without touching anything else."""
    return replace(state, last_error=message)
