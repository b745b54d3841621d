from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from table_studio.core.exceptions import QueryError
from table_studio.core.view_state import (
    RequestTag,
    ViewState,
    query_failed,
    query_settled,
    query_started,
    query_succeeded,
    set_query_text,
    set_row_limit,
)
from table_studio.services.api_client import DatasetApiClient
from table_studio.services.state_store import ViewStateStore

logger = logging.getLogger(__name__)


def _start_query(state: ViewState) -> Tuple[ViewState, Tuple[Optional[RequestTag], ViewState]]:
    # Query text and limit are read from the same snapshot the tag was issued on
    state, tag = query_started(state)
    return state, (tag, state)


class QueryController:
    """
    Runs the current query text against the active dataset and replaces
    the displayed rows. Never touches the schema, the preview or the registry.
    """

    def __init__(self, api: DatasetApiClient, store: ViewStateStore):
        self.api = api
        self.store = store

    def set_query_text(self, text: Optional[str]) -> ViewState:
        return self.store.dispatch(set_query_text, text)

    def set_row_limit(self, value: Any) -> ViewState:
        """:raises RowLimitError: when value is not an integer in 1..1000"""
        return self.store.dispatch(set_row_limit, value)

    def run_query(self) -> ViewState:
        tag, state = self.store.begin(_start_query)
        if tag is None:
            logger.debug("run_query without an active dataset; nothing to do")
            return state

        try:
            rows = self.api.query(tag.dataset_id, state.query_text, state.row_limit)
        except QueryError as e:
            self.store.dispatch(query_failed, tag, str(e))
        else:
            logger.info(
                "Query returned rows",
                extra={"dataset_id": tag.dataset_id, "request_id": tag.request_id, "rows": len(rows)},
            )
            self.store.dispatch(query_succeeded, tag, rows)
        finally:
            self.store.dispatch(query_settled, tag)

        return self.store.state
