from __future__ import annotations

import logging

from table_studio.core.view_state import ViewState, select_existing
from table_studio.services.state_store import ViewStateStore

logger = logging.getLogger(__name__)


class DatasetSelector:
    """
    Switches the active dataset to one from the registry.

    Rows are not fetched: the table stays empty until a query is run.
    """

    def __init__(self, store: ViewStateStore):
        self.store = store

    def select_existing(self, dataset_id: str) -> ViewState:
        state = self.store.dispatch(select_existing, dataset_id)
        if state.active_dataset is None or state.active_dataset.id != dataset_id:
            logger.info("Ignoring selection of unknown dataset", extra={"dataset_id": dataset_id})
        else:
            logger.info("Selected existing dataset", extra={"dataset_id": dataset_id})
        return state
