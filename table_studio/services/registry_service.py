from __future__ import annotations

import logging

from table_studio.core.exceptions import ListRefreshError
from table_studio.core.view_state import ViewState, list_refresh_failed, list_refreshed
from table_studio.services.api_client import DatasetApiClient
from table_studio.services.state_store import ViewStateStore

logger = logging.getLogger(__name__)


class DatasetRegistryClient:
    """
    Keeps ViewState.known_datasets in sync with the service listing.
    Failures are recorded on the state (list_status/list_error) but never
    reach last_error.
    """

    def __init__(self, api: DatasetApiClient, store: ViewStateStore):
        self.api = api
        self.store = store

    def refresh_list(self) -> ViewState:
        try:
            datasets = self.api.list_datasets()
        except ListRefreshError as e:
            logger.warning("Dataset list refresh failed", extra={"error": str(e)})
            return self.store.dispatch(list_refresh_failed, str(e))

        logger.info("Dataset list refreshed", extra={"count": len(datasets)})
        return self.store.dispatch(list_refreshed, datasets)
