from __future__ import annotations

import base64
import binascii
import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from table_studio.core.exceptions import UploadError
from table_studio.core.view_state import (
    RequestTag,
    ViewState,
    upload_failed,
    upload_settled,
    upload_started,
    upload_succeeded,
)
from table_studio.services.api_client import DatasetApiClient
from table_studio.services.registry_service import DatasetRegistryClient
from table_studio.services.state_store import ViewStateStore

logger = logging.getLogger(__name__)


def decode_upload_contents(contents: str) -> bytes:
    """
    Decode the data URL produced by dcc.Upload ("data:text/csv;base64,....").
    """
    try:
        _content_type, content_string = contents.split(",", 1)
        return base64.b64decode(content_string, validate=True)
    except (ValueError, binascii.Error) as e:
        raise UploadError("The uploaded file appears to be corrupted.") from e


class UploadController:
    """
    Sends a CSV to the upload service and installs the result as the
    active dataset, then refreshes the registry.
    """

    def __init__(self, api: DatasetApiClient, store: ViewStateStore, registry: DatasetRegistryClient):
        self.api = api
        self.store = store
        self.registry = registry

    @contextmanager
    def upload_in_progress(self) -> Iterator[RequestTag]:
        """Holds upload_in_flight for the duration of the block, on every exit path."""
        tag = self.store.begin(upload_started)
        try:
            yield tag
        finally:
            self.store.dispatch(upload_settled, tag)

    def upload(self, filename: str, content: Union[bytes, str]) -> ViewState:
        """
        Upload one file.

        :param filename: name sent with the multipart field
        :param content: raw bytes, or the base64 data URL from the browser picker
        :return: the state after the upload settled
        """
        succeeded: Optional[bool] = None
        with self.upload_in_progress() as tag:
            try:
                payload = decode_upload_contents(content) if isinstance(content, str) else content
                result = self.api.upload(filename, payload)
            except UploadError as e:
                succeeded = False
                self.store.dispatch(upload_failed, tag, str(e))
            else:
                succeeded = True
                logger.info(
                    "Uploaded dataset",
                    extra={
                        "upload_filename": filename,
                        "dataset_id": result.dataset.id,
                        "request_id": tag.request_id,
                    },
                )
                self.store.dispatch(upload_succeeded, tag, result)

        if succeeded:
            # The service holds the new dataset even if its response was stale
            self.registry.refresh_list()
        return self.store.state
