from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from table_studio.core.dataset import DatasetSummary, Row, UploadResult, rows_from_payload
from table_studio.core.exceptions import ListRefreshError, QueryError, UploadError
from table_studio.core.view_state import QUERY_FAILED_MESSAGE, UPLOAD_FAILED_MESSAGE

logger = logging.getLogger(__name__)

DATASETS_PATH = "/api/datasets"
UPLOAD_PATH = "/api/upload"
QUERY_PATH = "/api/query"


class DatasetApiClient:
    """
    HTTP adapter for the dataset service.

    Every method either returns parsed domain objects or raises the typed
    error for its call (ListRefreshError, UploadError, QueryError); raw
    requests exceptions never escape.
    """

    def __init__(
            self,
            base_url: str,
            session: Optional[requests.Session] = None,
            timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def list_datasets(self) -> List[DatasetSummary]:
        try:
            response = self.session.get(self._url(DATASETS_PATH), timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
            return [DatasetSummary.from_payload(d) for d in (data.get("datasets") or [])]
        except requests.RequestException as e:
            raise ListRefreshError(f"Listing datasets failed: {e}") from e
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise ListRefreshError(f"Malformed dataset listing: {e}") from e

    def upload(self, filename: str, content: bytes) -> UploadResult:
        files = {"file": (filename, content, "text/csv")}
        try:
            response = self.session.post(self._url(UPLOAD_PATH), files=files, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Upload request failed", extra={"upload_filename": filename, "error": str(e)})
            raise UploadError(f"{UPLOAD_FAILED_MESSAGE}: {e}") from e

        if not response.ok:
            # Server body is the user-facing message when present
            body = (response.text or "").strip()
            logger.warning(
                "Upload rejected",
                extra={"upload_filename": filename, "status_code": response.status_code},
            )
            raise UploadError(body or UPLOAD_FAILED_MESSAGE)

        try:
            return UploadResult.from_payload(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Malformed upload response", extra={"upload_filename": filename, "error": str(e)})
            raise UploadError(f"{UPLOAD_FAILED_MESSAGE}: malformed response from server") from e

    def query(self, dataset_id: str, query: str, limit: int) -> List[Row]:
        payload: Dict[str, Any] = {"dataset_id": dataset_id, "query": query, "limit": limit}
        try:
            response = self.session.post(self._url(QUERY_PATH), json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Query request failed", extra={"dataset_id": dataset_id, "error": str(e)})
            raise QueryError(QUERY_FAILED_MESSAGE) from e

        if not response.ok:
            # Detail is logged only; the user always sees the generic message
            logger.warning(
                "Query rejected",
                extra={
                    "dataset_id": dataset_id,
                    "status_code": response.status_code,
                    "detail": (response.text or "")[:500],
                },
            )
            raise QueryError(QUERY_FAILED_MESSAGE)

        try:
            return rows_from_payload(response.json().get("rows"))
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning("Malformed query response", extra={"dataset_id": dataset_id, "error": str(e)})
            raise QueryError(QUERY_FAILED_MESSAGE) from e
