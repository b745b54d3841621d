from __future__ import annotations

from typing import Any, Callable, List, Optional

import pytest

from table_studio.core.dataset import DatasetSummary, UploadResult
from table_studio.services.query_service import QueryController
from table_studio.services.registry_service import DatasetRegistryClient
from table_studio.services.selection_service import DatasetSelector
from table_studio.services.state_store import ViewStateStore
from table_studio.services.upload_service import UploadController


class FakeApi:
    """
    Stands in for DatasetApiClient.

    on_upload / on_query run while the request is "in flight", which lets a
    test change the state between issue and completion.
    """

    def __init__(self):
        self.datasets: List[DatasetSummary] = []
        self.list_error: Optional[Exception] = None
        self.upload_result: Optional[UploadResult] = None
        self.upload_error: Optional[Exception] = None
        self.rows: List[dict] = []
        self.query_error: Optional[Exception] = None
        self.on_upload: Optional[Callable[[], None]] = None
        self.on_query: Optional[Callable[[], None]] = None
        self.calls: List[tuple] = []

    def list_datasets(self) -> List[DatasetSummary]:
        self.calls.append(("list",))
        if self.list_error is not None:
            raise self.list_error
        return list(self.datasets)

    def upload(self, filename: str, content: bytes) -> UploadResult:
        self.calls.append(("upload", filename, content))
        if self.on_upload is not None:
            self.on_upload()
        if self.upload_error is not None:
            raise self.upload_error
        return self.upload_result

    def query(self, dataset_id: str, query: str, limit: int) -> List[dict]:
        self.calls.append(("query", dataset_id, query, limit))
        if self.on_query is not None:
            hook, self.on_query = self.on_query, None
            hook()
        if self.query_error is not None:
            raise self.query_error
        return list(self.rows)

    def calls_of(self, kind: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == kind]


def upload_payload(dataset_id: str = "d1", **overrides: Any) -> dict:
    payload = {
        "dataset_id": dataset_id,
        "name": "sales.csv",
        "columns": ["date", "amount"],
        "column_types": {"date": "string", "amount": "integer"},
        "row_count": 1,
        "preview": [{"date": "2024-01-01", "amount": 10}],
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture()
def store() -> ViewStateStore:
    return ViewStateStore()


@pytest.fixture()
def registry(api, store) -> DatasetRegistryClient:
    return DatasetRegistryClient(api, store)


@pytest.fixture()
def uploads(api, store, registry) -> UploadController:
    return UploadController(api, store, registry)


@pytest.fixture()
def queries(api, store) -> QueryController:
    return QueryController(api, store)


@pytest.fixture()
def selector(store) -> DatasetSelector:
    return DatasetSelector(store)


@pytest.fixture()
def make_upload() -> Callable[..., UploadResult]:
    def _make(dataset_id: str = "d1", **overrides: Any) -> UploadResult:
        return UploadResult.from_payload(upload_payload(dataset_id, **overrides))
    return _make
