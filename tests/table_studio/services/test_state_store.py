from __future__ import annotations

import threading

from table_studio.core.dataset import DatasetSummary
from table_studio.core.view_state import ViewState, list_refreshed, query_started, upload_started
from table_studio.services.state_store import ViewStateStore


def test_dispatch_applies_transition_and_bumps_revision():
    store = ViewStateStore()
    assert store.revision == 0

    state = store.dispatch(list_refreshed, [DatasetSummary(id="d1", name="a.csv")])

    assert store.state is state
    assert [d.id for d in state.known_datasets] == ["d1"]
    assert store.revision == 1


def test_begin_returns_issued_tag():
    store = ViewStateStore(ViewState(row_limit=25))

    tag = store.begin(upload_started)

    assert tag.kind == "upload"
    assert store.state.upload_in_flight is True
    assert store.state.row_limit == 25


def test_begin_query_without_dataset_issues_nothing():
    store = ViewStateStore()
    assert store.begin(query_started) is None


def test_concurrent_requests_get_distinct_ids():
    store = ViewStateStore()
    tags = []
    lock = threading.Lock()

    def _issue():
        for _ in range(50):
            tag = store.begin(upload_started)
            with lock:
                tags.append(tag.request_id)

    threads = [threading.Thread(target=_issue) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(tags) == list(range(1, 201))
    assert store.state.latest_upload_request == 200
