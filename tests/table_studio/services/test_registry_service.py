from __future__ import annotations

from table_studio.core.dataset import DatasetSummary
from table_studio.core.exceptions import ListRefreshError
from table_studio.core.view_state import LIST_FAILED, LIST_OK


def test_refresh_replaces_known_datasets(api, store, registry):
    api.datasets = [DatasetSummary(id="d1", name="a.csv"), DatasetSummary(id="d2", name="b.csv")]
    registry.refresh_list()

    api.datasets = [DatasetSummary(id="d3", name="c.csv")]
    state = registry.refresh_list()

    assert [d.id for d in state.known_datasets] == ["d3"]
    assert state.list_status == LIST_OK


def test_refresh_failure_keeps_list_and_stays_silent(api, store, registry):
    api.datasets = [DatasetSummary(id="d1", name="a.csv")]
    registry.refresh_list()

    api.list_error = ListRefreshError("Listing datasets failed: refused")
    state = registry.refresh_list()

    assert [d.id for d in state.known_datasets] == ["d1"]
    assert state.last_error is None
    assert state.list_status == LIST_FAILED
    assert "refused" in state.list_error
