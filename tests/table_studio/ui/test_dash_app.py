from __future__ import annotations

from dash import Dash

from table_studio.config import Settings
from table_studio.ui.dash_app import build_app_config, create_dash_app
from table_studio.ui.ids import IDs


def test_build_app_config_wires_controllers(api):
    ctx = build_app_config(Settings(default_row_limit=25), api=api)

    assert ctx.store.state.row_limit == 25
    assert ctx.uploads.registry is ctx.registry
    assert ctx.queries.store is ctx.store
    assert ctx.selector.store is ctx.store


def test_create_dash_app_builds_layout_without_network(api):
    app = create_dash_app(Settings(ui_title="Test Tables"), api=api)

    assert isinstance(app, Dash)
    assert app.title == "Test Tables"
    assert app.layout is not None
    # nothing is fetched until the page activates
    assert api.calls == []


def test_layout_holds_row_limit_input_and_query_status(api):
    app = create_dash_app(Settings(default_row_limit=40), api=api)

    limit_input = app.layout[IDs.Control.ROW_LIMIT_INPUT]
    assert limit_input.value == 40
    assert limit_input.max == 1000
    assert app.layout[IDs.Control.QUERY_STATUS] is not None
