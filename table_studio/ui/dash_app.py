from __future__ import annotations

import logging
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from table_studio.config import Settings, load_settings
from table_studio.core.view_state import ViewState
from table_studio.services.api_client import DatasetApiClient
from table_studio.services.query_service import QueryController
from table_studio.services.registry_service import DatasetRegistryClient
from table_studio.services.selection_service import DatasetSelector
from table_studio.services.state_store import ViewStateStore
from table_studio.services.upload_service import UploadController
from table_studio.ui.layout.build_layout import build_layout
from table_studio.ui.callbacks.callbacks_datasets import register_dataset_callbacks
from table_studio.ui.callbacks.callbacks_upload import register_upload_callbacks
from table_studio.ui.callbacks.callbacks_query import register_query_callbacks
from table_studio.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def build_app_config(
        settings: Settings,
        api: Optional[DatasetApiClient] = None,
) -> AppConfig:
    # 1) Service client
    if api is None:
        api = DatasetApiClient(settings.backend_url, timeout=settings.request_timeout)

    # 2) View state, seeded with the configured row limit
    store = ViewStateStore(ViewState(row_limit=settings.default_row_limit))

    # 3) Controllers
    registry = DatasetRegistryClient(api, store)
    ctx = AppConfig(
        settings=settings,
        store=store,
        api=api,
        registry=registry,
        uploads=UploadController(api, store, registry),
        queries=QueryController(api, store),
        selector=DatasetSelector(store),
    )
    ctx.validate()
    return ctx


def create_dash_app(
        settings: Optional[Settings] = None,
        api: Optional[DatasetApiClient] = None,
) -> Dash:
    settings = settings or load_settings()
    ctx = build_app_config(settings, api)

    logger.info("Creating Dash app", extra={"backend_url": settings.backend_url})

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = settings.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_dataset_callbacks(app, ctx)
    register_upload_callbacks(app, ctx)
    register_query_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    return app
