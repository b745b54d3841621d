from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from table_studio.core.view_state import upload_aborted
from table_studio.ui.ids import IDs

if TYPE_CHECKING:
    from table_studio.ui.config import AppConfig

logger = logging.getLogger(__name__)

# (output, value while the callback runs, value afterwards)
UPLOAD_RUNNING = [
    (Output(IDs.Control.UPLOAD, "disabled"), True, False),
    (Output(IDs.Control.UPLOAD_LABEL, "children"), "Uploading…", "Upload CSV"),
]


def upload_csv(ctx: AppConfig, contents, filename):
    """
    Upload the picked file and clear the picker.

    :return: (view revision, picker contents, query box value)
    """
    # Clearing the picker re-triggers this callback with no contents
    if not contents or not filename:
        raise dash.exceptions.PreventUpdate

    try:
        ctx.uploads.upload(filename, contents)
    except Exception:
        # upload_in_flight is already released by the controller
        logger.exception("Unexpected error while uploading", extra={"upload_filename": filename})
        ctx.store.dispatch(upload_aborted)

    # Always clear the picker so the same file can be chosen again
    return ctx.store.revision, None, ctx.store.state.query_text


def register_upload_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Store.VIEW_REVISION, "data", allow_duplicate=True),
        Output(IDs.Control.UPLOAD, "contents"),
        Output(IDs.Control.QUERY_INPUT, "value", allow_duplicate=True),
        Input(IDs.Control.UPLOAD, "contents"),
        State(IDs.Control.UPLOAD, "filename"),
        running=UPLOAD_RUNNING,
        prevent_initial_call=True,
    )
    def _upload_csv(contents, filename):
        return upload_csv(ctx, contents, filename)
