from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from table_studio.core.exceptions import ConfigError
from table_studio.core.view_state import DEFAULT_ROW_LIMIT, validate_row_limit

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_UI_TITLE = "AI Table Studio"


@dataclass(frozen=True)
class Settings:
    backend_url: str = DEFAULT_BACKEND_URL
    default_row_limit: int = DEFAULT_ROW_LIMIT
    request_timeout: Optional[float] = None
    ui_title: str = DEFAULT_UI_TITLE
    log_format: str = "json"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    - TABLE_STUDIO_BACKEND_URL: base URL of the dataset service, defaults to http://localhost:8000
    - TABLE_STUDIO_DEFAULT_ROW_LIMIT: initial row limit, 1..1000
    - TABLE_STUDIO_REQUEST_TIMEOUT: seconds; unset means requests never time out
    - TABLE_STUDIO_UI_TITLE: navbar title
    - TABLE_STUDIO_LOG_FORMAT: "json" or "plain"

    :param environ: mapping to read from, defaults to os.environ
    :return: a Settings instance
    :raises ConfigError: if a variable is present but invalid
    """
    env = os.environ if environ is None else environ

    backend_url = (env.get("TABLE_STUDIO_BACKEND_URL") or DEFAULT_BACKEND_URL).strip().rstrip("/")
    if not backend_url.startswith(("http://", "https://")):
        raise ConfigError(f"TABLE_STUDIO_BACKEND_URL must be an http(s) URL, got {backend_url!r}")

    raw_limit = env.get("TABLE_STUDIO_DEFAULT_ROW_LIMIT")
    default_row_limit = validate_row_limit(raw_limit) if raw_limit else DEFAULT_ROW_LIMIT

    request_timeout: Optional[float] = None
    raw_timeout = env.get("TABLE_STUDIO_REQUEST_TIMEOUT")
    if raw_timeout:
        try:
            request_timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"TABLE_STUDIO_REQUEST_TIMEOUT must be a number, got {raw_timeout!r}") from None
        if request_timeout <= 0:
            raise ConfigError(f"TABLE_STUDIO_REQUEST_TIMEOUT must be positive, got {raw_timeout!r}")

    log_format = (env.get("TABLE_STUDIO_LOG_FORMAT") or "json").lower()
    if log_format not in ("json", "plain"):
        raise ConfigError(f"TABLE_STUDIO_LOG_FORMAT must be 'json' or 'plain', got {log_format!r}")

    settings = Settings(
        backend_url=backend_url,
        default_row_limit=default_row_limit,
        request_timeout=request_timeout,
        ui_title=env.get("TABLE_STUDIO_UI_TITLE") or DEFAULT_UI_TITLE,
        log_format=log_format,
    )
    logger.info("Loaded settings", extra={"backend_url": settings.backend_url})
    return settings
