from __future__ import annotations

import logging

from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(log_format: str = "json", level: int = logging.INFO) -> None:
    """
    Install the single root handler used by the app.

    :param log_format: "json" (structured, extra={...} fields become keys) or
        "plain" for local development; normally Settings.log_format
    :param level: root level
    """
    if log_format == "plain":
        formatter = logging.Formatter(PLAIN_FORMAT)
    else:
        formatter = jsonlogger.JsonFormatter(JSON_FORMAT)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Reconfiguring replaces the handler instead of stacking a second one
    root.handlers.clear()
    root.addHandler(handler)

    # urllib3 logs every connection at DEBUG/INFO through requests
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
