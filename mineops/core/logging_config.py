"""Logging setup shared by everything that builds an equipment service."""

from __future__ import annotations

import logging

from pythonjsonlogger import jsonlogger

from mineops.core.config import Settings, settings as default_settings

_CONFIGURED = False

_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s %(service)s"


class _ServiceNameFilter(logging.Filter):
    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - trivial
        record.service = self.service_name
        return True


def _formatter(cfg: Settings) -> logging.Formatter:
    if cfg.log_json:
        return jsonlogger.JsonFormatter(_FIELDS)
    return logging.Formatter("%(asctime)s %(levelname)-8s [%(service)s] %(name)s: %(message)s")


def setup_logging(settings: Settings | None = None, service_name: str | None = None) -> None:
    """Configure the root logger once from settings.

    ``LOG_LEVEL``, ``LOG_JSON`` and ``SERVICE_NAME`` reach here through
    :class:`Settings`; ``service_name`` overrides the configured name.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    cfg = settings or default_settings
    handler = logging.StreamHandler()
    handler.setFormatter(_formatter(cfg))
    handler.addFilter(_ServiceNameFilter(service_name or cfg.service_name))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(cfg.log_level.upper())
    # SQL statements are only wanted when the engine echoes them
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if cfg.database_echo else logging.WARNING
    )
    logging.captureWarnings(True)
    _CONFIGURED = True


__all__ = ["setup_logging"]
