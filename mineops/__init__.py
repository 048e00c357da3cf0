"""MineOps equipment access package."""

import logging
from typing import Callable, Optional

from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .db.session import SessionProvider
from .models import Equipment
from .services import EquipmentErrorKind, EquipmentResult, EquipmentService


def create_service(
    config: Optional[Settings] = None,
    notify: Optional[Callable[[str], None]] = None,
    init_schema: bool = False,
) -> EquipmentService:
    """Configure logging, open the provider and build an equipment service.

    The caller owns the returned service's provider and disposes it on
    shutdown (``service.provider.dispose()``).
    """

    cfg = config or settings
    setup_logging(cfg)
    logger = logging.getLogger(__name__)

    provider = SessionProvider.from_settings(cfg)
    if init_schema:
        provider.init_db()
    logger.info("Equipment service ready on %s", provider.engine.url.render_as_string(hide_password=True))
    return EquipmentService(provider, notify=notify, broken_status=cfg.broken_status)


__all__ = [
    "create_service",
    "settings",
    "Settings",
    "SessionProvider",
    "Equipment",
    "EquipmentErrorKind",
    "EquipmentResult",
    "EquipmentService",
]
