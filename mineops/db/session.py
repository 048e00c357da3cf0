"""SQLModel session management."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from mineops.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class SessionProvider:
    """Owns one engine and hands out a fresh session per unit of work.

    Create it once at startup, pass it to the services that need storage,
    and call dispose() (or leave the ``with`` block) on shutdown.
    """

    def __init__(self, database_url: str, *, echo: bool = False, **engine_kwargs: Any) -> None:
        self.database_url = database_url
        self.engine: Engine = create_engine(database_url, echo=echo, **engine_kwargs)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SessionProvider":
        cfg = settings or default_settings
        return cls(
            cfg.database_url,
            echo=cfg.database_echo,
            pool_pre_ping=cfg.database_pool_pre_ping,
        )

    def init_db(self) -> None:
        # Registers the table on SQLModel.metadata
        import mineops.models  # noqa: F401

        SQLModel.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a database session that is closed on every exit path."""
        session = Session(self.engine)
        try:
            yield session
        finally:
            session.close()

    def dispose(self) -> None:
        logger.debug("Disposing engine for %s", self.engine.url)
        self.engine.dispose()

    def __enter__(self) -> "SessionProvider":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()


__all__ = ["SessionProvider"]
