"""Equipment lookups, ownership/status checks, transfers and registration."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, update

from mineops.core.config import settings
from mineops.db.session import SessionProvider
from mineops.models import Equipment
from mineops.services.results import EquipmentErrorKind, EquipmentResult

logger = logging.getLogger(__name__)


class EquipmentService:
    """Per-call access to equipment records.

    Each operation opens its own session from the provider and closes it
    before returning. The ``check_*``/``*_equipment`` methods report what
    went wrong through :class:`EquipmentResult`; the boolean methods keep the
    historical contract where every failure collapses to a default
    (``False``, except :meth:`is_broken` which answers ``True`` when the store
    cannot be read).
    """

    def __init__(
        self,
        provider: SessionProvider,
        notify: Optional[Callable[[str], None]] = None,
        broken_status: str | None = None,
    ) -> None:
        self.provider = provider
        self.notify = notify
        self.broken_status = (broken_status or settings.broken_status).upper()

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        with self.provider.session() as session:
            try:
                yield session
            except SQLAlchemyError:
                session.rollback()
                raise

    def _notice(self, message: str, level: int = logging.INFO) -> None:
        logger.log(level, message)
        if self.notify is not None:
            self.notify(message)

    # Result-returning operations

    def get_equipment(self, equipment_id: int) -> EquipmentResult[Equipment]:
        """Load one record by id; the returned instance is detached."""

        try:
            with self.provider.session() as session:
                record = session.get(Equipment, equipment_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to load equipment %s", equipment_id)
            return EquipmentResult.failure(EquipmentErrorKind.STORAGE_FAILURE, str(exc))
        if record is None:
            return EquipmentResult.failure(
                EquipmentErrorKind.NOT_FOUND, f"Equipment {equipment_id} not found"
            )
        return EquipmentResult.success(record)

    def check_exists(self, equipment_id: int) -> EquipmentResult[bool]:
        result = self.get_equipment(equipment_id)
        if result.error is EquipmentErrorKind.NOT_FOUND:
            return EquipmentResult.success(False)
        if not result.ok:
            return EquipmentResult.failure(result.error, result.detail)
        return EquipmentResult.success(True)

    def check_belongs_to_mine(self, equipment_id: int, mine_id: int) -> EquipmentResult[bool]:
        result = self.get_equipment(equipment_id)
        if not result.ok:
            return EquipmentResult.failure(result.error, result.detail)
        return EquipmentResult.success(result.value.mine_id == mine_id)

    def check_broken(self, equipment_id: int) -> EquipmentResult[bool]:
        result = self.get_equipment(equipment_id)
        if not result.ok:
            return EquipmentResult.failure(result.error, result.detail)
        status = result.value.status or ""
        return EquipmentResult.success(status.upper() == self.broken_status)

    def transfer_equipment(self, equipment_id: int, new_mine_id: int) -> EquipmentResult[Equipment]:
        """Move equipment to another mine in a single conditional update.

        Broken state and mine existence are not checked here; callers combine
        :meth:`is_broken` and their own mine lookup before transferring.
        """

        stmt = (
            update(Equipment)
            .where(Equipment.equipment_id == equipment_id)
            .values(mine_id=new_mine_id)
            .returning(Equipment.status)
        )
        try:
            with self._transaction() as session:
                row = session.exec(stmt).first()
                if row is None:
                    session.rollback()
                    return EquipmentResult.failure(
                        EquipmentErrorKind.NOT_FOUND, f"Equipment {equipment_id} not found"
                    )
                # Nothing may touch the store after this commit
                record = Equipment(equipment_id=equipment_id, mine_id=new_mine_id, status=row.status)
                session.commit()
        except SQLAlchemyError as exc:
            logger.exception("Failed to transfer equipment %s to mine %s", equipment_id, new_mine_id)
            return EquipmentResult.failure(EquipmentErrorKind.STORAGE_FAILURE, str(exc))

        logger.info("Transferred equipment %s to mine %s", equipment_id, new_mine_id)
        return EquipmentResult.success(record)

    def register_equipment(self, equipment: Equipment) -> EquipmentResult[Equipment]:
        """Insert a new record; an already used id is rejected as a duplicate."""

        equipment_id = equipment.equipment_id
        values = {
            "equipment_id": equipment_id,
            "mine_id": equipment.mine_id,
            "status": equipment.status,
        }
        try:
            with self._transaction() as session:
                if session.get(Equipment, equipment_id) is not None:
                    self._notice(f"Equipment ID {equipment_id} already exists", logging.WARNING)
                    return EquipmentResult.failure(
                        EquipmentErrorKind.DUPLICATE, f"Equipment {equipment_id} already exists"
                    )
                session.add(Equipment(**values))
                session.commit()
        except IntegrityError as exc:
            # Another writer inserted the same id between our lookup and commit
            self._notice(f"Equipment ID {equipment_id} already exists", logging.WARNING)
            return EquipmentResult.failure(EquipmentErrorKind.DUPLICATE, str(exc))
        except SQLAlchemyError as exc:
            logger.exception("Failed to register equipment %s", equipment_id)
            self._notice(f"Equipment {equipment_id} registration failed", logging.ERROR)
            return EquipmentResult.failure(EquipmentErrorKind.STORAGE_FAILURE, str(exc))

        self._notice(f"Equipment {equipment_id} registered successfully")
        return EquipmentResult.success(Equipment(**values))

    # Boolean convenience wrappers

    def exists_by_id(self, equipment_id: int) -> bool:
        return self.check_exists(equipment_id).unwrap_or(False)

    def belongs_to_mine(self, equipment_id: int, mine_id: int) -> bool:
        return self.check_belongs_to_mine(equipment_id, mine_id).unwrap_or(False)

    def is_broken(self, equipment_id: int) -> bool:
        """True when broken, and also when the store cannot answer."""
        result = self.check_broken(equipment_id)
        if result.error is EquipmentErrorKind.STORAGE_FAILURE:
            return True
        return result.unwrap_or(False)

    def transfer(self, equipment_id: int, new_mine_id: int) -> bool:
        return self.transfer_equipment(equipment_id, new_mine_id).ok

    def register(self, equipment: Equipment) -> bool:
        return self.register_equipment(equipment).ok


__all__ = ["EquipmentService"]
