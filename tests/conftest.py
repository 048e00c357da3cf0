"""Shared fixtures: file-backed SQLite providers and services."""

from __future__ import annotations

import pytest

from mineops.db.session import SessionProvider
from mineops.models import OPERATIONAL, Equipment
from mineops.services import EquipmentService


@pytest.fixture
def provider(tmp_path):
    provider = SessionProvider(f"sqlite:///{tmp_path / 'mineops.db'}")
    provider.init_db()
    yield provider
    provider.dispose()


@pytest.fixture
def unprovisioned_provider(tmp_path):
    """Provider whose schema was never created, so every query fails."""
    provider = SessionProvider(f"sqlite:///{tmp_path / 'empty.db'}")
    yield provider
    provider.dispose()


@pytest.fixture
def notices():
    return []


@pytest.fixture
def service(provider, notices):
    return EquipmentService(provider, notify=notices.append)


@pytest.fixture
def failing_service(unprovisioned_provider, notices):
    return EquipmentService(unprovisioned_provider, notify=notices.append)


@pytest.fixture
def make_equipment():
    def _make(equipment_id: int = 1, mine_id: int = 100, status: str = OPERATIONAL) -> Equipment:
        return Equipment(equipment_id=equipment_id, mine_id=mine_id, status=status)

    return _make
