"""Explicit application context handed to every screen."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..adapters.storage import JsonFileStorage
from ..infra.config import FolioConfig
from ..ports.storage import KeyValueStorage
from .session import SessionGuard
from .state_store import StateStore


@dataclass
class AppContext:
    config: FolioConfig
    store: StateStore
    session: SessionGuard


def build_context(config: FolioConfig, storage: Optional[KeyValueStorage] = None) -> AppContext:
    """Wire a store and a fresh (anonymous) session guard from ``config``."""
    if storage is None:
        storage = JsonFileStorage(config.data_dir)
    return AppContext(
        config=config,
        store=StateStore(storage, key=config.storage_key),
        session=SessionGuard(config.admin_password),
    )
