"""
Persisted state store.

Holds the whole AppState. On construction it restores the record saved under
``key`` in durable storage, falling back to the seed dataset when nothing is
saved or the saved blob cannot be read. Every update is written back
synchronously and then announced to subscribers.
"""
from __future__ import annotations

import copy
import json
from typing import Callable, List

from ..domain.models import AppState
from ..domain.rules import StatePatch, merge_state
from ..domain.seed import seed_state
from ..infra.exceptions import ValidationError, handle_errors
from ..infra.logging import get_logger
from ..infra.serialization import safe_json_dumps
from ..ports.storage import KeyValueStorage

logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "app_state"

Listener = Callable[[AppState], None]


class StateStore:
    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = DEFAULT_STORAGE_KEY,
        seed_factory: Callable[[], AppState] = seed_state,
    ) -> None:
        self._storage = storage
        self._key = key
        self._seed_factory = seed_factory
        self._listeners: List[Listener] = []
        self._state = self._load()

    @property
    def key(self) -> str:
        return self._key

    def _load(self) -> AppState:
        raw = self._storage.get(self._key)
        if raw is None:
            logger.info(f"未找到已保存的状态 [{self._key}]，使用默认数据集")
            return self._seed_factory()
        try:
            return AppState.from_dict(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            # corrupt blob: keep the seed in memory, leave storage untouched until the next write
            logger.warning(f"已保存的状态无法解析 [{self._key}]，回退到默认数据集: {e}")
            return self._seed_factory()

    def read(self) -> AppState:
        """Copy of the current record; changes reach the store only through ``update``."""
        return copy.deepcopy(self._state)

    @handle_errors(logger=logger, operation="update")
    def update(self, patch: StatePatch) -> None:
        """Shallow-merge ``patch`` over the record, persist it, notify subscribers."""
        new_state = merge_state(self._state, patch)
        self._storage.set(self._key, safe_json_dumps(new_state.to_dict()))
        self._state = copy.deepcopy(new_state)
        logger.debug(f"状态已保存 [{self._key}]: {', '.join(patch.keys())}")
        self._notify()

    @handle_errors(logger=logger, operation="reset")
    def reset(self) -> None:
        """Delete the saved record and go back to the seed dataset."""
        self._storage.remove(self._key)
        self._state = self._seed_factory()
        logger.info(f"状态已重置为默认数据集 [{self._key}]")
        self._notify()

    def reload(self) -> AppState:
        """Re-read durable storage, as a fresh page load would."""
        self._state = self._load()
        self._notify()
        return self.read()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.read())

