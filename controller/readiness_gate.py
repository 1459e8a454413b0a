"""Readiness gate for asynchronously loaded scene targets."""

from __future__ import annotations

import logging
from typing import Hashable

logger = logging.getLogger(__name__)


class ReadinessGate:
    """Tracks which scene targets have finished loading.

    Each target waits on exactly one load identity. A completion event whose
    identity matches marks the target ready; the transition is one-way and
    repeated events are ignored.
    """

    def __init__(self):
        self._pending: dict[str, Hashable] = {}
        self._ready: set[str] = set()

    def track(self, target: str, load_id: Hashable) -> None:
        """Start waiting for ``load_id`` on behalf of ``target``."""
        if target in self._ready:
            return
        self._pending[target] = load_id

    def on_load_event(self, load_id: Hashable) -> list[str]:
        """Consume a load-completion event.

        Returns:
            Targets that became ready because of this event (empty when the
            event is unrelated or already consumed)
        """
        newly_ready = [
            target for target, pending in self._pending.items() if pending == load_id
        ]
        for target in newly_ready:
            del self._pending[target]
            self._ready.add(target)
            logger.debug("Target %s ready (load %s)", target, load_id)
        return newly_ready

    def is_ready(self, target: str) -> bool:
        return target in self._ready

    def is_pending(self, target: str) -> bool:
        return target in self._pending
