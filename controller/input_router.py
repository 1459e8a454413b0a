"""Routes edge-triggered input signals to controller actions."""

from __future__ import annotations

import logging
from typing import Callable

from shared.constants import EDGE_HELD, INPUT_EDGES

logger = logging.getLogger(__name__)


class InputRouter:
    """Maps (button, edge) pairs to named actions and dispatches them.

    Only the press and release edges are dispatched; ``held`` signals are
    accepted but never trigger an action.
    """

    def __init__(self, bindings: dict[tuple[str, str], str] | None = None):
        self._bindings: dict[tuple[str, str], str] = dict(bindings or {})
        self._handlers: dict[str, Callable[[], object]] = {}

    def bind(self, button: str, edge: str, action: str) -> None:
        if edge not in INPUT_EDGES:
            raise ValueError(f"Unknown input edge: {edge}. Must be one of {', '.join(INPUT_EDGES)}")
        self._bindings[(button, edge)] = action

    def on(self, action: str, handler: Callable[[], object]) -> None:
        """Register the handler invoked for ``action``."""
        self._handlers[action] = handler

    def bindings(self) -> dict[tuple[str, str], str]:
        return dict(self._bindings)

    def buttons(self) -> set[str]:
        return {button for button, _ in self._bindings}

    def dispatch(self, button: str, edge: str) -> str | None:
        """Dispatch one input signal.

        Returns:
            The action name that was handled, or None if nothing was bound
        """
        if edge == EDGE_HELD:
            return None

        action = self._bindings.get((button, edge))
        if action is None:
            return None

        handler = self._handlers.get(action)
        if handler is None:
            logger.debug("No handler for action %s (%s %s)", action, button, edge)
            return None

        handler()
        return action
