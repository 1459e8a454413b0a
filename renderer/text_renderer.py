"""Text-based renderer implementation for status output."""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

from shared.interfaces import IRenderer


class TextRenderer(IRenderer):
    """Minimal renderer that emits textual status updates to a stream."""

    def __init__(self, stream: TextIO | None = None):
        self._stream: TextIO = stream or sys.stdout
        self._input_callback: Callable[[str, str], Any] | None = None

    def run(self) -> None:
        """No-op run loop for text renderer."""
        pass

    def report_status(self, message: str) -> None:
        if message is None:
            return
        print(message, file=self._stream)

    def attach_update_loop(
        self, update_fn: Callable[[float], bool], interval: float
    ) -> bool:
        return False

    def set_input_callback(self, callback: Callable[[str, str], Any] | None) -> None:
        self._input_callback = callback

    def send_input(self, button: str, edge: str) -> Any:
        """Feed an input edge as if it came from a device."""
        if self._input_callback is None:
            return None
        return self._input_callback(button, edge)
