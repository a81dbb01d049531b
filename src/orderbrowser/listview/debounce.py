"""Debounce gate for free-text search input.

Each push supersedes the previous one: the pending timer is cancelled and
a new one scheduled, so at most one emission is ever pending and only a
value left unchanged for the whole delay reaches the listener.
"""

import asyncio
from typing import Any, Callable, Generic, Optional, TypeVar

from ..config import config, get_logger

logger = get_logger("debounce")

T = TypeVar("T")

_NOTHING = object()


class Debouncer(Generic[T]):
    """Single-shot, restartable timer on an asyncio event loop.

    Args:
        delay_ms: Quiet period before a value is emitted (defaults to the
            configured search debounce).
        on_emit: Called with the value once it has been stable for the delay.
        loop: Event loop to schedule on; defaults to the loop running at
            each push. With no loop at all, values are emitted immediately.
    """

    def __init__(
        self,
        delay_ms: Optional[int],
        on_emit: Callable[[T], Any],
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.delay_ms = config.app.search_debounce_ms if delay_ms is None else delay_ms
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {self.delay_ms}")
        self._on_emit = on_emit
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        self._value: Any = _NOTHING

    @property
    def pending(self) -> bool:
        """True while a value is waiting for its quiet period to end."""
        return self._handle is not None

    def push(self, value: T) -> None:
        """
        Offer a new value, replacing any pending one.

        Outside a running event loop (and without an explicit loop) there
        is nothing to schedule on, so the value is emitted right away.
        """
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                self._value = _NOTHING
                logger.debug("No running event loop, emitting without delay")
                self._on_emit(value)
                return
        self._value = value
        self._handle = loop.call_later(self.delay_ms / 1000, self._fire)

    def flush(self) -> bool:
        """
        Emit the pending value now.

        Returns:
            True if a value was emitted.
        """
        if self._handle is None:
            return False
        self._handle.cancel()
        self._fire()
        return True

    def cancel(self) -> None:
        """Drop the pending value without emitting it."""
        if self._handle is not None:
            self._handle.cancel()
            logger.debug("Dropped pending debounced value")
        self._handle = None
        self._value = _NOTHING

    def _fire(self) -> None:
        value = self._value
        self._handle = None
        self._value = _NOTHING
        self._on_emit(value)
