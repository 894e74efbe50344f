"""ClientHistoryView: session-local input history for prompt navigation."""

from __future__ import annotations

import asyncio
import logging

from .core.backend import ContextBackend
from .types import HistoryState

logger = logging.getLogger(__name__)


def move_to_end(history: list[str], item: str) -> list[str]:
    """Return *history* with *item* as its last entry and no other copy of it."""
    updated = [entry for entry in history if entry != item]
    updated.append(item)
    return updated


class ClientHistoryView:
    """Inputs the user typed, oldest first.

    Seeded once from the backend's input history, then updated locally by
    ``add_input``. Never reconciled with the backend afterwards.

    Usage:
        view = ClientHistoryView(backend)
        await view.initialize()
        view.add_input("next prompt")
    """

    def __init__(self, backend: ContextBackend) -> None:
        self._backend = backend
        self._history: list[str] = []
        self._state = HistoryState.UNINITIALIZED
        self._pending: asyncio.Future | None = None

    @property
    def state(self) -> HistoryState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is HistoryState.INITIALIZED

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    async def initialize(self) -> None:
        """Load past inputs from the backend, at most once per view.

        Calls made while the first one is in flight do not return straight
        away: they wait for it without querying again, so the history is
        loaded by the time any caller's ``await`` completes. A backend
        failure leaves an empty history; the view is marked initialized
        either way and never retries.
        """
        if self._state is HistoryState.INITIALIZED:
            return
        if self._state is HistoryState.PENDING:
            await asyncio.shield(self._pending)
            return

        # Must flip before the first await so concurrent callers see PENDING.
        self._state = HistoryState.PENDING
        self._pending = asyncio.get_running_loop().create_future()
        try:
            newest_first = await self._backend.retrieve_input_history()
            self._history = list(reversed(newest_first))
        except Exception as e:
            logger.warning("Failed to initialize input history: %s", e, exc_info=e)
            self._history = []
        finally:
            self._state = HistoryState.INITIALIZED
            self._pending.set_result(None)

    def add_input(self, text: str) -> None:
        """Record a submitted input as the most recent entry.

        Blank input is ignored. A repeated input moves to the end.
        """
        trimmed = text.strip()
        if not trimmed:
            return
        self._history = move_to_end(self._history, trimmed)
