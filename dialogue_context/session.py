"""ContextSession: owns the turn store, backend and input history for one session."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import check_config, load_config
from .core.backend import ContextBackend, InMemoryBackend
from .history_view import ClientHistoryView
from .types import DialogueContextConfig, Turn

logger = logging.getLogger(__name__)


class ContextSession:
    """Wires the backend and the client history view together.

    Usage:
        session = ContextSession()
        await session.start()

        # User submits a prompt
        context = await session.submit(prompt)

        # After the model responds
        await session.record_turn(prompt, response)
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        config: DialogueContextConfig | None = None,
        backend: ContextBackend | None = None,
    ) -> None:
        self.config = check_config(config or load_config(config_path))
        self.backend = backend or InMemoryBackend(config=self.config.retriever)
        self.view = ClientHistoryView(self.backend)

    @property
    def history(self) -> tuple[str, ...]:
        return self.view.history

    async def start(self) -> None:
        await self.view.initialize()

    async def submit(self, prompt: str) -> list[Turn]:
        """Record *prompt* in the input history and fetch context for it."""
        self.view.add_input(prompt)
        context = await self.backend.retrieve_context(prompt)
        logger.debug("Prompt submitted, %d context turns", len(context))
        return context

    async def record_turn(self, prompt: str, response: str) -> None:
        await self.backend.save_turn_pair(prompt, response)
