"""ContextBackend abstract base class and the in-memory implementation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .input_history import project_inputs
from .retriever import RelevanceRetriever
from .turn_store import TurnStore
from ..types import RetrieverConfig, Turn

logger = logging.getLogger(__name__)


class ContextBackend(ABC):
    """Async storage interface for conversation turns.

    Async so a durable implementation can drop in without changing callers.
    """

    @abstractmethod
    async def save_turn_pair(self, prompt: str, response: str) -> None:
        """Persist one user prompt and the model response to it."""

    @abstractmethod
    async def retrieve_context(self, prompt: str) -> list[Turn]:
        """Past turns relevant to *prompt*, chronological order."""

    @abstractmethod
    async def retrieve_input_history(self) -> list[str]:
        """Past user inputs, newest first."""


class InMemoryBackend(ContextBackend):
    """Volatile backend over a session-owned TurnStore."""

    def __init__(
        self,
        store: TurnStore | None = None,
        config: RetrieverConfig | None = None,
    ) -> None:
        self.store = store if store is not None else TurnStore()
        self.retriever = RelevanceRetriever(self.store, config)

    async def save_turn_pair(self, prompt: str, response: str) -> None:
        logger.debug("Saving turn pair")
        self.store.append(prompt, response)

    async def retrieve_context(self, prompt: str) -> list[Turn]:
        return self.retriever.retrieve(prompt)

    async def retrieve_input_history(self) -> list[str]:
        inputs = project_inputs(self.store)
        logger.debug("Projected %d past inputs", len(inputs))
        return inputs
