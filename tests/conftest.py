"""Shared fixtures for dialogue-context tests."""

from __future__ import annotations

import asyncio

import pytest

from dialogue_context.core.backend import ContextBackend
from dialogue_context.core.turn_store import TurnStore
from dialogue_context.types import Turn


@pytest.fixture
def store() -> TurnStore:
    return TurnStore()


@pytest.fixture
def legal_medical_store(store) -> TurnStore:
    store.append(
        "What's the deadline for the court filing?",
        "The filing deadline is January 30th.",
    )
    store.append(
        "My blood glucose was 180 this morning.",
        "That reading is above target. Check with your doctor.",
    )
    store.append(
        "Has the attorney reviewed the settlement?",
        "Yes, the attorney recommends a counter offer.",
    )
    return store


class FakeHistoryBackend(ContextBackend):
    """Backend returning canned input history and counting calls."""

    def __init__(
        self,
        inputs: list[str] | None = None,
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ):
        self.inputs = inputs or []
        self.error = error
        self.gate = gate
        self.history_calls = 0
        self.saved: list[tuple[str, str]] = []
        self.context_calls: list[str] = []

    async def save_turn_pair(self, prompt: str, response: str) -> None:
        self.saved.append((prompt, response))

    async def retrieve_context(self, prompt: str) -> list[Turn]:
        self.context_calls.append(prompt)
        return []

    async def retrieve_input_history(self) -> list[str]:
        self.history_calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return list(self.inputs)
