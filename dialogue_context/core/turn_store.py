"""TurnStore: append-only chronological log of conversation turns."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..types import Role, Turn

logger = logging.getLogger(__name__)


class TurnStore:
    """Ordered log of turns, oldest first.

    Turns are only ever added as user/model pairs, so the length is always
    even. Purely in-memory; one instance lives for one session.
    """

    def __init__(self) -> None:
        self._turns: list[Turn] = []

    def append(self, prompt: str, response: str) -> None:
        self._turns.append(Turn(role=Role.USER, text=prompt))
        self._turns.append(Turn(role=Role.MODEL, text=response))
        logger.debug("Turn pair stored, store size is now %d turns", len(self._turns))

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    def tail(self, n: int) -> list[Turn]:
        """Last *n* turns in chronological order."""
        if n <= 0:
            return []
        return self._turns[-n:]

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(tuple(self._turns))
