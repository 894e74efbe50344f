"""Input history projection: past user inputs derived from the turn store."""

from __future__ import annotations

from collections.abc import Iterable

from ..types import Role, Turn


def dedupe_consecutive(items: Iterable[str]) -> list[str]:
    """Drop items equal to the item immediately before them.

    Only adjacent repeats collapse: ``["a", "b", "a"]`` is kept as is.
    """
    result: list[str] = []
    for item in items:
        if not result or item != result[-1]:
            result.append(item)
    return result


def project_inputs(turns: Iterable[Turn]) -> list[str]:
    """User inputs, newest first, with consecutive repeats collapsed.

    Computed fresh from *turns* on every call.
    """
    inputs = [turn.text for turn in turns if turn.role == Role.USER]
    inputs.reverse()
    return dedupe_consecutive(inputs)
