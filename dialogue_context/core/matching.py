"""Keyword tokenizer and turn matchers used by the relevance retriever."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

_WHITESPACE = re.compile(r"\s+")


def tokenize(text: str, drop_empty: bool = True) -> set[str]:
    """Lower-case *text* and split it on runs of whitespace.

    With ``drop_empty=False`` the raw split is kept, so leading/trailing
    whitespace or an empty prompt contributes the empty token ``""``.
    """
    tokens = set(_WHITESPACE.split(text.lower()))
    if drop_empty:
        tokens.discard("")
    return tokens


class TurnMatcher(ABC):
    """Decides whether a turn's text is relevant to a set of keywords."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Matcher identifier used in config (e.g. 'substring')."""

    @abstractmethod
    def matches(self, text: str, keywords: set[str]) -> bool:
        """True if *text* contains any of *keywords*. Both are lower-case."""


class SubstringMatcher(TurnMatcher):
    """Plain substring containment, not word-boundary aware."""

    @property
    def name(self) -> str:
        return "substring"

    def matches(self, text: str, keywords: set[str]) -> bool:
        return any(kw in text for kw in keywords)


class WholeWordMatcher(TurnMatcher):
    """Keyword must appear as a whole word."""

    def __init__(self) -> None:
        self._compiled: dict[str, re.Pattern] = {}

    @property
    def name(self) -> str:
        return "whole_word"

    def _pattern(self, keyword: str) -> re.Pattern:
        pattern = self._compiled.get(keyword)
        if pattern is None:
            pattern = re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)")
            self._compiled[keyword] = pattern
        return pattern

    def matches(self, text: str, keywords: set[str]) -> bool:
        # The empty keyword has no word to bound; treat it like substring.
        return any(
            self._pattern(kw).search(text) if kw else True
            for kw in keywords
        )


_MATCHERS: dict[str, type[TurnMatcher]] = {
    "substring": SubstringMatcher,
    "whole_word": WholeWordMatcher,
}


def available_matchers() -> list[str]:
    return sorted(_MATCHERS)


def build_matcher(name: str) -> TurnMatcher:
    """Instantiate a matcher by config name."""
    try:
        return _MATCHERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown matcher '{name}'. Available: {', '.join(available_matchers())}"
        ) from None
