"""RelevanceRetriever: keyword match over the turn store with a recency fallback."""

from __future__ import annotations

import logging

from .matching import TurnMatcher, build_matcher, tokenize
from .turn_store import TurnStore
from ..types import RetrieverConfig, Turn

logger = logging.getLogger(__name__)


class RelevanceRetriever:
    """Select past turns to re-surface for a new prompt.

    Every turn containing any prompt keyword is returned, in store order,
    with no cap and no ranking. When nothing matches, the most recent
    ``fallback_turns`` turns are returned instead.
    """

    def __init__(
        self,
        store: TurnStore,
        config: RetrieverConfig | None = None,
        matcher: TurnMatcher | None = None,
    ) -> None:
        self.store = store
        self.config = config or RetrieverConfig()
        self.matcher = matcher or build_matcher(self.config.matcher)

    def retrieve(self, prompt: str) -> list[Turn]:
        logger.debug("Retrieving context for prompt: %r", prompt)
        keywords = tokenize(prompt, drop_empty=self.config.drop_empty_tokens)

        matched: list[Turn] = []
        if keywords:
            matched = [
                turn for turn in self.store
                if self.matcher.matches(turn.text.lower(), keywords)
            ]

        if matched:
            logger.info(
                "Found %d relevant turns via %s keyword match",
                len(matched), self.matcher.name,
            )
            return matched

        recent = self.store.tail(self.config.fallback_turns)
        logger.info("No keyword match, returning %d recent turns", len(recent))
        return recent
