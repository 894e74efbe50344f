"""All dataclasses and enums for dialogue-context."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Turns
# ---------------------------------------------------------------------------

class Role(str, Enum):
    USER = "user"
    MODEL = "model"


@dataclass(frozen=True)
class Turn:
    """One role-tagged message of a conversation."""
    role: Role
    text: str


# ---------------------------------------------------------------------------
# Client history
# ---------------------------------------------------------------------------

class HistoryState(str, Enum):
    UNINITIALIZED = "uninitialized"
    PENDING = "pending"          # first initialize() is awaiting the backend
    INITIALIZED = "initialized"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass
class RetrieverConfig:
    """Keyword retrieval configuration."""
    matcher: str = "substring"  # "substring" or "whole_word"
    fallback_turns: int = 10    # recent turns returned when nothing matches
    drop_empty_tokens: bool = True


@dataclass
class DialogueContextConfig:
    version: str = "1.0"
    retriever: RetrieverConfig = field(default_factory=RetrieverConfig)
