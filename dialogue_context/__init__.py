"""dialogue-context: turn store, keyword context retrieval and client input history."""

from .config import load_config
from .core.backend import ContextBackend, InMemoryBackend
from .core.retriever import RelevanceRetriever
from .core.turn_store import TurnStore
from .history_view import ClientHistoryView
from .session import ContextSession
from .types import (
    DialogueContextConfig,
    HistoryState,
    RetrieverConfig,
    Role,
    Turn,
)

__version__ = "0.1.0"

__all__ = [
    "ContextSession",
    "load_config",
    "ClientHistoryView",
    "ContextBackend",
    "InMemoryBackend",
    "RelevanceRetriever",
    "TurnStore",
    "DialogueContextConfig",
    "HistoryState",
    "RetrieverConfig",
    "Role",
    "Turn",
]
