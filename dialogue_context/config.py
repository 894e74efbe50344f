"""Configuration loading, validation, and defaults."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .core.matching import available_matchers
from .types import DialogueContextConfig, RetrieverConfig

CONFIG_FILENAMES = [
    "dialogue-context.yaml",
    "dialogue-context.yml",
    "dialogue-context.json",
]


def _discover_config() -> Path | None:
    """Search CWD then parent dirs up to home for a config file."""
    cwd = Path.cwd()
    home = Path.home()
    search = cwd
    while True:
        for name in CONFIG_FILENAMES:
            candidate = search / name
            if candidate.is_file():
                return candidate
        if search == home or search == search.parent:
            break
        search = search.parent
    return None


def _build_config(raw: dict[str, Any]) -> DialogueContextConfig:
    """Build a DialogueContextConfig from a raw dict."""
    retrieval_raw = raw.get("retrieval")
    if not isinstance(retrieval_raw, dict):
        retrieval_raw = {}
    retriever_config = RetrieverConfig(
        matcher=retrieval_raw.get("matcher", "substring"),
        fallback_turns=retrieval_raw.get("fallback_turns", 10),
        drop_empty_tokens=retrieval_raw.get("drop_empty_tokens", True),
    )

    return DialogueContextConfig(
        version=str(raw.get("version", "1.0")),
        retriever=retriever_config,
    )


def validate_config(config: DialogueContextConfig) -> list[str]:
    """Validate a config. Returns list of error strings (empty = valid)."""
    errors: list[str] = []
    retriever = config.retriever

    if retriever.matcher not in available_matchers():
        errors.append(
            f"Unknown retrieval matcher '{retriever.matcher}' "
            f"(expected one of: {', '.join(available_matchers())})"
        )

    # bool is an int subclass; reject it explicitly
    fallback = retriever.fallback_turns
    if isinstance(fallback, bool) or not isinstance(fallback, int) or fallback < 0:
        errors.append(f"fallback_turns must be a non-negative integer, got {fallback!r}")

    if not isinstance(retriever.drop_empty_tokens, bool):
        errors.append(
            f"drop_empty_tokens must be true or false, got {retriever.drop_empty_tokens!r}"
        )

    return errors


def check_config(config: DialogueContextConfig) -> DialogueContextConfig:
    """Return *config* unchanged, or raise ValueError listing every problem."""
    errors = validate_config(config)
    if errors:
        raise ValueError("Config validation errors:\n" + "\n".join(f"  - {e}" for e in errors))
    return config


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    text = path.read_text()
    raw = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    return raw if isinstance(raw, dict) else {}


def load_config(
    config_path: str | Path | None = None,
    config_dict: dict | None = None,
    strict: bool = False,
) -> DialogueContextConfig:
    """Load config from dict, explicit path, or auto-discover.

    With ``strict=True`` an invalid config raises ``ValueError`` instead of
    being returned for ``validate_config`` to inspect.
    """
    if config_dict is not None:
        raw = config_dict
    else:
        path = Path(config_path) if config_path is not None else _discover_config()
        raw = _read_config_file(path) if path is not None else {}

    config = _build_config(raw)
    return check_config(config) if strict else config
