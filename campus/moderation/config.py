"""Moderation policy configuration.

A :class:`ModerationConfig` bundles the word lists, patterns, thresholds
and stage switches the engine runs with. It is immutable and injected into
:class:`~campus.moderation.engine.ModerationEngine`, so alternate lists can
be used in tests without touching module state.

Policies can also be loaded from YAML::

    blocked_keywords: [spam, scam]
    negative_words: [awful]
    harmful_patterns: ['\\bbuy\\s+now\\b']
    strict_toxicity_threshold: 1
    lenient_toxicity_threshold: 2
    pattern_filter_enabled: false
    sentiment_scoring_enabled: false

Keys that are omitted keep their defaults.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from campus.errors import ConfigError
from campus.moderation.wordlists import BLOCKED_KEYWORDS, HARMFUL_PATTERNS, NEGATIVE_WORDS

# Score at or above which posts and comments are rejected.
STRICT_TOXICITY_THRESHOLD = 1
# Score at or above which lightly-moderated content is rejected.
LENIENT_TOXICITY_THRESHOLD = 2


def _dedupe(words: Any) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for w in words:
        w = str(w).strip().lower()
        if w:
            seen.setdefault(w, None)
    return tuple(seen)


@dataclass(frozen=True)
class ModerationConfig:
    """Read-only policy data for the local moderation stages."""

    blocked_keywords: tuple[str, ...] = BLOCKED_KEYWORDS
    negative_words: tuple[str, ...] = NEGATIVE_WORDS
    harmful_patterns: tuple[str, ...] = HARMFUL_PATTERNS
    strict_toxicity_threshold: int = STRICT_TOXICITY_THRESHOLD
    lenient_toxicity_threshold: int = LENIENT_TOXICITY_THRESHOLD
    # Both stages currently ship disabled (lenient mode).
    pattern_filter_enabled: bool = False
    sentiment_scoring_enabled: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "blocked_keywords", _dedupe(self.blocked_keywords))
        object.__setattr__(self, "negative_words", _dedupe(self.negative_words))
        object.__setattr__(self, "harmful_patterns", tuple(self.harmful_patterns))
        for pattern in self.harmful_patterns:
            try:
                re.compile(pattern)
            except re.error as exc:
                raise ConfigError(
                    f"Invalid harmful pattern {pattern!r}: {exc}",
                    details={"pattern": pattern},
                ) from exc
        if self.strict_toxicity_threshold < 1 or self.lenient_toxicity_threshold < 1:
            raise ConfigError("Toxicity thresholds must be positive integers")

    def with_overrides(self, **changes: Any) -> "ModerationConfig":
        """Return a copy with *changes* applied."""
        return replace(self, **changes)


def load_moderation_config(path: str | Path, base: ModerationConfig | None = None) -> ModerationConfig:
    """Load a :class:`ModerationConfig` from a YAML file.

    Raises :class:`ConfigError` if the file is missing, unparsable, or
    contains unknown keys.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Moderation config not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Moderation config must be a mapping: {path}")

    known = {f.name for f in fields(ModerationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(
            f"Unknown moderation config keys: {', '.join(unknown)}",
            details={"keys": unknown},
        )

    for key in ("blocked_keywords", "negative_words", "harmful_patterns"):
        if key in data:
            if not isinstance(data[key], list):
                raise ConfigError(f"'{key}' must be a list")
            data[key] = tuple(data[key])

    return replace(base or ModerationConfig(), **data)
