"""Local moderation stages: keyword filter, pattern filter, toxicity scorer.

Each stage is a small callable built from a :class:`ModerationConfig`.
The pattern filter and the toxicity scorer have disabled variants
(:func:`no_patterns`, :func:`zero_toxicity`) that the engine plugs in when
the corresponding switch is off.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from campus.moderation.config import ModerationConfig

PatternCheck = Callable[[str], bool]
ToxicityScorer = Callable[[str], int]


def _word_pattern(word: str, flags: int = re.IGNORECASE | re.ASCII) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(word)}\b", flags)


class KeywordFilter:
    """Word-boundary match against the blocked keyword list.

    ``"class"`` does not match a blocked ``"ass"``; ``"skill"`` does not
    match ``"kill"``.
    """

    def __init__(self, keywords: tuple[str, ...]) -> None:
        self._patterns: list[tuple[str, re.Pattern[str]]] = [
            (w, _word_pattern(w)) for w in keywords
        ]

    def first_match(self, text: str) -> Optional[str]:
        """Return the first blocked keyword found in *text*, or None."""
        lowered = text.lower()
        for word, pattern in self._patterns:
            if pattern.search(lowered):
                return word
        return None

    def __call__(self, text: str) -> bool:
        return self.first_match(text) is not None


class HarmfulPatternFilter:
    """Case-insensitive regex screen for harmful phrasings."""

    def __init__(self, patterns: tuple[str, ...]) -> None:
        self._patterns = [re.compile(p, re.IGNORECASE) for p in patterns]

    def __call__(self, text: str) -> bool:
        return any(p.search(text) for p in self._patterns)


class NegativeWordScorer:
    """Heuristic toxicity score.

    One point per negative-word occurrence, +3 if any harmful pattern
    matches, +1 for more than two ``!`` or more than three ``?``, and +2
    when upper-case letters make up over 30% of a text longer than 10
    characters.
    """

    def __init__(self, negative_words: tuple[str, ...], patterns: PatternCheck) -> None:
        self._words = [_word_pattern(w) for w in negative_words]
        self._patterns = patterns

    def __call__(self, text: str) -> int:
        score = sum(len(p.findall(text)) for p in self._words)

        if self._patterns(text):
            score += 3

        if text.count("!") > 2 or text.count("?") > 3:
            score += 1

        if len(text) > 10:
            upper = sum(1 for ch in text if "A" <= ch <= "Z")
            if upper / len(text) > 0.3:
                score += 2

        return score


def no_patterns(text: str) -> bool:
    return False


def zero_toxicity(text: str) -> int:
    return 0


def build_pattern_check(config: ModerationConfig) -> PatternCheck:
    """Return the pattern stage for *config* (a no-op when disabled)."""
    if not config.pattern_filter_enabled:
        return no_patterns
    return HarmfulPatternFilter(config.harmful_patterns)


def build_toxicity_scorer(config: ModerationConfig) -> ToxicityScorer:
    """Return the scoring stage for *config* (always 0 when disabled)."""
    if not config.sentiment_scoring_enabled:
        return zero_toxicity
    return NegativeWordScorer(
        config.negative_words, HarmfulPatternFilter(config.harmful_patterns)
    )
