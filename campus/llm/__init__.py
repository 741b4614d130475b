"""LLM integration for Campus Connect moderation.

Provides an Anthropic-backed classifier that can replace the OpenAI
moderation endpoint in the engine's remote stage.
"""

from campus.llm.client import LLMModerationClient, parse_classification

__all__ = [
    "LLMModerationClient",
    "parse_classification",
]
