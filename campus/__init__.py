"""Campus Connect: content moderation for a campus social platform."""

__version__ = "0.1.0"
