"""Source spans."""

from colloid.text.text import TextRange

__all__ = [
    "TextRange",
]
