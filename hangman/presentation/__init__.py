"""
Presentation Module - Views over the engine.

Presentation adapters observe a GameSession and call into it. They own
all visual mapping (gallows drawing, keyboard styling) and hold no game
rules of their own.
"""

from .text import TextRenderer

__all__ = [
    "TextRenderer",
]
