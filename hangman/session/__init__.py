"""
Session Module - Manages in-memory game sessions.

A session represents one play-through:
- Created when a player starts a game
- Holds the GameSession for that game
- Destroyed when the player ends it or it goes stale

Sessions are EPHEMERAL: nothing is persisted.
"""

from .manager import SessionManager, Session

__all__ = [
    "SessionManager",
    "Session",
]
