"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Player starts a game -> session created with a secret word
   (pre-selected, or picked from the word source)
2. Player guesses letters through the session
3. Player ends the game, or the session goes stale -> removed

PERSISTENCE RULES:
- In-memory only
- Ending a session drops its game state

Sessions are independent of each other. The manager does not lock;
one session must not be driven by concurrent callers.
"""

from __future__ import annotations
import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable

from ..engine_core import GameSession, GuessOutcome, DEFAULT_MAX_MISTAKES
from ..words import WordSource, PackagedWordSource

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    One managed game.

    The session wraps a GameSession with an id and activity timestamps.
    """
    session_id: str
    game: GameSession
    created_at: float
    last_activity: float = 0.0

    # Session metadata
    metadata: dict[str, Any] = field(default_factory=dict)

    def is_active(self) -> bool:
        """Check if the game is still being played."""
        return not self.game.is_over

    def guess(self, letter: str, now: float | None = None) -> GuessOutcome:
        """Guess a letter in this session's game."""
        outcome = self.game.guess_letter(letter)
        self.last_activity = now if now is not None else time.time()
        return outcome


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with a secret word
    - Track sessions by id
    - Clean up ended and stale sessions
    """

    def __init__(
        self,
        word_source: WordSource | None = None,
        max_mistakes: int = DEFAULT_MAX_MISTAKES,
        clock: Callable[[], float] = time.time,
    ):
        self.word_source = word_source or PackagedWordSource()
        self.max_mistakes = max_mistakes
        self._clock = clock
        self._sessions: dict[str, Session] = {}

    def create_session(self, word: str | None = None) -> Session:
        """
        Create a new game session.

        Args:
            word: Pre-selected secret word (picked from the word source if None)

        Returns:
            New Session, ready for guesses

        Raises ValueError if a pre-selected word is not a run of letters.
        """
        secret = word if word is not None else self.word_source.pick_word()
        game = GameSession.create(secret, max_mistakes=self.max_mistakes)

        now = self._clock()
        session = Session(
            session_id=str(uuid.uuid4()),
            game=game,
            created_at=now,
            last_activity=now,
            metadata={"preselected": word is not None},
        )
        self._sessions[session.session_id] = session

        logger.info(
            "Session %s created (%d letters, %d mistakes allowed)",
            session.session_id, len(game.secret_word), game.max_mistakes,
        )
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def guess(self, session_id: str, letter: str) -> GuessOutcome | None:
        """
        Guess a letter in a session.

        Returns None if the session does not exist.
        """
        session = self._sessions.get(session_id)
        if not session:
            return None
        return session.guess(letter, now=self._clock())

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and drop its state.

        Returns False if the session did not exist.
        """
        session = self._sessions.pop(session_id, None)
        if not session:
            return False

        logger.info(
            "Session %s ended (%s, status=%s)",
            session_id, reason, session.game.status.value,
        )
        return True

    def list_sessions(self) -> list[str]:
        """List IDs of all sessions."""
        return list(self._sessions)

    def list_active_sessions(self) -> list[str]:
        """List IDs of sessions whose game is still in progress."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: float = 3600) -> int:
        """
        Remove sessions idle for longer than max_age_seconds.

        Returns the number of sessions removed.
        """
        current_time = self._clock()
        to_remove = [
            session_id for session_id, session in self._sessions.items()
            if current_time - session.last_activity > max_age_seconds
        ]

        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return len(to_remove)
