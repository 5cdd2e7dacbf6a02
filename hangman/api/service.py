"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to session/engine calls
2. Maps engine errors to structured error responses
3. Formats engine state for clients

This layer is framework-agnostic (used by the FastAPI app and tests).
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    CreateSessionRequest,
    GuessRequest,
    SessionResponse,
    GuessResponse,
    HealthResponse,
    ErrorResponse,
    ErrorCode,
    SessionStatus,
    GuessResult,
    LetterStatus,
)
from .. import __version__
from ..engine_core import InvalidLetterInput, OutcomeKind, part_for_mistake
from ..session import SessionManager, Session


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        session = service.create_session(CreateSessionRequest())
        result = service.guess(session.session_id, GuessRequest(letter="e"))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    environment: str = "development"

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """
        Create a new game session.

        Raises ValueError if a pre-selected word is not a run of letters.
        """
        session = self.session_manager.create_session(word=request.word)
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """Get session state."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._session_to_response(session)

    def guess(
        self,
        session_id: str,
        request: GuessRequest,
    ) -> GuessResponse | ErrorResponse:
        """
        Guess a letter in a session.

        A guess after the game has ended is not an error; it returns
        result=game_already_over and the unchanged session.
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        try:
            outcome = self.session_manager.guess(session_id, request.letter)
        except InvalidLetterInput as e:
            return ErrorResponse(
                error=str(e),
                error_code=ErrorCode.INVALID_LETTER,
                details={"letter": request.letter},
            )

        new_part = None
        if outcome.kind == OutcomeKind.INCORRECT:
            part = part_for_mistake(outcome.mistake_count)
            new_part = part.value if part else None

        return GuessResponse(
            session_id=session_id,
            letter=outcome.letter,
            result=GuessResult(outcome.kind.value),
            correct=outcome.correct,
            repeated=outcome.repeated,
            revealed_positions=sorted(outcome.revealed_positions),
            new_part=new_part,
            session=self._session_to_response(session),
        )

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        """End a session."""
        return self.session_manager.end_session(session_id, reason=reason)

    def list_sessions(self) -> list[str]:
        """List all session IDs."""
        return self.session_manager.list_sessions()

    def health(self) -> HealthResponse:
        return HealthResponse(
            version=__version__,
            environment=self.environment,
            active_sessions=len(self.session_manager.list_active_sessions()),
        )

    # =========================================================================
    # Conversion helpers
    # =========================================================================

    def _session_to_response(self, session: Session) -> SessionResponse:
        """Convert internal session to API response."""
        game = session.game
        return SessionResponse(
            session_id=session.session_id,
            status=SessionStatus(game.status.value),
            rendered_word=game.rendered_word(),
            word_length=len(game.secret_word),
            mistake_count=game.mistake_count,
            max_mistakes=game.max_mistakes,
            mistakes_remaining=game.mistakes_remaining,
            tried_letters=sorted(game.tried_letters),
            letter_states={
                letter: LetterStatus(state.value)
                for letter, state in game.letter_states().items()
            },
            drawn_parts=[part.value for part in game.drawn_parts()],
            status_message=game.status_message(),
            secret_word=game.secret_word if game.is_over else None,
            created_at=session.created_at,
        )

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error="Session not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
            details={"session_id": session_id},
        )
