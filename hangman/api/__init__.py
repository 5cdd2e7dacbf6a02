"""
API Module - Remote client interface.

Exposes the engine via REST API. A client:
1. Creates a game session
2. Guesses letters
3. Reads the rendered word, gallows parts, and end-of-game message

All state is session-scoped and in-memory.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    GuessRequest,
    # Responses
    SessionResponse,
    GuessResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    ErrorResponse,
    # Enums
    SessionStatus,
    GuessResult,
    LetterStatus,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "GuessRequest",
    # Responses
    "SessionResponse",
    "GuessResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "HealthResponse",
    "ErrorResponse",
    # Enums
    "SessionStatus",
    "GuessResult",
    "LetterStatus",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
