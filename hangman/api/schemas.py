"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between remote clients and the engine.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has been ended
- INVALID_LETTER: Guess is not exactly one letter A-Z
- INVALID_WORD: Pre-selected secret word is empty or not all letters
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Game status values."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GuessResult(str, Enum):
    """What a guess did."""
    CORRECT = "correct"
    INCORRECT = "incorrect"
    GAME_ALREADY_OVER = "game_already_over"


class LetterStatus(str, Enum):
    """Keyboard status of a letter."""
    UNUSED = "unused"
    HIT = "hit"
    MISS = "miss"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_LETTER = "INVALID_LETTER"
    INVALID_WORD = "INVALID_WORD"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Requests
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to start a new game."""
    word: Optional[str] = Field(
        None,
        description="Pre-selected secret word; picked from the word list if omitted",
    )


class GuessRequest(BaseModel):
    """Request to guess one letter."""
    letter: str = Field(description="A single letter A-Z (either case)")


# =============================================================================
# Responses
# =============================================================================

class SessionResponse(BaseModel):
    """Current state of a game session."""
    session_id: str
    status: SessionStatus
    rendered_word: str = Field(description="Word with unrevealed letters as '_', e.g. '_ A _'")
    word_length: int
    mistake_count: int
    max_mistakes: int
    mistakes_remaining: int
    tried_letters: list[str] = Field(default_factory=list)
    letter_states: dict[str, LetterStatus] = Field(default_factory=dict)
    drawn_parts: list[str] = Field(
        default_factory=list,
        description="Gallows parts to show, in reveal order",
    )
    status_message: Optional[str] = None
    secret_word: Optional[str] = Field(
        None,
        description="Only present once the game is over",
    )
    created_at: float


class GuessResponse(BaseModel):
    """Result of a guess plus the updated session."""
    session_id: str
    letter: str
    result: GuessResult
    correct: bool
    repeated: bool = Field(description="Letter had already been tried")
    revealed_positions: list[int] = Field(default_factory=list)
    new_part: Optional[str] = Field(
        None,
        description="Gallows part revealed by this guess, if it was a mistake",
    )
    session: SessionResponse


class SessionListResponse(BaseModel):
    """List of session IDs."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Result of ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    version: str
    environment: str
    active_sessions: int


class ErrorResponse(BaseModel):
    """Error response body."""
    error: str
    error_code: ErrorCode
    details: Optional[dict] = None
