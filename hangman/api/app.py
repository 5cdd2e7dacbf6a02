"""
FastAPI Application - REST API for remote Hangman clients.

Endpoints:
    GET    /api/v1/health                   Health check
    POST   /api/v1/sessions                 Start a game
    GET    /api/v1/sessions                 List sessions
    GET    /api/v1/sessions/{id}            Get game state
    POST   /api/v1/sessions/{id}/guesses    Guess a letter
    DELETE /api/v1/sessions/{id}            End a game

All request and response bodies are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional, Union

from ..config import GameConfig

ERROR_STATUS_CODES = {
    "SESSION_NOT_FOUND": 404,
    "INVALID_LETTER": 422,
    "INVALID_WORD": 422,
}


def create_app(service=None, config: Optional[GameConfig] = None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)
        config: Optional GameConfig (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Body, Query
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .service import APIService
    from .schemas import (
        CreateSessionRequest,
        GuessRequest,
        SessionResponse,
        GuessResponse,
        SessionListResponse,
        EndSessionResponse,
        HealthResponse,
        ErrorResponse,
        ErrorCode,
    )
    from ..session import SessionManager
    from ..words import load_word_source
    from .. import __version__

    config = config or GameConfig.from_env()

    app = FastAPI(
        title="Hangman Engine API",
        description="""
Single-player Hangman over HTTP.

Start a session, then guess one letter at a time until the word is
revealed or the mistake budget runs out. Guesses after the end return
`result=game_already_over` and change nothing.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `INVALID_LETTER` | Guess is not a single letter A-Z |
| `INVALID_WORD` | Pre-selected word is not all letters |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if service is None:
        manager = SessionManager(
            word_source=load_word_source(config.words_file),
            max_mistakes=config.max_mistakes,
        )
        service = APIService(session_manager=manager, environment=config.environment)
    api_service = service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=ERROR_STATUS_CODES.get(error.error_code.value, 400),
            content=error.model_dump(mode="json"),
        )

    # =========================================================================
    # Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health() -> HealthResponse:
        return api_service.health()

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        status_code=201,
        responses={422: {"model": ErrorResponse, "description": "Invalid word"}},
        tags=["Sessions"],
        summary="Start a new game",
    )
    async def create_session(
        request: Annotated[Optional[CreateSessionRequest], Body()] = None,
    ) -> Union[SessionResponse, JSONResponse]:
        """
        Start a new game.

        Omit `word` to have the server pick one from its word list.
        """
        try:
            return api_service.create_session(request or CreateSessionRequest())
        except ValueError as e:
            return make_error_response(
                ErrorResponse(error=str(e), error_code=ErrorCode.INVALID_WORD)
            )

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get game state",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/guesses",
        response_model=GuessResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Session not found"},
            422: {"model": ErrorResponse, "description": "Invalid letter"},
        },
        tags=["Game"],
        summary="Guess a letter",
    )
    async def guess(
        session_id: str,
        request: GuessRequest,
    ) -> Union[GuessResponse, JSONResponse]:
        response = api_service.guess(session_id, request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> EndSessionResponse:
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    return app
