"""
Configuration - Environment-driven settings.

Variables:
    HANGMAN_WORDS_FILE     Word list path (default: packaged list)
    HANGMAN_MAX_MISTAKES   Mistake budget per game (default: 6)
    HANGMAN_LOG_LEVEL      Log level for the CLI (default: WARNING)
    HANGMAN_ENV            Environment tag reported by the API
    ALLOWED_ORIGINS        Comma-separated CORS origins for the API

Command-line flags override the environment.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .engine_core.state import DEFAULT_MAX_MISTAKES


@dataclass(frozen=True)
class GameConfig:
    """Settings shared by the CLI and the API."""
    words_file: str | None = None
    max_mistakes: int = DEFAULT_MAX_MISTAKES
    log_level: str = "WARNING"
    environment: str = "development"
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self):
        if self.max_mistakes < 1:
            raise ValueError(f"max_mistakes must be at least 1, got {self.max_mistakes}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameConfig:
        """
        Build config from environment variables.

        Raises ValueError if HANGMAN_MAX_MISTAKES is not an integer or
        HANGMAN_LOG_LEVEL is not a known level.
        """
        env = os.environ if environ is None else environ

        raw_max = env.get("HANGMAN_MAX_MISTAKES")
        if raw_max:
            try:
                max_mistakes = int(raw_max)
            except ValueError:
                raise ValueError(f"HANGMAN_MAX_MISTAKES must be an integer, got {raw_max!r}")
        else:
            max_mistakes = DEFAULT_MAX_MISTAKES

        origins = [
            o.strip() for o in env.get("ALLOWED_ORIGINS", "*").split(",") if o.strip()
        ]

        return cls(
            words_file=env.get("HANGMAN_WORDS_FILE") or None,
            max_mistakes=max_mistakes,
            log_level=env.get("HANGMAN_LOG_LEVEL", "WARNING").upper(),
            environment=env.get("HANGMAN_ENV", "development"),
            allowed_origins=origins or ["*"],
        )

    def with_overrides(self, **overrides: Any) -> GameConfig:
        """Return a copy with the non-None overrides applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)
