"""
Engine Core - Hangman game state and guess resolution.

The engine is the runtime that:
1. Holds the secret word and per-position reveal flags
2. Applies letter guesses
3. Counts mistakes against a fixed budget
4. Derives the game status (in progress, won, lost)
"""

from .state import GameSession, GameStatus, LetterState, DEFAULT_MAX_MISTAKES
from .guess import GuessOutcome, OutcomeKind, InvalidLetterInput, normalize_letter
from .drawing import BodyPart, BODY_PARTS, part_for_mistake, parts_for_mistakes

__all__ = [
    "GameSession",
    "GameStatus",
    "LetterState",
    "DEFAULT_MAX_MISTAKES",
    "GuessOutcome",
    "OutcomeKind",
    "InvalidLetterInput",
    "normalize_letter",
    "BodyPart",
    "BODY_PARTS",
    "part_for_mistake",
    "parts_for_mistakes",
]
