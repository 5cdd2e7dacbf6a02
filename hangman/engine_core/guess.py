"""
Guess System - Letter normalization and guess outcomes.

A guess is a single letter A-Z. Every accepted call to
GameSession.guess_letter() produces a GuessOutcome describing:
1. Whether the letter was in the word
2. Which positions it revealed
3. The mistake count and status after the guess

Guesses submitted after the game has ended are not errors. They
produce an outcome of kind GAME_ALREADY_OVER and change nothing.
"""

from __future__ import annotations
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import GameStatus


ALPHABET = string.ascii_uppercase


class InvalidLetterInput(ValueError):
    """Raised when a guess is not exactly one alphabetic character."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Guess must be a single letter A-Z, got {value!r}")


class OutcomeKind(Enum):
    """What a guess did to the game."""
    CORRECT = "correct"
    INCORRECT = "incorrect"
    GAME_ALREADY_OVER = "game_already_over"


@dataclass(frozen=True)
class GuessOutcome:
    """
    Result of guessing one letter.

    revealed_positions holds every index of the letter in the secret
    word, including positions revealed by an earlier guess of the
    same letter.
    """
    letter: str
    kind: OutcomeKind
    mistake_count: int
    status: GameStatus
    revealed_positions: frozenset[int] = field(default_factory=frozenset)
    repeated: bool = False

    @property
    def correct(self) -> bool:
        return self.kind == OutcomeKind.CORRECT

    @property
    def accepted(self) -> bool:
        """True if the guess was applied to the game."""
        return self.kind != OutcomeKind.GAME_ALREADY_OVER


def is_letter(value: object) -> bool:
    """Check that value is exactly one ASCII letter (either case)."""
    return (
        isinstance(value, str)
        and len(value) == 1
        and value.isascii()
        and value.isalpha()
    )


def is_word(value: object) -> bool:
    """Check that value is a non-empty run of ASCII letters."""
    return (
        isinstance(value, str)
        and len(value) > 0
        and value.isascii()
        and value.isalpha()
    )


def normalize_letter(value: object) -> str:
    """
    Normalize a guess to a single uppercase letter.

    Raises InvalidLetterInput for anything else (empty strings,
    several characters, digits, punctuation, non-strings).
    """
    if not is_letter(value):
        raise InvalidLetterInput(value)
    return value.upper()
