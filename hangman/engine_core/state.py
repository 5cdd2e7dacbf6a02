"""
Game State - The Hangman session state machine.

Design principles:
- Single mutation point: guess_letter() is the only way to change state
- Derived status: won/lost is computed from the mask and mistake count,
  never stored
- Terminal states are final: once won or lost, guesses are no-ops
- Presentation-free: rendering helpers return plain strings and data

Repeat guesses are re-scored. Guessing a wrong letter twice costs two
mistakes; the outcome's `repeated` flag lets callers warn about it.
"""

from __future__ import annotations
import logging
from enum import Enum

from .guess import (
    ALPHABET,
    GuessOutcome,
    OutcomeKind,
    is_word,
    normalize_letter,
)
from .drawing import BodyPart, parts_for_mistakes

logger = logging.getLogger(__name__)

DEFAULT_MAX_MISTAKES = 6
DEFAULT_PLACEHOLDER = "_"

WIN_MESSAGE = "Congratulations! You've guessed the word: {word}"
LOSS_MESSAGE = "Game over! The secret word was: {word}"


class GameStatus(Enum):
    """High-level game status."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class LetterState(Enum):
    """Keyboard status of a single letter."""
    UNUSED = "unused"
    HIT = "hit"  # Tried and present in the word
    MISS = "miss"  # Tried and absent from the word


class GameSession:
    """
    One game of Hangman.

    The secret word and mistake budget are fixed for the lifetime of the
    session; all other state changes only through guess_letter(). Create
    a new session to play again.
    """

    def __init__(self, secret_word: str, max_mistakes: int = DEFAULT_MAX_MISTAKES):
        if not is_word(secret_word):
            raise ValueError(
                f"Secret word must be a non-empty string of letters A-Z, got {secret_word!r}"
            )
        if max_mistakes < 1:
            raise ValueError(f"max_mistakes must be at least 1, got {max_mistakes}")

        self._secret_word = secret_word.upper()
        self._max_mistakes = max_mistakes
        self._mistake_count = 0

        # Per-position reveal flags, same length as the secret word
        self._mask = [False] * len(self._secret_word)
        self._tried: set[str] = set()

        # Accepted guesses, in order
        self._history: list[GuessOutcome] = []

    def __repr__(self) -> str:
        return (
            f"GameSession(word_length={len(self._secret_word)}, "
            f"mistake_count={self._mistake_count}, max_mistakes={self._max_mistakes}, "
            f"status={self.status.value})"
        )

    @classmethod
    def create(cls, word: str, max_mistakes: int = DEFAULT_MAX_MISTAKES) -> GameSession:
        """
        Start a new game for the given secret word.

        The word is uppercased. Raises ValueError if it is empty or
        contains anything other than letters.
        """
        return cls(word, max_mistakes=max_mistakes)

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def secret_word(self) -> str:
        return self._secret_word

    @property
    def max_mistakes(self) -> int:
        return self._max_mistakes

    @property
    def mistake_count(self) -> int:
        return self._mistake_count

    @property
    def history(self) -> list[GuessOutcome]:
        return list(self._history)

    @property
    def guessed_mask(self) -> tuple[bool, ...]:
        return tuple(self._mask)

    @property
    def tried_letters(self) -> frozenset[str]:
        return frozenset(self._tried)

    @property
    def status(self) -> GameStatus:
        if all(self._mask):
            return GameStatus.WON
        if self.mistake_count >= self.max_mistakes:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def mistakes_remaining(self) -> int:
        return max(0, self.max_mistakes - self.mistake_count)

    # =========================================================================
    # Mutation
    # =========================================================================

    def guess_letter(self, letter: str) -> GuessOutcome:
        """
        Guess one letter.

        Raises InvalidLetterInput if letter is not a single letter A-Z.
        After the game has ended, returns a GAME_ALREADY_OVER outcome
        and leaves the state untouched.
        """
        letter = normalize_letter(letter)
        repeated = letter in self._tried

        if self.is_over:
            return GuessOutcome(
                letter=letter,
                kind=OutcomeKind.GAME_ALREADY_OVER,
                mistake_count=self.mistake_count,
                status=self.status,
                repeated=repeated,
            )

        positions = frozenset(
            i for i, ch in enumerate(self.secret_word) if ch == letter
        )
        for i in positions:
            self._mask[i] = True

        if positions:
            kind = OutcomeKind.CORRECT
        else:
            kind = OutcomeKind.INCORRECT
            self._mistake_count += 1

        self._tried.add(letter)

        outcome = GuessOutcome(
            letter=letter,
            kind=kind,
            mistake_count=self.mistake_count,
            status=self.status,
            revealed_positions=positions,
            repeated=repeated,
        )
        self._history.append(outcome)

        if outcome.status != GameStatus.IN_PROGRESS:
            logger.info(
                "Game finished: %s after %d guesses (%d mistakes)",
                outcome.status.value, len(self._history), self._mistake_count,
            )
        return outcome

    # =========================================================================
    # Presentation helpers
    # =========================================================================

    def rendered_word(self, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
        """
        Get the word as shown to the player, e.g. "_ A _".

        Revealed positions show their letter, the rest show placeholder.
        """
        return " ".join(
            ch if shown else placeholder
            for ch, shown in zip(self.secret_word, self._mask)
        )

    def status_message(self) -> str | None:
        """Get the end-of-game message, or None while in progress."""
        status = self.status
        if status == GameStatus.WON:
            return WIN_MESSAGE.format(word=self.secret_word)
        if status == GameStatus.LOST:
            return LOSS_MESSAGE.format(word=self.secret_word)
        return None

    def letter_states(self) -> dict[str, LetterState]:
        """Get the keyboard state of every letter A-Z."""
        states = {}
        for ch in ALPHABET:
            if ch not in self._tried:
                states[ch] = LetterState.UNUSED
            elif ch in self.secret_word:
                states[ch] = LetterState.HIT
            else:
                states[ch] = LetterState.MISS
        return states

    def drawn_parts(self) -> tuple[BodyPart, ...]:
        """Get the gallows parts visible for the current mistake count."""
        return parts_for_mistakes(self.mistake_count)
