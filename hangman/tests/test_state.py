"""
Tests for the game state machine.

Tests:
- Guess resolution (reveal, mistakes)
- Win/loss detection
- Terminal state idempotence
- Repeat guess re-scoring
- Input validation
- Presentation helpers
"""

import pytest

from ..engine_core import (
    GameSession,
    GameStatus,
    LetterState,
    OutcomeKind,
    InvalidLetterInput,
    BodyPart,
    normalize_letter,
)
from ..engine_core.state import WIN_MESSAGE, LOSS_MESSAGE


class TestCreate:
    """Tests for starting a game."""

    def test_initial_state(self, cat_game):
        """New game has nothing revealed and no mistakes."""
        assert cat_game.secret_word == "CAT"
        assert cat_game.guessed_mask == (False, False, False)
        assert cat_game.mistake_count == 0
        assert cat_game.max_mistakes == 6
        assert cat_game.tried_letters == frozenset()
        assert cat_game.status == GameStatus.IN_PROGRESS
        assert not cat_game.is_over

    def test_word_is_uppercased(self):
        """Secret word is stored uppercase."""
        game = GameSession.create("python")
        assert game.secret_word == "PYTHON"

    @pytest.mark.parametrize("word", ["", "two words", "abc1", "café"])
    def test_invalid_word_rejected(self, word):
        """Empty or non-alphabetic words are rejected."""
        with pytest.raises(ValueError):
            GameSession.create(word)

    def test_max_mistakes_must_be_positive(self):
        """A zero mistake budget is rejected."""
        with pytest.raises(ValueError):
            GameSession.create("CAT", max_mistakes=0)


class TestGuess:
    """Tests for guessing letters."""

    def test_cat_scenario(self, cat_game):
        """C, A, Z, T wins CAT with one mistake."""
        outcome = cat_game.guess_letter("C")
        assert outcome.kind == OutcomeKind.CORRECT
        assert outcome.revealed_positions == frozenset({0})

        outcome = cat_game.guess_letter("A")
        assert outcome.correct
        assert outcome.revealed_positions == frozenset({1})

        outcome = cat_game.guess_letter("Z")
        assert outcome.kind == OutcomeKind.INCORRECT
        assert outcome.mistake_count == 1
        assert outcome.revealed_positions == frozenset()

        outcome = cat_game.guess_letter("T")
        assert outcome.revealed_positions == frozenset({2})
        assert outcome.status == GameStatus.WON

        assert cat_game.status == GameStatus.WON
        assert cat_game.rendered_word() == "C A T"
        assert cat_game.mistake_count == 1

    def test_dog_scenario(self, dog_game):
        """Six wrong letters lose DOG."""
        for letter in ["Q", "X", "Z", "V", "J"]:
            dog_game.guess_letter(letter)
            assert dog_game.status == GameStatus.IN_PROGRESS

        outcome = dog_game.guess_letter("K")

        assert outcome.status == GameStatus.LOST
        assert dog_game.status == GameStatus.LOST
        assert dog_game.mistake_count == 6
        assert "DOG" in dog_game.status_message()

    def test_lowercase_guess(self, cat_game):
        """Guesses are case-insensitive."""
        outcome = cat_game.guess_letter("c")
        assert outcome.letter == "C"
        assert outcome.correct
        assert "C" in cat_game.tried_letters

    def test_duplicate_letters_revealed_together(self):
        """One guess reveals every occurrence of the letter."""
        game = GameSession.create("BANANA")
        outcome = game.guess_letter("A")

        assert outcome.revealed_positions == frozenset({1, 3, 5})
        assert game.rendered_word() == "_ A _ A _ A"

    def test_custom_mistake_budget(self):
        """Game is lost when a smaller budget runs out."""
        game = GameSession.create("DOG", max_mistakes=3)
        for letter in "XYZ":
            game.guess_letter(letter)
        assert game.status == GameStatus.LOST

    def test_history_records_accepted_guesses(self, cat_game):
        """Every applied guess is kept in order."""
        cat_game.guess_letter("C")
        cat_game.guess_letter("Z")
        assert [o.letter for o in cat_game.history] == ["C", "Z"]

    @pytest.mark.parametrize("word", ["CAT", "BANANA", "MISSISSIPPI", "A", "RHYTHM"])
    def test_guessing_every_letter_wins(self, word):
        """Covering all letters of the word wins without mistakes."""
        game = GameSession.create(word)
        for letter in sorted(set(word)):
            game.guess_letter(letter)

        assert game.status == GameStatus.WON
        assert game.mistake_count == 0

    def test_win_on_last_allowed_mistake_count(self):
        """Mistakes below the budget do not prevent a win."""
        game = GameSession.create("AB")
        for letter in "VWXYZ":
            game.guess_letter(letter)
        game.guess_letter("A")
        game.guess_letter("B")

        assert game.status == GameStatus.WON
        assert game.mistake_count == 5


class TestRepeatGuesses:
    """Repeat guesses are re-scored every time."""

    def test_repeat_wrong_letter_costs_again(self, dog_game):
        """Guessing the same wrong letter twice costs two mistakes."""
        first = dog_game.guess_letter("Z")
        second = dog_game.guess_letter("Z")

        assert not first.repeated
        assert second.repeated
        assert second.kind == OutcomeKind.INCORRECT
        assert dog_game.mistake_count == 2

    def test_repeat_correct_letter_still_correct(self, dog_game):
        """Guessing a correct letter again is still correct."""
        dog_game.guess_letter("O")
        outcome = dog_game.guess_letter("O")

        assert outcome.correct
        assert outcome.repeated
        assert outcome.revealed_positions == frozenset({1})
        assert dog_game.mistake_count == 0

    def test_six_repeats_of_one_wrong_letter_lose(self, dog_game):
        """Repeats alone can exhaust the budget."""
        for _ in range(6):
            dog_game.guess_letter("Q")
        assert dog_game.status == GameStatus.LOST


class TestTerminalState:
    """Tests that finished games ignore further guesses."""

    def test_guess_after_win_is_noop(self, cat_game):
        """A won game does not change."""
        for letter in "CAT":
            cat_game.guess_letter(letter)
        mask = cat_game.guessed_mask
        history_len = len(cat_game.history)

        outcome = cat_game.guess_letter("Q")

        assert outcome.kind == OutcomeKind.GAME_ALREADY_OVER
        assert not outcome.accepted
        assert outcome.status == GameStatus.WON
        assert cat_game.mistake_count == 0
        assert cat_game.guessed_mask == mask
        assert len(cat_game.history) == history_len
        assert "Q" not in cat_game.tried_letters

    def test_guess_after_loss_is_noop(self, dog_game):
        """A lost game does not reveal letters or count more mistakes."""
        for letter in "QXZVJK":
            dog_game.guess_letter(letter)

        outcome = dog_game.guess_letter("D")
        assert outcome.kind == OutcomeKind.GAME_ALREADY_OVER
        assert dog_game.guessed_mask == (False, False, False)
        assert dog_game.status == GameStatus.LOST

        dog_game.guess_letter("W")
        assert dog_game.mistake_count == 6

    def test_invalid_input_rejected_after_end(self, cat_game):
        """Input validation still applies once the game is over."""
        for letter in "CAT":
            cat_game.guess_letter(letter)
        with pytest.raises(InvalidLetterInput):
            cat_game.guess_letter("12")


class TestFixedState:
    """Tests that state only changes through guesses."""

    def test_secret_word_is_read_only(self, cat_game):
        with pytest.raises(AttributeError):
            cat_game.secret_word = "ELEPHANT"

        assert cat_game.secret_word == "CAT"
        assert len(cat_game.guessed_mask) == len(cat_game.secret_word)

    def test_counters_are_read_only(self, cat_game):
        with pytest.raises(AttributeError):
            cat_game.mistake_count = 99
        with pytest.raises(AttributeError):
            cat_game.max_mistakes = 1

        assert cat_game.mistake_count == 0
        assert cat_game.max_mistakes == 6

    def test_counters_not_accepted_by_constructor(self):
        """A session always starts from a clean slate."""
        with pytest.raises(TypeError):
            GameSession("CAT", mistake_count=99)

    def test_history_copy_does_not_alias(self, cat_game):
        cat_game.guess_letter("C")
        cat_game.history.clear()
        assert len(cat_game.history) == 1


class TestInvalidInput:
    """Tests for letter validation."""

    @pytest.mark.parametrize("value", ["", "AB", "1", "?", " ", "é", "\ufb06", None, 5])
    def test_rejected_without_state_change(self, cat_game, value):
        """Anything but one letter A-Z is rejected and changes nothing."""
        with pytest.raises(InvalidLetterInput):
            cat_game.guess_letter(value)

        assert cat_game.mistake_count == 0
        assert cat_game.tried_letters == frozenset()
        assert cat_game.history == []

    def test_ligature_uppercasing_to_two_letters_rejected(self):
        """A character whose uppercase form is two letters is not a letter."""
        game = GameSession.create("STOP")
        with pytest.raises(InvalidLetterInput):
            game.guess_letter("ﬆ")

        assert game.mistake_count == 0
        assert game.guessed_mask == (False, False, False, False)

    def test_ligature_word_rejected(self):
        with pytest.raises(ValueError):
            GameSession.create("ﬆop")

    def test_invalid_letter_is_value_error(self):
        """InvalidLetterInput can be caught as ValueError."""
        with pytest.raises(ValueError):
            normalize_letter("xyz")

    def test_normalize_letter(self):
        assert normalize_letter("q") == "Q"
        assert normalize_letter("Q") == "Q"


class TestRendering:
    """Tests for presentation helpers."""

    def test_rendered_word_placeholders(self, cat_game):
        """Unrevealed positions show the placeholder."""
        assert cat_game.rendered_word() == "_ _ _"
        cat_game.guess_letter("A")
        assert cat_game.rendered_word() == "_ A _"

    def test_rendered_word_custom_placeholder(self, cat_game):
        cat_game.guess_letter("T")
        assert cat_game.rendered_word(placeholder="*") == "* * T"

    def test_rendered_word_has_one_slot_per_letter(self):
        """Rendered word always has len(secret_word) positions."""
        game = GameSession.create("MISSISSIPPI")
        for letter in "SZP":
            game.guess_letter(letter)
            assert len(game.rendered_word().split(" ")) == len(game.secret_word)

    def test_status_message_in_progress(self, cat_game):
        assert cat_game.status_message() is None

    def test_status_message_win(self, cat_game):
        """Win message reveals the word."""
        for letter in "CAT":
            cat_game.guess_letter(letter)
        assert cat_game.status_message() == WIN_MESSAGE.format(word="CAT")
        assert "CAT" in cat_game.status_message()

    def test_status_message_loss(self, dog_game):
        """Loss message reveals the word."""
        for letter in "QXZVJK":
            dog_game.guess_letter(letter)
        assert "DOG" in dog_game.status_message()
        assert dog_game.status_message() == LOSS_MESSAGE.format(word="DOG")

    def test_letter_states(self, cat_game):
        """Tried letters are hits or misses; the rest are unused."""
        cat_game.guess_letter("C")
        cat_game.guess_letter("Z")
        states = cat_game.letter_states()

        assert len(states) == 26
        assert states["C"] == LetterState.HIT
        assert states["Z"] == LetterState.MISS
        assert states["A"] == LetterState.UNUSED

    def test_drawn_parts_follow_mistakes(self, dog_game):
        """Each mistake adds the next body part."""
        assert dog_game.drawn_parts() == ()
        dog_game.guess_letter("Q")
        dog_game.guess_letter("X")
        assert dog_game.drawn_parts() == (BodyPart.HEAD, BodyPart.BODY)

    def test_mistakes_remaining(self, dog_game):
        dog_game.guess_letter("Q")
        assert dog_game.mistakes_remaining == 5
