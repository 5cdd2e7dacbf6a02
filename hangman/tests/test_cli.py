"""
Tests for the command-line interface.
"""

import pytest

from ..cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ["HANGMAN_WORDS_FILE", "HANGMAN_MAX_MISTAKES", "HANGMAN_LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)


def feed_input(monkeypatch, answers):
    """Replace input() with a scripted sequence; EOF when exhausted."""
    answers = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


class TestPlayCommand:
    """Tests for `hangman play`."""

    def test_win(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["c", "a", "t"])

        assert main(["play", "--word", "cat"]) == 0
        assert "Congratulations! You've guessed the word: CAT" in capsys.readouterr().out

    def test_loss(self, monkeypatch, capsys):
        feed_input(monkeypatch, list("QXZVJK"))

        assert main(["play", "--word", "dog"]) == 1
        assert "Game over! The secret word was: DOG" in capsys.readouterr().out

    def test_invalid_input_reprompts(self, monkeypatch, capsys):
        """Bad input is rejected at the prompt and costs nothing."""
        feed_input(monkeypatch, ["", "12", "ab", "c", "a", "t"])

        assert main(["play", "--word", "cat"]) == 0
        out = capsys.readouterr().out
        assert out.count("Please enter a single letter A-Z.") == 3
        assert "Mistakes: 0/6" in out

    def test_quit(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["quit"])

        assert main(["play", "--word", "cat"]) == 1
        assert "The secret word was: CAT" in capsys.readouterr().out

    def test_eof_quits(self, monkeypatch, capsys):
        feed_input(monkeypatch, [])
        assert main(["play", "--word", "cat"]) == 1

    def test_max_mistakes_flag(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["x", "y"])
        assert main(["play", "--word", "dog", "--max-mistakes", "2"]) == 1

    def test_invalid_word(self, capsys):
        assert main(["play", "--word", "not a word"]) == 2
        assert "Error" in capsys.readouterr().out

    def test_words_file(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("\nox\n\n", encoding="utf-8")
        feed_input(monkeypatch, ["o", "x"])

        assert main(["play", "--words", str(path)]) == 0


class TestConfigErrors:
    """Bad settings are reported without a traceback."""

    def test_zero_max_mistakes(self, capsys):
        assert main(["play", "--word", "cat", "--max-mistakes", "0"]) == 2
        assert capsys.readouterr().out.startswith("Error: max_mistakes must be at least 1")

    def test_non_numeric_env_max_mistakes(self, monkeypatch, capsys):
        monkeypatch.setenv("HANGMAN_MAX_MISTAKES", "six")
        assert main(["word"]) == 2
        assert capsys.readouterr().out.startswith("Error: ")

    def test_unknown_log_level(self, capsys):
        assert main(["--log-level", "bogus", "word"]) == 2
        assert "Unknown log level" in capsys.readouterr().out


class TestWordCommand:
    """Tests for `hangman word`."""

    def test_prints_word_from_file(self, capsys, word_file):
        assert main(["word", "--words", str(word_file), "--seed", "1"]) == 0
        assert capsys.readouterr().out.strip() in {"APPLE", "BANANA", "CHERRY"}

    def test_missing_file_prints_fallback(self, capsys, tmp_path):
        assert main(["word", "--words", str(tmp_path / "missing.txt")]) == 0
        assert capsys.readouterr().out.strip() == "JAVA"


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()
