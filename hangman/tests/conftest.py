"""
Pytest fixtures for Hangman tests.
"""

import pytest

from ..engine_core import GameSession
from ..words import StaticWordSource
from ..session import SessionManager
from ..api.service import APIService


class FakeClock:
    """Controllable time source for session tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def cat_game() -> GameSession:
    """A fresh game for the word CAT."""
    return GameSession.create("CAT")


@pytest.fixture
def dog_game() -> GameSession:
    """A fresh game for the word DOG."""
    return GameSession.create("DOG")


@pytest.fixture
def word_file(tmp_path):
    """Word list file with blank lines, padding and mixed case."""
    path = tmp_path / "words.txt"
    path.write_text("apple\n\n   \n  Banana  \nCHERRY\n", encoding="utf-8")
    return path


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session_manager(clock) -> SessionManager:
    """Session manager that always picks CAT."""
    return SessionManager(word_source=StaticWordSource(["cat"]), clock=clock)


@pytest.fixture
def service(session_manager) -> APIService:
    """API service over the CAT-only session manager."""
    return APIService(session_manager=session_manager)
