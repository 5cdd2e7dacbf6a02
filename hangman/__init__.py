"""
Hangman - Word-guessing game engine

A small, deterministic engine for single-player Hangman.
The engine picks a secret word from a word list and provides:
- Game state management (guess, reveal, win/loss)
- Word sources with a defined fallback word
- In-memory session management
- Text and HTTP presentation adapters
"""

__version__ = "0.1.0"
