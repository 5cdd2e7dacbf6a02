"""
Word Sources - Supply secret words for new games.

Sources:
- StaticWordSource: in-memory list
- FileWordSource: newline-delimited text file
- PackagedWordSource: the word list bundled with this package
- FixedWordSource: a pre-selected word (reproducible games)

Fallback policy:
If the backing list is missing, unreadable, or has no usable entries,
pick_word() returns FALLBACK_WORD instead of raising. Callers can rely
on always getting a playable word.

Randomness is injectable through `rng` or `seed` so that tests can
reproduce a pick.
"""

from __future__ import annotations
import logging
import random
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Iterable

from ..engine_core.guess import is_word

logger = logging.getLogger(__name__)

FALLBACK_WORD = "JAVA"
PACKAGED_WORD_LIST = "words.txt"


def parse_word_lines(lines: Iterable[str]) -> list[str]:
    """
    Extract candidate words from raw lines.

    Each line is trimmed. Blank lines are skipped, as are lines that
    are not a single run of letters A-Z (they could never be guessed).
    """
    words = []
    skipped = 0
    for line in lines:
        word = line.strip()
        if not word:
            continue
        if not is_word(word):
            skipped += 1
            continue
        words.append(word)

    if skipped:
        logger.debug("Skipped %d non-alphabetic word list entries", skipped)
    return words


class WordSource(ABC):
    """
    Base class for secret word suppliers.

    Subclasses implement load_candidates(); the random pick and the
    fallback handling live here.
    """

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        self._rng = rng if rng is not None else random.Random(seed)

    @abstractmethod
    def load_candidates(self) -> list[str]:
        """
        Load the candidate words.

        May raise OSError if the backing store is unavailable.
        """
        pass

    def pick_word(self) -> str:
        """
        Pick a secret word uniformly at random, uppercased.

        Returns FALLBACK_WORD if no candidate is available.
        """
        try:
            words = self.load_candidates()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Word list unavailable (%s), using fallback word", e)
            return FALLBACK_WORD

        if not words:
            logger.warning("Word list has no usable entries, using fallback word")
            return FALLBACK_WORD

        return self._rng.choice(words).upper()


class StaticWordSource(WordSource):
    """Word source backed by an in-memory list."""

    def __init__(
        self,
        words: Iterable[str],
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        super().__init__(rng=rng, seed=seed)
        self._words = parse_word_lines(words)

    def load_candidates(self) -> list[str]:
        return list(self._words)


class FileWordSource(WordSource):
    """
    Word source backed by a text file, one word per line.

    The file is read on every pick so that edits are picked up
    without restarting.
    """

    def __init__(
        self,
        path: str | Path,
        encoding: str = "utf-8",
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        super().__init__(rng=rng, seed=seed)
        self.path = Path(path)
        self.encoding = encoding

    def load_candidates(self) -> list[str]:
        with self.path.open("r", encoding=self.encoding) as f:
            words = parse_word_lines(f)
        logger.info("Loaded %d words from %s", len(words), self.path)
        return words


class PackagedWordSource(WordSource):
    """Word source backed by a text resource shipped in this package."""

    def __init__(
        self,
        resource_name: str = PACKAGED_WORD_LIST,
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        super().__init__(rng=rng, seed=seed)
        self.resource_name = resource_name

    def load_candidates(self) -> list[str]:
        resource = resources.files(__package__).joinpath(self.resource_name)
        text = resource.read_text(encoding="utf-8")
        words = parse_word_lines(text.splitlines())
        logger.info("Loaded %d packaged words from %s", len(words), self.resource_name)
        return words


class FixedWordSource(WordSource):
    """
    Word source that always returns the same word.

    Raises ValueError if the word is not a run of letters A-Z.
    """

    def __init__(self, word: str):
        super().__init__()
        word = word.strip()
        if not is_word(word):
            raise ValueError(f"Fixed word must be letters A-Z only, got {word!r}")
        self.word = word

    def load_candidates(self) -> list[str]:
        return parse_word_lines([self.word])


def load_word_source(
    path: str | Path | None = None,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> WordSource:
    """
    Get the word source for a path, or the packaged list if path is None.
    """
    if path:
        return FileWordSource(path, rng=rng, seed=seed)
    return PackagedWordSource(rng=rng, seed=seed)
