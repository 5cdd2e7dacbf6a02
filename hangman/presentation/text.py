"""
Text Renderer - Plain-text view of a game session.

Draws the gallows for the visible body parts, the word line with
placeholders, and the used-letter keyboard. Used by the CLI; any other
front end can call the same engine methods and draw its own way.
"""

from __future__ import annotations

from ..engine_core import (
    BodyPart,
    GameSession,
    GuessOutcome,
    LetterState,
    OutcomeKind,
    part_for_mistake,
)

# Cell of the gallows grid drawn for each part: (row, column, glyph)
PART_GLYPHS: dict[BodyPart, list[tuple[int, int, str]]] = {
    BodyPart.HEAD: [(2, 6, "O")],
    BodyPart.BODY: [(3, 6, "|")],
    BodyPart.LEFT_ARM: [(3, 5, "/")],
    BodyPart.RIGHT_ARM: [(3, 7, "\\")],
    BodyPart.LEFT_LEG: [(4, 5, "/")],
    BodyPart.RIGHT_LEG: [(4, 7, "\\")],
}

GALLOWS_TEMPLATE = [
    "  +---+ ",
    "  |   | ",
    "  |     ",
    "  |     ",
    "  |     ",
    "  |     ",
    "=========",
]

LETTER_MARKERS = {
    LetterState.UNUSED: "{}",
    LetterState.HIT: "[{}]",
    LetterState.MISS: "-{}-",
}


class TextRenderer:
    """
    Renders a GameSession as text.

    Usage:
        renderer = TextRenderer()
        print(renderer.render(game))
    """

    def __init__(self, placeholder: str = "_"):
        self.placeholder = placeholder

    def render_gallows(self, game: GameSession) -> str:
        rows = [list(line) for line in GALLOWS_TEMPLATE]
        for part in game.drawn_parts():
            for row, col, glyph in PART_GLYPHS[part]:
                rows[row][col] = glyph
        return "\n".join("".join(row).rstrip() for row in rows)

    def render_word(self, game: GameSession) -> str:
        return game.rendered_word(placeholder=self.placeholder)

    def render_keyboard(self, game: GameSession) -> str:
        """Letters A-Z; hits in brackets, misses struck with dashes."""
        return " ".join(
            LETTER_MARKERS[state].format(letter)
            for letter, state in game.letter_states().items()
        )

    def render(self, game: GameSession) -> str:
        """Render the full board: gallows, word, mistakes, keyboard, message."""
        lines = [
            self.render_gallows(game),
            "",
            f"Word:     {self.render_word(game)}",
            f"Mistakes: {game.mistake_count}/{game.max_mistakes}",
            f"Letters:  {self.render_keyboard(game)}",
        ]
        message = game.status_message()
        if message:
            lines.extend(["", message])
        return "\n".join(lines)

    def describe_outcome(self, outcome: GuessOutcome) -> str:
        """One-line reaction to a guess."""
        if outcome.kind == OutcomeKind.GAME_ALREADY_OVER:
            return "The game is already over."

        prefix = f"You already tried {outcome.letter}. " if outcome.repeated else ""
        if outcome.kind == OutcomeKind.CORRECT:
            count = len(outcome.revealed_positions)
            noun = "letter" if count == 1 else "letters"
            return f"{prefix}Yes! {outcome.letter} reveals {count} {noun}."

        part = part_for_mistake(outcome.mistake_count)
        drawn = f" Drawing the {part.value.replace('_', ' ')}." if part else ""
        return f"{prefix}No {outcome.letter} in the word.{drawn}"
