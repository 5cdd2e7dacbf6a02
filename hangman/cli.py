"""
Hangman CLI - Command-line interface for the engine.

Usage:
    hangman play [--words PATH] [--word WORD] [--seed N]   Play in the terminal
    hangman word [--words PATH] [--seed N]                 Print a picked word
    hangman serve [--host HOST] [--port PORT]              Run the HTTP API
"""

import argparse
import logging
import sys

from .config import GameConfig


def build_parser():
    parser = argparse.ArgumentParser(
        description="Hangman - Word-guessing game engine",
        prog="hangman",
    )
    parser.add_argument(
        "--log-level",
        help="Log level (default: HANGMAN_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("--words", help="Path to word list (one word per line)")
    play_parser.add_argument("--word", help="Use this secret word instead of picking one")
    play_parser.add_argument("--seed", type=int, help="Random seed for the word pick")
    play_parser.add_argument("--max-mistakes", type=int, help="Mistakes allowed")

    # Word command
    word_parser = subparsers.add_parser("word", help="Print a randomly picked word")
    word_parser.add_argument("--words", help="Path to word list (one word per line)")
    word_parser.add_argument("--seed", type=int, help="Random seed for the word pick")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = GameConfig.from_env().with_overrides(
            log_level=args.log_level.upper() if args.log_level else None,
            words_file=getattr(args, "words", None),
            max_mistakes=getattr(args, "max_mistakes", None),
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    logging.basicConfig(level=config.log_level, format="%(levelname)s: %(message)s")

    if args.command == "play":
        return cmd_play(args, config)
    elif args.command == "word":
        return cmd_word(args, config)
    elif args.command == "serve":
        return cmd_serve(args, config)

    parser.print_help()
    return 1


def cmd_play(args, config):
    """Play an interactive game."""
    from .engine_core import GameSession, GameStatus, InvalidLetterInput
    from .presentation import TextRenderer
    from .words import load_word_source

    if args.word:
        word = args.word
    else:
        word = load_word_source(config.words_file, seed=args.seed).pick_word()

    try:
        game = GameSession.create(word, max_mistakes=config.max_mistakes)
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    renderer = TextRenderer()
    print(renderer.render(game))

    while not game.is_over:
        try:
            raw = input("\nGuess a letter: ").strip()
        except EOFError:
            raw = "quit"

        if raw.lower() == "quit":
            print(f"\nQuit. The secret word was: {game.secret_word}")
            return 1

        try:
            outcome = game.guess_letter(raw)
        except InvalidLetterInput:
            print("Please enter a single letter A-Z.")
            continue

        print()
        print(renderer.describe_outcome(outcome))
        print(renderer.render(game))

    return 0 if game.status == GameStatus.WON else 1


def cmd_word(args, config):
    """Print one picked word."""
    from .words import load_word_source

    print(load_word_source(config.words_file, seed=args.seed).pick_word())
    return 0


def cmd_serve(args, config):
    """Run the HTTP API under uvicorn."""
    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not installed. Install with: pip install uvicorn")
        return 1

    from .api import create_app

    uvicorn.run(create_app(config=config), host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
