"""CLI: command-line interface for fcard."""

import argparse
import signal
import sys

from fcard.app import App
from fcard.console import ConsoleIO
from fcard.errors import FlashcardError, QuitRequested
from fcard.review_session import ReviewSession
from fcard.template import TEMPLATE

_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _stop_handler(app: App):
    """Signal handler that ends the review, unless the deck is already being saved."""
    def handler(signum, frame):
        if not app.closing:
            raise QuitRequested(f"signal {signum}")
    return handler


def _set_signal_handlers(handler) -> dict:
    """Install handler for the stop signals. Returns the previous handlers."""
    previous = {}
    for signum in _STOP_SIGNALS:
        try:
            previous[signum] = signal.signal(signum, handler)
        except (OSError, ValueError) as e:
            print(f"Warning: cannot install handler for signal {signum}: {e}",
                  file=sys.stderr)
    return previous


def cmd_review(args, app: App) -> int:
    previous = _set_signal_handlers(_stop_handler(app))
    try:
        return _review(app)
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def _review(app: App) -> int:
    try:
        deck = app.load()
    except QuitRequested:
        return 0
    except FlashcardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        try:
            io = ConsoleIO(clear_mode=app.settings.get("clear_screen", "blank"))
            session = ReviewSession(deck, io,
                                    show_stats=bool(app.settings.get("show_stats", True)))
            print(f"{session.remaining_count()} card(s) to review, "
                  f"{deck.graduated_count()} in long-term memory")
            session.run()
        except QuitRequested:
            pass
        finally:
            try:
                app.closing = True
            except QuitRequested:
                # signal landed before the flag was set
                app.closing = True
            app.close()
    except FlashcardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_status(args, app: App) -> int:
    try:
        deck = app.load()
    except FlashcardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Cards:            {len(deck)}")
    print(f"Long-term memory: {deck.graduated_count()}")
    print(f"To review:        {deck.active_count()}")
    return 0


def cmd_template(args, app=None) -> int:
    print(TEMPLATE, end="")
    return 0


def main():
    parser = argparse.ArgumentParser(prog="fcard", description="Flashcard review")
    subparsers = parser.add_subparsers(dest="command")

    p_review = subparsers.add_parser("review", help="Review due cards and save the results")
    p_review.add_argument("file", help="Flashcard data file")

    p_status = subparsers.add_parser("status", help="Show card counts")
    p_status.add_argument("file", help="Flashcard data file")

    subparsers.add_parser("template", help="Show the data file template")

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        print("\nData file format:")
        print(TEMPLATE, end="")
        sys.exit(1)

    if args.command == "template":
        code = cmd_template(args)
    elif args.command == "review":
        code = cmd_review(args, App(args.file))
    elif args.command == "status":
        code = cmd_status(args, App(args.file))
    if code:
        sys.exit(code)
