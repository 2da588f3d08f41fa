"""App: holds the data file path, settings and loaded deck for one run."""

import pathlib

from fcard.codec import load_deck, save_deck
from fcard.config import load_settings
from fcard.models import Deck


class App:
    """Owns the deck for the lifetime of the process.

    Usage:
        app = App("cards.txt")
        app.load()                 # parse the file
        ...                        # review, mutating app.deck
        app.close()                # re-sort, write back, release

    close() is safe to call from both the normal exit path and an
    interrupt; only the first call writes. Once closing is set, stop
    signals no longer interrupt the run.
    """

    def __init__(self, path: pathlib.Path | str, settings: dict | None = None):
        self.path = pathlib.Path(path)
        self.settings = settings if settings is not None else load_settings()
        self.deck: Deck | None = None
        self.closing = False
        self.closed = False

    def load(self, now: int | None = None) -> Deck:
        self.deck = load_deck(self.path, now)
        return self.deck

    def close(self, now: int | None = None):
        self.closing = True
        if self.closed:
            return
        self.closed = True
        if self.deck is None:
            return
        deck, self.deck = self.deck, None
        save_deck(deck, self.path, now)
