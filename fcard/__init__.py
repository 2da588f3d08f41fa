"""fcard — flashcard review over a plain text file."""

__version__ = "0.1.0"

from fcard.models import Deck, FlashcardRecord, N_LONG_TERM_MEMORY
from fcard.app import App

__all__ = ["App", "Deck", "FlashcardRecord", "N_LONG_TERM_MEMORY"]
