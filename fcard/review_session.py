"""ReviewSession: walks the deck, asks each due card and records the verdict."""

from fcard.errors import QuitRequested
from fcard.models import Deck, FlashcardRecord
from fcard.scheduler import due_cards, update_statistics


class ReviewSession:
    def __init__(self, deck: Deck, io=None, show_stats: bool = True):
        self.deck = deck
        self.io = io
        self.show_stats = show_stats
        # Session aggregate; shares the update rule with the cards
        self.header = FlashcardRecord()
        self.queue = list(due_cards(deck.cards))
        self.position = 0
        self.current_card: FlashcardRecord | None = None
        self.reviewed = 0

    def get_next_card(self) -> FlashcardRecord | None:
        if self.position >= len(self.queue):
            self.current_card = None
            return None
        self.current_card = self.queue[self.position]
        self.position += 1
        return self.current_card

    def flip(self) -> str:
        if self.current_card is None:
            raise ValueError("No current card")
        return self.current_card.answer

    def grade_current(self, correct: bool) -> FlashcardRecord:
        if self.current_card is None:
            raise ValueError("No current card")
        card = self.current_card
        update_statistics(card, correct)
        update_statistics(self.header, correct)
        self.reviewed += 1
        self.current_card = None
        return card

    def remaining_count(self) -> int:
        return len(self.queue) - self.position

    def run(self) -> int:
        """Drive the review loop through self.io. Returns the number of cards judged.

        QuitRequested from the io layer ends the loop quietly; saving is
        left to the caller.
        """
        try:
            self.io.clear_screen()
            while self.get_next_card() is not None:
                card = self.current_card
                self.io.show_question(card.question)
                self.io.read_answer()
                self.io.show_answer(self.flip())
                self.grade_current(self.io.read_judgment())
                if self.show_stats:
                    self.io.show_stats(card)
                self.io.clear_screen()
        except QuitRequested:
            self.current_card = None
        if self.show_stats and self.reviewed:
            self.io.show_stats(self.header)
        return self.reviewed
