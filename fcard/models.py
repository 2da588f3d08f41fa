"""Shared data classes: flashcard records and the deck that holds them."""

from dataclasses import dataclass, field

N_LONG_TERM_MEMORY = 10


@dataclass
class FlashcardRecord:
    comment: str | None = None
    question: str | None = None
    answer: str | None = None
    review_count: int = 0
    streak: int = 0
    accuracy: float = 0.0
    last_review_time: int = 0
    next_review_time: int = 0

    def is_graduated(self) -> bool:
        """Long-term memory: enough consecutive correct answers to stop asking."""
        return self.streak >= N_LONG_TERM_MEMORY

    def is_header(self) -> bool:
        return self.question is None


@dataclass
class Deck:
    """All cards of one data file, plus the header pseudo-record.

    The header carries the file-level comment. Its question/answer stay
    unset, which is what tells it apart from a card.
    """
    header: FlashcardRecord = field(default_factory=lambda: FlashcardRecord(comment=""))
    cards: list[FlashcardRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def graduated_count(self) -> int:
        return sum(1 for c in self.cards if c.is_graduated())

    def active_count(self) -> int:
        """Cards still asked in a session."""
        return sum(1 for c in self.cards if not c.is_graduated())
