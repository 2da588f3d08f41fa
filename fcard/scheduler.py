"""Review ordering, graduation filtering and statistics updates.

Ordering is a first-match insertion scan, not a key sort: the comparator
below is not transitive when due dates, graduation and accuracy disagree,
so the deck is always rebuilt by re-inserting cards one by one.
"""

from typing import Iterator

from fcard.models import FlashcardRecord


def ranks_before(candidate: FlashcardRecord, existing: FlashcardRecord,
                 reference_time: int) -> bool:
    """True if ``candidate`` should be placed ahead of ``existing``.

    Clauses are checked in order and the first applicable one decides:
      1. candidate overdue at reference_time → earlier due date first
      2. neither card graduated → lower streak first
      3. otherwise → lower accuracy first
    """
    if reference_time > candidate.next_review_time:
        return candidate.next_review_time < existing.next_review_time
    if not candidate.is_graduated() and not existing.is_graduated():
        return candidate.streak < existing.streak
    return candidate.accuracy < existing.accuracy


def insert_card(cards: list[FlashcardRecord], card: FlashcardRecord,
                reference_time: int) -> int:
    """Splice card before the first element it ranks before. Returns its index."""
    for i, existing in enumerate(cards):
        if ranks_before(card, existing, reference_time):
            cards.insert(i, card)
            return i
    cards.append(card)
    return len(cards) - 1


def resort(cards: list[FlashcardRecord], reference_time: int) -> list[FlashcardRecord]:
    """Rebuild the order from scratch, re-inserting cards in their current order."""
    ordered: list[FlashcardRecord] = []
    for card in cards:
        insert_card(ordered, card, reference_time)
    return ordered


def due_cards(cards: list[FlashcardRecord]) -> Iterator[FlashcardRecord]:
    """Cards to show this session, in deck order; graduated cards are skipped."""
    for card in cards:
        if not card.is_graduated():
            yield card


def update_statistics(record: FlashcardRecord, correct: bool) -> FlashcardRecord:
    n = record.review_count
    record.review_count += 1
    if correct:
        record.streak += 1
        record.accuracy = (record.accuracy * n + 100) / (n + 1)
    else:
        record.streak = 0
        if record.accuracy > 0:
            record.accuracy = (record.accuracy * n - 100) / (n + 1)
        else:
            record.accuracy = 0.0
    # (a*n - 100)/(n+1) goes negative whenever a < 100/n
    record.accuracy = min(max(record.accuracy, 0.0), 100.0)
    return record
