"""Tests for review ordering and statistics updates."""

import itertools
import random

import pytest

from fcard.models import FlashcardRecord
from fcard.scheduler import due_cards, insert_card, ranks_before, resort, update_statistics

NOW = 1700000000
LATER = NOW + 86400


def _card(name, **kw):
    kw.setdefault("next_review_time", LATER)
    return FlashcardRecord(comment="", question=f"{name}\n", answer="\n", **kw)


def _names(cards):
    return [c.question.strip() for c in cards]


# ─── update_statistics ──────────────────────────────────────────────────────

def test_first_correct_answer():
    r = _card("a")
    update_statistics(r, True)
    assert r.review_count == 1
    assert r.streak == 1
    assert r.accuracy == 100


def test_wrong_answer_reweights_accuracy():
    r = _card("a", review_count=10, streak=5, accuracy=80)
    update_statistics(r, False)
    assert r.review_count == 11
    assert r.streak == 0
    assert r.accuracy == pytest.approx((80 * 10 - 100) / 11)


def test_wrong_answer_at_zero_accuracy_stays_zero():
    r = _card("a", review_count=3, streak=2, accuracy=0)
    update_statistics(r, False)
    assert r.accuracy == 0
    assert r.review_count == 4
    assert r.streak == 0


def test_wrong_answer_never_goes_negative():
    r = _card("a", review_count=1, accuracy=50)
    update_statistics(r, False)
    assert r.accuracy == 0


def test_correct_answer_increments_streak():
    r = _card("a", review_count=4, streak=4, accuracy=100)
    update_statistics(r, True)
    assert r.streak == 5
    assert r.accuracy == 100


def test_update_returns_record():
    r = _card("a")
    assert update_statistics(r, True) is r


def test_accuracy_stays_in_range_over_random_judgments():
    rng = random.Random(1234)
    for _ in range(50):
        r = _card("a", review_count=rng.randrange(0, 20),
                  streak=rng.randrange(0, 15), accuracy=rng.uniform(0, 100))
        for _ in range(40):
            correct = rng.random() < 0.6
            before = r.streak
            update_statistics(r, correct)
            assert 0 <= r.accuracy <= 100
            assert r.streak == (before + 1 if correct else 0)


# ─── ranks_before ───────────────────────────────────────────────────────────

def test_due_card_before_later_graduated_card():
    due = _card("due", streak=1, accuracy=90, next_review_time=NOW - 10)
    grad = _card("grad", streak=12, accuracy=20, next_review_time=NOW + 1000)
    assert ranks_before(due, grad, NOW)
    cards = []
    insert_card(cards, grad, NOW)
    insert_card(cards, due, NOW)
    assert _names(cards) == ["due", "grad"]


def test_overdue_candidate_compares_due_dates_only():
    older = _card("older", streak=9, next_review_time=NOW - 100)
    newer = _card("newer", streak=0, next_review_time=NOW - 10)
    assert ranks_before(older, newer, NOW)
    # clause 1 decides even though newer has the lower streak
    assert not ranks_before(newer, older, NOW)


def test_not_overdue_uses_streak_when_neither_graduated():
    low = _card("low", streak=1, accuracy=100)
    high = _card("high", streak=4, accuracy=0)
    assert ranks_before(low, high, NOW)
    assert not ranks_before(high, low, NOW)


def test_graduated_pair_uses_accuracy():
    a = _card("a", streak=10, accuracy=40)
    b = _card("b", streak=3, accuracy=60)
    assert ranks_before(a, b, NOW)
    assert not ranks_before(b, a, NOW)


def test_equal_cards_do_not_rank_before():
    a = _card("a", streak=2, accuracy=50)
    b = _card("b", streak=2, accuracy=50)
    assert not ranks_before(a, b, NOW)
    assert not ranks_before(b, a, NOW)


def test_reference_time_equal_to_due_is_not_overdue():
    a = _card("a", streak=5, next_review_time=NOW)
    b = _card("b", streak=1, next_review_time=NOW + 5)
    assert not ranks_before(a, b, NOW)


# ─── insert_card / resort ───────────────────────────────────────────────────

def test_insert_appends_ties_after_peers():
    cards = []
    for name in ("a", "b", "c"):
        insert_card(cards, _card(name, streak=2), NOW)
    assert _names(cards) == ["a", "b", "c"]


def test_insert_returns_index():
    cards = [_card("x", streak=3)]
    assert insert_card(cards, _card("y", streak=1), NOW) == 0
    assert insert_card(cards, _card("z", streak=7), NOW) == 2


def test_resort_builds_new_list():
    cards = [_card("b", streak=2), _card("a", streak=1)]
    ordered = resort(cards, NOW)
    assert _names(ordered) == ["a", "b"]
    assert _names(cards) == ["b", "a"]


@pytest.mark.parametrize("streaks", [(0, 1, 2, 3), (5, 3, 9, 1)])
def test_resort_is_order_independent_for_streaks(streaks):
    cards = [_card(f"s{s}", streak=s) for s in streaks]
    expected = _names(sorted(cards, key=lambda c: c.streak))
    for perm in itertools.permutations(cards):
        built = []
        for c in perm:
            insert_card(built, c, NOW)
        assert _names(resort(built, NOW)) == expected


def test_resort_is_order_independent_for_overdue_cards():
    cards = [_card(f"d{i}", streak=s, next_review_time=NOW - i * 100)
             for i, s in enumerate((3, 0, 8, 1), start=1)]
    expected = _names(sorted(cards, key=lambda c: c.next_review_time))
    for perm in itertools.permutations(cards):
        assert _names(resort(list(perm), NOW)) == expected


def test_intransitive_triple():
    """Overdue, practicing and graduated cards can form a ranking cycle."""
    a = _card("a", streak=0, accuracy=50, next_review_time=NOW - 50)
    b = _card("b", streak=5, accuracy=0, next_review_time=NOW + 100)
    c = _card("c", streak=10, accuracy=10, next_review_time=NOW + 200)
    assert ranks_before(a, b, NOW)
    assert ranks_before(b, c, NOW)
    assert ranks_before(c, a, NOW)
    # so the rebuilt order depends on where the scan starts
    assert _names(resort([a, b, c], NOW)) == ["c", "a", "b"]
    assert _names(resort([b, c, a], NOW)) == ["a", "b", "c"]


# ─── due_cards ──────────────────────────────────────────────────────────────

def test_due_cards_skips_graduated():
    cards = [_card("a", streak=10), _card("b", streak=2),
             _card("c", streak=11), _card("d")]
    assert _names(due_cards(cards)) == ["b", "d"]


def test_due_cards_does_not_mutate_skipped():
    grad = _card("g", streak=12, accuracy=88.5, review_count=30)
    list(due_cards([grad]))
    assert (grad.streak, grad.accuracy, grad.review_count) == (12, 88.5, 30)
