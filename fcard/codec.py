"""Flashcard data file format: parsing and serialization.

Format (line oriented):

    # file comment lines

    >>
    # card comment
    Q:
        question text
    A:
        answer text
    S:
        review_count streak accuracy [last_review_time next_review_time]
    <<

Timestamps written after the statistics are informational; on load the
last review time is stamped with the current time and the next review
time is recomputed one calendar month later.
"""

import calendar
import io
import os
import pathlib
import re
import tempfile
import time

from fcard.errors import DestinationUnwritable, EmptyCollection, SourceUnreadable
from fcard.models import Deck, FlashcardRecord
from fcard.scheduler import insert_card, resort

_QUESTION, _ANSWER, _STATISTICS = "question", "answer", "statistics"
_MARKERS = {"Q:": _QUESTION, "A:": _ANSWER, "S:": _STATISTICS}
_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _now() -> int:
    return int(time.time())


def next_month(ts: int) -> int:
    """Same UTC day and time one calendar month after ts.

    Days past the end of the target month roll forward into the month
    after (Jan 31 → Mar 3 in a common year).
    """
    t = time.gmtime(ts)
    year, month = t.tm_year, t.tm_mon + 1
    if month > 12:
        year, month = year + 1, 1
    return calendar.timegm((year, month, t.tm_mday, t.tm_hour, t.tm_min, t.tm_sec))


def _parse_statistics(card: FlashcardRecord, line: str, now: int):
    """Read "review_count streak accuracy" into card.

    Each token is read by its leading number, like sscanf: "7.5" as an
    integer gives 7, and reading stops at the first token that is not
    fully numeric.
    """
    card.last_review_time = now
    tokens = line.split()
    for i, (attr, pattern, conv) in enumerate((("review_count", _INT_RE, int),
                                               ("streak", _INT_RE, int),
                                               ("accuracy", _FLOAT_RE, float))):
        if i >= len(tokens):
            break
        m = pattern.match(tokens[i])
        if not m:
            break
        value = conv(m.group())
        if conv is float:
            value = min(max(value, 0.0), 100.0)
        else:
            value = max(value, 0)
        setattr(card, attr, value)
        if m.end() != len(tokens[i]):
            break


def _fixup(card: FlashcardRecord, now: int):
    if card.comment is None:
        card.comment = ""
    if card.question is None:
        card.question = "\n"
    if card.answer is None:
        card.answer = "\n"
    if card.last_review_time == 0:
        card.last_review_time = now
    card.next_review_time = next_month(card.last_review_time)


def _append(text: str | None, line: str) -> str:
    return line if text is None else text + line


def parse(text: str, now: int | None = None) -> Deck:
    """Parse flashcard file text into a Deck ordered for review.

    Raises EmptyCollection if the text holds no complete (>> ... <<) card.
    """
    if now is None:
        now = _now()
    deck = Deck()
    card = None          # open card, between >> and <<
    last_closed = None
    seen_start = False
    stage = None

    for line in io.StringIO(text):
        if line.startswith("#") and not seen_start:
            deck.header.comment += line
        elif line.startswith(">>"):
            seen_start = True
            card = FlashcardRecord()
            stage = None
        elif line.startswith("#"):
            if card is not None:
                card.comment = _append(card.comment, line)
            elif last_closed is not None:
                last_closed.comment += line
        elif card is None:
            continue
        elif line.rstrip() in _MARKERS:
            stage = _MARKERS[line.rstrip()]
        elif line.startswith("<<"):
            _fixup(card, now)
            insert_card(deck.cards, card, now)
            last_closed, card, stage = card, None, None
        elif stage == _QUESTION:
            card.question = _append(card.question, line)
        elif stage == _ANSWER:
            card.answer = _append(card.answer, line)
        elif stage == _STATISTICS:
            _parse_statistics(card, line, now)

    if not deck.cards:
        raise EmptyCollection()
    return deck


def _block(text: str) -> str:
    if text and not text.endswith("\n"):
        return text + "\n"
    return text


def serialize(deck: Deck, now: int | None = None) -> str:
    """Re-sort the deck in place and render it in file format."""
    if now is None:
        now = _now()
    deck.cards = resort(deck.cards, now)
    out = [deck.header.comment or ""]
    for c in deck.cards:
        out.append("\n>>\n")
        out.append(_block(c.comment or ""))
        out.append("Q:\n")
        out.append(_block(c.question or "\n"))
        out.append("A:\n")
        out.append(_block(c.answer or "\n"))
        out.append("S:\n")
        out.append("    %d %d %g %d %d\n" % (c.review_count, c.streak, c.accuracy,
                                            c.last_review_time, c.next_review_time))
        out.append("<<\n")
    return "".join(out)


def load_deck(path: pathlib.Path | str, now: int | None = None) -> Deck:
    path = pathlib.Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable(path, e) from e
    try:
        return parse(text, now)
    except EmptyCollection:
        raise EmptyCollection(path) from None


def save_deck(deck: Deck, path: pathlib.Path | str, now: int | None = None):
    """Write the deck to path, replacing the old file only once the new one is complete."""
    path = pathlib.Path(path)
    data = serialize(deck, now)
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp",
                                        dir=str(path.parent))
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data)
        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode & 0o7777)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise DestinationUnwritable(path, e) from e
