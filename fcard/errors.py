"""Error types raised by fcard."""


class FlashcardError(Exception):
    """Base class for fcard errors."""


class FormatError(FlashcardError):
    """The data file could not be read as a flashcard file."""


class SourceUnreadable(FormatError):
    def __init__(self, path, reason=None):
        self.path = str(path)
        msg = f"cannot read {self.path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class DestinationUnwritable(FlashcardError):
    def __init__(self, path, reason=None):
        self.path = str(path)
        msg = f"cannot write {self.path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class EmptyCollection(FlashcardError):
    def __init__(self, path=None):
        self.path = str(path) if path is not None else None
        where = f" in {self.path}" if self.path else ""
        super().__init__(f"no flashcard records found{where}")


class QuitRequested(FlashcardError):
    """Raised to leave the review loop early (quit command, end of input, signal)."""
