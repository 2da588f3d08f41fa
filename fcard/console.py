"""Terminal front end for a review session."""

import sys

from fcard.errors import QuitRequested
from fcard.models import FlashcardRecord
from fcard.template import HELP, TEMPLATE

END_OF_ANSWER = "<<<"


class ConsoleIO:
    """Line-based prompts on a pair of text streams.

    At every prompt the commands help, quit, temp and clear are
    recognised. quit and end of input raise QuitRequested.
    """

    def __init__(self, stdin=None, stdout=None, clear_mode: str = "blank"):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.clear_mode = clear_mode

    def _print(self, text: str = "", end: str = "\n"):
        self.stdout.write(text + end)
        self.stdout.flush()

    def _readline(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise QuitRequested("end of input")
        return line

    def exec_command(self, line: str) -> bool:
        """Run line as an in-session command. Returns True if it was one."""
        cmd = line.strip()
        if cmd == "help":
            self._print(HELP, end="")
        elif cmd == "quit":
            raise QuitRequested("quit")
        elif cmd == "temp":
            self._print(TEMPLATE, end="")
        elif cmd == "clear":
            self.clear_screen()
        else:
            return False
        return True

    def clear_screen(self):
        if self.clear_mode == "ansi":
            self._print("\x1b[2J\x1b[H", end="")
        elif self.clear_mode == "blank":
            self._print("\n" * 100, end="")

    def show_question(self, text: str):
        self._print("Question:")
        self._print(text, end="")
        self._print(f"Enter your answer (finish with {END_OF_ANSWER} on its own line):")

    def read_answer(self) -> str:
        lines = []
        while True:
            line = self._readline()
            if line.rstrip("\r\n") == END_OF_ANSWER:
                return "".join(lines)
            if not self.exec_command(line):
                lines.append(line)

    def show_answer(self, text: str):
        self._print("Answer:")
        self._print(text, end="")

    def read_judgment(self) -> bool:
        while True:
            self._print("Correct? (y = correct / n = wrong)")
            line = self._readline()
            if self.exec_command(line):
                continue
            reply = line.strip().lower()
            if reply == "y":
                return True
            if reply == "n":
                return False

    def show_stats(self, record: FlashcardRecord):
        if record.is_header():
            self._print(f"Session: {record.review_count} reviews, "
                        f"accuracy {record.accuracy:g}%.")
        else:
            self._print(f"Reviewed {record.review_count} times, "
                        f"{record.streak} correct in a row, "
                        f"accuracy {record.accuracy:g}%.\n")
