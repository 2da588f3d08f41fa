"""Help texts: the data file template and the in-session command list."""

TEMPLATE = """\
# XXX flashcards
# This file consists of comments (every line starting with # is a comment),
# flashcard records and blank lines.
# A record is made of a start marker (>>), optional comments and blank lines,
# a question marker (Q:) and the question, an answer marker (A:) and the
# answer, a statistics marker (S:) with one statistics line, and an end
# marker (<<). The statistics line holds the review count, the number of
# consecutive correct answers, the accuracy in percent, and the encoded
# last and next review times. Statistics may be left out from the end
# backwards; the two times are maintained by the program and should not be
# entered by hand. When the file is updated, the leading file comment and
# the comments inside records are kept.

>>
[# comment]
Q:
    the question
A:
    the answer
S:
    [review count] [correct in a row] [accuracy] [last review] [next review]
<<

[more flashcard records]
"""

HELP = """\
    Enter a command name and press Enter to run it, at any prompt.
Available commands:
    help      show this help
    quit      save and quit
    temp      show the data file template
    clear     clear the screen
"""
