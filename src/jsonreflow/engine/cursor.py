"""Positional view over the source text being formatted."""

from typing import Final

WHITESPACE: Final = frozenset(" \t\v\n\r")

# Separators are never trusted: they are skipped on input and re-emitted by the formatter
PUNCTUATION: Final = frozenset(",:")

CLOSING_BRACKETS: Final = frozenset("}]")

# Characters that end an atom, in addition to whitespace and comment openers
TERMINALS: Final = frozenset('{}[],:"')


class Cursor:
    """Read-only cursor over the source text.

    The cursor only ever moves forward, except when the formatter rolls back a
    speculative single-line attempt and assigns an earlier ``offset``.

    Attributes:
        source (str): The complete source text.
        offset (int): Index of the next unread character.

    Example:
        >>> cursor = Cursor('{"a": 1}')
        >>> cursor.peek(), cursor.next_char(), cursor.peek()
        ('{', '{', '"')
        >>> cursor.is_next_prefix('"a"')
        True
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.offset = 0

    def more(self) -> bool:
        return self.offset < len(self.source)

    def at_end(self) -> bool:
        return not self.more()

    def peek(self) -> str:
        """Return the next character without consuming it, or an empty string at the end."""
        return self.source[self.offset : self.offset + 1]  # noqa: E203

    def is_next(self, char: str) -> bool:
        return self.peek() == char

    def is_next_prefix(self, prefix: str) -> bool:
        return prefix != "" and self.source.startswith(prefix, self.offset)

    def is_next_space(self) -> bool:
        return self.peek() in WHITESPACE

    def is_next_punctuation(self) -> bool:
        return self.peek() in PUNCTUATION

    def is_next_closing(self) -> bool:
        return self.peek() in CLOSING_BRACKETS

    def is_next_terminal_char(self) -> bool:
        return self.peek() in TERMINALS

    def next_char(self) -> str:
        """Consume and return the next character."""
        char = self.source[self.offset]
        self.offset += 1
        return char

    def skip_char(self) -> None:
        self.offset += 1

    def skip(self, count: int) -> None:
        self.offset += count
