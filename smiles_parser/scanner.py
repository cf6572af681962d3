"""Character cursor over a SMILES string."""

from __future__ import annotations

from typing import Callable

from .exceptions import ParseError


class Scanner:
    """Low-level SMILES scanner.

    Provides character-by-character access to a SMILES string with
    lookahead, and builds errors that point at the current offset.
    """

    __slots__ = ("_string", "_pos")

    def __init__(self, string: str) -> None:
        self._string = string
        self._pos = 0

    @property
    def string(self) -> str:
        """The full string being scanned."""
        return self._string

    @property
    def position(self) -> int:
        """Current position in the string."""
        return self._pos

    @property
    def remaining(self) -> str:
        """Remaining unparsed string."""
        return self._string[self._pos:]

    def peek(self, offset: int = 0) -> str | None:
        """Look at character at current position + offset without consuming.

        Args:
            offset: Positions ahead to look (default 0 = current).

        Returns:
            Character at position, or None if past end.
        """
        pos = self._pos + offset
        if pos >= len(self._string):
            return None
        return self._string[pos]

    def next(self) -> str | None:
        """Consume and return the next character.

        Returns:
            Next character, or None if at end.
        """
        if self._pos >= len(self._string):
            return None
        char = self._string[self._pos]
        self._pos += 1
        return char

    def skip(self, count: int = 1) -> None:
        """Skip forward by count characters."""
        self._pos += count

    def read_while(self, predicate: Callable[[str], bool], limit: int | None = None) -> str:
        """Read characters while predicate is true.

        Args:
            predicate: Function(char) -> bool.
            limit: Maximum number of characters to consume.

        Returns:
            String of consumed characters.
        """
        start = self._pos
        end = len(self._string) if limit is None else min(len(self._string), start + limit)
        while self._pos < end and predicate(self._string[self._pos]):
            self._pos += 1
        return self._string[start:self._pos]

    def read_number(self, limit: int | None = None) -> int | None:
        """Read and return an integer, or None if no digits present."""
        digits = self.read_while(_is_ascii_digit, limit)
        return int(digits) if digits else None

    def is_eof(self) -> bool:
        """Check if at end of string."""
        return self._pos >= len(self._string)

    def expect(self, char: str, what: str | None = None) -> None:
        """Consume expected character or raise error.

        Args:
            char: Expected character.
            what: Description used in the error message.

        Raises:
            ParseError: If next character doesn't match.
        """
        actual = self.peek()
        if actual != char:
            raise self.error(
                f"Expected {what or repr(char)}, got {_describe(actual)}",
                expected=char,
            )
        self._pos += 1

    def error(
        self,
        message: str,
        *,
        cls: type[ParseError] = ParseError,
        position: int | None = None,
        expected: str | None = None,
        **kwargs,
    ) -> ParseError:
        """Build an error pointing at ``position`` (default: current offset).

        The character found at that offset is filled in automatically.
        """
        pos = self._pos if position is None else position
        kwargs.setdefault("found", self._string[pos] if pos < len(self._string) else None)
        return cls(message, self._string, pos, expected=expected, **kwargs)


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _describe(char: str | None) -> str:
    return "end of input" if char is None else repr(char)
