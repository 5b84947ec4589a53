# Argstyle CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `TokenCursor`, a restartable cursor over a fixed sequence of tokens.

The cursor moves one token at a time in either direction and lets the
argument parser look one token ahead or behind without moving. Lookaround is
plain index arithmetic; positions outside the sequence yield an empty string.
"""
from typing import Iterator, Sequence


class TokenCursor:
    """
    Forward/backward cursor over an ordered sequence of string tokens.

    The position is clamped to `[-1, len(tokens)]` so stepping past either end
    is a no-op rather than an error.
    """

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens: tuple[str, ...] = tuple(tokens)
        self.position: int = 0

    def current(self) -> str:
        """Return the token at the current position, or "" when out of range."""
        return self._at(self.position)

    def advance(self) -> None:
        if self.position < len(self.tokens):
            self.position += 1

    def retreat(self) -> None:
        if self.position > -1:
            self.position -= 1

    def rewind(self) -> None:
        """Move back to the first token."""
        self.position = 0

    def is_valid(self) -> bool:
        return 0 <= self.position < len(self.tokens)

    def key(self) -> int:
        return self.position

    def peek_next(self) -> str:
        """Return the following token without moving, or "" at the end."""
        return self._at(self.position + 1)

    def peek_previous(self) -> str:
        """Return the preceding token without moving, or "" at the start."""
        return self._at(self.position - 1)

    def _at(self, index: int) -> str:
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return ""

    def __iter__(self) -> Iterator[str]:
        self.rewind()
        while self.is_valid():
            yield self.current()
            self.advance()

    def __len__(self) -> int:
        return len(self.tokens)

    def __repr__(self) -> str:
        return f"TokenCursor(position={self.position}, tokens={list(self.tokens)!r})"
