# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Pull-style access to the result of the most recent declaration.

A `ResultCursor` holds the tokens matched for a value-taking option, the
collected positionals, or the catch-all. Each pull removes the head, marks the
token used and returns its value. A `FlagCursor` only carries a count.
"""
from __future__ import annotations

from collections import deque
from typing import Callable, Iterator

from optim.exceptions import InternalError, InvalidNumberError, OptimError
from optim.parser.token import Token
from optim.parser.utils import parse_long

Reporter = Callable[[OptimError], object]


def _ignore(_: OptimError) -> None:
    pass


class ResultCursor:
    """
    Ordered matches for one declaration.

    Args:
        tokens (list[Token]): Matched tokens in argument order.
        raw (bool): Yield the restored command-line form instead of the value.
            Used by the catch-all.
        report (Reporter | None): Receives parse and invariant errors.
    """

    def __init__(
        self,
        tokens: list[Token] | None = None,
        raw: bool = False,
        report: Reporter | None = None,
    ) -> None:
        self._tokens: deque[Token] = deque(tokens or [])
        self.raw: bool = raw
        self._report: Reporter = report or _ignore

    @property
    def count(self) -> int:
        """Number of matches left to pull."""
        return len(self._tokens)

    def __len__(self) -> int:
        return self.count

    def __bool__(self) -> bool:
        return self.count > 0

    def close(self) -> None:
        """Drop every match not pulled yet; the tokens stay unclaimed."""
        self._tokens.clear()

    def pop(self) -> Token | None:
        """Remove the head match, mark it used and return it."""
        if not self._tokens:
            return None
        token = self._tokens.popleft()
        token.used = True
        return token

    def get_string(self, default: str | None = None) -> str | None:
        """Pull the next match as text, or `default` if none are left."""
        token = self.pop()
        if token is None:
            return default
        if self.raw:
            return token.restore()
        try:
            return token.text
        except ValueError:
            self._report(
                InternalError(
                    f"Internal optim error: `get_string` unable to handle "
                    f"argument type '{token.kind}'"
                )
            )
            return default

    def get_long(self, default: int) -> int:
        """Pull the next match as an integer, or `default` if none are left or it does not parse."""
        value = self.get_string(None)
        if value is None:
            return default
        try:
            return parse_long(value)
        except ValueError:
            self._report(InvalidNumberError(f"Unable to parse number '{value}'"))
            return default

    def __iter__(self) -> Iterator[str]:
        while self._tokens:
            value = self.get_string(None)
            if value is not None:
                yield value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count}, raw={self.raw})"


class FlagCursor(ResultCursor):
    """The count of a flag declaration. Pulls decrement the count and yield the default."""

    def __init__(self, count: int = 0) -> None:
        super().__init__()
        self._count: int = count

    @property
    def count(self) -> int:
        return self._count

    def pop(self) -> Token | None:
        if self._count > 0:
            self._count -= 1
        return None

    def get_string(self, default: str | None = None) -> str | None:
        self.pop()
        return default

    def get_long(self, default: int) -> int:
        self.pop()
        return default

    def __iter__(self) -> Iterator[str]:
        return iter(())

    def __repr__(self) -> str:
        return f"FlagCursor(count={self.count})"
