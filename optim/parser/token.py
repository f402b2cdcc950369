# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification for raw command-line arguments.

Every raw argument becomes exactly one `Token`, in order, on a single forward
pass. The kind of a token never changes after tokenization; the only mutable
state is the `used` flag and the letters left in a short-option cluster.

Kinds:
- INVOCATION: slot 0, the program path. Always used.
- BARE: no leading dash, a lone `-`, `--=value`, or anything after `--`.
- SHORT_CLUSTER: `-abc`, one or more single-letter options.
- LONG_FLAG: `--name`.
- LONG_WITH_VALUE: `--name=value`, name and value kept apart.
- SEPARATOR: exactly `--`.
- EMPTY: a `None` or empty slot. Always used, never reported.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from optim.logger import logger


class TokenKind(Enum):
    """Classification of a single raw argument."""

    INVOCATION = "invocation"
    BARE = "bare"
    SHORT_CLUSTER = "short_cluster"
    LONG_FLAG = "long_flag"
    LONG_WITH_VALUE = "long_with_value"
    SEPARATOR = "separator"
    EMPTY = "empty"

    def __str__(self) -> str:
        return self.value


@dataclass
class Token:
    """
    One classified command-line argument.

    Attributes:
        kind (TokenKind): The classification of the argument.
        raw (str | None): The argument exactly as given.
        index (int): Position in the argument vector.
        used (bool): True once a declaration or a cursor pull claimed it.
        flags (list[str]): Letters still unclaimed in a short cluster.
        last (str): Last letter of a short cluster when it was tokenized.
        name (str): Option name for long forms, basename for the invocation.
        value (str): Inline value of `--name=value`.
    """

    kind: TokenKind
    raw: str | None
    index: int
    used: bool = False
    flags: list[str] = field(default_factory=list)
    last: str = ""
    name: str = ""
    value: str = ""

    @property
    def text(self) -> str:
        """The value a cursor yields for this token."""
        if self.kind == TokenKind.BARE:
            assert self.raw is not None
            return self.raw
        if self.kind == TokenKind.LONG_WITH_VALUE:
            return self.value
        raise ValueError(f"Token of kind '{self.kind}' does not carry a value")

    def restore(self) -> str:
        """Render the token back into command-line form."""
        if self.kind == TokenKind.LONG_WITH_VALUE:
            return f"--{self.name}={self.value}"
        if self.kind == TokenKind.LONG_FLAG:
            return f"--{self.name}"
        if self.kind == TokenKind.SHORT_CLUSTER:
            return "-" + "".join(self.flags)
        return self.raw or ""

    def pop_flag(self, letter: str) -> bool:
        """
        Remove the first occurrence of `letter` from a short cluster.

        The cluster becomes used once no letters remain.

        Returns:
            bool: True if the letter was present and removed.
        """
        assert self.kind == TokenKind.SHORT_CLUSTER
        if self.used or letter not in self.flags:
            return False
        self.flags.remove(letter)
        if not self.flags:
            self.used = True
        return True


def get_basename(path: str) -> str:
    """Return the part of `path` after the last '/'."""
    return path.rsplit("/", 1)[-1]


def classify(raw: str | None, index: int, after_separator: bool) -> Token:
    """Classify one non-invocation argument."""
    if not raw:
        return Token(TokenKind.EMPTY, raw, index, used=True)
    if after_separator or not raw.startswith("-") or raw == "-":
        return Token(TokenKind.BARE, raw, index)
    if not raw.startswith("--"):
        body = raw[1:]
        return Token(
            TokenKind.SHORT_CLUSTER, raw, index, flags=list(body), last=body[-1]
        )
    if raw == "--":
        return Token(TokenKind.SEPARATOR, raw, index)

    name, sep, value = raw[2:].partition("=")
    if not sep:
        return Token(TokenKind.LONG_FLAG, raw, index, name=name)
    if not name:
        return Token(TokenKind.BARE, raw, index)
    return Token(TokenKind.LONG_WITH_VALUE, raw, index, name=name, value=value)


def tokenize(argv: Sequence[str | None]) -> list[Token]:
    """
    Classify every raw argument, in order, one token per argument.

    Args:
        argv (Sequence[str | None]): The argument vector; `argv[0]` is the
            program path.

    Returns:
        list[Token]: One token per entry of `argv`.
    """
    tokens: list[Token] = []
    if not argv:
        return tokens

    invocation = argv[0] or ""
    tokens.append(
        Token(
            TokenKind.INVOCATION,
            argv[0],
            0,
            used=True,
            name=get_basename(invocation),
        )
    )

    after_separator = False
    for index, raw in enumerate(argv[1:], start=1):
        token = classify(raw, index, after_separator)
        if token.kind == TokenKind.SEPARATOR:
            after_separator = True
        tokens.append(token)

    logger.debug(
        "Tokenized %d arguments: %s",
        len(tokens),
        ", ".join(str(token.kind) for token in tokens),
    )
    return tokens
