# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Matches a declared option against the token list.

Each function makes a single forward pass over the tokens, skipping anything
already used, and claims every occurrence of the option it is given. Problems
found along the way are passed to `report`; matching carries on afterwards so
that later occurrences are still claimed.

- `match_arg`: an option that takes a value, either from the next bare token
  (`-a VALUE`, `--alpha VALUE`, `-xa VALUE`) or inline (`--alpha=VALUE`).
- `match_flag`: an option without a value, countable by repetition
  (`-vvv`, `-v -v`, `--verbose --verbose`).
"""
from __future__ import annotations

from typing import Callable

from optim.exceptions import (
    AlreadyConsumedError,
    DuplicateFlagError,
    MissingArgumentError,
    OptimError,
    UnexpectedValueError,
)
from optim.parser.token import Token, TokenKind

Reporter = Callable[[OptimError], object]

SKIPPED_KINDS = (
    TokenKind.EMPTY,
    TokenKind.INVOCATION,
    TokenKind.BARE,
    TokenKind.SEPARATOR,
)


def _value_after(tokens: list[Token], index: int) -> Token | None:
    """Return the token following `index` if it can serve as a value."""
    if index + 1 >= len(tokens):
        return None
    candidate = tokens[index + 1]
    if candidate.used or candidate.kind != TokenKind.BARE:
        return None
    return candidate


def match_arg(
    tokens: list[Token],
    short: str | None,
    long: str | None,
    metavar: str,
    report: Reporter,
) -> list[Token]:
    """
    Claim every occurrence of a value-taking option.

    A short option only matches a cluster whose last letter it is, since the
    value has to follow the cluster.

    Args:
        tokens (list[Token]): The session's tokens.
        short (str | None): Single-letter name, or None.
        long (str | None): Long name without dashes, or None.
        metavar (str): Name of the value, used in error messages.
        report (Reporter): Receives errors found while matching.

    Returns:
        list[Token]: Tokens holding the values, in argument order.
    """
    matches: list[Token] = []
    for index, token in enumerate(tokens):
        if token.used or token.kind in SKIPPED_KINDS:
            continue

        if token.kind == TokenKind.SHORT_CLUSTER:
            if not short or token.last != short:
                continue
            if not token.pop_flag(short):
                report(AlreadyConsumedError(f"Flag '-{short} {metavar}' already consumed"))
                continue
            if token.pop_flag(short):
                report(
                    DuplicateFlagError(
                        f"Flag '-{short} {metavar}' specified multiple times in same argument"
                    )
                )
                continue
            value = _value_after(tokens, index)
            if value is None:
                report(MissingArgumentError(f"Flag '-{short}' is missing its argument"))
                continue
            value.used = True
            matches.append(value)

        elif token.kind == TokenKind.LONG_FLAG:
            if not long or token.name != long:
                continue
            value = _value_after(tokens, index)
            if value is None:
                report(MissingArgumentError(f"Flag '--{long}' is missing its argument"))
                continue
            token.used = True
            value.used = True
            matches.append(value)

        elif token.kind == TokenKind.LONG_WITH_VALUE:
            if not long or token.name != long:
                continue
            token.used = True
            matches.append(token)

    return matches


def match_flag(
    tokens: list[Token],
    short: str | None,
    long: str | None,
    report: Reporter,
) -> int:
    """
    Claim every occurrence of a flag and return how many there were.

    Each repetition of the letter inside a cluster counts separately.
    """
    count = 0
    for token in tokens:
        if token.used or token.kind in SKIPPED_KINDS:
            continue

        if token.kind == TokenKind.SHORT_CLUSTER:
            if not short:
                continue
            while token.pop_flag(short):
                count += 1

        elif token.kind == TokenKind.LONG_FLAG:
            if not long or token.name != long:
                continue
            token.used = True
            count += 1

        elif token.kind == TokenKind.LONG_WITH_VALUE:
            if not long or token.name != long:
                continue
            report(UnexpectedValueError(f"Flag '--{token.name}' does not take an argument"))

    return count
