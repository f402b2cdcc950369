# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Reports every token left unclaimed when a session finishes."""
from __future__ import annotations

from typing import Callable

from optim.exceptions import OptimError, UnusedArgumentError
from optim.parser.token import Token, TokenKind


def describe_unused(token: Token, positionals_claimed: bool) -> str | None:
    """Return the error message for an unused token, or None if it is silent."""
    if token.kind == TokenKind.BARE:
        if positionals_claimed:
            return f"Unused positional argument: '{token.raw}'"
        return f"Unused floating argument: '{token.raw}'"
    if token.kind == TokenKind.SHORT_CLUSTER:
        assert token.flags, "an unused cluster always has letters left"
        return f"Unused flag: '-{token.flags[0]}'"
    if token.kind in (TokenKind.LONG_FLAG, TokenKind.LONG_WITH_VALUE):
        return f"Unused argument: '--{token.name}'"
    return None


def audit_unused(
    tokens: list[Token],
    positionals_claimed: bool,
    report: Callable[[OptimError], object],
) -> int:
    """
    Report every unused token through `report`.

    Returns:
        int: The number of tokens reported.
    """
    reported = 0
    for token in tokens:
        if token.used:
            continue
        message = describe_unused(token, positionals_claimed)
        if message is None:
            continue
        report(UnusedArgumentError(message))
        reported += 1
    return reported
