# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Terminal collection modes.

Collecting a token does not claim it; a cursor pull does. Anything collected
but never pulled is still reported as unused when the session finishes.
"""
from __future__ import annotations

from optim.parser.token import Token, TokenKind


def collect_positionals(tokens: list[Token]) -> list[Token]:
    """Return every unused bare token, in argument order."""
    return [
        token for token in tokens if not token.used and token.kind == TokenKind.BARE
    ]


def collect_unused(tokens: list[Token]) -> list[Token]:
    """Return every unused token of any kind, in argument order."""
    return [token for token in tokens if not token.used]
