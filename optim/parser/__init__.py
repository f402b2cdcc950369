"""
Optim Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .auditor import audit_unused
from .collectors import collect_positionals, collect_unused
from .cursor import FlagCursor, ResultCursor
from .matcher import match_arg, match_flag
from .token import Token, TokenKind, tokenize
from .utils import parse_long

__all__ = [
    "Token",
    "TokenKind",
    "tokenize",
    "match_arg",
    "match_flag",
    "collect_positionals",
    "collect_unused",
    "ResultCursor",
    "FlagCursor",
    "audit_unused",
    "parse_long",
]
