# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value conversion helpers for option values.

Functions:
- parse_long: Parse an integer with C `strtol` base detection.
"""
import re

_LONG_PATTERN = re.compile(
    r"""
    \s*
    (?P<sign>[+-]?)
    (?:
        0[xX](?P<hex>[0-9a-fA-F]+)
      | (?P<oct>0[0-7]*)
      | (?P<dec>[1-9][0-9]*)
    )
    """,
    re.VERBOSE,
)


def parse_long(value: str) -> int:
    """
    Parse `value` as an integer, detecting the base from its prefix.

    Accepts optional leading whitespace and sign, then `0x`/`0X` for
    hexadecimal, a leading `0` for octal, or plain decimal. The whole string
    must be consumed.

    Args:
        value (str): The text to parse.

    Returns:
        int: The parsed integer.

    Raises:
        ValueError: If the string is empty or has unparsed trailing text.
    """
    match = _LONG_PATTERN.fullmatch(value)
    if not value or match is None:
        raise ValueError(f"Unable to parse number '{value}'")

    if match.group("hex") is not None:
        number = int(match.group("hex"), 16)
    elif match.group("oct") is not None:
        number = int(match.group("oct"), 8)
    else:
        number = int(match.group("dec"), 10)
    return -number if match.group("sign") == "-" else number
