# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage text accumulation and option-line formatting.

`UsageBuffer` collects the help text written by a session, and
`format_option` lays out one option as two columns:

      -a, --alpha=ARG           Alpha parameter. This usage has a lot to
                                  say, so the usage spans over multiple
                                  lines

The option column is `args_width` wide and the help column `help_width` wide.
Help text is wrapped at spaces; a word that does not fit is emitted as is,
together with the rest of the help.
"""
from __future__ import annotations

from io import StringIO
from typing import Any

from optim.logger import logger

ARGS_WIDTH = 30
HELP_WIDTH = 50


def format_message(fmt: str, *args: Any) -> str:
    """
    Apply printf-style formatting when arguments are given.

    Without arguments only `%%` is collapsed to `%`; a lone `%` is kept as is.
    """
    if args:
        return fmt % args
    return fmt.replace("%%", "%")


class UsageBuffer:
    """
    Append-only buffer for usage text.

    Writes are non-fatal: once a message fails to format, the buffer stops
    accepting text and every later write returns the same failure code.
    """

    def __init__(self) -> None:
        self._buffer = StringIO()
        self.failed: bool = False

    def write(self, fmt: str, *args: Any) -> int:
        """Append formatted text. Returns the number of characters written or -1."""
        if self.failed:
            return -1
        try:
            text = format_message(fmt, *args)
        except (TypeError, ValueError) as error:
            logger.warning("Unable to format usage text %r: %s", fmt, error)
            self.failed = True
            return -1
        return self._buffer.write(text)

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def __str__(self) -> str:
        return self.getvalue()


def _option_column(short: str | None, long: str | None, metavar: str | None) -> str:
    column = "  "
    column += f"-{short}" if short else "  "
    if short and long:
        column += ", "
    elif short and metavar is not None:
        column += f" {metavar}"
    else:
        column += "  "
    if long:
        column += f"--{long}"
        if metavar is not None:
            column += f"={metavar}"
    return column + "  "


def _wrap_help(
    help: str, col: int, args_width: int, help_width: int
) -> list[str]:
    """Split help text into the pieces that go on each output line."""
    lines: list[str] = []
    first_line = True
    remaining = help_width + args_width - col
    if remaining < 0 or remaining > help_width:
        lines.append("")
        first_line = False

    rest = help
    while rest:
        prefix = ""
        if not first_line:
            prefix = " " * (args_width + 2)
            remaining = help_width - 2

        split = -1
        newline = rest.find("\n")
        if 0 <= newline <= remaining:
            split = newline
        elif len(rest) > remaining:
            split = rest.rfind(" ", 0, max(remaining, 0))

        if split < 0:
            lines.append(prefix + rest)
            break
        lines.append(prefix + rest[:split])
        rest = rest[split + 1 :]
        first_line = False
    return lines


def format_option(
    short: str | None,
    long: str | None,
    metavar: str | None,
    help: str | None,
    args_width: int = ARGS_WIDTH,
    help_width: int = HELP_WIDTH,
) -> str:
    """
    Render the usage entry for one option.

    Args:
        short (str | None): Single-letter option, or None.
        long (str | None): Long option name, or None.
        metavar (str | None): Name of the value, None for flags.
        help (str | None): Help text; may contain newlines.
        args_width (int): Width of the option column.
        help_width (int): Width of the help column.

    Returns:
        str: The formatted entry, ending in a newline.
    """
    column = _option_column(short, long, metavar)
    column = column.ljust(args_width)
    lines = _wrap_help(help or "", len(column), args_width, help_width)
    if not lines:
        return column.rstrip() + "\n"
    return column + "\n".join(lines) + "\n"
