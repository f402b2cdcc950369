# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Optim`, an incremental command-line option parser.

Unlike argparse, options are not registered up front and parsed in one go.
Each declaration immediately claims its occurrences from the argument vector
and hands back a cursor over what it found, so the program reads its options
in the same place it declares them. Whatever no declaration claimed is
reported as an error when the session is finished.

Key Features:
- Short options, clusters (`-vvx VALUE`), long options (`--name VALUE`,
  `--name=VALUE`) and the `--` separator
- Countable flags
- Positional collection and a catch-all for pass-through arguments
- Built-in `-h/--help` and `--version`
- First-error-wins reporting together with the generated usage text

Example Usage:
    session = Optim(sys.argv, "[-v] [-n NUM] <path>")
    session.usage("Frobnicate the given path\\n")

    verbose = session.flag("v", "verbose", "Increase verbosity").count
    number = session.arg("n", "number", "NUM", "How many times").get_long(1)

    paths = list(session.positionals())
    if not paths:
        session.error("expected at least one path")

    status = session.finish()
    if status != FinishStatus.SUCCESS:
        sys.exit(status != FinishStatus.HANDLED)
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any, Sequence

from optim.config import OptimSettings
from optim.console import console, error_console
from optim.exceptions import (
    AllocationFailedError,
    ArgumentError,
    ErrorFormatError,
    InvalidArgumentError,
    OptimError,
    OptimUsageError,
    SessionFinishedError,
)
from optim.logger import logger
from optim.parser.auditor import audit_unused
from optim.parser.collectors import collect_positionals, collect_unused
from optim.parser.cursor import FlagCursor, ResultCursor
from optim.parser.matcher import match_arg, match_flag
from optim.parser.token import Token, tokenize
from optim.usage import UsageBuffer, format_message, format_option


class FinishStatus(IntEnum):
    """Result of `Optim.finish()`."""

    FAILURE = -1
    SUCCESS = 0
    HANDLED = 1


class Optim:
    """
    A parsing session over one argument vector.

    Args:
        argv (Sequence[str | None]): The argument vector. `argv[0]` is the
            program path; entries may be None to mark deleted arguments.
        usage (str): One-line invocation summary, shown after the program name.
        argc (int | None): Number of entries of `argv` to use. Defaults to all.
        settings (OptimSettings | None): Layout and built-in option settings.

    Raises:
        InvalidArgumentError: If `argc` is negative.
        AllocationFailedError: If internal storage cannot be created.
    """

    def __init__(
        self,
        argv: Sequence[str | None],
        usage: str = "",
        *,
        argc: int | None = None,
        settings: OptimSettings | None = None,
    ) -> None:
        if argc is None:
            argc = len(argv)
        if argc < 0:
            raise InvalidArgumentError(f"Argument count must not be negative: {argc}")

        self.settings: OptimSettings = settings or OptimSettings()
        try:
            self.argv: list[str | None] = list(argv[:argc])
            self.tokens: list[Token] = tokenize(self.argv)
            self._usage: UsageBuffer = UsageBuffer()
        except MemoryError as error:
            raise AllocationFailedError("Unable to allocate parser state") from error

        self.started_options: bool = False
        self.asked_for_help: bool = False
        self.asked_for_version: bool = False
        self.positionals_claimed: bool = False
        self.catchall_claimed: bool = False
        self.finished: bool = False
        self.status: FinishStatus | None = None

        self.last_error: OptimError | None = None
        self.version_text: str | None = None
        self._cursor: ResultCursor | None = None

        program = self.tokens[0].name if self.tokens else ""
        self.usage("Usage: %s %s\n\n", program, usage)

    @property
    def error_message(self) -> str | None:
        """The first recorded error, if any."""
        if self.last_error is None:
            return None
        return self.last_error.message

    @property
    def usage_text(self) -> str:
        return self._usage.getvalue()

    @property
    def cursor(self) -> ResultCursor | None:
        """The cursor of the most recent declaration."""
        return self._cursor

    def _record(self, error: OptimError) -> None:
        """Keep `error` if it is the first one of the session."""
        if self.last_error is not None:
            logger.debug("Dropping error after the first: %s", error)
            return
        if isinstance(error, OptimUsageError):
            logger.warning("%s", error)
        else:
            logger.debug("Recorded error: %s", error)
        self.last_error = error

    def _check_finished(self, name: str) -> bool:
        if self.finished:
            logger.error(
                "%s",
                SessionFinishedError(
                    f"Internal optim error: `{name}` called on a finished session. "
                    "Was `finish` already called?"
                ),
            )
            return True
        return False

    def _check_declaration(self, name: str, short: str | None, long: str | None) -> bool:
        """Return True if a declaration may go ahead."""
        if not short and not long:
            self._record(
                OptimUsageError(
                    f"Internal optim error: `{name}` called without `short` or `long`"
                )
            )
            return False
        if short and len(short) != 1:
            self._record(
                OptimUsageError(
                    f"Internal optim error: `{name}` called with a short option "
                    f"longer than one character: '{short}'"
                )
            )
            return False
        if self.positionals_claimed:
            self._record(
                OptimUsageError(f"Internal optim error: `{name}` called after `positionals`")
            )
            return False
        if self.catchall_claimed:
            self._record(
                OptimUsageError(f"Internal optim error: `{name}` called after `unused`")
            )
            return False
        return True

    def _option_usage(
        self, short: str | None, long: str | None, metavar: str | None, help: str | None
    ) -> None:
        if not self.started_options:
            self.usage("\nOptions:\n")
            self.started_options = True
            settings = self.settings
            if settings.help_short or settings.help_long:
                if self.flag(settings.help_short, settings.help_long, settings.help_text):
                    self.asked_for_help = True

        self.usage(
            "%s",
            format_option(
                short,
                long,
                metavar,
                help,
                args_width=self.settings.args_width,
                help_width=self.settings.help_width,
            ),
        )

    # -- Declaring Options --

    def arg(
        self,
        short: str | None,
        long: str | None,
        metavar: str | None = None,
        help: str | None = "",
    ) -> ResultCursor:
        """
        Declare an option that takes a required value.

        Args:
            short (str | None): Single-letter option (`-l`), or None for long-only.
            long (str | None): Long option (`--long`), or None for short-only.
            metavar (str | None): Name of the value in the usage text.
            help (str | None): Usage message; may contain newlines.

        Returns:
            ResultCursor: The values given, in argument order.
        """
        if self._check_finished("arg"):
            return ResultCursor()
        if not self._check_declaration("arg", short, long):
            return ResultCursor()

        metavar = metavar or self.settings.default_metavar
        self._option_usage(short, long, metavar, help)
        matches = match_arg(self.tokens, short, long, metavar, self._record)
        logger.debug("Option -%s/--%s matched %d value(s)", short, long, len(matches))
        self._cursor = ResultCursor(matches, report=self._record)
        return self._cursor

    def flag(
        self, short: str | None, long: str | None, help: str | None = ""
    ) -> FlagCursor:
        """
        Declare an option that does not take a value.

        Returns:
            FlagCursor: How many times the flag was given.
        """
        if self._check_finished("flag"):
            return FlagCursor()
        if not self._check_declaration("flag", short, long):
            return FlagCursor()

        self._option_usage(short, long, None, help)
        count = match_flag(self.tokens, short, long, self._record)
        logger.debug("Flag -%s/--%s given %d time(s)", short, long, count)
        cursor = FlagCursor(count)
        self._cursor = cursor
        return cursor

    def positionals(self) -> ResultCursor:
        """
        Take the remaining bare arguments.

        Call this after every `arg` and `flag`. Calling it again returns the
        current cursor unchanged.
        """
        if self._check_finished("positionals"):
            return ResultCursor()
        if self.catchall_claimed:
            self._record(
                OptimUsageError("Internal optim error: `positionals` called after `unused`")
            )
            return ResultCursor()
        if self.positionals_claimed:
            return self._cursor if self._cursor is not None else ResultCursor()

        self.positionals_claimed = True
        self._cursor = ResultCursor(collect_positionals(self.tokens), report=self._record)
        logger.debug("Collected %d positional argument(s)", self._cursor.count)
        return self._cursor

    def unused(self) -> ResultCursor:
        """
        Take every argument not claimed so far, in its original form.

        Call this after every other argument has been used. Arguments pulled
        from the returned cursor count as used.
        """
        if self._check_finished("unused"):
            return ResultCursor()
        if self.catchall_claimed:
            return self._cursor if self._cursor is not None else ResultCursor()

        self.catchall_claimed = True
        if self._cursor is not None:
            self._cursor.close()
        self._cursor = ResultCursor(collect_unused(self.tokens), raw=True, report=self._record)
        logger.debug("Collected %d unused argument(s)", self._cursor.count)
        return self._cursor

    # -- Reading Options --

    def _require_cursor(self, name: str) -> ResultCursor | None:
        if self._cursor is None:
            self._record(
                OptimUsageError(
                    f"Internal optim error: `{name}` called before `arg`, `flag`, "
                    "`positionals`, or `unused`"
                )
            )
        return self._cursor

    def get_count(self) -> int:
        """Number of values remaining for the current option, or -1 if there is none."""
        if self._check_finished("get_count"):
            return -1
        cursor = self._require_cursor("get_count")
        if cursor is None:
            return -1
        return cursor.count

    def get_string(self, default: str | None = None) -> str | None:
        """Pull the next value of the current option, or `default`."""
        if self._check_finished("get_string"):
            return default
        cursor = self._require_cursor("get_string")
        if cursor is None:
            return default
        return cursor.get_string(default)

    def get_long(self, default: int) -> int:
        """Pull the next value of the current option as an integer, or `default`."""
        if self._check_finished("get_long"):
            return default
        cursor = self._require_cursor("get_long")
        if cursor is None:
            return default
        return cursor.get_long(default)

    # -- Error Handling & Usage --

    def error(self, fmt: str, *args: Any) -> int:
        """
        Declare an error. Only the first error of a session is kept.

        Returns:
            int: Length of the message, 0 if an error was already recorded,
            or -1 if the message could not be formatted.
        """
        if self._check_finished("error"):
            return -1
        if self.last_error is not None:
            return 0
        try:
            message = format_message(fmt, *args)
        except (TypeError, ValueError):
            self._record(ErrorFormatError())
            return -1
        if message.endswith("\n"):
            message = message[:-1]
        self._record(ArgumentError(message))
        return len(message)

    def usage(self, fmt: str, *args: Any) -> int:
        """Add text to the usage message. Returns the number of characters written or -1."""
        if self._check_finished("usage"):
            return -1
        return self._usage.write(fmt, *args)

    def version(self, fmt: str, *args: Any) -> int:
        """
        Set the `--version` text and declare the `--version` flag.

        Returns:
            int: Length of the text, or -1 if it was already set or could not be formatted.
        """
        if self._check_finished("version"):
            return -1
        if self.version_text is not None:
            return -1
        try:
            self.version_text = format_message(fmt, *args)
        except (TypeError, ValueError) as error:
            logger.warning("Unable to format version text %r: %s", fmt, error)
            return -1

        if self.flag(None, self.settings.version_long, self.settings.version_text):
            self.asked_for_version = True
        return len(self.version_text)

    def finish(self) -> FinishStatus:
        """
        Report unused arguments, print help, version or the first error, and
        end the session.

        Returns:
            FinishStatus: SUCCESS, HANDLED if help or version was printed, or
            FAILURE if there was an error.
        """
        if self._check_finished("finish"):
            return FinishStatus.FAILURE

        audit_unused(self.tokens, self.positionals_claimed, self._record)

        status = FinishStatus.SUCCESS if self.last_error is None else FinishStatus.FAILURE
        if self.asked_for_help:
            console.out(self.usage_text, end="", highlight=False)
            status = FinishStatus.HANDLED
        elif self.asked_for_version:
            console.out(self.version_text or "", end="", highlight=False)
            status = FinishStatus.HANDLED
        elif status == FinishStatus.FAILURE:
            error_console.out(
                f"Error: {self.error_message}\n{self.usage_text}", end="", highlight=False
            )

        logger.debug("Finished session with status %s", status.name)
        self.finished = True
        self.status = status
        self._cursor = None
        return status

    def __enter__(self) -> Optim:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type is None and not self.finished:
            self.finish()

    def __str__(self) -> str:
        return (
            f"Optim(tokens={len(self.tokens)}, "
            f"unused={sum(not token.used for token in self.tokens)}, "
            f"error={self.error_message!r})"
        )

    def __repr__(self) -> str:
        return str(self)


def start(
    argv: Sequence[str | None],
    usage: str = "",
    *,
    argc: int | None = None,
    settings: OptimSettings | None = None,
) -> Optim:
    """Create an `Optim` session; see `Optim` for the arguments."""
    return Optim(argv, usage, argc=argc, settings=settings)
