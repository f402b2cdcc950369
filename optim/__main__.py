"""
Optim Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import sys
from typing import Sequence

from optim.config import OptimSettings, find_settings_file, load_settings
from optim.console import console
from optim.session import FinishStatus, Optim
from optim.utils import load_argument_file, setup_logging, verbosity_to_level


def bootstrap_settings() -> OptimSettings:
    settings_path = find_settings_file()
    if settings_path:
        return load_settings(settings_path)
    return OptimSettings()


def resolve_argv(argv: Sequence[str]) -> list[str]:
    """Read arguments from a file when invoked as `optim afl <file>`."""
    if len(argv) == 3 and argv[1] == "afl":
        return load_argument_file(argv[0], argv[2])
    return list(argv)


def main(argv: Sequence[str] | None = None) -> int:
    argv = resolve_argv(sys.argv if argv is None else argv)

    session = Optim(argv, "[-a] [-b] <path>", settings=bootstrap_settings())
    session.usage("My test optim program\n")
    session.version("optim_test Version 1.0\n")

    verbose = session.flag("v", "verbose", "Increase verbosity").count
    if verbose:
        setup_logging(console_log_level=verbosity_to_level(verbose))
        console.print("Verbose mode on", highlight=False)

    session.usage("\nSection Two:\n")

    alpha = session.arg(
        "a",
        "alpha",
        None,
        "Alpha parameter. This usage has a lot to say, so the usage spans over "
        "multiple lines\nNewlines are also handled fine",
    )
    while alpha.count > 0:
        console.print(f"Got alpha '{alpha.get_long(-1)}'", markup=False, highlight=False)

    session.flag("b", "beta", "Beta flag")
    session.flag("c", None, "C flag without longform")
    session.arg(None, "delta", "diff", "Delta parameter without short form")
    session.arg("e", None, "exarg", "Extra option with an arg but no longopt")

    positionals = session.positionals()
    if positionals.count < 1:
        session.error("expected at least one positional argument")
    for value in positionals:
        console.print(f"Got positional '{value}'", markup=False, highlight=False)

    status = session.finish()
    return 1 if status == FinishStatus.FAILURE else 0


if __name__ == "__main__":
    sys.exit(main())
