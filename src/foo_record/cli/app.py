"""CLI application entry point for foo-record.

This module is the **sole error boundary** for the entire application.
It catches :class:`~foo_record.exceptions.FooError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering messages on stderr and
returning well-defined exit codes.

Architecture notes
------------------
* No validation logic lives here — records are built by
  :func:`~foo_record.core.factory.new_foo`.
* Exactly two arguments are the name and the age, taken verbatim.  Only
  a lone ``-h/--help`` or ``-V/--version`` is treated as an option.
* The program name used in the usage line is an explicit parameter of
  :func:`main`, never module-level state.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from foo_record.cli import exit_codes
from foo_record.cli.console import console
from foo_record.cli.display import print_foo
from foo_record.config.logging import configure_logging
from foo_record.config.settings import FooSettings
from foo_record.core.factory import new_foo
from foo_record.exceptions import FooError, UsageError
from foo_record.version import __version__

_USAGE = "%(prog)s <name> <age>"
_INFO_FLAGS = frozenset({"-h", "--help", "-V", "--version"})


def _usage_line(prog: str) -> str:
    """Return the plain usage line for *prog*."""
    return "usage: " + _USAGE % {"prog": prog}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser(prog: str) -> argparse.ArgumentParser:
    """Construct the parser used for ``--help`` and ``--version``.

    Operands never go through option parsing: any two arguments are the
    name and the age, even when they start with ``-``.
    """
    parser = argparse.ArgumentParser(
        prog=prog,
        usage=_USAGE,
        description="Build a validated name/age record and print it.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("name", help="The record's name.")
    parser.add_argument("age", help="The record's age in years.")
    return parser


# ---------------------------------------------------------------------------
# Command handling
# ---------------------------------------------------------------------------

def _handle_record(name: str, age_str: str, settings: FooSettings) -> int:
    """Build the record, print it, and let it go out of scope."""
    foo = new_foo(
        name,
        age_str,
        strict=settings.strict,
        limits=settings.limits,
    )
    print_foo(foo)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    prog: str | None = None,
    settings: FooSettings | None = None,
) -> int:
    """Run the foo CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    prog:
        Program name shown in the usage line.  When ``None``, the basename
        of ``sys.argv[0]`` is used.
    settings:
        Parsing and logging settings.  When ``None``, the defaults apply.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        If the argument count is not exactly two.
    ValidationError
        If the inputs cannot form a valid record.
    """
    if argv is None:
        argv = sys.argv[1:]
    if prog is None:
        prog = os.path.basename(sys.argv[0])

    if len(argv) == 1 and argv[0] in _INFO_FLAGS:
        # exits through argparse
        _build_parser(prog).parse_args(argv)

    if len(argv) != 2:
        raise UsageError(_usage_line(prog))

    if settings is None:
        settings = FooSettings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    name, age_str = argv
    return _handle_record(name, age_str, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UsageError as exc:
        console.plain(str(exc))
        sys.exit(exit_codes.GENERAL_ERROR)
    except FooError as exc:
        console.error(str(exc), hint=exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
