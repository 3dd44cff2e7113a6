"""Demo CLI entry point and the process-level error boundary.

The demo declares a small parameter set, parses the process arguments
with :class:`~cmdopts.core.commands.Commands`, and prints what it got.
It is also the only place that turns a
:class:`~cmdopts.core.models.ParseOutcome` into console output and an
OS exit code.

Architecture notes
------------------
* No parsing logic lives here — everything is delegated to ``core``.
* All output goes through the console proxies in
  :mod:`cmdopts.cli.console`.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cmdopts.cli import exit_codes
from cmdopts.cli.console import console, stdout_console
from cmdopts.cli.logging_setup import configure_logging
from cmdopts.core.commands import Commands
from cmdopts.core.models import ParameterSpec, ParamType, ParseOutcome, ParseStatus
from cmdopts.exceptions import CmdOptsError


# ---------------------------------------------------------------------------
# Demo declarations
# ---------------------------------------------------------------------------

def build_demo_commands(auto_show_help: bool = True) -> Commands:
    """Declare the demo parameter set."""
    return (
        Commands(auto_show_help=auto_show_help)
        .add_param(ParameterSpec(
            name="autoDel",
            alias="a",
            type=ParamType.BOOLEAN,
            comment="Delete sources when done",
        ))
        .add_param(ParameterSpec(
            name="b2",
            type=ParamType.BOOLEAN,
            default=False,
        ))
        .add_param(ParameterSpec(
            name="type",
            type=ParamType.ENUM,
            choices=("dog", "cat"),
            comment="Animal kind",
        ))
        .add_param(ParameterSpec(
            name="str",
            type=ParamType.STRING,
            comment="Free text, may span several tokens",
        ))
        .add_param(ParameterSpec(
            name="files",
            type=ParamType.ARRAY,
            comment="Input files",
        ))
        .add_param(ParameterSpec(
            name="width",
            type=ParamType.INT,
            default=100,
        ))
    )


# ---------------------------------------------------------------------------
# Outcome rendering
# ---------------------------------------------------------------------------

def report_outcome(outcome: ParseOutcome) -> int:
    """Print *outcome* and return the matching exit code."""
    if outcome.status is ParseStatus.HELP_REQUESTED:
        stdout_console.print(outcome.help_text or "", preformatted=True)
        return exit_codes.SUCCESS

    if outcome.status is ParseStatus.ERROR:
        error = outcome.error
        console.print(f"Error: {error}", style="bold red", preformatted=True)
        if error is not None and error.hint:
            console.print(f"Hint: {error.hint}", style="yellow", preformatted=True)
        if outcome.help_text:
            console.print(outcome.help_text, preformatted=True)
        return exit_codes.GENERAL_ERROR

    stdout_console.print(outcome.args)
    stdout_console.print(outcome.options)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    commands = build_demo_commands()
    return report_outcome(commands.parse(argv))


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    configure_logging()
    try:
        code = main()
        sys.exit(code)
    except CmdOptsError as exc:
        console.print(f"Error: {exc}", style="bold red", preformatted=True)
        if exc.hint:
            console.print(f"Hint: {exc.hint}", style="yellow", preformatted=True)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
            preformatted=True,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
