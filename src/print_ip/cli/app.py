"""CLI application entry point and command routing for print-ip.

This module is the **sole error boundary** for the entire application.
It catches :class:`~print_ip.exceptions.PrintIpError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No rendering logic lives here — values are built from the command
  line and handed to :func:`print_ip.core.renderer.render`.
* Rendered values go to stdout; messages and hints go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from print_ip.cli import exit_codes
from print_ip.cli.console import console
from print_ip.exceptions import InvalidArgumentError, PrintIpError
from print_ip.utils.logging_config import configure_logging
from print_ip.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``print-ip demo``                         — render the sample set
    * ``print-ip int VALUE [--width W]``        — render an integer
    * ``print-ip text VALUE``                   — pass text through
    * ``print-ip list ITEM...``                 — render a sequence
    * ``print-ip tuple ITEM...``                — render a tuple
    * ``print-ip doctor``                       — environment diagnostics
    * ``print-ip --version``
    """
    parser = argparse.ArgumentParser(
        prog="print-ip",
        description="Render values as dotted-octet, IP-address-like strings.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log shape selection and validation to stderr.",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    commands.add_parser("demo", help="Render the built-in sample values.")
    commands.add_parser("doctor", help="Run environment diagnostics.")

    int_parser = commands.add_parser(
        "int",
        help="Render an integer as big-endian bytes.",
    )
    int_parser.add_argument(
        "value",
        help=(
            "Integer literal: decimal (leading zeros allowed), "
            "0x hex, 0o octal or 0b binary."
        ),
    )
    int_parser.add_argument(
        "-w",
        "--width",
        type=int,
        choices=(1, 2, 4, 8),
        default=None,
        help="Byte width.  Defaults to 4, or 8 when the value needs it.",
    )
    int_parser.add_argument(
        "-u",
        "--unsigned",
        action="store_true",
        help="Treat the value as unsigned (requires --width).",
    )

    text_parser = commands.add_parser("text", help="Print text unchanged.")
    text_parser.add_argument("value", help="Pre-formatted text.")

    for name, noun in (("list", "sequence"), ("tuple", "tuple")):
        item_parser = commands.add_parser(
            name,
            help=f"Render the items as a {noun}.",
        )
        item_parser.add_argument(
            "items",
            nargs="*",
            help="Items; decimal integers become int, anything else str.",
        )

    return parser


# ---------------------------------------------------------------------------
# Value conversion
# ---------------------------------------------------------------------------

def _parse_int(raw: str) -> int:
    """Parse an integer literal with an optional base prefix.

    Plain digit strings are read as decimal, so ``010`` is ten, the same
    value ``list`` and ``tuple`` items get.
    """
    literal = raw.strip().replace("_", "")
    base = 10 if literal.lstrip("+-").isdigit() else 0
    try:
        return int(literal, base)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Not an integer: {raw}",
            hint="Use decimal, or prefix with 0x, 0o or 0b.",
        ) from exc


def _coerce_item(raw: str) -> int | str:
    """Return *raw* as an ``int`` when it is a decimal integer, else as text."""
    try:
        return int(raw)
    except ValueError:
        return raw


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_demo() -> int:
    from print_ip.cli.demo import run_demo

    return run_demo()


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from print_ip.cli.doctor import run_doctor

    return run_doctor()


def _handle_int(raw: str, width: int | None, unsigned: bool) -> int:
    """Render an integer, pinned to *width* bytes when given."""
    from print_ip.core.models import fixed_width_type
    from print_ip.core.renderer import render

    number = _parse_int(raw)
    if width is None:
        if unsigned:
            raise InvalidArgumentError(
                "--unsigned needs an explicit width.",
                hint="Add --width 1, 2, 4 or 8.",
            )
        render(number)
        return exit_codes.SUCCESS

    int_type = fixed_width_type(width, signed=not unsigned)
    render(int_type(number))
    return exit_codes.SUCCESS


def _handle_text(value: str) -> int:
    from print_ip.core.renderer import render

    render(value)
    return exit_codes.SUCCESS


def _handle_items(items: list[str], *, as_tuple: bool) -> int:
    """Render command-line items as a list or a tuple."""
    from print_ip.core.renderer import render

    values = [_coerce_item(raw) for raw in items]
    render(tuple(values) if as_tuple else values)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the print-ip CLI.

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
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(verbose=args.verbose)
    logger.debug("Running command %r", args.command)

    if args.command == "demo":
        return _handle_demo()
    if args.command == "doctor":
        return _handle_doctor()
    if args.command == "int":
        return _handle_int(args.value, args.width, args.unsigned)
    if args.command == "text":
        return _handle_text(args.value)
    return _handle_items(args.items, as_tuple=args.command == "tuple")


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
    except PrintIpError as exc:
        console.print_labeled("Error:", "bold red", str(exc))
        if exc.hint:
            console.print_labeled("Hint:", "yellow", exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_labeled(
            "Unexpected error.",
            "bold red",
            f"Please report this issue.\n  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
