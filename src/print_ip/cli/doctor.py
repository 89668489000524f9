"""``print-ip doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can run print-ip, ending with a
self-test render of ``UInt32(2130706433)``.

This module lives in the CLI layer — it may import from ``core``, and
it renders via Rich when available.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from print_ip.cli import exit_codes
from print_ip.cli.console import console, rich_available
from print_ip.core.models import UInt32
from print_ip.core.renderer import format_ip
from print_ip.exceptions import PrintIpError
from print_ip.version import __version__

SELF_TEST_VALUE: UInt32 = UInt32(2130706433)
SELF_TEST_EXPECTED: str = "127.0.0.1\n"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _printip_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the print-ip version row."""
    return "print-ip", __version__, "[green]OK[/green]"


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row.

    Rich is optional, so a missing install is a warning.
    """
    if not rich_available():
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"
    try:
        return "rich", metadata.version("rich"), "[green]OK[/green]"
    except metadata.PackageNotFoundError:
        return "rich", "unknown", "[green]OK[/green]"


def _byte_order_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the host byte-order row.

    Rendering does not depend on it; the row is informational.
    """
    return "byte order", sys.byteorder, "[green]OK[/green]"


def _self_test_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the rendering self-test row."""
    try:
        rendered = format_ip(SELF_TEST_VALUE)
    except PrintIpError as exc:
        return "self-test", str(exc), "[red]FAIL[/red]"
    value = rendered.rstrip("\n")
    if rendered != SELF_TEST_EXPECTED:
        return "self-test", value, "[red]FAIL[/red]"
    return "self-test", value, "[green]OK[/green]"


def collect_checks() -> list[tuple[str, str, str]]:
    """Run every diagnostic collector in display order."""
    return [
        _printip_version_check(),
        _python_version_check(),
        _rich_check(),
        _byte_order_check(),
        _self_test_check(),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nprint-ip doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    from rich.table import Table

    table = Table(
        title="print-ip doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)

    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)

    if rich_available():
        _print_rich_doctor_table(checks)
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
