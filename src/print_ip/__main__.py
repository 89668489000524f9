"""Allow ``python -m print_ip`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m print_ip`` behaves identically to the ``print-ip``
console script.
"""

from __future__ import annotations

from print_ip.cli.app import cli

if __name__ == "__main__":
    cli()
