"""Logging setup for the print-ip command line.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed here, once, by the CLI.  Records go to stderr so
rendered output on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER: str = "print_ip"

_PLAIN_FORMAT: str = "%(levelname)-8s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    """Return a Rich handler on stderr, or a plain stream handler."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger and return it.

    Parameters
    ----------
    verbose:
        ``True`` logs at ``DEBUG``; otherwise only warnings and above.

    Calling this again replaces the previously installed handler instead
    of stacking a second one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, "_print_ip_handler", False):
            logger.removeHandler(existing)

    handler = _build_handler()
    handler._print_ip_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
