"""Shared pytest fixtures and configuration for the print-ip test suite.

Guidelines
----------
* Rendered output is checked through ``capsys`` or an in-memory sink.
* Tests must not depend on OS state or terminal size.
* The package logger is reset after every test so handlers installed
  by ``main()`` never leak between tests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("print_ip")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
